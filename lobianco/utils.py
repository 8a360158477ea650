# lobianco/utils.py

from flask import flash, redirect, url_for
from flask_login import current_user

DEFAULT_ABOUT_TEXT = (
    "Lobianco Investimentos é uma empresa especializada em investimentos imobiliários, "
    "oferecendo oportunidades de crescimento patrimonial através de projetos imobiliários "
    "de qualidade."
)


def format_brl(value):
    """Whole reais with pt-BR thousands separators, e.g. 'R$ 1.250.000'."""
    if value is None:
        return "R$ N/A"
    return "R$ " + f"{int(value):,}".replace(",", ".")


def whatsapp_link(number):
    if not number:
        return None
    digits = ''.join(filter(str.isdigit, number))
    return f"https://wa.me/{digits}" if digits else None


def caller():
    """The logged-in user object, or None for anonymous requests."""
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return None


def admin_redirect():
    """
    Where to send a request that may not enter the admin panel, or None.
    Anonymous visitors go to the access gate, logged-in non-admins back to
    the home page.
    """
    if not current_user.is_authenticated:
        flash('Digite a senha para acessar a área de gestão.', 'info')
        return redirect(url_for('auth.login'))
    if not current_user.is_admin:
        flash('Acesso negado.', 'danger')
        return redirect(url_for('public.index'))
    return None
