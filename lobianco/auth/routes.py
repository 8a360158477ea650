# lobianco/auth/routes.py

import logging

from flask import Blueprint, current_app, flash, redirect, render_template, session, url_for
from flask_login import current_user, login_user, logout_user

from lobianco.admin.editing import SESSION_KEY as EDIT_SESSIONS_KEY
from lobianco.api import procedures
from lobianco.auth.forms import AccessGateForm
from lobianco.auth.gate import AccessGate, GateState
from lobianco.errors import SiteError

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/admin/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated and current_user.is_admin:
        return redirect(url_for('admin.index'))

    gate = AccessGate.from_config(current_app.config)
    gate.open()
    form = AccessGateForm()

    if not gate.configured:
        logger.warning("Admin gate has no password configured")
        flash('A área de gestão não está configurada.', 'danger')
        return render_template('auth/login.html', form=form, gate=gate), 503

    if form.validate_on_submit():
        state = gate.submit(form.password.data)
        form.password.data = ''
        if state is GateState.GRANTED:
            try:
                owner = procedures.upsert_user({
                    'open_id': current_app.config['OWNER_OPEN_ID'],
                    'name': current_app.config.get('OWNER_NAME'),
                    'login_method': 'password',
                })
            except SiteError as e:
                logger.error(f"Admin login failed: {e.message}")
                flash(f"Não foi possível entrar: {e.message}", 'danger')
                return render_template('auth/login.html', form=form, gate=gate), e.status_code
            login_user(owner)
            gate.close()
            flash('Login realizado com sucesso!', 'success')
            return redirect(url_for('admin.index'))

        logger.info("Admin gate rejected a password attempt")
        flash(gate.error, 'danger')
        return render_template('auth/login.html', form=form, gate=gate), 401

    return render_template('auth/login.html', form=form, gate=gate)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    session.pop(EDIT_SESSIONS_KEY, None)
    flash('Você saiu da área de gestão.', 'info')
    return redirect(url_for('public.index'))
