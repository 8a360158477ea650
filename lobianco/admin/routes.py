# lobianco/admin/routes.py

import base64
import logging
from dataclasses import dataclass

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from lobianco.admin import forms
from lobianco.admin.editing import (clear_edit, current_edit, form_to_payload, record_to_form_data,
                                    start_edit)
from lobianco.api import procedures, schemas
from lobianco.errors import InvalidInputError, SiteError
from lobianco.storage import StorageBucket
from lobianco.utils import admin_redirect, caller

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


@dataclass(frozen=True)
class AdminTab:
    name: str
    label: str
    form_class: type
    schema: type
    # (file field, url field, bucket) triples
    uploads: tuple = ()
    # (record key, heading) pairs shown in the list
    columns: tuple = ()

    @property
    def procedure(self):
        return procedures.CRUD_RESOURCES.get(self.name) or procedures.SINGLETON_RESOURCES[self.name]

    @property
    def singleton(self):
        return self.name in procedures.SINGLETON_RESOURCES


TABS = {
    'carousel': AdminTab('carousel', 'Carrossel', forms.CarouselSlideForm, schemas.SlideCreate,
                         uploads=(('imagem_file', 'imagem_url', StorageBucket.CARROSSEL),),
                         columns=(('titulo', 'Título'), ('descricao', 'Descrição'))),
    'investments': AdminTab('investments', 'Investimentos', forms.InvestmentForm, schemas.InvestmentCreate,
                            uploads=(('imagem_file', 'imagem_url', StorageBucket.INVESTIMENTOS),),
                            columns=(('titulo', 'Título'), ('tipo', 'Tipo'), ('preco', 'Preço'))),
    'properties': AdminTab('properties', 'Imóveis', forms.PropertyForm, schemas.PropertyCreate,
                           uploads=(('main_image_file', 'main_image', StorageBucket.INVESTIMENTOS),),
                           columns=(('title', 'Título'), ('location', 'Localização'), ('price', 'Preço'))),
    'config': AdminTab('config', 'Configurações', forms.SiteConfigForm, schemas.SiteConfigUpdate,
                       uploads=(('logo_file', 'logo', StorageBucket.CONFIG),
                                ('banner_file', 'banner', StorageBucket.CONFIG))),
    'settings': AdminTab('settings', 'Redes Sociais', forms.SiteSettingsForm, schemas.SiteSettingsUpdate),
}


@admin_bp.before_request
def check_admin_access():
    return admin_redirect()


def _tab(name):
    tab = TABS.get(name)
    if tab is None:
        abort(404)
    return tab


def _form_for(tab):
    """A fresh form prefilled from the record being edited or the singleton row."""
    if tab.singleton:
        return tab.form_class(data=record_to_form_data(tab.schema, tab.procedure.get()))
    edit = current_edit(tab.name)
    if edit is None or not edit.editing:
        return tab.form_class()
    record = tab.procedure.get(edit.record_id)
    if record is None:
        clear_edit(tab.name)
        return tab.form_class()
    return tab.form_class(data=record_to_form_data(tab.schema, record))


def _render_tab(tab, form=None, status=200):
    records = [] if tab.singleton else tab.procedure.list()
    return render_template('admin/panel.html',
                           tabs=TABS,
                           tab=tab,
                           form=form if form is not None else _form_for(tab),
                           records=records,
                           edit=None if tab.singleton else current_edit(tab.name)), status


def _flash_form_errors(form):
    for field_name, errors in form.errors.items():
        label = form[field_name].label.text if field_name in form else field_name
        for error in errors:
            flash(f"{label}: {error}", 'danger')


def _upload_pending_images(tab, form):
    """
    Sends every chosen file to its bucket and writes the returned URL into
    the matching hidden field. Raises SiteError on the first failure.
    """
    for file_field, url_field, bucket in tab.uploads:
        upload = form[file_field].data
        if not upload:
            continue
        result = procedures.upload_file(caller(), {
            'bucket': bucket.value,
            'filename': upload.filename,
            'file_base64': base64.b64encode(upload.read()).decode('ascii'),
        })
        form[url_field].data = result['url']


@admin_bp.route('/')
def index():
    return redirect(url_for('admin.panel', tab_name='carousel'))


@admin_bp.route('/<tab_name>')
def panel(tab_name):
    return _render_tab(_tab(tab_name))


@admin_bp.route('/<tab_name>/save', methods=['POST'])
def save(tab_name):
    tab = _tab(tab_name)
    form = tab.form_class()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return _render_tab(tab, form=form, status=400)

    try:
        _upload_pending_images(tab, form)
    except SiteError as e:
        logger.error(f"Image upload for {tab.name} failed: {e.message}")
        flash(f"Erro ao enviar imagem: {e.message}", 'danger')
        return _render_tab(tab, form=form, status=e.status_code)

    payload = form_to_payload(tab.schema, form)
    session_edit = None if tab.singleton else current_edit(tab.name)
    message, category = 'Salvo com sucesso!', 'success'
    try:
        if tab.singleton:
            tab.procedure.update(caller(), payload)
        elif session_edit is not None and session_edit.editing:
            if tab.procedure.update(caller(), dict(payload, id=session_edit.record_id)) is None:
                message, category = 'O registro não existe mais.', 'info'
        else:
            tab.procedure.create(caller(), payload)
    except InvalidInputError as e:
        flash(e.message, 'danger')
        for issue in e.issues:
            flash(f"{'.'.join(issue['path'])}: {issue['message']}", 'danger')
        return _render_tab(tab, form=form, status=e.status_code)
    except SiteError as e:
        logger.error(f"Saving {tab.name} failed: {e.message}")
        flash(f"Erro ao salvar: {e.message}", 'danger')
        return _render_tab(tab, form=form, status=e.status_code)

    if not tab.singleton:
        clear_edit(tab.name)
    flash(message, category)
    return redirect(url_for('admin.panel', tab_name=tab.name))


@admin_bp.route('/<tab_name>/<int:record_id>/edit')
def edit(tab_name, record_id):
    tab = _tab(tab_name)
    if tab.singleton:
        abort(404)
    record = tab.procedure.get(record_id)
    if record is None:
        flash('Registro não encontrado.', 'danger')
        return redirect(url_for('admin.panel', tab_name=tab.name))
    start_edit(tab.name, record_id)
    return redirect(url_for('admin.panel', tab_name=tab.name))


@admin_bp.route('/<tab_name>/cancel', methods=['POST'])
def cancel(tab_name):
    tab = _tab(tab_name)
    clear_edit(tab.name)
    return redirect(url_for('admin.panel', tab_name=tab.name))


@admin_bp.route('/<tab_name>/<int:record_id>/delete', methods=['GET', 'POST'])
def delete(tab_name, record_id):
    tab = _tab(tab_name)
    if tab.singleton:
        abort(404)
    record = tab.procedure.get(record_id)
    if record is None:
        flash('Registro não encontrado.', 'danger')
        return redirect(url_for('admin.panel', tab_name=tab.name))

    form = forms.ConfirmDeleteForm()
    if request.method == 'POST':
        if not form.validate_on_submit():
            _flash_form_errors(form)
            return render_template('admin/confirm_delete.html', tab=tab, record=record, form=form), 400
        try:
            tab.procedure.delete(caller(), {'id': record_id})
        except SiteError as e:
            logger.error(f"Deleting {tab.name} {record_id} failed: {e.message}")
            flash(f"Erro ao excluir: {e.message}", 'danger')
            return redirect(url_for('admin.panel', tab_name=tab.name))
        session_edit = current_edit(tab.name)
        if session_edit is not None and session_edit.record_id == record_id:
            clear_edit(tab.name)
        flash('Excluído com sucesso!', 'success')
        return redirect(url_for('admin.panel', tab_name=tab.name))

    return render_template('admin/confirm_delete.html', tab=tab, record=record, form=form)
