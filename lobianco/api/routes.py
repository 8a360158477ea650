# lobianco/api/routes.py

import logging

from flask import Blueprint, abort, jsonify, request, session
from flask_login import logout_user

from lobianco.admin.editing import SESSION_KEY as EDIT_SESSIONS_KEY
from lobianco.api import procedures
from lobianco.errors import NotFoundError, SiteError
from lobianco.utils import caller

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.errorhandler(SiteError)
def handle_site_error(error):
    if error.status_code >= 500:
        logger.error(f"{request.method} {request.path} failed: {error.message}")
    return jsonify({'error': error.to_dict()}), error.status_code


def _json_body():
    """The decoded body, or None. The procedures reject non-objects after the role check."""
    return request.get_json(silent=True)


def _crud(resource):
    procedure = procedures.CRUD_RESOURCES.get(resource)
    if procedure is None:
        abort(404)
    return procedure


def _singleton(resource):
    procedure = procedures.SINGLETON_RESOURCES.get(resource)
    if procedure is None:
        abort(404)
    return procedure


@api_bp.route('/<resource>', methods=['GET'])
def list_records(resource):
    if resource in procedures.SINGLETON_RESOURCES:
        return jsonify(_singleton(resource).get())
    return jsonify(_crud(resource).list(**request.args.to_dict()))


@api_bp.route('/<resource>', methods=['POST'])
def create_record(resource):
    return jsonify(_crud(resource).create(caller(), _json_body())), 201


@api_bp.route('/<resource>', methods=['PUT'])
def update_singleton(resource):
    return jsonify(_singleton(resource).update(caller(), _json_body()))


@api_bp.route('/<resource>/<int:record_id>', methods=['GET'])
def get_record(resource, record_id):
    record = _crud(resource).get(record_id)
    if record is None:
        raise NotFoundError()
    return jsonify(record)


@api_bp.route('/<resource>/<int:record_id>', methods=['PATCH'])
def update_record(resource, record_id):
    data = _json_body()
    if isinstance(data, dict):
        data = dict(data, id=record_id)
    return jsonify(_crud(resource).update(caller(), data))


@api_bp.route('/<resource>/<int:record_id>', methods=['DELETE'])
def delete_record(resource, record_id):
    return jsonify(_crud(resource).delete(caller(), {'id': record_id}))


@api_bp.route('/storage/upload', methods=['POST'])
def upload_file():
    return jsonify(procedures.upload_file(caller(), _json_body()))


@api_bp.route('/auth/me', methods=['GET'])
def me():
    return jsonify(procedures.me(caller()))


@api_bp.route('/auth/logout', methods=['POST'])
def logout():
    logout_user()
    session.pop(EDIT_SESSIONS_KEY, None)
    return jsonify({'success': True})
