# lobianco/api/procedures.py
"""
Procedure layer shared by the JSON API and the admin panel.

Queries (list/get) are public and degrade to an empty result when the
content store is unavailable. Mutations require an authenticated admin,
validate their input, and raise when the store cannot be written.
"""

import base64
import binascii
import logging

from flask import current_app
from pydantic import ValidationError

from database import get_db_session
from lobianco.api import schemas
from lobianco.errors import (AuthenticationRequiredError, ForbiddenError, InvalidInputError,
                             StorageError, StoreUnavailableError)
from lobianco.models import (ROLE_ADMIN, CarouselSlide, Investment, Property, SiteConfig,
                             SiteSettings, User, utcnow)
from lobianco.storage import build_object_key, get_storage, guess_content_type

logger = logging.getLogger(__name__)


def require_admin(user):
    if user is None or not getattr(user, 'is_authenticated', False):
        raise AuthenticationRequiredError()
    if getattr(user, 'role', None) != ROLE_ADMIN:
        raise ForbiddenError()


def validate(schema, data):
    if not isinstance(data, dict):
        raise InvalidInputError("O corpo da requisição deve ser um objeto")
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        issues = [
            {'path': [str(p) for p in err['loc']], 'message': err['msg']}
            for err in e.errors()
        ]
        raise InvalidInputError(issues=issues) from e


def _fields(parsed, exclude=('id',)):
    """Only the fields the caller actually sent."""
    return parsed.model_dump(exclude_unset=True, exclude=set(exclude))


class CrudResource:
    """list/get/create/update/delete over one row collection."""

    def __init__(self, name, model, create_schema, update_schema, filter_schema=None):
        self.name = name
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.filter_schema = filter_schema

    def list(self, **filters):
        criteria = {}
        if self.filter_schema is not None:
            criteria = {k: v for k, v in _fields(validate(self.filter_schema, filters)).items() if v is not None}
        elif filters:
            raise InvalidInputError(f"{self.name} não aceita filtros")
        try:
            with get_db_session() as s:
                query = s.query(self.model).filter_by(**criteria)
                rows = query.order_by(self.model.created_at, self.model.id).all()
                return [row.to_dict() for row in rows]
        except StoreUnavailableError:
            logger.warning(f"Cannot list {self.name}: database not available")
            return []

    def get(self, record_id):
        parsed = validate(schemas.RecordId, {'id': record_id})
        try:
            with get_db_session() as s:
                row = s.get(self.model, parsed.id)
                return row.to_dict() if row else None
        except StoreUnavailableError:
            logger.warning(f"Cannot get {self.name} {record_id}: database not available")
            return None

    def create(self, user, data):
        require_admin(user)
        values = _fields(validate(self.create_schema, data), exclude=())
        with get_db_session() as s:
            row = self.model(**values)
            s.add(row)
            s.commit()
            logger.info(f"Created {self.name} {row.id}")
            return row.to_dict()

    def update(self, user, data):
        require_admin(user)
        parsed = validate(self.update_schema, data)
        values = _fields(parsed)
        with get_db_session() as s:
            row = s.get(self.model, parsed.id)
            if row is None:
                logger.info(f"Update of missing {self.name} {parsed.id} ignored")
                return None
            for key, value in values.items():
                setattr(row, key, value)
            row.updated_at = utcnow()
            s.commit()
            logger.info(f"Updated {self.name} {row.id}: {sorted(values)}")
            return row.to_dict()

    def delete(self, user, data):
        require_admin(user)
        parsed = validate(schemas.RecordId, data)
        with get_db_session() as s:
            deleted = s.query(self.model).filter_by(id=parsed.id).delete()
            s.commit()
            logger.info(f"Deleted {self.name} {parsed.id} ({deleted} row)")
            return {'success': True}


class SingletonResource:
    """A table holding at most one row: get, and update-else-insert."""

    def __init__(self, name, model, update_schema):
        self.name = name
        self.model = model
        self.update_schema = update_schema

    def _current(self, s):
        return s.query(self.model).order_by(self.model.id).first()

    def get(self):
        try:
            with get_db_session() as s:
                row = self._current(s)
                return row.to_dict() if row else None
        except StoreUnavailableError:
            logger.warning(f"Cannot get {self.name}: database not available")
            return None

    def update(self, user, data):
        require_admin(user)
        values = _fields(validate(self.update_schema, data), exclude=())
        with get_db_session() as s:
            row = self._current(s)
            if row is None:
                row = self.model(**values)
                s.add(row)
                logger.info(f"Inserted {self.name} row")
            else:
                for key, value in values.items():
                    setattr(row, key, value)
                row.updated_at = utcnow()
                logger.info(f"Updated {self.name}: {sorted(values)}")
            s.commit()
            return row.to_dict()


carousel = CrudResource('carousel', CarouselSlide, schemas.SlideCreate, schemas.SlideUpdate)
investments = CrudResource('investments', Investment, schemas.InvestmentCreate, schemas.InvestmentUpdate,
                           filter_schema=schemas.InvestmentFilter)
properties = CrudResource('properties', Property, schemas.PropertyCreate, schemas.PropertyUpdate)
site_config = SingletonResource('config', SiteConfig, schemas.SiteConfigUpdate)
site_settings = SingletonResource('settings', SiteSettings, schemas.SiteSettingsUpdate)

CRUD_RESOURCES = {
    'carousel': carousel,
    'investments': investments,
    'properties': properties,
}

SINGLETON_RESOURCES = {
    'config': site_config,
    'settings': site_settings,
}


def _decode_base64(payload):
    if payload.startswith('data:') and ',' in payload:
        payload = payload.split(',', 1)[1]
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(issues=[{'path': ['fileBase64'], 'message': 'base64 inválido'}]) from e


def upload_file(user, data):
    """
    Stores one file in the requested bucket under a timestamped, sanitized
    key and returns {'url', 'path'}. Nothing is written to the content store;
    callers persist the URL themselves and only after this returns.
    """
    require_admin(user)
    parsed = validate(schemas.UploadInput, data)
    content = _decode_base64(parsed.file_base64)
    key = build_object_key(parsed.filename)
    try:
        url = get_storage().save_bytes(parsed.bucket, key, content,
                                       content_type=guess_content_type(parsed.filename))
    except StorageError as e:
        logger.error(f"Upload to {parsed.bucket.value} failed: {e.message}")
        raise StorageError("Falha ao enviar o arquivo") from e
    logger.info(f"Uploaded {parsed.bucket.value}/{key} ({len(content)} bytes)")
    return {'url': url, 'path': key}


def upsert_user(data):
    """
    Inserts or refreshes a user by open id. The configured owner identity
    becomes admin unless a role is given explicitly.
    """
    parsed = validate(schemas.UserUpsert, data)
    values = _fields(parsed, exclude=('open_id',))
    if parsed.role is None:
        values.pop('role', None)
        if parsed.open_id == current_app.config.get('OWNER_OPEN_ID'):
            values['role'] = ROLE_ADMIN
    with get_db_session() as s:
        user = s.query(User).filter_by(open_id=parsed.open_id).first()
        if user is None:
            user = User(open_id=parsed.open_id)
            s.add(user)
        for key, value in values.items():
            setattr(user, key, value)
        user.last_signed_in = utcnow()
        s.commit()
        logger.info(f"Upserted user {user.open_id} (role={user.role})")
        return user


def me(user):
    if user is None or not getattr(user, 'is_authenticated', False):
        return None
    return user.to_dict()
