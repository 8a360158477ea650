# database.py

import logging
from contextlib import contextmanager

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from lobianco.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

# Initialize SQLAlchemy without an app yet. init_db() binds it later.
db = SQLAlchemy()


def init_db(app):
    """
    Binds the SQLAlchemy extension to the app and makes sure every table
    defined in lobianco.models exists.

    Without SQLALCHEMY_DATABASE_URI the extension is left unbound; the
    procedures then treat the content store as unavailable.
    """
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        logger.warning("DATABASE_URL is not set, content store unavailable")
        return False

    db.init_app(app)

    # Import models here to ensure they're registered before table creation
    from lobianco import models  # noqa: F401

    with app.app_context():
        try:
            db.create_all()
            logger.info("Content store tables ensured")
        except OperationalError as e:
            logger.error(f"Failed to create tables: {str(e)}")
    return True


def store_configured():
    return 'sqlalchemy' in current_app.extensions


@contextmanager
def get_db_session():
    """
    Provides the request's SQLAlchemy session after checking the connection.
    Raises StoreUnavailableError when no database is configured or the
    connection test fails, and rolls back if the body raises.
    """
    if not store_configured():
        raise StoreUnavailableError()

    session = db.session
    try:
        session.execute(text("SELECT 1"))
    except OperationalError as e:
        session.rollback()
        logger.error(f"Database connection test failed: {str(e)}")
        raise StoreUnavailableError() from e

    try:
        yield session
    except Exception:
        session.rollback()
        raise
