# config.py

import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_very_secret_key_for_development'

    # No DATABASE_URL means the content store is unavailable: public pages
    # render empty and every write fails.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SITE_TITLE = os.environ.get('SITE_TITLE', 'Lobianco Investimentos')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # OAuth identity auto-promoted to admin, also used by the password gate
    OWNER_OPEN_ID = os.environ.get('OWNER_OPEN_ID', 'owner')
    OWNER_NAME = os.environ.get('OWNER_NAME', 'Administrador')

    # Shared secret of the admin gate. The werkzeug hash wins when both are set.
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'local').lower()
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'uploads'))
    # Site root used to build absolute URLs for locally stored uploads
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL', 'http://localhost:5000')
    S3_ENDPOINT_URL = os.environ.get('S3_ENDPOINT_URL')
    S3_ACCESS_KEY_ID = os.environ.get('S3_ACCESS_KEY_ID')
    S3_SECRET_ACCESS_KEY = os.environ.get('S3_SECRET_ACCESS_KEY')
    S3_REGION = os.environ.get('S3_REGION')
    S3_PUBLIC_BASE_URL = os.environ.get('S3_PUBLIC_BASE_URL')
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024

    CAROUSEL_INTERVAL_SECONDS = int(os.environ.get('CAROUSEL_INTERVAL_SECONDS', 5))

    DEBUG = os.environ.get('FLASK_DEBUG') == '1'

    SESSION_COOKIE_SECURE = not DEBUG
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    STORAGE_BACKEND = 'local'
    PUBLIC_BASE_URL = 'http://localhost'
    OWNER_OPEN_ID = 'owner-test'
    ADMIN_PASSWORD_HASH = None
    ADMIN_PASSWORD = 'lobianco123'
