"""Pytest configuration and fixtures."""

import pytest
from flask import appcontext_popped

from config import TestingConfig
from database import db
from lobianco import create_app
from lobianco.models import ROLE_ADMIN, ROLE_USER, User


def _expire_test_session(sender, **extra):
    # Each test client request runs in its own app context and session; the
    # test's session must reload whatever the request changed.
    db.session.expire_all()


@pytest.fixture
def app(tmp_path):
    """App bound to a fresh in-memory database and a temporary upload folder."""
    class Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(Config)
    with app.app_context():
        appcontext_popped.connect(_expire_test_session, app)
        yield app
        appcontext_popped.disconnect(_expire_test_session, app)
        db.session.remove()
        db.drop_all()


@pytest.fixture
def offline_app(tmp_path):
    """App without a database: the content store is unavailable."""
    class Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = None
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(Config)
    with app.app_context():
        yield app


@pytest.fixture
def admin_user(app):
    user = User(open_id='owner-test', name='Administrador', role=ROLE_ADMIN)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def regular_user(app):
    user = User(open_id='visitor-1', name='Visitante', role=ROLE_USER)
    db.session.add(user)
    db.session.commit()
    return user


def log_in(client, user):
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user.id)
        sess['_fresh'] = True
    return client


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app, admin_user):
    return log_in(app.test_client(), admin_user)


@pytest.fixture
def user_client(app, regular_user):
    return log_in(app.test_client(), regular_user)
