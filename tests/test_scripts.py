"""Tests for the seeding and admin bootstrap scripts."""

from create_admin import create_admin
from database import db
from lobianco.models import CarouselSlide, Investment, SiteConfig, SiteSettings
from seed_content import seed_content


def test_seed_fills_empty_tables(app):
    created = seed_content(db.session)
    assert created == {'carrossel': 3, 'investimentos': 3, 'config': 1, 'settings': 1}
    assert {i.tipo.value for i in Investment.query.all()} == {'lancamentos', 'na_planta', 'aluguel'}
    assert SiteConfig.query.one().cor_primaria == '#1E40AF'
    assert SiteSettings.query.one().whatsapp == '5511999999999'


def test_seed_is_safe_to_rerun(app):
    seed_content(db.session)
    assert sum(seed_content(db.session).values()) == 0
    assert CarouselSlide.query.count() == 3


def test_create_admin(app):
    user = create_admin('helper', name='Ajudante')
    assert user.role == 'admin'
    assert user.name == 'Ajudante'
    assert create_admin('helper').id == user.id
