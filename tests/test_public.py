"""Tests for the public pages."""

from lobianco.api import procedures
from lobianco.utils import DEFAULT_ABOUT_TEXT


def test_empty_home(client):
    response = client.get('/')
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert 'Carrossel não configurado' in page
    assert 'Nenhum imóvel disponível' in page
    assert DEFAULT_ABOUT_TEXT in page


def test_home_without_database(offline_app):
    response = offline_app.test_client().get('/')
    assert response.status_code == 200
    assert 'Carrossel não configurado' in response.get_data(as_text=True)


def test_home_shows_slides_and_sections(app, client, admin_user):
    for titulo in ('Oportunidade de Ouro', 'Crescimento Patrimonial', 'Futuro Seguro'):
        procedures.carousel.create(admin_user, {'titulo': titulo})
    procedures.investments.create(admin_user, {'tipo': 'na_planta', 'titulo': 'Edifício Centro', 'preco': 1250000})

    page = client.get('/').get_data(as_text=True)
    assert 'Oportunidade de Ouro' in page
    assert 'Futuro Seguro' in page
    assert 'data-interval="5000"' in page
    assert 'id="compra-planta"' in page
    assert 'Edifício Centro' in page
    assert 'R$ 1.250.000' in page
    assert page.index('Edifício Centro') > page.index('id="compra-planta"')
    assert page.index('Edifício Centro') < page.index('id="aluguel"')


def test_slide_query_parameter(app, client, admin_user):
    for titulo in ('A', 'B', 'C'):
        procedures.carousel.create(admin_user, {'titulo': titulo})
    page = client.get('/?slide=1').get_data(as_text=True)
    assert 'data-index="1"' in page
    assert '/?slide=0' in page
    assert '/?slide=2' in page


def test_page_rotation_follows_the_carousel(app, client, admin_user):
    for titulo in ('A', 'B', 'C'):
        procedures.carousel.create(admin_user, {'titulo': titulo})
    page = client.get('/').get_data(as_text=True)
    assert 'data-interval="5000"' in page
    assert 'data-index="0"' in page
    assert 'setInterval(' in page
    assert "addEventListener('pagehide', function () { clearInterval(timer); })" in page


def test_configured_interval_reaches_the_page(app, client, admin_user):
    app.config['CAROUSEL_INTERVAL_SECONDS'] = 8
    procedures.carousel.create(admin_user, {'titulo': 'A'})
    assert 'data-interval="8000"' in client.get('/').get_data(as_text=True)


def test_empty_carousel_renders_no_slides(client):
    page = client.get('/').get_data(as_text=True)
    assert 'class="slide"' not in page
    assert 'data-dot=' not in page


def test_out_of_range_slide_is_ignored(app, client, admin_user):
    procedures.carousel.create(admin_user, {'titulo': 'A'})
    page = client.get('/?slide=7').get_data(as_text=True)
    assert 'data-index="0"' in page


def test_site_config_and_social_links(app, client, admin_user):
    procedures.site_config.update(admin_user, {'quemSomos': 'Texto institucional', 'corPrimaria': '#FF0000'})
    procedures.site_settings.update(admin_user, {'whatsapp': '+55 11 99999-9999',
                                                 'instagram': 'https://instagram.com/lobianco'})
    page = client.get('/').get_data(as_text=True)
    assert 'Texto institucional' in page
    assert DEFAULT_ABOUT_TEXT not in page
    assert '--cor-primaria: #FF0000' in page
    assert 'https://wa.me/5511999999999' in page
    assert 'https://instagram.com/lobianco' in page
    assert 'aria-label="Facebook"' not in page


def test_properties_page(app, client, admin_user):
    created = procedures.properties.create(admin_user, {'title': 'Casa na Praia', 'location': 'Ubatuba'})
    page = client.get('/imoveis').get_data(as_text=True)
    assert 'Casa na Praia' in page
    assert f"/imoveis/{created['id']}" in page


def test_empty_properties_page(client):
    assert 'Nenhum imóvel disponível' in client.get('/imoveis').get_data(as_text=True)


def test_property_detail(app, client, admin_user):
    created = procedures.properties.create(admin_user, {
        'title': 'Cobertura', 'location': 'Centro', 'bedrooms': 3, 'pool': True, 'price': 900000,
    })
    response = client.get(f"/imoveis/{created['id']}")
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert '3 quartos' in page
    assert 'Piscina' in page
    assert 'R$ 900.000' in page


def test_missing_property(client):
    assert client.get('/imoveis/999').status_code == 404


def test_uploaded_file_is_served(app, client, admin_user):
    result = procedures.upload_file(admin_user, {'bucket': 'carrossel', 'filename': 'a.png', 'fileBase64': 'iVBORw=='})
    response = client.get(result['url'])
    assert response.status_code == 200
    assert response.data == b'\x89PNG'


def test_unknown_bucket_is_not_served(client):
    assert client.get('/uploads/segredos/a.png').status_code == 404
