# lobianco/public/routes.py

import logging
import os

from flask import Blueprint, abort, current_app, render_template, request, send_from_directory

from lobianco.api import procedures
from lobianco.models import InvestmentType
from lobianco.public.carousel import Carousel
from lobianco.storage import StorageBucket
from lobianco.utils import DEFAULT_ABOUT_TEXT

logger = logging.getLogger(__name__)

public_bp = Blueprint('public', __name__)

# Section anchors of the home page, in display order
SECTIONS = [
    ('compra', InvestmentType.LANCAMENTOS),
    ('compra-planta', InvestmentType.NA_PLANTA),
    ('aluguel', InvestmentType.ALUGUEL),
]


@public_bp.app_context_processor
def inject_site():
    return dict(site_config=procedures.site_config.get() or {},
                site_settings=procedures.site_settings.get() or {},
                default_about=DEFAULT_ABOUT_TEXT)


def group_investments(investments):
    grouped = {tipo.value: [] for _, tipo in SECTIONS}
    for investment in investments:
        grouped.setdefault(investment['tipo'], []).append(investment)
    return grouped


@public_bp.route('/')
def index():
    slides = procedures.carousel.list()
    carousel = Carousel(slides, interval=current_app.config['CAROUSEL_INTERVAL_SECONDS'])
    requested = request.args.get('slide', type=int)
    if requested is not None and 0 <= requested < len(carousel):
        carousel.go_to(requested)
    grouped = group_investments(procedures.investments.list())
    sections = [(anchor, tipo, grouped[tipo.value]) for anchor, tipo in SECTIONS]
    return render_template('public/index.html', carousel=carousel, sections=sections)


@public_bp.route('/imoveis')
def properties():
    return render_template('public/properties.html', properties=procedures.properties.list())


@public_bp.route('/imoveis/<int:property_id>')
def property_detail(property_id):
    record = procedures.properties.get(property_id)
    if record is None:
        logger.info(f"Property {property_id} not found")
        abort(404)
    return render_template('public/property_detail.html', property=record)


@public_bp.route('/uploads/<bucket>/<path:key>')
def uploaded_file(bucket, key):
    if bucket not in {b.value for b in StorageBucket}:
        abort(404)
    folder = current_app.config['UPLOAD_FOLDER']
    return send_from_directory(os.path.join(folder, bucket), key)
