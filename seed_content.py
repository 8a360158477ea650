#!/usr/bin/env python3
"""
Script to populate the initial site content: carousel slides, one listing
per investment category, the site config row and the social links row.
Tables that already hold rows are left untouched, so it is safe to re-run.
"""

import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from database import get_db_session  # noqa: E402
from lobianco import create_app  # noqa: E402
from lobianco.errors import StoreUnavailableError  # noqa: E402
from lobianco.models import CarouselSlide, Investment, InvestmentType, SiteConfig, SiteSettings  # noqa: E402
from lobianco.utils import DEFAULT_ABOUT_TEXT  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_SLIDES = [
    {
        'titulo': 'Oportunidade de Ouro',
        'descricao': 'Invista em projetos imobiliários premium com retorno garantido',
        'imagem_url': 'https://images.unsplash.com/photo-1486325212027-8081e485255e?w=1200&h=500&fit=crop',
    },
    {
        'titulo': 'Crescimento Patrimonial',
        'descricao': 'Aumente seu patrimônio com investimentos imobiliários seguros',
        'imagem_url': 'https://images.unsplash.com/photo-1560518883-ce09059eeffa?w=1200&h=500&fit=crop',
    },
    {
        'titulo': 'Futuro Seguro',
        'descricao': 'Garanta seu futuro financeiro com a Lobianco',
        'imagem_url': 'https://images.unsplash.com/photo-1454165804606-c3d57bc86b40?w=1200&h=500&fit=crop',
    },
]

DEFAULT_INVESTMENTS = [
    {
        'tipo': InvestmentType.LANCAMENTOS,
        'titulo': 'Residencial Lobianco Premium',
        'descricao': 'Apartamentos de luxo no melhor bairro da cidade. Acabamento premium, '
                     'localização estratégica e infraestrutura completa.',
        'imagem_url': 'https://images.unsplash.com/photo-1512207736139-afc10e0e5e6f?w=400&h=300&fit=crop',
    },
    {
        'tipo': InvestmentType.NA_PLANTA,
        'titulo': 'Edifício Comercial Centro',
        'descricao': 'Salas comerciais modernas no coração do centro. Perfeito para empresas '
                     'que buscam visibilidade e acessibilidade.',
        'imagem_url': 'https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=400&h=300&fit=crop',
    },
    {
        'tipo': InvestmentType.ALUGUEL,
        'titulo': 'Condomínio Residencial Seguro',
        'descricao': 'Casarões e apartamentos para aluguel em condomínio fechado. Segurança 24h, '
                     'áreas de lazer e infraestrutura completa.',
        'imagem_url': 'https://images.unsplash.com/photo-1564013799919-ab600027ffc6?w=400&h=300&fit=crop',
    },
]

DEFAULT_CONFIG = {
    'quem_somos': DEFAULT_ABOUT_TEXT + ' Com anos de experiência no mercado, garantimos '
                                       'transparência e segurança em cada investimento.',
    'cor_primaria': '#1E40AF',
    'tamanho': 16,
}

DEFAULT_SETTINGS = {
    'whatsapp': '5511999999999',
    'facebook': 'https://facebook.com/lobiancoinvestimentos',
    'instagram': 'https://instagram.com/lobiancoinvestimentos',
}

SEED_PLAN = [
    (CarouselSlide, DEFAULT_SLIDES),
    (Investment, DEFAULT_INVESTMENTS),
    (SiteConfig, [DEFAULT_CONFIG]),
    (SiteSettings, [DEFAULT_SETTINGS]),
]


def seed_content(session):
    """Inserts the defaults into every empty table. Returns rows created per table."""
    created = {}
    for model, rows in SEED_PLAN:
        table = model.__tablename__
        existing_count = session.query(model).count()
        if existing_count > 0:
            logger.info(f"✅ {table}: already has {existing_count} rows")
            created[table] = 0
            continue
        for values in rows:
            session.add(model(**values))
        created[table] = len(rows)
        logger.info(f"✅ {table}: created {len(rows)} rows")
    session.commit()
    return created


def main():
    app = create_app()
    with app.app_context():
        try:
            with get_db_session() as session:
                created = seed_content(session)
        except StoreUnavailableError:
            logger.error("❌ Database not available, set DATABASE_URL")
            return 1
    logger.info(f"🎉 Seeding completed: {sum(created.values())} rows created")
    return 0


if __name__ == '__main__':
    sys.exit(main())
