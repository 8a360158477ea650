# lobianco/models.py

import enum
from datetime import datetime, timezone

from flask_login import UserMixin

from database import db

ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


def utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


class InvestmentType(enum.Enum):
    LANCAMENTOS = 'lancamentos'
    NA_PLANTA = 'na_planta'
    ALUGUEL = 'aluguel'

    @property
    def label(self):
        return INVESTMENT_TYPE_LABELS[self]

    @classmethod
    def choices(cls):
        return [(member.value, member.label) for member in cls]


INVESTMENT_TYPE_LABELS = {
    InvestmentType.LANCAMENTOS: 'Compra',
    InvestmentType.NA_PLANTA: 'Compra na Planta',
    InvestmentType.ALUGUEL: 'Aluguel',
}


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class User(db.Model, UserMixin):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    open_id = db.Column(db.String(64), unique=True, nullable=False)
    name = db.Column(db.Text)
    email = db.Column(db.String(320))
    login_method = db.Column(db.String(64))
    role = db.Column(db.String(16), default=ROLE_USER, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    last_signed_in = db.Column(db.DateTime, default=utcnow, nullable=False)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self):
        return {
            'id': self.id,
            'openId': self.open_id,
            'name': self.name,
            'email': self.email,
            'loginMethod': self.login_method,
            'role': self.role,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
            'lastSignedIn': _isoformat(self.last_signed_in),
        }

    def __repr__(self):
        return f'<User {self.open_id}>'


class CarouselSlide(TimestampMixin, db.Model):
    __tablename__ = 'carrossel'
    id = db.Column(db.Integer, primary_key=True)
    titulo = db.Column(db.Text, nullable=False)
    descricao = db.Column(db.Text)
    imagem_url = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'titulo': self.titulo,
            'descricao': self.descricao,
            'imagemUrl': self.imagem_url,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<CarouselSlide {self.id} {self.titulo}>'


class Investment(TimestampMixin, db.Model):
    __tablename__ = 'investimentos'
    id = db.Column(db.Integer, primary_key=True)
    tipo = db.Column(
        db.Enum(InvestmentType, name='investment_type',
                values_callable=lambda members: [m.value for m in members]),
        nullable=False,
        index=True,
    )
    titulo = db.Column(db.Text, nullable=False)
    descricao = db.Column(db.Text)
    imagem_url = db.Column(db.Text)

    # Property attributes; money in whole reais and area in whole square meters
    endereco = db.Column(db.Text)
    area_mt2 = db.Column(db.Integer)
    quartos = db.Column(db.Integer)
    banheiros = db.Column(db.Integer)
    suites = db.Column(db.Integer)
    garagem = db.Column(db.Integer)
    piscina = db.Column(db.Boolean, default=False, nullable=False)
    academia = db.Column(db.Boolean, default=False, nullable=False)
    churrasqueira = db.Column(db.Boolean, default=False, nullable=False)
    condominio = db.Column(db.Integer)
    iptu = db.Column(db.Integer)
    preco = db.Column(db.Integer)

    def to_dict(self):
        return {
            'id': self.id,
            'tipo': self.tipo.value if self.tipo else None,
            'titulo': self.titulo,
            'descricao': self.descricao,
            'imagemUrl': self.imagem_url,
            'endereco': self.endereco,
            'areaMt2': self.area_mt2,
            'quartos': self.quartos,
            'banheiros': self.banheiros,
            'suites': self.suites,
            'garagem': self.garagem,
            'piscina': bool(self.piscina),
            'academia': bool(self.academia),
            'churrasqueira': bool(self.churrasqueira),
            'condominio': self.condominio,
            'iptu': self.iptu,
            'preco': self.preco,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Investment {self.id} {self.tipo}>'


class Property(TimestampMixin, db.Model):
    __tablename__ = 'properties'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    location = db.Column(db.Text)
    price = db.Column(db.Integer)
    area_mt2 = db.Column(db.Integer)
    bedrooms = db.Column(db.Integer)
    bathrooms = db.Column(db.Integer)
    suites = db.Column(db.Integer)
    garage = db.Column(db.Integer)
    pool = db.Column(db.Boolean, default=False, nullable=False)
    gym = db.Column(db.Boolean, default=False, nullable=False)
    bbq = db.Column(db.Boolean, default=False, nullable=False)
    condominium = db.Column(db.Integer)
    iptu = db.Column(db.Integer)
    main_image = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'location': self.location,
            'price': self.price,
            'areaMt2': self.area_mt2,
            'bedrooms': self.bedrooms,
            'bathrooms': self.bathrooms,
            'suites': self.suites,
            'garage': self.garage,
            'pool': bool(self.pool),
            'gym': bool(self.gym),
            'bbq': bool(self.bbq),
            'condominium': self.condominium,
            'iptu': self.iptu,
            'mainImage': self.main_image,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Property {self.id} {self.title}>'


# Singleton tables: the procedures keep them at one row by checking for an
# existing row before inserting, there is no unique constraint.

class SiteConfig(TimestampMixin, db.Model):
    __tablename__ = 'config'
    id = db.Column(db.Integer, primary_key=True)
    quem_somos = db.Column(db.Text)
    cor_primaria = db.Column(db.String(7), default='#1E40AF')
    tamanho = db.Column(db.Integer, default=16)
    logo = db.Column(db.Text)
    banner = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'quemSomos': self.quem_somos,
            'corPrimaria': self.cor_primaria,
            'tamanho': self.tamanho,
            'logo': self.logo,
            'banner': self.banner,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }


class SiteSettings(TimestampMixin, db.Model):
    __tablename__ = 'settings'
    id = db.Column(db.Integer, primary_key=True)
    whatsapp = db.Column(db.String(32))
    facebook = db.Column(db.Text)
    instagram = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'whatsapp': self.whatsapp,
            'facebook': self.facebook,
            'instagram': self.instagram,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }
