# lobianco/api/schemas.py
"""
Input schemas of the procedure layer.

Field names follow the models (snake_case); the aliases are the camelCase
names the JSON API uses. Both are accepted.
Unknown fields are rejected and scalar types are strict, so "3" is not an
integer and 1 is not a boolean.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator

from lobianco.models import InvestmentType
from lobianco.storage import StorageBucket

HEX_COLOR = r'^#[0-9A-Fa-f]{6}$'

Count = Optional[StrictInt]
Amount = Optional[StrictInt]


class ProcedureInput(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    # Required columns may be omitted from an update but never nulled.
    non_nullable: ClassVar[tuple] = ()

    @field_validator('*', mode='before')
    @classmethod
    def reject_null_for_required(cls, value, info):
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError('campo não pode ser nulo')
        return value


class RecordId(ProcedureInput):
    id: StrictInt


# Carousel

class SlideCreate(ProcedureInput):
    titulo: StrictStr = Field(min_length=1)
    descricao: Optional[StrictStr] = None
    imagem_url: Optional[StrictStr] = Field(None, alias='imagemUrl')


class SlideUpdate(ProcedureInput):
    non_nullable: ClassVar[tuple] = ('titulo',)

    id: StrictInt
    titulo: StrictStr = Field(None, min_length=1)
    descricao: Optional[StrictStr] = None
    imagem_url: Optional[StrictStr] = Field(None, alias='imagemUrl')


# Investments

class InvestmentFields(ProcedureInput):
    descricao: Optional[StrictStr] = None
    imagem_url: Optional[StrictStr] = Field(None, alias='imagemUrl')
    endereco: Optional[StrictStr] = None
    area_mt2: Count = Field(None, ge=0, alias='areaMt2')
    quartos: Count = Field(None, ge=0)
    banheiros: Count = Field(None, ge=0)
    suites: Count = Field(None, ge=0)
    garagem: Count = Field(None, ge=0)
    condominio: Amount = Field(None, ge=0)
    iptu: Amount = Field(None, ge=0)
    preco: Amount = Field(None, ge=0)


class InvestmentCreate(InvestmentFields):
    tipo: InvestmentType
    titulo: StrictStr = Field(min_length=1)
    piscina: StrictBool = False
    academia: StrictBool = False
    churrasqueira: StrictBool = False


class InvestmentUpdate(InvestmentFields):
    non_nullable: ClassVar[tuple] = ('tipo', 'titulo', 'piscina', 'academia', 'churrasqueira')

    id: StrictInt
    tipo: InvestmentType = None
    titulo: StrictStr = Field(None, min_length=1)
    piscina: StrictBool = None
    academia: StrictBool = None
    churrasqueira: StrictBool = None


class InvestmentFilter(ProcedureInput):
    tipo: Optional[InvestmentType] = None


# Properties

class PropertyFields(ProcedureInput):
    description: Optional[StrictStr] = None
    location: Optional[StrictStr] = None
    price: Amount = Field(None, ge=0)
    area_mt2: Count = Field(None, ge=0, alias='areaMt2')
    bedrooms: Count = Field(None, ge=0)
    bathrooms: Count = Field(None, ge=0)
    suites: Count = Field(None, ge=0)
    garage: Count = Field(None, ge=0)
    condominium: Amount = Field(None, ge=0)
    iptu: Amount = Field(None, ge=0)
    main_image: Optional[StrictStr] = Field(None, alias='mainImage')


class PropertyCreate(PropertyFields):
    title: StrictStr = Field(min_length=1)
    pool: StrictBool = False
    gym: StrictBool = False
    bbq: StrictBool = False


class PropertyUpdate(PropertyFields):
    non_nullable: ClassVar[tuple] = ('title', 'pool', 'gym', 'bbq')

    id: StrictInt
    title: StrictStr = Field(None, min_length=1)
    pool: StrictBool = None
    gym: StrictBool = None
    bbq: StrictBool = None


# Singletons

class SiteConfigUpdate(ProcedureInput):
    quem_somos: Optional[StrictStr] = Field(None, alias='quemSomos')
    cor_primaria: StrictStr = Field(None, pattern=HEX_COLOR, alias='corPrimaria')
    tamanho: StrictInt = Field(None, ge=8, le=48)
    logo: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None

    non_nullable: ClassVar[tuple] = ('cor_primaria', 'tamanho')


class SiteSettingsUpdate(ProcedureInput):
    whatsapp: Optional[StrictStr] = Field(None, max_length=32)
    facebook: Optional[StrictStr] = None
    instagram: Optional[StrictStr] = None


# Storage

class UploadInput(ProcedureInput):
    bucket: StorageBucket
    filename: StrictStr = Field(min_length=1)
    file_base64: StrictStr = Field(min_length=1, alias='fileBase64')


# User

class UserUpsert(ProcedureInput):
    open_id: StrictStr = Field(min_length=1, max_length=64, alias='openId')
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = Field(None, max_length=320)
    login_method: Optional[StrictStr] = Field(None, max_length=64, alias='loginMethod')
    role: Optional[StrictStr] = Field(None, pattern=r'^(user|admin)$')
