from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField
from wtforms import BooleanField, HiddenField, IntegerField, SelectField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, NumberRange, Optional, Regexp

from lobianco.models import InvestmentType

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']
IMAGE_ONLY = FileAllowed(IMAGE_EXTENSIONS, 'Envie uma imagem (jpg, png, gif ou webp).')


def count_field(label):
    return IntegerField(label, validators=[Optional(), NumberRange(min=0, message='Não pode ser negativo.')])


class CarouselSlideForm(FlaskForm):
    titulo = StringField('Título', validators=[DataRequired(message='Informe o título.')])
    descricao = TextAreaField('Descrição', validators=[Optional()])
    imagem_url = HiddenField()
    imagem_file = FileField('Imagem', validators=[IMAGE_ONLY])
    submit = SubmitField('Salvar')


class InvestmentForm(FlaskForm):
    tipo = SelectField('Tipo', choices=InvestmentType.choices(), validators=[DataRequired()])
    titulo = StringField('Título', validators=[DataRequired(message='Informe o título.')])
    descricao = TextAreaField('Descrição', validators=[Optional()])
    endereco = StringField('Endereço', validators=[Optional()])
    area_mt2 = count_field('Área (m²)')
    quartos = count_field('Quartos')
    banheiros = count_field('Banheiros')
    suites = count_field('Suítes')
    garagem = count_field('Vagas de garagem')
    piscina = BooleanField('Piscina')
    academia = BooleanField('Academia')
    churrasqueira = BooleanField('Churrasqueira')
    condominio = count_field('Condomínio (R$)')
    iptu = count_field('IPTU (R$)')
    preco = count_field('Preço (R$)')
    imagem_url = HiddenField()
    imagem_file = FileField('Imagem', validators=[IMAGE_ONLY])
    submit = SubmitField('Salvar')


class PropertyForm(FlaskForm):
    title = StringField('Título', validators=[DataRequired(message='Informe o título.')])
    description = TextAreaField('Descrição', validators=[Optional()])
    location = StringField('Localização', validators=[DataRequired(message='Informe a localização.')])
    price = count_field('Preço (R$)')
    area_mt2 = count_field('Área (m²)')
    bedrooms = count_field('Quartos')
    bathrooms = count_field('Banheiros')
    suites = count_field('Suítes')
    garage = count_field('Vagas de garagem')
    pool = BooleanField('Piscina')
    gym = BooleanField('Academia')
    bbq = BooleanField('Churrasqueira')
    condominium = count_field('Condomínio (R$)')
    iptu = count_field('IPTU (R$)')
    main_image = HiddenField()
    main_image_file = FileField('Imagem principal', validators=[IMAGE_ONLY])
    submit = SubmitField('Salvar')


class SiteConfigForm(FlaskForm):
    quem_somos = TextAreaField('Quem Somos', validators=[Optional()])
    cor_primaria = StringField('Cor primária', default='#1E40AF',
                               validators=[DataRequired(), Regexp(r'^#[0-9A-Fa-f]{6}$', message='Use o formato #RRGGBB.')])
    tamanho = IntegerField('Tamanho da fonte', default=16,
                           validators=[DataRequired(), NumberRange(min=8, max=48)])
    logo = HiddenField()
    logo_file = FileField('Logo', validators=[IMAGE_ONLY])
    banner = HiddenField()
    banner_file = FileField('Banner', validators=[IMAGE_ONLY])
    submit = SubmitField('Salvar configurações')


class SiteSettingsForm(FlaskForm):
    whatsapp = StringField('WhatsApp', validators=[Optional(), Length(max=32)])
    facebook = StringField('Facebook', validators=[Optional()])
    instagram = StringField('Instagram', validators=[Optional()])
    submit = SubmitField('Salvar redes sociais')


class ConfirmDeleteForm(FlaskForm):
    confirm = BooleanField('Confirmo a exclusão', validators=[DataRequired(message='Confirme a exclusão.')])
    submit = SubmitField('Excluir')
