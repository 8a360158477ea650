from flask_wtf import FlaskForm
from wtforms import PasswordField, SubmitField
from wtforms.validators import DataRequired


class AccessGateForm(FlaskForm):
    password = PasswordField('Senha', validators=[DataRequired(message='Digite a senha.')])
    submit = SubmitField('Entrar')
