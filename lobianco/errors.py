# lobianco/errors.py
"""Errors raised by the procedure layer.

Each class carries the procedure error code and the HTTP status the JSON API
answers with. The HTML blueprints catch them and flash the message instead.
"""


class SiteError(Exception):
    code = 'INTERNAL_SERVER_ERROR'
    status_code = 500
    default_message = 'Erro interno'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'code': self.code, 'message': self.message}


class InvalidInputError(SiteError):
    code = 'BAD_REQUEST'
    status_code = 400
    default_message = 'Dados inválidos'

    def __init__(self, message=None, issues=None):
        super().__init__(message)
        self.issues = issues or []

    def to_dict(self):
        data = super().to_dict()
        data['issues'] = self.issues
        return data


class AuthenticationRequiredError(SiteError):
    code = 'UNAUTHORIZED'
    status_code = 401
    default_message = 'Faça login para continuar'


class ForbiddenError(SiteError):
    code = 'FORBIDDEN'
    status_code = 403
    default_message = 'Acesso negado'


class NotFoundError(SiteError):
    code = 'NOT_FOUND'
    status_code = 404
    default_message = 'Registro não encontrado'


class StorageError(SiteError):
    default_message = 'Falha ao enviar o arquivo'


class StoreUnavailableError(SiteError):
    code = 'SERVICE_UNAVAILABLE'
    status_code = 503
    default_message = 'Banco de dados indisponível'
