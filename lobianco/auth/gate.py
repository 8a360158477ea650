# lobianco/auth/gate.py

import enum
import hmac

from werkzeug.security import check_password_hash


class GateState(enum.Enum):
    CLOSED = 'closed'
    AWAITING_PASSWORD = 'awaiting_password'
    GRANTED = 'granted'
    REJECTED = 'rejected'


class AccessGate:
    """
    Shared-secret prompt in front of the admin panel.

    closed -> awaiting_password -> granted | rejected. A rejection clears the
    typed password and leaves the gate open for another try; there is no
    lockout. Granting access here only lets the caller become the owner
    user; every write is still checked for the admin role server-side.
    """

    def __init__(self, password=None, password_hash=None):
        self._password = password
        self._password_hash = password_hash
        self.state = GateState.CLOSED
        self.typed_password = ''
        self.error = None

    @classmethod
    def from_config(cls, config):
        return cls(password=config.get('ADMIN_PASSWORD'),
                   password_hash=config.get('ADMIN_PASSWORD_HASH'))

    @property
    def configured(self):
        return bool(self._password_hash or self._password)

    def open(self):
        self.state = GateState.AWAITING_PASSWORD
        self.error = None
        return self.state

    def close(self):
        self.state = GateState.CLOSED
        self.typed_password = ''
        self.error = None
        return self.state

    def matches(self, password):
        if not password:
            return False
        if self._password_hash:
            return check_password_hash(self._password_hash, password)
        if self._password:
            return hmac.compare_digest(password.encode('utf-8'), self._password.encode('utf-8'))
        return False

    def submit(self, password):
        if self.state not in (GateState.AWAITING_PASSWORD, GateState.REJECTED):
            self.open()
        if self.matches(password):
            self.state = GateState.GRANTED
            self.error = None
        else:
            self.state = GateState.REJECTED
            self.error = 'Senha incorreta!'
        self.typed_password = ''
        return self.state
