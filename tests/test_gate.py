"""Tests for the admin access gate."""

from werkzeug.security import generate_password_hash

from lobianco.auth.gate import AccessGate, GateState


def test_starts_closed():
    assert AccessGate(password='segredo').state is GateState.CLOSED


def test_open_awaits_password():
    gate = AccessGate(password='segredo')
    assert gate.open() is GateState.AWAITING_PASSWORD


def test_correct_password_grants():
    gate = AccessGate(password='segredo')
    gate.open()
    assert gate.submit('segredo') is GateState.GRANTED
    assert gate.error is None


def test_wrong_password_rejects_and_clears():
    gate = AccessGate(password='segredo')
    gate.open()
    gate.typed_password = 'errada'
    assert gate.submit('errada') is GateState.REJECTED
    assert gate.error == 'Senha incorreta!'
    assert gate.typed_password == ''


def test_retry_after_rejection():
    gate = AccessGate(password='segredo')
    gate.open()
    for _ in range(5):
        assert gate.submit('errada') is GateState.REJECTED
    assert gate.submit('segredo') is GateState.GRANTED


def test_match_is_exact():
    gate = AccessGate(password='segredo')
    assert not gate.matches('Segredo')
    assert not gate.matches('segredo ')
    assert not gate.matches('')
    assert not gate.matches(None)


def test_hashed_password():
    gate = AccessGate(password_hash=generate_password_hash('segredo'))
    gate.open()
    assert gate.submit('segredo') is GateState.GRANTED


def test_hash_wins_over_plain():
    gate = AccessGate(password='antiga', password_hash=generate_password_hash('nova'))
    assert gate.matches('nova')
    assert not gate.matches('antiga')


def test_unconfigured_gate_never_grants():
    gate = AccessGate()
    assert not gate.configured
    assert gate.submit('qualquer') is GateState.REJECTED


def test_from_config():
    gate = AccessGate.from_config({'ADMIN_PASSWORD': 'segredo', 'ADMIN_PASSWORD_HASH': None})
    assert gate.configured
    assert gate.matches('segredo')


def test_close_resets():
    gate = AccessGate(password='segredo')
    gate.open()
    gate.submit('errada')
    assert gate.close() is GateState.CLOSED
    assert gate.error is None
