"""Unit tests for password hashing and Basic header parsing."""

import base64

import pytest

from server.auth import generate_token, hash_password, parse_basic_auth, verify_password


def _basic(raw: bytes) -> str:
    return 'Basic ' + base64.b64encode(raw).decode('ascii')


def test_hash_and_verify():
    password_hash = hash_password('pw1')
    assert password_hash != 'pw1'
    assert verify_password('pw1', password_hash)
    assert not verify_password('pw2', password_hash)


def test_verify_against_garbage_hash():
    assert verify_password('pw1', 'not-a-bcrypt-hash') is False


def test_tokens_are_unique():
    assert generate_token() != generate_token()


def test_parse_basic_auth():
    assert parse_basic_auth(_basic(b'a@b.com:pw1')) == ('a@b.com', 'pw1')
    assert parse_basic_auth(_basic(b'a@b.com:p:w')) == ('a@b.com', 'p:w')


@pytest.mark.parametrize('header', [
    None,
    '',
    'Bearer abc',
    'Basic !!!',
    _basic(b'no-colon'),
    _basic(b':pw1'),
    _basic(b'a@b.com:'),
    _basic(b'\xff\xfe:pw'),
])
def test_parse_basic_auth_rejects(header):
    assert parse_basic_auth(header) is None
