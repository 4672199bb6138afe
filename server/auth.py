"""Authentication and security utilities."""

import base64
import binascii
import uuid
from typing import Optional, Tuple

import bcrypt
from fastapi import Depends, Header, Request

from server.exceptions import UnauthorizedError


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        Bcrypt hash of the password
    """
    password_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Args:
        password: Plain text password to verify
        password_hash: Bcrypt hash to verify against

    Returns:
        True if password matches hash, False otherwise
    """
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def generate_token() -> str:
    """
    Generate a new opaque session token.

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def parse_basic_auth(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Decode an ``Authorization: Basic <base64(email:password)>`` header.

    Only the first colon separates email from password, so passwords may
    contain colons.

    Returns:
        (email, password) or None if the header is absent or malformed
    """
    if not header or not header.startswith("Basic "):
        return None

    encoded = header[len("Basic "):].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        return None

    email, sep, password = decoded.partition(':')
    if not sep or not email or not password:
        return None
    return email, password


def get_auth_service(request: Request):
    from server.services.auth_service import AuthService

    container = request.app.state.container
    return AuthService(container.database, container.sessions)


def get_current_user(
    x_token: Optional[str] = Header(None, alias="X-Token"),
    auth_service=Depends(get_auth_service),
) -> str:
    """
    FastAPI dependency resolving the X-Token header to a user_id.

    Raises:
        UnauthorizedError: if the token is missing or unknown
    """
    return auth_service.resolve_session(x_token)


def get_optional_user(
    x_token: Optional[str] = Header(None, alias="X-Token"),
    auth_service=Depends(get_auth_service),
) -> Optional[str]:
    """
    Like get_current_user, but yields None instead of failing.
    """
    if not x_token:
        return None
    try:
        return auth_service.resolve_session(x_token)
    except UnauthorizedError:
        return None
