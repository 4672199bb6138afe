"""Session API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status

from server.auth import get_auth_service
from server.schemas.users import TokenResponse
from server.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


@router.get("/connect", response_model=TokenResponse)
def connect(
    authorization: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with Basic credentials and open a 24 hour session.

    Parameters:
        - Authorization header: Basic base64(email:password)

    Returns:
        - token: Opaque session token, sent back as X-Token

    Raises:
        - 401: Missing, malformed or invalid credentials
    """
    token = auth_service.login(authorization)
    return TokenResponse(token=token)


@router.get("/disconnect", status_code=status.HTTP_204_NO_CONTENT)
def disconnect(
    x_token: Optional[str] = Header(None, alias="X-Token"),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Close the session identified by X-Token.

    Raises:
        - 401: Missing or unknown token
    """
    auth_service.logout(x_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
