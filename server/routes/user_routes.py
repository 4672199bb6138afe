"""User account API routes."""

from fastapi import APIRouter, Depends, Request, status

from server.auth import get_current_user
from server.schemas.users import RegisterRequest, UserResponse
from server.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(request: Request) -> UserService:
    return UserService(request.app.state.container.database)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, user_service: UserService = Depends(get_user_service)):
    """
    Register a new user account.

    Parameters:
        - email: Unique email address
        - password: User password (stored as a bcrypt hash)

    Returns:
        - id, email of the created user

    Raises:
        - 400: Missing email, Missing password, Already exist
    """
    user = user_service.register_user(request.email, request.password)
    return UserResponse(id=user.user_id, email=user.email)


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: str = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """
    Return the user owning the X-Token session.

    Raises:
        - 401: Missing or unknown token, or the user no longer exists
    """
    user = user_service.get_user(current_user)
    return UserResponse(id=user.user_id, email=user.email)
