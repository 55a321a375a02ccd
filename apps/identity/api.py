"""
Identity API endpoints with JWT bearer authentication.

Provides register and login, plus the helpers other routers use to resolve
the caller: get_current_user / require_auth / require_permission.
"""
import logging
from typing import Optional
from ninja import Router
from django.http import HttpRequest
from ninja.errors import HttpError

from apps.core.errors import VALIDATION_MESSAGE
from apps.core.schemas import ValidationErrorOut

from .models import User
from .dtos import RegisterIn, LoginIn, TokenOut
from .services import (
    UsernameTaken,
    authenticate_user,
    get_active_user,
    register_user,
    to_user_dto,
)
from .permissions import get_user_permissions
from .jwt_auth import create_access_token, get_token_from_request, get_user_id_from_token

logger = logging.getLogger(__name__)

router = Router(tags=["Identity"])


# =============================================================================
# Helper Functions
# =============================================================================

def get_current_user(request: HttpRequest) -> Optional[User]:
    """
    Extract and validate user from the bearer token.

    Returns User object if valid token, None otherwise.
    """
    token = get_token_from_request(request)
    if not token:
        return None

    user_id = get_user_id_from_token(token)
    if not user_id:
        return None

    return get_active_user(user_id)


def require_auth(request: HttpRequest) -> User:
    """
    Require authentication. Raises 401 if not authenticated.
    """
    user = get_current_user(request)
    if not user:
        raise HttpError(401, "Unauthenticated")
    return user


def require_permission(request: HttpRequest, permission: str) -> User:
    """Require an authenticated user holding `permission` (401, then 403)."""
    user = require_auth(request)
    if permission not in get_user_permissions(user):
        logger.warning(f"User {user.id} denied {permission}")
        raise HttpError(403, "Permission denied")
    return user


def token_response(user: User) -> dict:
    return {
        "token": create_access_token(user.id, user.role),
        "token_type": "bearer",
        "user": to_user_dto(user),
    }


# =============================================================================
# Auth Endpoints
# =============================================================================

@router.post("/register", response={201: TokenOut, 422: ValidationErrorOut}, auth=None)
def register(request: HttpRequest, payload: RegisterIn):
    """
    Create an account and return an access token for it.
    """
    try:
        user = register_user(payload)
    except UsernameTaken:
        return 422, {
            "message": VALIDATION_MESSAGE,
            "errors": {"username": ["The username has already been taken."]},
        }
    return 201, token_response(user)


@router.post("/login", response=TokenOut, auth=None)
def login(request: HttpRequest, payload: LoginIn):
    """
    Exchange username/password for a bearer token.
    """
    user = authenticate_user(payload.username, payload.password)
    if user is None:
        logger.info(f"Failed login for {payload.username}")
        raise HttpError(401, "Invalid username or password")

    logger.info(f"User {user.id} logged in")
    return token_response(user)
