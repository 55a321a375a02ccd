"""Services for Identity app."""
import logging

from django.contrib.auth import authenticate

from .models import User, UserRole
from .dtos import UserDTO, RegisterIn
from .permissions import get_user_permissions

logger = logging.getLogger(__name__)


class UsernameTaken(Exception):
    pass


def to_user_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        is_active=user.is_active,
        permissions=get_user_permissions(user),
    )


def get_active_user(user_id) -> User | None:
    try:
        return User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        return None


def register_user(payload: RegisterIn) -> User:
    """Create an active MEMBER account. Raises UsernameTaken on a duplicate username."""
    if User.objects.filter(username=payload.username).exists():
        raise UsernameTaken(payload.username)

    user = User.objects.create_user(
        username=payload.username,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name or "",
        last_name=payload.last_name or "",
        role=UserRole.MEMBER,
        is_active=True,
    )
    logger.info(f"Registered user {user.username} (id={user.id})")
    return user


def authenticate_user(username: str, password: str) -> User | None:
    """
    Check credentials. Returns None for unknown users, wrong passwords and
    disabled accounts alike.
    """
    user = authenticate(username=username, password=password)
    if user is None or not user.is_active:
        return None
    return user
