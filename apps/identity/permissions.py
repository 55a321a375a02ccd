from typing import List, Dict
from .models import UserRole, User


class Permissions:
    # Tasks
    TASKS_LIST = "tasks.list"
    TASKS_CREATE = "tasks.create"

    # Identity
    IDENTITY_MANAGE_USER = "identity.manage_user"


# Static Role -> Permission Mapping
ROLE_PERMISSIONS: Dict[str, List[str]] = {
    UserRole.ADMIN: [
        Permissions.TASKS_LIST,
        Permissions.TASKS_CREATE,
        Permissions.IDENTITY_MANAGE_USER,
    ],
    UserRole.MEMBER: [
        Permissions.TASKS_LIST,
        Permissions.TASKS_CREATE,
    ],
    UserRole.GUEST: [
        # Guests may create their own tasks but not browse the board
        Permissions.TASKS_CREATE,
    ],
}


def get_user_permissions(user: User) -> List[str]:
    """
    Returns a list of permission strings for the given user based on their role.
    """
    if not user or not user.is_active:
        return []

    return ROLE_PERMISSIONS.get(user.role, [])
