"""
Role based permissions
"""

from typing import Any, Optional

from inventory_app.models import User, UserRole

ROLE_PERMISSIONS = {
    UserRole.ADMIN: {
        ('create', 'product'), ('read', 'product'), ('update', 'product'), ('delete', 'product'),
        ('read', 'dashboard'),
        ('create', 'user'), ('read', 'user'), ('update', 'user'), ('delete', 'user'),
        ('create', 'movement'), ('read', 'movement'),
        ('read', 'report'),
    },
    UserRole.EMPLOYEE: {
        ('create', 'product'), ('read', 'product'), ('update', 'product'),
        ('read', 'dashboard'),
        ('create', 'movement'), ('read', 'movement'),
        ('read', 'report'),
    },
}


def _role_of(user: Any) -> Optional[UserRole]:
    if isinstance(user, User):
        return user.role
    if isinstance(user, UserRole):
        return user
    try:
        return UserRole(user)
    except ValueError:
        return None


def can(user: Any, action: str, resource: str) -> bool:
    """Check whether a user (or bare role) may perform action on resource"""
    if user is None:
        return False
    if isinstance(user, User) and not user.is_active:
        return False
    role = _role_of(user)
    if role is None:
        return False
    return (action, resource) in ROLE_PERMISSIONS.get(role, set())
