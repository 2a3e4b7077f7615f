"""
User Model
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from .enums import UserRole


@dataclass(frozen=True)
class User:
    """Directory record for an authenticated person"""
    id: str
    email: str
    name: str
    role: UserRole
    created_at: str
    is_active: bool = True
    last_login: Optional[str] = None

    def __repr__(self):
        return f'<User {self.id} {self.role.value}>'

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            id=str(data['id']),
            email=data.get('email', ''),
            name=data.get('name', ''),
            role=UserRole(data.get('role', UserRole.EMPLOYEE.value)),
            is_active=bool(data.get('isActive', True)),
            created_at=data.get('createdAt', ''),
            last_login=data.get('lastLogin')
        )

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role.value,
            'isActive': self.is_active,
            'createdAt': self.created_at,
            'lastLogin': self.last_login
        }
