"""
User Service - Directory of people allowed to operate the inventory
"""

import logging
from typing import Any, Dict, List
from uuid import uuid4

from inventory_app.exceptions import InvalidInputError, NotFoundError
from inventory_app.models import User, UserRole
from inventory_app.repositories import UserRepository
from inventory_app.store import KeyValueStore
from inventory_app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('email', 'name', 'role', 'isActive')


class UserService:

    def __init__(self, store: KeyValueStore):
        self.user_repo = UserRepository(store)

    def list_users(self) -> List[User]:
        return self.user_repo.get_all()

    def get_user(self, user_id: str) -> User:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError('User not found')
        return user

    def create_user(self, data: Dict[str, Any]) -> User:
        """
        Register a directory record

        The id should be the subject the identity provider puts in its tokens;
        a random one is assigned when the request omits it
        """
        user_id = str(data.get('id') or uuid4())
        if self.user_repo.get_by_id(user_id) is not None:
            raise InvalidInputError(f"User {user_id} already exists")
        if self.user_repo.get_by_email(data['email']) is not None:
            raise InvalidInputError(f"Email {data['email']} is already registered")

        user = User(
            id=user_id,
            email=data['email'],
            name=data['name'],
            role=UserRole(data.get('role', UserRole.EMPLOYEE.value)),
            is_active=True,
            created_at=now_iso()
        )
        self.user_repo.save(user)
        logger.info(f"Created user {user.id} with role {user.role.value}")
        return user

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> User:
        existing = self.get_user(user_id)
        email = updates.get('email')
        if email and email != existing.email:
            owner = self.user_repo.get_by_email(email)
            if owner is not None and owner.id != existing.id:
                raise InvalidInputError(f"Email {email} is already registered")

        merged = existing.to_dict()
        merged.update({key: value for key, value in updates.items() if key in UPDATABLE_FIELDS})
        merged['id'] = existing.id

        user = self.user_repo.save(User.from_dict(merged))
        logger.info(f"Updated user {user.id}")
        return user

    def delete_user(self, user_id: str) -> None:
        if not self.user_repo.delete(user_id):
            raise NotFoundError('User not found')
        logger.info(f"Deleted user {user_id}")
