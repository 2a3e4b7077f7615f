"""
User Repository - user directory records
"""

from typing import List, Optional

from inventory_app.models import User
from inventory_app.store import KeyValueStore, user_key, USER_PREFIX


class UserRepository:

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_by_id(self, user_id: str) -> Optional[User]:
        data = self.store.get(user_key(user_id))
        return User.from_dict(data) if data else None

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self.get_all():
            if user.email.lower() == email.lower():
                return user
        return None

    def get_all(self) -> List[User]:
        users = [User.from_dict(data) for data in self.store.get_by_prefix(USER_PREFIX)]
        return sorted(users, key=lambda u: (u.created_at, u.id))

    def save(self, user: User) -> User:
        self.store.set(user_key(user.id), user.to_dict())
        return user

    def delete(self, user_id: str) -> bool:
        if self.store.get(user_key(user_id)) is None:
            return False
        self.store.delete(user_key(user_id))
        return True
