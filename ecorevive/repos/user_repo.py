from typing import Any, Dict

from ecorevive.data.store import EntityStore
from ecorevive.data.models.user import UserModel


class UserRepo:
    def __init__(self, store: EntityStore):
        self.store = store

    def get_user(self, user_id: int) -> UserModel | None:
        return self.store.users.get(user_id)

    def get_by_username(self, username: str) -> UserModel | None:
        wanted = username.lower()
        found = self.store.users.find(lambda u: u.username.lower() == wanted)
        return found[0] if found else None

    def get_by_email(self, email: str) -> UserModel | None:
        wanted = email.lower()
        found = self.store.users.find(lambda u: u.email.lower() == wanted)
        return found[0] if found else None

    def create_user(self, fields: Dict[str, Any]) -> UserModel:
        return self.store.users.create(fields)

    def count(self) -> int:
        return len(self.store.users)

    def update_user(self, user_id: int, partial: Dict[str, Any]) -> UserModel | None:
        return self.store.users.update(user_id, partial)
