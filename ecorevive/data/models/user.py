from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from ecorevive.domain.enums import Role


class UserModel(BaseModel):
    id: int
    username: str
    password_hash: str
    email: str
    full_name: str
    location: Optional[str] = None
    role: Role = Role.BUYER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def can_sell(self) -> bool:
        return self.role in (Role.SELLER, Role.ADMIN)
