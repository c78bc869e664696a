from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that files reports or manages records.

    Note: Plain data object, no DB access here.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    full_name: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        # password_hash is deliberately left out
        return {
            "id": self.user_id,
            "username": self.username,
            "role": self.role.value,
            "full_name": self.full_name,
            "is_active": self.is_active,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }
