from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp


@dataclass(frozen=True)
class Material:
    """Domain entity: a shared learning resource."""

    material_id: int
    title: str
    created_by: int
    description: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.material_id,
            "title": self.title,
            "description": self.description,
            "file_url": self.file_url,
            "file_name": self.file_name,
            "created_by": self.created_by,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class NewMaterial:
    title: str
    created_by: int
    description: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
