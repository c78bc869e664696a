from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError
from ..users.repository import UserRepository
from .model import Material, NewMaterial
from .repository import MaterialRepository

_OPTIONAL_TEXT = ("description", "file_url", "file_name")


class MaterialService:
    """Use case: manage shared learning materials (coordinator)."""

    def __init__(self, materials: MaterialRepository, users: UserRepository):
        self._materials = materials
        self._users = users

    def create_material(self, data: Mapping[str, Any], *, user_id: int) -> Material:
        title = require_non_empty(data.get("title"), "Title")
        user_id = require_positive_int(user_id, "user_id")
        if not self._users.get_by_id(user_id):
            raise NotFoundError(f"User with ID {user_id} not found")

        return self._materials.create(
            NewMaterial(
                title=title,
                created_by=user_id,
                description=optional_text(data.get("description"), "description"),
                file_url=optional_text(data.get("file_url"), "file_url"),
                file_name=optional_text(data.get("file_name"), "file_name"),
            )
        )

    def list_materials(self) -> Sequence[Material]:
        return self._materials.list_all()

    def get_material(self, material_id: int) -> Optional[Material]:
        return self._materials.get_by_id(int(material_id))

    def update_material(self, material_id: int, data: Mapping[str, Any]) -> Optional[Material]:
        """Partial update: only keys present in ``data`` are changed."""

        changes: dict[str, Any] = {}
        if "title" in data:
            changes["title"] = require_non_empty(data["title"], "Title")
        for key in _OPTIONAL_TEXT:
            if key in data:
                changes[key] = optional_text(data[key], key)

        if not changes:
            return self._materials.get_by_id(int(material_id))
        return self._materials.update(int(material_id), changes=changes)

    def delete_material(self, material_id: int) -> bool:
        return self._materials.delete(int(material_id))
