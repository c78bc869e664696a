from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Material, NewMaterial


class MaterialRepository(Protocol):
    def create(self, material: NewMaterial) -> Material:
        raise NotImplementedError

    def list_all(self) -> Sequence[Material]:
        raise NotImplementedError

    def get_by_id(self, material_id: int) -> Optional[Material]:
        raise NotImplementedError

    def update(self, material_id: int, *, changes: Mapping[str, Any]) -> Optional[Material]:
        raise NotImplementedError

    def delete(self, material_id: int) -> bool:
        raise NotImplementedError
