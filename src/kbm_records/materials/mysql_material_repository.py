from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Material, NewMaterial
from .repository import MaterialRepository

UPDATABLE_COLUMNS = ("title", "description", "file_url", "file_name")

_SELECT = """
    SELECT material_id, title, description, file_url, file_name, created_by, created_at, updated_at
    FROM materials
"""


def _to_material(row: Dict[str, Any]) -> Material:
    return Material(
        material_id=int(row["material_id"]),
        title=row["title"],
        created_by=int(row["created_by"]),
        description=row.get("description"),
        file_url=row.get("file_url"),
        file_name=row.get("file_name"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLMaterialRepository(MaterialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, material: NewMaterial) -> Material:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO materials(title, description, file_url, file_name, created_by)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    material.title,
                    material.description,
                    material.file_url,
                    material.file_name,
                    int(material.created_by),
                ),
            )
            material_id = int(cur.lastrowid)
            cur.execute(f"{_SELECT} WHERE material_id=%s", (material_id,))
            return _to_material(fetchone(cur))

    def list_all(self) -> Sequence[Material]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY created_at DESC, material_id DESC")
            return [_to_material(r) for r in fetchall(cur)]

    def get_by_id(self, material_id: int) -> Optional[Material]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE material_id=%s", (int(material_id),))
            row = fetchone(cur)
            return _to_material(row) if row else None

    def update(self, material_id: int, *, changes: Mapping[str, Any]) -> Optional[Material]:
        sql, params = build_update(
            "materials",
            key_column="material_id",
            key_value=int(material_id),
            changes=changes,
            allowed=UPDATABLE_COLUMNS,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            cur.execute(f"{_SELECT} WHERE material_id=%s", (int(material_id),))
            row = fetchone(cur)
            return _to_material(row) if row else None

    def delete(self, material_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM materials WHERE material_id=%s", (int(material_id),))
            return cur.rowcount > 0
