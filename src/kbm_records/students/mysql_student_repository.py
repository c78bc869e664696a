from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.enums import Gender, Level, StudentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import NewStudent, Student
from .repository import StudentRepository

UPDATABLE_COLUMNS = (
    "full_name",
    "birth_place",
    "birth_date",
    "group_name",
    "gender",
    "level",
    "status",
    "profession",
    "skills",
    "notes",
    "photo_url",
)

_SELECT = f"SELECT student_id, {', '.join(UPDATABLE_COLUMNS)}, created_at, updated_at FROM students"


def _to_student(row: Dict[str, Any]) -> Student:
    return Student(
        student_id=int(row["student_id"]),
        full_name=row["full_name"],
        birth_place=row["birth_place"],
        birth_date=row["birth_date"],
        group_name=row["group_name"],
        gender=Gender(row["gender"]),
        level=Level(row["level"]),
        status=StudentStatus(row["status"]),
        profession=row.get("profession"),
        skills=row.get("skills"),
        notes=row.get("notes"),
        photo_url=row.get("photo_url"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def _db_value(value: Any) -> Any:
    # Enums are stored by value.
    return getattr(value, "value", value)


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, student: NewStudent) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(
                    full_name, birth_place, birth_date, group_name, gender, level, status,
                    profession, skills, notes, photo_url
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    student.full_name,
                    student.birth_place,
                    student.birth_date,
                    student.group_name,
                    student.gender.value,
                    student.level.value,
                    student.status.value,
                    student.profession,
                    student.skills,
                    student.notes,
                    student.photo_url,
                ),
            )
            student_id = int(cur.lastrowid)
            cur.execute(f"{_SELECT} WHERE student_id=%s", (student_id,))
            return _to_student(fetchone(cur))

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY student_id ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE student_id=%s", (int(student_id),))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def update(self, student_id: int, *, changes: Mapping[str, Any]) -> Optional[Student]:
        sql, params = build_update(
            "students",
            key_column="student_id",
            key_value=int(student_id),
            changes={k: _db_value(v) for k, v in changes.items()},
            allowed=UPDATABLE_COLUMNS,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            # rowcount is 0 when nothing actually changed, so re-read instead
            cur.execute(f"{_SELECT} WHERE student_id=%s", (int(student_id),))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def delete(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0
