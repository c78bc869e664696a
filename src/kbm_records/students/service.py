from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import optional_text, require_enum, require_non_empty
from ..core.enums import Gender, Level, StudentStatus
from ..core.exceptions import ValidationError
from .model import NewStudent, Student
from .repository import StudentRepository

_REQUIRED_TEXT = {
    "full_name": "Full name",
    "birth_place": "Birth place",
    "group_name": "Group",
}
_OPTIONAL_TEXT = ("profession", "skills", "notes", "photo_url")
_ENUMS = {
    "gender": (Gender, "Gender"),
    "level": (Level, "Level"),
    "status": (StudentStatus, "Status"),
}


def _require_birth_date(value: Any) -> Any:
    birth_date = parse_optional_date(value, "Birth date")
    if birth_date is None:
        raise ValidationError("Birth date is required")
    return birth_date


class StudentService:
    """Use case: manage the student roster (coordinator)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create_student(self, data: Mapping[str, Any]) -> Student:
        new = NewStudent(
            full_name=require_non_empty(data.get("full_name"), "Full name"),
            birth_place=require_non_empty(data.get("birth_place"), "Birth place"),
            birth_date=_require_birth_date(data.get("birth_date")),
            group_name=require_non_empty(data.get("group_name"), "Group"),
            gender=require_enum(data.get("gender"), Gender, "Gender"),
            level=require_enum(data.get("level"), Level, "Level"),
            status=require_enum(data.get("status"), StudentStatus, "Status"),
            profession=optional_text(data.get("profession"), "profession"),
            skills=optional_text(data.get("skills"), "skills"),
            notes=optional_text(data.get("notes"), "notes"),
            photo_url=optional_text(data.get("photo_url"), "photo_url"),
        )
        return self._students.create(new)

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: int) -> Optional[Student]:
        return self._students.get_by_id(int(student_id))

    def update_student(self, student_id: int, data: Mapping[str, Any]) -> Optional[Student]:
        """Partial update: only keys present in ``data`` are changed."""

        changes: dict[str, Any] = {}
        for key, label in _REQUIRED_TEXT.items():
            if key in data:
                changes[key] = require_non_empty(data[key], label)
        for key in _OPTIONAL_TEXT:
            if key in data:
                changes[key] = optional_text(data[key], key)
        for key, (enum_cls, label) in _ENUMS.items():
            if key in data:
                changes[key] = require_enum(data[key], enum_cls, label)
        if "birth_date" in data:
            changes["birth_date"] = _require_birth_date(data["birth_date"])

        if not changes:
            return self._students.get_by_id(int(student_id))
        return self._students.update(int(student_id), changes=changes)

    def delete_student(self, student_id: int) -> bool:
        return self._students.delete(int(student_id))
