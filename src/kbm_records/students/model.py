from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_timestamp
from ..core.enums import Gender, Level, StudentStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a learner ("generus") on the roster."""

    student_id: int
    full_name: str
    birth_place: str
    birth_date: date
    group_name: str
    gender: Gender
    level: Level
    status: StudentStatus
    profession: Optional[str] = None
    skills: Optional[str] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "full_name": self.full_name,
            "birth_place": self.birth_place,
            "birth_date": format_date(self.birth_date),
            "group_name": self.group_name,
            "gender": self.gender.value,
            "level": self.level.value,
            "status": self.status.value,
            "profession": self.profession,
            "skills": self.skills,
            "notes": self.notes,
            "photo_url": self.photo_url,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class NewStudent:
    """Validated input for creating a student."""

    full_name: str
    birth_place: str
    birth_date: date
    group_name: str
    gender: Gender
    level: Level
    status: StudentStatus
    profession: Optional[str] = None
    skills: Optional[str] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
