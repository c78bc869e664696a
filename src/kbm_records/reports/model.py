from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class KBMReport:
    """Domain entity: one recorded teaching occasion (class session)."""

    report_id: int
    report_date: date
    day_name: str
    teacher_name: str
    user_id: int
    topic: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.report_id,
            "report_date": format_date(self.report_date),
            "day_name": self.day_name,
            "teacher_name": self.teacher_name,
            "user_id": self.user_id,
            "topic": self.topic,
            "notes": self.notes,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class AttendanceInput:
    student_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class NewKBMReport:
    """Validated input for filing a report; day_name is already derived from report_date."""

    report_date: date
    day_name: str
    teacher_name: str
    user_id: int
    topic: str
    notes: Optional[str] = None
    attendances: tuple[AttendanceInput, ...] = field(default_factory=tuple)
