from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status in one KBM report."""

    attendance_id: int
    student_id: int
    report_id: int
    status: AttendanceStatus
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "student_id": self.student_id,
            "report_id": self.report_id,
            "status": self.status.value,
            "created_at": format_timestamp(self.created_at),
        }


@dataclass(frozen=True)
class AttendanceStatRow:
    """Read-model for statistics: attendance joined with its report date."""

    student_id: int
    report_id: int
    report_date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class PeriodSummary:
    total_students: int
    present: int
    sick: int
    excused: int
    absent: int
    period: str

    def to_dict(self) -> dict:
        return {
            "total_students": self.total_students,
            "present": self.present,
            "sick": self.sick,
            "excused": self.excused,
            "absent": self.absent,
            "period": self.period,
        }


@dataclass(frozen=True)
class WeeklyBucket:
    week: int
    start_date: date
    end_date: date
    attendance_count: int
    total_students: int

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "start_date": format_date(self.start_date),
            "end_date": format_date(self.end_date),
            "attendance_count": self.attendance_count,
            "total_students": self.total_students,
        }


@dataclass(frozen=True)
class MonthlyBreakdown:
    month: str
    year: int
    total_kbm: int
    avg_attendance: float
    weekly_data: list[WeeklyBucket] = field(default_factory=list)

    @property
    def total_sessions(self) -> int:
        return self.total_kbm

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "total_kbm": self.total_kbm,
            "avg_attendance": self.avg_attendance,
            "weekly_data": [w.to_dict() for w in self.weekly_data],
        }
