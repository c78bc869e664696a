from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceStatRow


class AttendanceRepository(Protocol):
    def get_stat_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceStatRow]:
        """Attendance joined to reports whose date is in [start_date, end_date] (inclusive)."""

        raise NotImplementedError

    def count_reports(self, *, start_date: date, end_date: date) -> int:
        raise NotImplementedError

    def list_for_student(
        self,
        student_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_report(self, report_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
