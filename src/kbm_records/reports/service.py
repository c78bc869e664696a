from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import day_name, parse_optional_date
from ..common.validators import optional_text, require_enum, require_non_empty, require_positive_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from ..users.repository import UserRepository
from .model import AttendanceInput, KBMReport, NewKBMReport
from .repository import KBMReportRepository

logger = logging.getLogger(__name__)


def _parse_attendances(raw: Any) -> tuple[AttendanceInput, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise ValidationError("attendances must be a list")

    entries: list[AttendanceInput] = []
    seen: set[int] = set()
    for item in raw:
        if not isinstance(item, Mapping):
            raise ValidationError("Each attendance entry must be an object")
        student_id = require_positive_int(item.get("student_id"), "student_id")
        if student_id in seen:
            raise ValidationError(f"Student {student_id} is listed more than once")
        seen.add(student_id)
        entries.append(
            AttendanceInput(
                student_id=student_id,
                status=require_enum(item.get("status"), AttendanceStatus, "Attendance status"),
            )
        )
    return tuple(entries)


class ReportService:
    """Use case: file, list and remove KBM reports.

    Attendance entries reference students by id. All references are checked
    before anything is written, and the report plus its attendance rows are
    stored by the repository in a single transaction.
    """

    def __init__(self, reports: KBMReportRepository, users: UserRepository, students: StudentRepository):
        self._reports = reports
        self._users = users
        self._students = students

    def create_report(self, data: Mapping[str, Any], *, user_id: int) -> KBMReport:
        report_date = parse_optional_date(data.get("report_date"), "Report date")
        if report_date is None:
            raise ValidationError("Report date is required")

        teacher_name = require_non_empty(data.get("teacher_name"), "Teacher name")
        topic = require_non_empty(data.get("topic"), "Topic")
        notes = optional_text(data.get("notes"), "notes")
        attendances = _parse_attendances(data.get("attendances"))
        user_id = require_positive_int(user_id, "user_id")

        if not self._users.get_by_id(user_id):
            raise NotFoundError(f"User with ID {user_id} not found")

        for entry in attendances:
            if not self._students.get_by_id(entry.student_id):
                raise NotFoundError(f"Student with ID {entry.student_id} not found")

        report = self._reports.create_with_attendance(
            NewKBMReport(
                report_date=report_date,
                day_name=day_name(report_date),
                teacher_name=teacher_name,
                user_id=user_id,
                topic=topic,
                notes=notes,
                attendances=attendances,
            )
        )
        logger.info(
            "KBM report %s filed by user %s for %s with %d attendance rows",
            report.report_id,
            user_id,
            report.report_date,
            len(attendances),
        )
        return report

    def list_reports(self, *, user_id: Optional[int] = None) -> Sequence[KBMReport]:
        if user_id is not None:
            return self._reports.list_by_user(int(user_id))
        return self._reports.list_all()

    def get_report(self, report_id: int) -> Optional[KBMReport]:
        return self._reports.get_by_id(int(report_id))

    def delete_report(self, report_id: int) -> bool:
        deleted = self._reports.delete(int(report_id))
        if deleted:
            logger.info("KBM report %s deleted with its attendance rows", report_id)
        return deleted
