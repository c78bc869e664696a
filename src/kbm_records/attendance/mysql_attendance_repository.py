from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceStatRow
from .repository import AttendanceRepository


def _to_record(row: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row["attendance_id"]),
        student_id=int(row["student_id"]),
        report_id=int(row["report_id"]),
        status=AttendanceStatus(row["status"]),
        created_at=row.get("created_at"),
    )


def _date_clauses(start_date: Optional[date], end_date: Optional[date]) -> tuple[list[str], list[object]]:
    clauses: list[str] = []
    params: list[object] = []
    if start_date is not None:
        clauses.append("r.report_date >= %s")
        params.append(start_date)
    if end_date is not None:
        clauses.append("r.report_date <= %s")
        params.append(end_date)
    return clauses, params


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_stat_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceStatRow]:
        clauses, params = _date_clauses(start_date, end_date)
        if status is not None:
            clauses.append("a.status = %s")
            params.append(status.value)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.student_id, a.report_id, r.report_date, a.status
                FROM attendance a
                JOIN kbm_reports r ON r.report_id = a.report_id
                {where}
                ORDER BY r.report_date ASC, a.report_id ASC, a.student_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceStatRow(
                    student_id=int(r["student_id"]),
                    report_id=int(r["report_id"]),
                    report_date=r["report_date"],
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def count_reports(self, *, start_date: date, end_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM kbm_reports WHERE report_date BETWEEN %s AND %s",
                (start_date, end_date),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_for_student(
        self,
        student_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses, params = _date_clauses(start_date, end_date)
        clauses.insert(0, "a.student_id = %s")
        params.insert(0, int(student_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.attendance_id, a.student_id, a.report_id, a.status, a.created_at
                FROM attendance a
                JOIN kbm_reports r ON r.report_id = a.report_id
                WHERE {' AND '.join(clauses)}
                ORDER BY r.report_date ASC, a.attendance_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_report(self, report_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, report_id, status, created_at
                FROM attendance
                WHERE report_id = %s
                ORDER BY attendance_id ASC
                """,
                (int(report_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]
