from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import KBMReport, NewKBMReport
from .repository import KBMReportRepository

_SELECT = """
    SELECT report_id, report_date, day_name, teacher_name, user_id, topic, notes, created_at, updated_at
    FROM kbm_reports
"""


def _to_report(row: Dict[str, Any]) -> KBMReport:
    return KBMReport(
        report_id=int(row["report_id"]),
        report_date=row["report_date"],
        day_name=row["day_name"],
        teacher_name=row["teacher_name"],
        user_id=int(row["user_id"]),
        topic=row["topic"],
        notes=row.get("notes"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLKBMReportRepository(KBMReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_with_attendance(self, report: NewKBMReport) -> KBMReport:
        # One connection, one commit: readers never see a report without its rows.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kbm_reports(report_date, day_name, teacher_name, user_id, topic, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    report.report_date,
                    report.day_name,
                    report.teacher_name,
                    int(report.user_id),
                    report.topic,
                    report.notes,
                ),
            )
            report_id = int(cur.lastrowid)

            if report.attendances:
                cur.executemany(
                    """
                    INSERT INTO attendance(student_id, report_id, status)
                    VALUES(%s,%s,%s)
                    """,
                    [(int(a.student_id), report_id, a.status.value) for a in report.attendances],
                )

            cur.execute(f"{_SELECT} WHERE report_id=%s", (report_id,))
            return _to_report(fetchone(cur))

    def list_all(self) -> Sequence[KBMReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY report_date DESC, report_id DESC")
            return [_to_report(r) for r in fetchall(cur)]

    def list_by_user(self, user_id: int) -> Sequence[KBMReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE user_id=%s ORDER BY report_date DESC, report_id DESC",
                (int(user_id),),
            )
            return [_to_report(r) for r in fetchall(cur)]

    def get_by_id(self, report_id: int) -> Optional[KBMReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE report_id=%s", (int(report_id),))
            row = fetchone(cur)
            return _to_report(row) if row else None

    def delete(self, report_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE report_id=%s", (int(report_id),))
            cur.execute("DELETE FROM kbm_reports WHERE report_id=%s", (int(report_id),))
            return cur.rowcount > 0
