from __future__ import annotations

from datetime import date

from kbm_records.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from kbm_records.core.enums import AttendanceStatus


class RecordingCursor:
    def __init__(self, rows):
        self._rows = rows
        self.statements = []

    def execute(self, sql, params=None):
        self.statements.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class RecordingConnection:
    def __init__(self, rows=()):
        self.cur = RecordingCursor(list(rows))
        self.commits = 0

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class SingleConnectionFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self, *, with_database=True):
        return self.conn


def _repo(rows=()):
    conn = RecordingConnection(rows)
    return MySQLAttendanceRepository(SingleConnectionFactory(conn)), conn.cur


def test_stat_rows_filter_on_inclusive_dates_and_status():
    repo, cur = _repo(
        [{"student_id": "3", "report_id": 7, "report_date": date(2024, 1, 15), "status": "Hadir"}]
    )

    rows = repo.get_stat_rows(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        status=AttendanceStatus.PRESENT,
    )

    sql, params = cur.statements[0]
    assert "WHERE r.report_date >= %s AND r.report_date <= %s AND a.status = %s" in sql
    assert params == (date(2024, 1, 1), date(2024, 1, 31), "Hadir")
    assert rows[0].student_id == 3
    assert rows[0].status == AttendanceStatus.PRESENT


def test_stat_rows_without_filters_has_no_where_clause():
    repo, cur = _repo()

    assert repo.get_stat_rows() == []

    sql, params = cur.statements[0]
    assert "WHERE" not in sql
    assert params == ()


def test_stat_rows_with_only_an_end_date():
    repo, cur = _repo()

    repo.get_stat_rows(end_date=date(2024, 2, 29))

    sql, params = cur.statements[0]
    assert "WHERE r.report_date <= %s ORDER BY" in sql
    assert params == (date(2024, 2, 29),)


def test_count_reports_uses_inclusive_range():
    repo, cur = _repo([{"total": 4}])

    assert repo.count_reports(start_date=date(2024, 2, 1), end_date=date(2024, 2, 29)) == 4

    sql, params = cur.statements[0]
    assert "WHERE report_date BETWEEN %s AND %s" in sql
    assert params == (date(2024, 2, 1), date(2024, 2, 29))


def test_list_for_student_puts_student_filter_first():
    repo, cur = _repo()

    repo.list_for_student(5, start_date=date(2024, 1, 1))

    sql, params = cur.statements[0]
    assert "WHERE a.student_id = %s AND r.report_date >= %s" in sql
    assert params == (5, date(2024, 1, 1))
