from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import StatisticsService
from .database.connection import DBConfig, DatabaseConnection
from .materials.mysql_material_repository import MySQLMaterialRepository
from .materials.repository import MaterialRepository
from .materials.service import MaterialService
from .reports.mysql_report_repository import MySQLKBMReportRepository
from .reports.repository import KBMReportRepository
from .reports.service import ReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    students_repo: StudentRepository
    reports_repo: KBMReportRepository
    attendance_repo: AttendanceRepository
    materials_repo: MaterialRepository

    auth_service: AuthService
    student_service: StudentService
    report_service: ReportService
    statistics_service: StatisticsService
    material_service: MaterialService


def build_services(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    reports_repo: KBMReportRepository,
    attendance_repo: AttendanceRepository,
    materials_repo: MaterialRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services around any set of repositories (MySQL or in-memory)."""

    return Container(
        conn=conn,
        users_repo=users_repo,
        students_repo=students_repo,
        reports_repo=reports_repo,
        attendance_repo=attendance_repo,
        materials_repo=materials_repo,
        auth_service=AuthService(users_repo),
        student_service=StudentService(students_repo),
        report_service=ReportService(reports_repo, users_repo, students_repo),
        statistics_service=StatisticsService(attendance_repo),
        material_service=MaterialService(materials_repo, users_repo),
    )


def build_container(*, db_config: Mapping[str, Any]) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        reports_repo=MySQLKBMReportRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        materials_repo=MySQLMaterialRepository(conn),
    )
