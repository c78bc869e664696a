from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access decisions."""

    TEACHER = "guru"
    COORDINATOR = "koordinator"


class AttendanceStatus(str, Enum):
    """Attendance status stored for each student in a KBM report."""

    PRESENT = "Hadir"
    SICK = "Sakit"
    EXCUSED = "Izin"
    ABSENT = "Tidak Hadir/Alfa"


class Gender(str, Enum):
    MALE = "Laki-laki"
    FEMALE = "Perempuan"


class Level(str, Enum):
    """Academic level (jenjang)."""

    SD = "SD"
    SMP = "SMP"
    SMA = "SMA"
    COLLEGE = "Kuliah"


class StudentStatus(str, Enum):
    ACTIVE = "Aktif"
    INACTIVE = "Tidak Aktif"
    ALUMNI = "Alumni"
