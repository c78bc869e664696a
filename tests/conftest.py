from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from kbm_records.container import build_services
from kbm_records.core.enums import Role
from kbm_records.main import create_app

from tests.fakes import (
    InMemoryAttendance,
    InMemoryDB,
    InMemoryMaterials,
    InMemoryReports,
    InMemoryStudents,
    InMemoryUsers,
    student_payload,
)


@pytest.fixture
def db():
    return InMemoryDB()


@pytest.fixture
def users(db):
    return InMemoryUsers(db)


@pytest.fixture
def container(db, users):
    return build_services(
        users_repo=users,
        students_repo=InMemoryStudents(db),
        reports_repo=InMemoryReports(db),
        attendance_repo=InMemoryAttendance(db),
        materials_repo=InMemoryMaterials(db),
    )


@pytest.fixture
def teacher(users):
    return users.add(
        username="guru0001",
        password_hash=generate_password_hash("rahasia123"),
        role=Role.TEACHER,
        full_name="Guru Pengajar 0001",
    )


@pytest.fixture
def coordinator(users):
    return users.add(
        username="koordinator",
        password_hash=generate_password_hash("koor123"),
        role=Role.COORDINATOR,
        full_name="Koordinator KBM",
    )


@pytest.fixture
def make_student(container):
    def _make(**overrides):
        return container.student_service.create_student(student_payload(**overrides))

    return _make


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
