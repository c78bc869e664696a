from __future__ import annotations

from datetime import date

import pytest

from kbm_records.core.enums import Gender, Level, StudentStatus
from kbm_records.core.exceptions import ValidationError

from tests.fakes import student_payload


def test_create_student_keeps_birth_date(container):
    student = container.student_service.create_student(
        student_payload(birth_date="2009-12-31", profession="Pelajar", notes="  ")
    )

    loaded = container.student_service.get_student(student.student_id)
    assert loaded.birth_date == date(2009, 12, 31)
    assert loaded.to_dict()["birth_date"] == "2009-12-31"
    assert loaded.gender == Gender.MALE
    assert loaded.level == Level.SMP
    assert loaded.status == StudentStatus.ACTIVE
    assert loaded.profession == "Pelajar"
    assert loaded.notes is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"full_name": ""},
        {"birth_date": "31/12/2009"},
        {"birth_date": None},
        {"gender": "L"},
        {"level": "SMK"},
        {"status": "Lulus"},
    ],
)
def test_create_student_validates_fields(container, overrides):
    with pytest.raises(ValidationError):
        container.student_service.create_student(student_payload(**overrides))


def test_list_students(container, make_student):
    make_student(full_name="A")
    make_student(full_name="B")

    assert [s.full_name for s in container.student_service.list_students()] == ["A", "B"]


def test_partial_update_changes_only_given_fields(container, make_student):
    student = make_student(profession="Pelajar")

    updated = container.student_service.update_student(
        student.student_id,
        {"level": "SMA", "birth_date": "2010-02-03"},
    )

    assert updated.level == Level.SMA
    assert updated.birth_date == date(2010, 2, 3)
    assert updated.full_name == student.full_name
    assert updated.profession == "Pelajar"


def test_update_can_clear_optional_field(container, make_student):
    student = make_student(profession="Pelajar")

    updated = container.student_service.update_student(student.student_id, {"profession": None})

    assert updated.profession is None


def test_update_missing_student_returns_none(container):
    assert container.student_service.update_student(404, {"full_name": "X"}) is None
    assert container.student_service.update_student(404, {}) is None


def test_update_rejects_blank_required_field(container, make_student):
    student = make_student()

    with pytest.raises(ValidationError):
        container.student_service.update_student(student.student_id, {"full_name": " "})


def test_delete_student(container, make_student):
    student = make_student()

    assert container.student_service.delete_student(student.student_id) is True
    assert container.student_service.get_student(student.student_id) is None
    assert container.student_service.delete_student(student.student_id) is False
