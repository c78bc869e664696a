from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from kbm_records.core.enums import Role
from kbm_records.core.exceptions import ValidationError


def test_login_with_valid_credentials(container, teacher):
    user = container.auth_service.login("guru0001", "rahasia123", "guru")

    assert user is not None
    assert user.user_id == teacher.user_id
    assert "password_hash" not in user.to_dict()


@pytest.mark.parametrize(
    "username, password, role",
    [
        ("guru0001", "salah", "guru"),
        ("tidak-ada", "rahasia123", "guru"),
        ("guru0001", "rahasia123", "koordinator"),
    ],
)
def test_login_failures_return_none(container, teacher, username, password, role):
    assert container.auth_service.login(username, password, role) is None


def test_inactive_user_cannot_login(container, users):
    users.add(
        username="lama",
        password_hash=generate_password_hash("pw"),
        role=Role.COORDINATOR,
        full_name="Old",
        is_active=False,
    )

    assert container.auth_service.login("lama", "pw", "koordinator") is None


def test_corrupted_hash_is_a_failed_login(container, users):
    users.add(username="rusak", password_hash="CHANGE_ME", role=Role.TEACHER, full_name="X")

    assert container.auth_service.login("rusak", "CHANGE_ME", "guru") is None


def test_unknown_role_is_a_validation_error(container):
    with pytest.raises(ValidationError):
        container.auth_service.login("guru0001", "rahasia123", "admin")


def test_get_current_user(container, teacher, users):
    inactive = users.add(username="x", password_hash="h", role=Role.TEACHER, full_name="X", is_active=False)

    assert container.auth_service.get_current_user(teacher.user_id) == teacher
    assert container.auth_service.get_current_user(999) is None
    assert container.auth_service.get_current_user(inactive.user_id) is None
