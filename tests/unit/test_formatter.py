from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from auth_client.formatter import (
    format_role,
    format_user,
    to_int,
    to_optional_timestamp,
    to_timestamp,
)
from auth_client.models import ProjectRole, Role, User


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestCoercion:
    def test_to_int_accepts_numeric_strings(self) -> None:
        assert to_int("300") == 300
        assert to_int(" 12 ") == 12
        assert to_int("5.0") == 5
        assert to_int(7) == 7
        assert to_int(True) == 1

    def test_to_int_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            to_int("abc")

    def test_to_timestamp_iso_with_z(self) -> None:
        assert to_timestamp("2025-01-01T00:00:00Z") == utc(2025, 1, 1)

    def test_to_timestamp_naive_is_utc(self) -> None:
        ts = to_timestamp("2024-06-15 08:30:00")
        assert ts == utc(2024, 6, 15, 8, 30)
        assert ts.tzinfo is not None

    def test_to_timestamp_keeps_offset(self) -> None:
        ts = to_timestamp("2024-06-15T10:30:00+02:00")
        assert ts == utc(2024, 6, 15, 8, 30)

    def test_to_timestamp_epoch_millis(self) -> None:
        assert to_timestamp(1_735_689_600_000) == utc(2025, 1, 1)

    def test_to_timestamp_passes_datetime_through(self) -> None:
        value = utc(2020, 2, 2)
        assert to_timestamp(value) is value

    def test_to_timestamp_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            to_timestamp(None)
        with pytest.raises(TypeError):
            to_timestamp(True)

    def test_optional_timestamp(self) -> None:
        assert to_optional_timestamp(None) is None
        assert to_optional_timestamp("") is None
        assert to_optional_timestamp(0) is None
        assert to_optional_timestamp("2025-01-01T00:00:00Z") == utc(2025, 1, 1)


class TestFormatRole:
    def test_formats_nested_role(self) -> None:
        role = format_role(
            {
                "id": "4",
                "name": "admin",
                "created_at": "2023-01-01T00:00:00Z",
                "updated_at": "2023-02-01T00:00:00Z",
            }
        )
        assert role == Role(
            id=4,
            name="admin",
            created_at=utc(2023, 1, 1),
            updated_at=utc(2023, 2, 1),
            deleted_at=None,
        )


class TestFormatUser:
    def test_coerces_profile_fields(self, raw_user: dict[str, Any]) -> None:
        user = format_user(raw_user)

        assert isinstance(user, User)
        assert user.id == 42
        assert user.full_name == "Jane Doe"
        assert user.email == "jane@example.com"
        assert user.avatar == "https://cdn.example.com/avatars/42.png"
        assert user.manual_time_enabled is True
        assert user.inactivity_timeout == 300
        assert user.screenshots_enabled is False
        assert user.screenshots_interval == 5
        assert user.is_active is True
        assert user.is_admin is False
        assert user.is_important is False
        assert user.force_password_reset is True
        assert user.timezone == "Europe/Moscow"
        assert user.created_at == utc(2024, 3, 1, 10)
        assert user.updated_at == utc(2024, 6, 15, 8, 30)
        assert user.deleted_at is None

    def test_formats_default_role(self, raw_user: dict[str, Any]) -> None:
        user = format_user(raw_user)
        assert user.role.id == 2
        assert user.role.name == "user"
        assert user.role.deleted_at is None

    def test_projects_role_preserves_order(self, raw_user: dict[str, Any]) -> None:
        user = format_user(raw_user)

        assert [pr.project_id for pr in user.projects_role] == ["7", "3"]
        first, second = user.projects_role
        assert isinstance(first, ProjectRole)
        assert first.role.id == 1
        assert first.role.name == "manager"
        assert first.deleted_at is None
        assert second.deleted_at == utc(2024, 5, 3)
        assert second.role.deleted_at == utc(2024, 1, 1)

    def test_empty_projects_relation(self, raw_user: dict[str, Any]) -> None:
        raw_user["projects_relation"] = []
        assert format_user(raw_user).projects_role == ()

    def test_null_avatar_stays_none(self, raw_user: dict[str, Any]) -> None:
        raw_user["avatar"] = None
        assert format_user(raw_user).avatar is None

        raw_user["avatar"] = ""
        assert format_user(raw_user).avatar is None

        del raw_user["avatar"]
        assert format_user(raw_user).avatar is None

    def test_is_idempotent(self, raw_user: dict[str, Any]) -> None:
        assert format_user(raw_user) == format_user(raw_user)

    def test_deleted_user(self, raw_user: dict[str, Any]) -> None:
        raw_user["deleted_at"] = "2024-07-01T00:00:00Z"
        assert format_user(raw_user).deleted_at == utc(2024, 7, 1)

    def test_missing_role_is_a_contract_violation(
        self, raw_user: dict[str, Any]
    ) -> None:
        del raw_user["role"]
        with pytest.raises(KeyError):
            format_user(raw_user)

    @pytest.mark.parametrize(
        "key",
        ["screenshots_active", "manual_time", "active", "is_admin", "important", "change_password"],
    )
    def test_missing_flag_is_a_contract_violation(
        self, raw_user: dict[str, Any], key: str
    ) -> None:
        del raw_user[key]
        with pytest.raises(KeyError):
            format_user(raw_user)
