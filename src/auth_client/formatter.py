from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from .models import ProjectRole, Role, User


def to_int(value: Any) -> int:
    """Coerce a lax wire value (``7``, ``"7"``, ``7.0``, ``True``) to int."""
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            return int(float(value))
    return int(value)


def to_bool(value: Any) -> bool:
    return bool(value)


def to_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string, epoch milliseconds or datetime.

    Values without an offset are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to a timestamp")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_optional_timestamp(value: Any) -> datetime | None:
    return to_timestamp(value) if value else None


def format_role(raw: Mapping[str, Any]) -> Role:
    return Role(
        id=to_int(raw["id"]),
        name=str(raw["name"]),
        created_at=to_timestamp(raw["created_at"]),
        updated_at=to_timestamp(raw["updated_at"]),
        deleted_at=to_optional_timestamp(raw.get("deleted_at")),
    )


def format_project_role(raw: Mapping[str, Any]) -> ProjectRole:
    return ProjectRole(
        project_id=str(raw["project_id"]),
        role=format_role(raw["role"]),
        created_at=to_timestamp(raw["created_at"]),
        updated_at=to_timestamp(raw["updated_at"]),
        deleted_at=to_optional_timestamp(raw.get("deleted_at")),
    )


def format_user(raw: Mapping[str, Any]) -> User:
    """Build a ``User`` from a snake_case wire record.

    The record must carry a nested ``role`` mapping and a
    ``projects_relation`` sequence; anything else missing raises during
    coercion.
    """
    avatar = raw.get("avatar")

    return User(
        id=to_int(raw["id"]),
        full_name=str(raw["full_name"]),
        email=str(raw["email"]),
        avatar=str(avatar) if avatar else None,
        screenshots_enabled=to_bool(raw["screenshots_active"]),
        manual_time_enabled=to_bool(raw["manual_time"]),
        inactivity_timeout=to_int(raw["computer_time_popup"]),
        screenshots_interval=to_int(raw["screenshots_interval"]),
        is_active=to_bool(raw["active"]),
        is_admin=to_bool(raw["is_admin"]),
        is_important=to_bool(raw["important"]),
        force_password_reset=to_bool(raw["change_password"]),
        timezone=str(raw["timezone"]),
        role=format_role(raw["role"]),
        projects_role=tuple(
            format_project_role(pr) for pr in raw["projects_relation"]
        ),
        created_at=to_timestamp(raw["created_at"]),
        updated_at=to_timestamp(raw["updated_at"]),
        deleted_at=to_optional_timestamp(raw.get("deleted_at")),
    )
