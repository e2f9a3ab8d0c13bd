from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Token:
    token: str
    token_type: str
    token_expire: datetime


@dataclass(frozen=True)
class TokenDTO:
    """Token returned by a refresh; carries no user payload."""

    token: str
    token_type: str
    token_expire: datetime


@dataclass(frozen=True)
class Role:
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class ProjectRole:
    """A role scoped to a single project."""

    project_id: str
    role: Role
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class User:
    id: int
    full_name: str
    email: str
    avatar: str | None
    screenshots_enabled: bool
    manual_time_enabled: bool
    inactivity_timeout: int
    screenshots_interval: int
    is_active: bool
    is_admin: bool
    is_important: bool
    force_password_reset: bool
    timezone: str
    role: Role
    projects_role: tuple[ProjectRole, ...]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class UserLoginDTO:
    token: Token
    user: User
