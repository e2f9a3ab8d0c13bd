from __future__ import annotations

import copy
from typing import Any

import pytest

RAW_USER: dict[str, Any] = {
    "id": "42",
    "full_name": "Jane Doe",
    "email": "jane@example.com",
    "avatar": "https://cdn.example.com/avatars/42.png",
    "manual_time": 1,
    "computer_time_popup": "300",
    "screenshots_active": 0,
    "screenshots_interval": 5,
    "active": True,
    "is_admin": 0,
    "important": "",
    "change_password": 1,
    "timezone": "Europe/Moscow",
    "created_at": "2024-03-01T10:00:00Z",
    "updated_at": "2024-06-15 08:30:00",
    "deleted_at": None,
    "role": {
        "id": 2,
        "name": "user",
        "created_at": "2023-01-01T00:00:00Z",
        "updated_at": "2023-01-01T00:00:00Z",
        "deleted_at": None,
    },
    "projects_relation": [
        {
            "project_id": 7,
            "created_at": "2024-04-01T00:00:00Z",
            "updated_at": "2024-04-01T00:00:00Z",
            "deleted_at": None,
            "role": {
                "id": "1",
                "name": "manager",
                "created_at": "2023-01-01T00:00:00Z",
                "updated_at": "2023-01-01T00:00:00Z",
                "deleted_at": None,
            },
        },
        {
            "project_id": "3",
            "created_at": "2024-05-01T00:00:00Z",
            "updated_at": "2024-05-02T00:00:00Z",
            "deleted_at": "2024-05-03T00:00:00Z",
            "role": {
                "id": 3,
                "name": "auditor",
                "created_at": "2023-01-01T00:00:00Z",
                "updated_at": "2023-01-01T00:00:00Z",
                "deleted_at": "2024-01-01T00:00:00Z",
            },
        },
    ],
}


@pytest.fixture
def raw_user() -> dict[str, Any]:
    """A fully populated user record as the API returns it."""
    return copy.deepcopy(RAW_USER)


@pytest.fixture
def login_body(raw_user: dict[str, Any]) -> dict[str, Any]:
    return {
        "success": True,
        "access_token": "T",
        "token_type": "bearer",
        "expires_in": "2025-01-01T00:00:00Z",
        "user": raw_user,
    }
