from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from ..errors import ApiError, AuthClientError, NetworkError
from ..formatter import to_timestamp
from ..transport.transport import TransportResult

DEFAULT_ERROR_TYPE = "unknown"
DEFAULT_ERROR_MESSAGE = "Unknown message"


@dataclass(frozen=True)
class LoginBody:
    access_token: str
    token_type: str
    expires_at: datetime
    user: Mapping[str, Any]


@dataclass(frozen=True)
class MeBody:
    user: Mapping[str, Any]


@dataclass(frozen=True)
class RefreshBody:
    access_token: str
    token_type: str
    expires_at: datetime


def classify_failure(result: TransportResult) -> AuthClientError:
    """Turn a failed transport result into the error the caller sees.

    Network failures win; an error the transport already classified is
    returned as is; anything else becomes an ``ApiError`` built from the
    response body, with ``unknown`` / ``Unknown message`` filling gaps.
    """
    if result.is_network_error:
        return NetworkError(result)

    if result.api_error is not None:
        return result.api_error

    status = 0
    error_type = DEFAULT_ERROR_TYPE
    message = DEFAULT_ERROR_MESSAGE

    if result.response is not None:
        status = result.response.status or 0
        data = result.response.data
        if isinstance(data, Mapping):
            error_type = _non_empty_str(data.get("error_type")) or DEFAULT_ERROR_TYPE
            message = _non_empty_str(data.get("message")) or DEFAULT_ERROR_MESSAGE

    return ApiError(status, error_type, message)


def parse_login_body(data: Any) -> LoginBody:
    body = _require_mapping(data)
    if body.get("success") is not True:
        raise ApiError.unexpected_structure()

    access_token = body.get("access_token")
    token_type = body.get("token_type")
    expires_in = body.get("expires_in")
    user = body.get("user")

    if (
        not isinstance(access_token, str)
        or not isinstance(token_type, str)
        or not _is_timestamp_like(expires_in)
        or not isinstance(user, Mapping)
    ):
        raise ApiError.unexpected_structure()

    return LoginBody(
        access_token=access_token,
        token_type=token_type,
        expires_at=_parse_expiry(expires_in),
        user=user,
    )


def parse_me_body(data: Any) -> MeBody:
    body = _require_mapping(data)
    user = body.get("user")
    if not body.get("success") or not isinstance(user, Mapping):
        raise ApiError.unexpected_structure()
    return MeBody(user=user)


def parse_refresh_body(data: Any) -> RefreshBody:
    body = _require_mapping(data)
    access_token = body.get("access_token")
    token_type = body.get("token_type")
    expires_in = body.get("expires_in")

    if (
        not body.get("success")
        or not isinstance(access_token, str)
        or not isinstance(token_type, str)
        or not isinstance(expires_in, str)
    ):
        raise ApiError.unexpected_structure()

    return RefreshBody(
        access_token=access_token,
        token_type=token_type,
        expires_at=_parse_expiry(expires_in),
    )


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ApiError.unexpected_structure()
    return data


def _is_timestamp_like(value: Any) -> bool:
    # login accepts epoch numbers as well as strings
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _parse_expiry(value: str | int | float) -> datetime:
    try:
        return to_timestamp(value)
    except (ValueError, TypeError, OverflowError, OSError):
        raise ApiError.unexpected_structure() from None
