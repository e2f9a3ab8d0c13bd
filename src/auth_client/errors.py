from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .transport.transport import TransportResult


class AuthClientError(Exception):
    """Base error for all auth client errors."""

    def __init__(self, code: str, message: str, details: object = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidArgumentError(AuthClientError, ValueError):
    """Caller passed malformed input; raised before any request is sent."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_ARGUMENT", message)


class NetworkError(AuthClientError):
    """The request never reached the server (connect failure, timeout, ...)."""

    def __init__(self, result: TransportResult) -> None:
        reason = str(result.error) if result.error is not None else "Network failure"
        super().__init__("NETWORK_ERROR", reason, details=result)
        self.result = result
        self.__cause__ = result.error


class ApiError(AuthClientError):
    """The server answered, but reported a failure or an unexpected body."""

    def __init__(self, status: int, error_type: str, message: str) -> None:
        super().__init__(
            "API_ERROR",
            message,
            details={"status": status, "error_type": error_type},
        )
        self.status = status
        self.error_type = error_type

    @classmethod
    def unexpected_structure(cls) -> ApiError:
        return cls(0, "unexpected_structure", "Incorrect response structure")

    def __repr__(self) -> str:
        return (
            f"ApiError(status={self.status!r}, error_type={self.error_type!r}, "
            f"message={self.message!r})"
        )
