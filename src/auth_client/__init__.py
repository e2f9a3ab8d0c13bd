from .api.auth import AuthAPI
from .client import AuthClient
from .config import ClientOptions, RequestOptions
from .errors import ApiError, AuthClientError, InvalidArgumentError, NetworkError
from .formatter import format_project_role, format_role, format_user
from .models import ProjectRole, Role, Token, TokenDTO, User, UserLoginDTO
from .transport import (
    HttpTransport,
    Transport,
    TransportResponse,
    TransportResult,
)

__all__ = [
    "AuthClient",
    "AuthAPI",
    "ClientOptions",
    "RequestOptions",
    "HttpTransport",
    "Transport",
    "TransportResponse",
    "TransportResult",
    "Token",
    "TokenDTO",
    "Role",
    "ProjectRole",
    "User",
    "UserLoginDTO",
    "format_user",
    "format_role",
    "format_project_role",
    "AuthClientError",
    "InvalidArgumentError",
    "NetworkError",
    "ApiError",
]
