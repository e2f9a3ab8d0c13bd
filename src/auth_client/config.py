from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, TypeAlias

HttpMethod: TypeAlias = Literal["GET", "POST"]

DEFAULT_REQUEST_TIMEOUT_MS = 10_000
DEFAULT_USER_AGENT = "auth-client-python"


@dataclass(frozen=True)
class ClientOptions:
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    headers: Mapping[str, str] = field(default_factory=dict)
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True)
class RequestOptions:
    """Per-call transport flags.

    ``no_auth`` skips the Authorization header, ``no_relogin`` skips the
    relogin hook when the server answers 401. Requests sent with
    ``no_auth`` never trigger the hook.
    """

    no_auth: bool = False
    no_relogin: bool = False
