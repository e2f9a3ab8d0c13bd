from __future__ import annotations

import logging

from ..config import RequestOptions
from ..errors import InvalidArgumentError
from ..formatter import format_user
from ..models import Token, TokenDTO, User, UserLoginDTO
from ..protocol.responses import (
    classify_failure,
    parse_login_body,
    parse_me_body,
    parse_refresh_body,
)
from ..transport.transport import Transport, TransportResult

logger = logging.getLogger("auth_client")

LOGIN_PATH = "api/auth/login"
ME_PATH = "api/auth/me"
LOGOUT_PATH = "api/auth/logout"
LOGOUT_FROM_ALL_PATH = "api/auth/logout-from-all"
REFRESH_PATH = "api/auth/refresh"


class AuthAPI:
    """Authentication — login, me, logout, token refresh."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def login(self, email: str, password: str) -> UserLoginDTO:
        if not isinstance(email, str) or not email:
            raise InvalidArgumentError("Incorrect email parameter given")
        if not isinstance(password, str) or not password:
            raise InvalidArgumentError("Incorrect password parameter given")

        res = await self._transport.post(
            LOGIN_PATH,
            {"email": email, "password": password},
            RequestOptions(no_auth=True),
        )
        _raise_for_failure(LOGIN_PATH, res)

        body = parse_login_body(_data(res))
        return UserLoginDTO(
            token=Token(
                token=body.access_token,
                token_type=body.token_type,
                token_expire=body.expires_at,
            ),
            user=format_user(body.user),
        )

    async def me(self) -> User:
        res = await self._transport.get(ME_PATH, {})
        _raise_for_failure(ME_PATH, res)

        body = parse_me_body(_data(res))
        return format_user(body.user)

    async def logout(self, from_all: bool = False) -> bool:
        # A 401 is the expected answer for an already dead session, so
        # the transport must not try to log back in here.
        path = LOGOUT_FROM_ALL_PATH if from_all is True else LOGOUT_PATH
        res = await self._transport.post(path, {}, RequestOptions(no_relogin=True))
        _raise_for_failure(path, res)
        return True

    async def refresh(self, relogin: bool = False) -> TokenDTO:
        res = await self._transport.post(
            REFRESH_PATH, {}, RequestOptions(no_relogin=not relogin)
        )
        _raise_for_failure(REFRESH_PATH, res)

        body = parse_refresh_body(_data(res))
        return TokenDTO(
            token=body.access_token,
            token_type=body.token_type,
            token_expire=body.expires_at,
        )


def _raise_for_failure(path: str, res: TransportResult) -> None:
    if res.success:
        return
    error = classify_failure(res)
    logger.debug("%s failed: %r", path, error)
    raise error


def _data(res: TransportResult) -> object:
    return res.response.data if res.response is not None else None
