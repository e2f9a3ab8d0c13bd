from __future__ import annotations

import logging
from typing import Any

import httpx

from .api.auth import AuthAPI
from .config import ClientOptions
from .models import TokenDTO, UserLoginDTO
from .transport.transport import HttpTransport, ReloginHook

logger = logging.getLogger("auth_client")


class AuthClient:
    """Async Python client for the authentication API."""

    def __init__(
        self,
        base_url: str,
        options: ClientOptions | None = None,
        *,
        relogin: ReloginHook | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._options = options or ClientOptions()
        self._transport = HttpTransport(
            base_url,
            options=self._options,
            relogin=relogin,
            client=http_client,
        )
        self._auth = AuthAPI(self._transport)

    # ── State ─────────────────────────────────────────────────────

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def auth(self) -> AuthAPI:
        return self._auth

    @property
    def is_authenticated(self) -> bool:
        return self._transport.token is not None

    # ── Session ───────────────────────────────────────────────────

    async def login(self, email: str, password: str) -> UserLoginDTO:
        """Log in and attach the issued token to subsequent requests."""
        result = await self._auth.login(email, password)
        self._transport.set_token(result.token.token, result.token.token_type)
        logger.debug("Logged in as user %d", result.user.id)
        return result

    async def refresh(self, relogin: bool = False) -> TokenDTO:
        result = await self._auth.refresh(relogin)
        self._transport.set_token(result.token, result.token_type)
        return result

    async def logout(self, from_all: bool = False) -> bool:
        try:
            return await self._auth.logout(from_all)
        finally:
            self._transport.clear_token()

    # ── Context manager ───────────────────────────────────────────

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> AuthClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()
