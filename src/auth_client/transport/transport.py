from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Protocol

import httpx

from ..config import ClientOptions, HttpMethod, RequestOptions
from ..errors import ApiError

logger = logging.getLogger("auth_client")

ReloginHook = Callable[[], Awaitable[bool]]


@dataclass(frozen=True)
class TransportResponse:
    status: int
    data: Any = None


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a single request as seen by the API layer.

    ``api_error`` carries a failure the transport already classified;
    ``error`` is the raw cause, if any.
    """

    success: bool
    response: TransportResponse | None = None
    error: BaseException | None = None
    api_error: ApiError | None = None
    is_network_error: bool = False


class Transport(Protocol):
    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> TransportResult: ...

    async def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> TransportResult: ...


class HttpTransport:
    """httpx-backed transport with bearer token and relogin hook support."""

    def __init__(
        self,
        base_url: str,
        *,
        options: ClientOptions | None = None,
        relogin: ReloginHook | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._options = options or ClientOptions()
        self._relogin = relogin
        self._token: str | None = None
        self._token_type = "bearer"
        self._owns_client = client is None

        if client is None:
            headers = {
                "Accept": "application/json",
                "User-Agent": self._options.user_agent,
            }
            headers.update(self._options.headers)
            client = httpx.AsyncClient(
                base_url=base_url.rstrip("/") + "/",
                headers=headers,
                timeout=self._options.request_timeout_ms / 1000,
            )
        self._client = client

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str, token_type: str = "bearer") -> None:
        self._token = token
        self._token_type = token_type

    def clear_token(self) -> None:
        self._token = None

    # -- Requests ---------------------------------------------------------

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> TransportResult:
        return await self._request("GET", path, options, params=params)

    async def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> TransportResult:
        return await self._request("POST", path, options, body=body)

    # -- Lifecycle --------------------------------------------------------

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    # -- Private ----------------------------------------------------------

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        options: RequestOptions | None,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> TransportResult:
        opts = options or RequestOptions()

        result = await self._send(method, path, opts, params=params, body=body)

        if (
            self._relogin is not None
            and not opts.no_relogin
            and not opts.no_auth
            and result.response is not None
            and result.response.status == 401
        ):
            if await self._run_relogin(method, path):
                result = await self._send(
                    method, path, opts, params=params, body=body
                )

        return result

    async def _send(
        self,
        method: HttpMethod,
        path: str,
        opts: RequestOptions,
        *,
        params: Mapping[str, Any] | None,
        body: Mapping[str, Any] | None,
    ) -> TransportResult:
        headers: dict[str, str] = {}
        if self._token is not None and not opts.no_auth:
            headers["Authorization"] = f"{self._token_type.capitalize()} {self._token}"

        logger.debug("%s %s", method, path)

        try:
            res = await self._client.request(
                method,
                path.lstrip("/"),
                params=dict(params) if params else None,
                json=dict(body or {}) if method == "POST" else None,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return TransportResult(success=False, error=e, is_network_error=True)

        response = TransportResponse(status=res.status_code, data=_decode(res))

        if res.is_success:
            return TransportResult(success=True, response=response)

        logger.debug("%s %s -> %d", method, path, res.status_code)
        return TransportResult(
            success=False,
            response=response,
            error=httpx.HTTPStatusError(
                f"Server responded with {res.status_code}",
                request=res.request,
                response=res,
            ),
        )

    async def _run_relogin(self, method: HttpMethod, path: str) -> bool:
        assert self._relogin is not None
        try:
            return bool(await self._relogin())
        except Exception:
            logger.exception("Relogin hook failed for %s %s", method, path)
            return False


def _decode(res: httpx.Response) -> Any:
    if not res.content:
        return None
    try:
        return res.json()
    except ValueError:
        return None
