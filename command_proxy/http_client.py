"""Single-attempt HTTP client that turns every backend call into an ApiResponse."""

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter

from command_proxy.envelope import ApiResponse
from command_proxy.errors import DecodeError, ProxyError, TransportError, describe_exception
from command_proxy.logging_utils import log_debug, log_info, log_warning, new_correlation_id

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001"


class ProxyClient:
    """Forwards one request per call to the backend and never raises to the caller."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or self._initialize_session()

    def _initialize_session(self) -> httpx.AsyncClient:
        """Create the shared connection pool; requests wait as long as the transport does."""

        logger.info("Command proxy HTTP client initialized for %s", self.base_url)
        return httpx.AsyncClient(timeout=None)

    async def __aenter__(self) -> "ProxyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.session.aclose()

    def build_url(self, path: str) -> str:
        """Join ``path`` onto the base address without normalizing or escaping it."""

        return f"{self.base_url}{path}"

    async def call(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
        *,
        adapter: Optional[TypeAdapter] = None,
    ) -> ApiResponse:
        """
        Issue ``method path`` once and wrap the outcome.

        When ``adapter`` is given the decoded JSON must validate against it;
        otherwise any JSON value is accepted.
        """

        correlation_id = new_correlation_id()
        log_debug("Dispatching backend request", correlation_id, method=method, path=path)

        try:
            response = await self._send(method, path, json_body, correlation_id)
            payload = self._decode(response, adapter, correlation_id)
        except ProxyError as exc:
            log_warning("Backend request failed", correlation_id, method=method, path=path, error=exc.message)
            return ApiResponse.fail(str(exc))

        log_info(
            "Backend request completed",
            correlation_id,
            method=method,
            path=path,
            status=response.status_code,
        )
        return ApiResponse.ok(payload)

    async def _send(
        self,
        method: str,
        path: str,
        json_body: Optional[Any],
        correlation_id: str,
    ) -> httpx.Response:
        try:
            return await self.session.request(method, self.build_url(path), json=json_body)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            raise TransportError(describe_exception(exc), correlation_id=correlation_id) from exc

    @staticmethod
    def _decode(
        response: httpx.Response,
        adapter: Optional[TypeAdapter],
        correlation_id: str,
    ) -> Any:
        # Status codes are not inspected; only the body shape decides.
        try:
            raw = response.json()
            return adapter.validate_python(raw) if adapter is not None else raw
        except (ValueError, RecursionError) as exc:
            raise DecodeError(
                describe_exception(exc),
                status_code=response.status_code,
                correlation_id=correlation_id,
            ) from exc
