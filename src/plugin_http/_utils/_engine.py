import asyncio
import ssl
import threading
from concurrent.futures import Future
from logging import getLogger
from typing import Optional, Protocol, runtime_checkable

import httpx

from ..models.errors import RequestTimeoutError, TransportError, UrlConfigurationError
from ._request_spec import RequestSpec
from .constants import HEADER_USER_AGENT, LOGGER_NAME, USER_AGENT


@runtime_checkable
class Engine(Protocol):
    """Executes requests asynchronously and hands back a completion handle."""

    def submit(self, spec: RequestSpec) -> "Future[httpx.Response]":
        """Start sending `spec` and return a future resolving to the response.

        The future fails with `TransportError` or `RequestTimeoutError` when
        the request cannot be completed.
        """
        ...

    def close(self) -> None:
        """Release connections and any background resources."""
        ...


class HttpxEngine:
    """Engine driving an `httpx.AsyncClient` on a private event loop thread.

    Requests may be submitted from any thread. The response body is read in
    full and the underlying stream released before the future resolves.
    """

    def __init__(
        self,
        *,
        verify: "ssl.SSLContext | bool" = True,
        proxy: Optional[str] = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._closed = False
        self._lock = threading.Lock()

        self._client = httpx.AsyncClient(
            headers={HEADER_USER_AGENT: user_agent},
            verify=verify,
            proxy=proxy,
            trust_env=False,
            # completion is bounded by the caller waiting on the future
            timeout=None,
        )

        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever, name="plugin-http-engine", daemon=True
        )
        self._thread.start()
        self._logger.debug("Engine started (proxy=%s)", proxy)

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, spec: RequestSpec) -> "Future[httpx.Response]":
        if self._closed:
            raise TransportError("Engine is closed")
        return asyncio.run_coroutine_threadsafe(self._send(spec), self._loop)

    async def _send(self, spec: RequestSpec) -> httpx.Response:
        try:
            url = httpx.URL(spec.url)
            # options are appended after the query the URL already carries
            params = url.params.multi_items() + list(spec.params)
            request = self._client.build_request(
                spec.method.value,
                url,
                params=params,
                headers=dict(spec.headers),
                content=spec.content,
            )
        except httpx.InvalidURL as e:
            raise UrlConfigurationError(spec.url, reason=str(e)) from e

        try:
            response = await self._client.send(request, auth=spec.auth, stream=True)
            try:
                await response.aread()
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(str(request.url)) from e
        except httpx.RequestError as e:
            raise TransportError(f"{spec.method.value} {request.url} failed: {e}") from e
        return response

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        try:
            asyncio.run_coroutine_threadsafe(self._client.aclose(), self._loop).result()
        finally:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join()
            self._loop.close()
            self._logger.debug("Engine closed")
