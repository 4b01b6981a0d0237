import asyncio
from concurrent.futures import TimeoutError as FutureTimeoutError
from logging import getLogger
from typing import Any, Optional, Type, TypeVar, Union

from httpx import Response

from .._config import ClientConfig
from .._utils._codec import Codec, JsonCodec
from .._utils._engine import Engine, HttpxEngine
from .._utils._request_spec import (
    HttpVerb,
    RequestOptions,
    RequestSpec,
    build_request_spec,
    resolve_url,
)
from .._utils._ssl_context import create_ssl_context
from .._utils.constants import DEFAULT_HTTP_TIMEOUT_SEC, LOGGER_NAME
from ..models.errors import (
    InvalidRequestError,
    RequestTimeoutError,
    UnauthorizedError,
)

T = TypeVar("T")


class RequestClient:
    """Shared HTTP call layer for plugins.

    Every call resolves the target URL against the configured base URL,
    applies preemptive Basic authentication and the caller's options, waits
    at most `DEFAULT_HTTP_TIMEOUT_SEC` seconds for the response and decodes
    the JSON body into the requested type.

    The client owns its engine: close it once, either explicitly or by using
    it as a context manager.

    Examples:
        ```python
        from plugin_http import RequestClient

        with RequestClient("https://api.example.com", username="admin", password="secret") as client:
            invoice = client.issue("GET", "/invoices/42", result_type=Invoice)
        ```
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        proxy_host: Optional[str] = None,
        proxy_port: Optional[int] = None,
        strict_ssl: bool = True,
        *,
        engine: Optional[Engine] = None,
        codec: Optional[Codec] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = ClientConfig(
            base_url=base_url,
            username=username,
            password=password,
            proxy_host=proxy_host,
            proxy_port=proxy_port,
            strict_ssl=strict_ssl,
        )

        self._codec = codec if codec is not None else self.create_codec()
        self._engine = engine if engine is not None else self.create_engine()

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "RequestClient":
        return cls(
            config.base_url,
            username=config.username,
            password=config.password,
            proxy_host=config.proxy_host,
            proxy_port=config.proxy_port,
            strict_ssl=config.strict_ssl,
            **kwargs,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def codec(self) -> Codec:
        return self._codec

    def create_codec(self) -> Codec:
        return JsonCodec()

    def create_engine(self) -> Engine:
        ssl_context = create_ssl_context(strict=self._config.strict_ssl)
        return HttpxEngine(verify=ssl_context, proxy=self._config.proxy_url)

    def close(self) -> None:
        self._engine.close()

    def __enter__(self) -> "RequestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def encode(self, value: Any) -> str:
        """Serialize a value with the client's codec, for use as a request body."""
        return self._codec.encode(value)

    def issue(
        self,
        verb: Union[HttpVerb, str],
        uri: Optional[str],
        body: Optional[str] = None,
        options: Optional[RequestOptions] = None,
        result_type: Optional[Type[T]] = None,
    ) -> T:
        """Send a request and decode its JSON response.

        Args:
            verb: One of GET, POST, PUT, DELETE, HEAD or OPTIONS.
            uri: Absolute URL, or a path appended verbatim to the base URL.
            body: Raw request body. Ignored for GET and HEAD.
            options: `Accept` and `Content-Type` become headers, every other
                non-null entry becomes a query parameter.
            result_type: Type to decode the response body into. When omitted
                the parsed JSON is returned as-is.

        Returns:
            The decoded response body, or None when the response has no body.

        Raises:
            UrlConfigurationError: If `uri` is missing or malformed.
            InvalidVerbError: If `verb` is not supported.
            RequestTimeoutError: If no response arrives in time.
            TransportError: If the request could not be sent.
            UnauthorizedError: If the server answers 401.
            InvalidRequestError: If the server answers with another status >= 400.
            DeserializationError: If the body cannot be decoded into `result_type`.
        """
        spec = self.build_request(verb, uri, body, options)
        return self.execute_and_wait(spec, DEFAULT_HTTP_TIMEOUT_SEC, result_type)

    async def issue_async(
        self,
        verb: Union[HttpVerb, str],
        uri: Optional[str],
        body: Optional[str] = None,
        options: Optional[RequestOptions] = None,
        result_type: Optional[Type[T]] = None,
    ) -> T:
        spec = self.build_request(verb, uri, body, options)
        return await self.execute_async(spec, DEFAULT_HTTP_TIMEOUT_SEC, result_type)

    def build_request(
        self,
        verb: Union[HttpVerb, str],
        uri: Optional[str],
        body: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> RequestSpec:
        url = resolve_url(self._config.base_url, uri)
        return build_request_spec(
            verb,
            url,
            body,
            options,
            username=self._config.username,
            password=self._config.password,
        )

    def execute_and_wait(
        self,
        spec: RequestSpec,
        timeout_sec: float,
        result_type: Optional[Type[T]] = None,
    ) -> T:
        self._logger.debug(f"Request: {spec.method.value} {spec.url}")

        future = self._engine.submit(spec)
        try:
            response = future.result(timeout=timeout_sec)
        except FutureTimeoutError as e:
            future.cancel()
            raise RequestTimeoutError(spec.url, timeout_sec) from e

        return self._handle_response(response, result_type)

    async def execute_async(
        self,
        spec: RequestSpec,
        timeout_sec: float,
        result_type: Optional[Type[T]] = None,
    ) -> T:
        self._logger.debug(f"Request: {spec.method.value} {spec.url}")

        future = asyncio.wrap_future(self._engine.submit(spec))
        try:
            response = await asyncio.wait_for(future, timeout=timeout_sec)
        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(spec.url, timeout_sec) from e

        return self._handle_response(response, result_type)

    def _handle_response(
        self, response: Response, result_type: Optional[Type[T]]
    ) -> T:
        self._logger.debug(f"Response: {response.status_code} {response.url}")

        if response.status_code == 401:
            raise UnauthorizedError(response)
        if response.status_code >= 400:
            raise InvalidRequestError("Invalid request", response)

        return self.deserialize_response(response, result_type)

    def deserialize_response(
        self, response: Response, result_type: Optional[Type[T]]
    ) -> T:
        # the engine has already read and released the stream
        content = response.content
        if not content.strip():
            return None  # type: ignore[return-value]
        return self._codec.decode(content, result_type)
