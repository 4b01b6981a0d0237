from ._config import ClientConfig
from ._services import RequestClient
from ._utils import (
    Codec,
    Engine,
    HttpVerb,
    HttpxEngine,
    JsonCodec,
    RequestOptions,
    RequestSpec,
    build_request_spec,
    create_ssl_context,
    resolve_url,
)
from ._utils.constants import (
    APPLICATION_JSON,
    APPLICATION_X_WWW_FORM_URLENCODED,
    APPLICATION_XML,
    DEFAULT_HTTP_TIMEOUT_SEC,
    USER_AGENT,
)
from .models.errors import (
    DeserializationError,
    HttpClientError,
    InvalidRequestError,
    InvalidVerbError,
    RequestTimeoutError,
    SecuritySetupError,
    TransportError,
    UnauthorizedError,
    UrlConfigurationError,
)

__all__ = [
    "RequestClient",
    "ClientConfig",
    "HttpVerb",
    "RequestOptions",
    "RequestSpec",
    "build_request_spec",
    "resolve_url",
    "Engine",
    "HttpxEngine",
    "Codec",
    "JsonCodec",
    "create_ssl_context",
    "APPLICATION_JSON",
    "APPLICATION_XML",
    "APPLICATION_X_WWW_FORM_URLENCODED",
    "DEFAULT_HTTP_TIMEOUT_SEC",
    "USER_AGENT",
    "HttpClientError",
    "SecuritySetupError",
    "UrlConfigurationError",
    "InvalidVerbError",
    "RequestTimeoutError",
    "TransportError",
    "InvalidRequestError",
    "UnauthorizedError",
    "DeserializationError",
]
