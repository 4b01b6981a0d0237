from .errors import (
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
