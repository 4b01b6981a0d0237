from typing import Any, Optional


class HttpClientError(Exception):
    """Base class for every error raised by the request client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SecuritySetupError(HttpClientError):
    """Raised when the SSL context for the engine cannot be built."""

    def __init__(self, message: str = "Unable to build the SSL context"):
        super().__init__(message)


class UrlConfigurationError(HttpClientError):
    """Raised when the request URI is missing or cannot be parsed."""

    def __init__(self, uri: Optional[str] = None, reason: str = "URL misconfigured"):
        self.uri = uri
        super().__init__(f"{reason}: {uri if uri is not None else '(null)'}")


class InvalidVerbError(HttpClientError):
    def __init__(self, verb: Any):
        self.verb = verb
        super().__init__(f"Unrecognized verb: {verb}")


class RequestTimeoutError(HttpClientError):
    def __init__(self, url: str, timeout_sec: Optional[float] = None):
        self.url = url
        self.timeout_sec = timeout_sec
        if timeout_sec is None:
            message = f"Request to {url} timed out"
        else:
            message = f"Request to {url} did not complete within {timeout_sec}s"
        super().__init__(message)


class TransportError(HttpClientError):
    """Raised when the engine fails to send the request or read the response."""


class InvalidRequestError(HttpClientError):
    """Raised when the server answers with a status code >= 400.

    The raw response is kept on the error so callers can inspect the status
    code, headers and body the server sent back.
    """

    def __init__(self, message: str, response: Any):
        self.response = response
        self.status_code: int = response.status_code
        super().__init__(f"{message} (status code: {self.status_code})")


class UnauthorizedError(InvalidRequestError):
    def __init__(self, response: Any, message: str = "Unauthorized request"):
        super().__init__(message, response)


class DeserializationError(HttpClientError):
    def __init__(self, result_type: Any, reason: str):
        self.result_type = result_type
        name = getattr(result_type, "__name__", repr(result_type))
        super().__init__(f"Unable to deserialize response into {name}: {reason}")
