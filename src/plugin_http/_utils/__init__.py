from ._codec import Codec, JsonCodec
from ._engine import Engine, HttpxEngine
from ._request_spec import (
    HttpVerb,
    RequestOptions,
    RequestSpec,
    build_request_spec,
    resolve_url,
)
from ._ssl_context import create_permissive_ssl_context, create_ssl_context

__all__ = [
    "Codec",
    "JsonCodec",
    "Engine",
    "HttpxEngine",
    "HttpVerb",
    "RequestOptions",
    "RequestSpec",
    "build_request_spec",
    "resolve_url",
    "create_ssl_context",
    "create_permissive_ssl_context",
]
