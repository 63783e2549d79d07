from fetchware.models import ComposedFetch, FetchResponse, RequestOptions, Response, TransportCall
from fetchware.utils import set_header, stringify_query
from fetchware.middleware import (
    MIDDLEWARE_FUNC,
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewarePipeline,
    MiddlewareType,
    compose,
    accept,
    auth,
    base,
    body,
    header,
    json,
    method,
    params,
    query,
    parse_json,
    parse_text,
    request_info,
    LoggingMiddleware,
)
# transport must be imported before config; the aiohttp engine reads its
# connector settings from config.models
from fetchware.transport import AiohttpTransport, Transport, TransportFactory, TransportType
from fetchware.config import ConfigLoader, FetchConfig
from fetchware.config.factories import build_fetch
from fetchware.fetch import create_fetch
from fetchware.core.exceptions import (
    FetchwareError,
    InvalidBodyError,
    MiddlewareOrderError,
    RequestFailedError,
    ResponseParseError,
    TransportClosedError,
)
from fetchware.core.logging import configure_logging

__all__ = [
    "ComposedFetch",
    "FetchResponse",
    "RequestOptions",
    "Response",
    "set_header",
    "stringify_query",
    "MIDDLEWARE_FUNC",
    "NEXT_CALL",
    "Middleware",
    "MiddlewareFactory",
    "MiddlewarePipeline",
    "MiddlewareType",
    "compose",
    "accept",
    "auth",
    "base",
    "body",
    "header",
    "json",
    "method",
    "params",
    "query",
    "parse_json",
    "parse_text",
    "request_info",
    "LoggingMiddleware",
    "AiohttpTransport",
    "Transport",
    "TransportCall",
    "TransportFactory",
    "TransportType",
    "ConfigLoader",
    "FetchConfig",
    "build_fetch",
    "create_fetch",
    "FetchwareError",
    "InvalidBodyError",
    "MiddlewareOrderError",
    "RequestFailedError",
    "ResponseParseError",
    "TransportClosedError",
    "configure_logging",
]
