from fetchware.middleware.pipeline import (
    MIDDLEWARE_FUNC,
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewarePipeline,
    MiddlewareType,
    compose,
)
from fetchware.middleware.common import (
    BaseUrlMiddleware,
    BodyMiddleware,
    HeaderMiddleware,
    MethodMiddleware,
    ParamsMiddleware,
    QueryMiddleware,
    accept,
    auth,
    base,
    body,
    header,
    json,
    method,
    params,
    query,
)
from fetchware.middleware.interceptors import (
    ParseJSONMiddleware,
    ParseTextMiddleware,
    RequestInfoMiddleware,
    parse_json,
    parse_text,
    request_info,
)
from fetchware.middleware.listeners import LoggingMiddleware

__all__ = [
    "MIDDLEWARE_FUNC",
    "NEXT_CALL",
    "Middleware",
    "MiddlewareFactory",
    "MiddlewarePipeline",
    "MiddlewareType",
    "compose",
    "BaseUrlMiddleware",
    "BodyMiddleware",
    "HeaderMiddleware",
    "MethodMiddleware",
    "ParamsMiddleware",
    "QueryMiddleware",
    "accept",
    "auth",
    "base",
    "body",
    "header",
    "json",
    "method",
    "params",
    "query",
    "ParseJSONMiddleware",
    "ParseTextMiddleware",
    "RequestInfoMiddleware",
    "parse_json",
    "parse_text",
    "request_info",
    "LoggingMiddleware",
]
