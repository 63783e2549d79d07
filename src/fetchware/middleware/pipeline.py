from __future__ import annotations
from enum import Enum
from functools import reduce
from typing import Any, Awaitable, Callable, Mapping, Protocol

from fetchware.core.abstract_factory import TypeAbstractFactory
from fetchware.models import ComposedFetch, RequestOptions, Response


NEXT_CALL = Callable[[str, RequestOptions], Awaitable[Response]]
MIDDLEWARE_FUNC = Callable[[NEXT_CALL, str, RequestOptions], Awaitable[Response]]


class MiddlewareType(str, Enum):
    METHOD = "method"
    HEADER = "header"
    AUTH = "auth"
    ACCEPT = "accept"
    BASE = "base"
    QUERY = "query"
    BODY = "body"
    JSON = "json"
    PARAMS = "params"
    PARSE_TEXT = "parse_text"
    PARSE_JSON = "parse_json"
    REQUEST_INFO = "request_info"
    LOGGING = "logging"


class Middleware(Protocol):
    """
    Middleware wraps a single call to the next link in the chain. It receives
    that link as next_call together with the request descriptor (url, options).
    It can modify the descriptor and delegate, await the delegated call and
    annotate the response, or short-circuit by returning a response without
    calling next_call at all.
    """

    async def __call__(
        self,
        next_call: NEXT_CALL,
        url: str,
        options: RequestOptions,
    ) -> Response:
        """
        Args:
            next_call: The next middleware in the chain, or the transport.
            url: Request URL as seen by this link.
            options: Mutable request options shared along the chain.

        Returns:
            The response produced by next_call, or a substitute.
        """
        ...


class MiddlewareFactory(TypeAbstractFactory[MiddlewareType, Middleware]):
    """Registry for Middleware components"""
    ...


def _wrap(next_call: NEXT_CALL, middleware: MIDDLEWARE_FUNC) -> NEXT_CALL:
    async def step(url: str, options: RequestOptions) -> Response:
        return await middleware(next_call, url, options)

    return step


def _options_from_mapping(options: Mapping[str, Any]) -> RequestOptions:
    fields = dict(options)
    if fields.get("headers") is not None:
        fields["headers"] = dict(fields["headers"])
    return RequestOptions(**fields)


def compose(transport: NEXT_CALL, *middleware: MIDDLEWARE_FUNC) -> ComposedFetch:
    """
    Fold middleware around a transport into a single fetch function.

    The fold runs right to left: the last middleware receives the transport
    as next_call and the first middleware becomes the outermost link. Calling
    the result therefore runs request-side logic in list order and
    response-side logic in reverse list order. Nothing is caught here; any
    exception raised along the chain reaches the caller unchanged.

    Options may be given as a RequestOptions or as a mapping with method,
    headers and body keys. A mapping is copied into a fresh RequestOptions,
    so middleware changes are not written back to it.
    """
    chain = reduce(_wrap, reversed(middleware), transport)

    async def composed_fetch(url: str, options: RequestOptions | Mapping[str, Any] | None = None) -> Response:
        if options is None:
            options = RequestOptions()
        elif isinstance(options, Mapping):
            options = _options_from_mapping(options)
        return await chain(url, options)

    composed_fetch.transport = transport
    return composed_fetch


class MiddlewarePipeline:
    """
    Builder form of compose(). Middleware are collected in the order they are
    added and folded around a transport by build(), so the first middleware
    added is the outermost wrapper.
    """

    def __init__(self, middleware: list[MIDDLEWARE_FUNC] | None = None) -> None:
        self._middleware_list: list[MIDDLEWARE_FUNC] = list(middleware or [])

    def __len__(self) -> int:
        return len(self._middleware_list)

    def add(self, middleware: MIDDLEWARE_FUNC) -> "MiddlewarePipeline":
        self._middleware_list.append(middleware)
        return self

    def build(self, transport: NEXT_CALL) -> ComposedFetch:
        return compose(transport, *self._middleware_list)
