# Standard middleware - these middleware objects mutate the request before it
# reaches the transport
from json import dumps
from typing import Any, Mapping

from fetchware.core.exceptions import InvalidBodyError, MiddlewareOrderError
from fetchware.models import RequestOptions, Response
from fetchware.middleware.pipeline import (
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewareType,
)
from fetchware.utils import set_header, stringify_query


JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "x-www-form-urlencoded"
QUERY_METHODS = frozenset({"GET", "HEAD"})


@MiddlewareFactory.register(MiddlewareType.METHOD)
class MethodMiddleware(Middleware):
    """Sets the request method."""

    def __init__(self, verb: str) -> None:
        self.verb = verb

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        options.method = self.verb
        return await next_call(url, options)


@MiddlewareFactory.register(MiddlewareType.HEADER)
class HeaderMiddleware(Middleware):
    """Adds a header to the request, replacing any earlier value under the same name."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        set_header(options, self.name, self.value)
        return await next_call(url, options)


@MiddlewareFactory.register(MiddlewareType.BASE)
class BaseUrlMiddleware(Middleware):
    """
    Prepends a fixed string to the request URL. This is plain concatenation;
    slashes are not normalized.
    """

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        return await next_call(self.base_url + url, options)


@MiddlewareFactory.register(MiddlewareType.QUERY)
class QueryMiddleware(Middleware):
    """Appends a query string to the request URL."""

    def __init__(self, query: Mapping[str, Any] | str) -> None:
        self.query_string = stringify_query(query)

    def apply(self, url: str) -> str:
        separator = "&" if "?" in url else "?"
        return url + separator + self.query_string

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        return await next_call(self.apply(url), options)


@MiddlewareFactory.register(MiddlewareType.BODY)
class BodyMiddleware(Middleware):
    """
    Attaches text content to the request together with its Content-Type and
    Content-Length headers. Content-Length is the character length of the
    content. Non-string content is rejected at construction time.
    """

    def __init__(self, content: str, content_type: str) -> None:
        if not isinstance(content, str):
            raise InvalidBodyError(content)
        self.content = content
        self.content_type = content_type

    def apply(self, options: RequestOptions) -> None:
        options.body = self.content
        set_header(options, "Content-Type", self.content_type)
        set_header(options, "Content-Length", str(len(self.content)))

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        self.apply(options)
        return await next_call(url, options)


@MiddlewareFactory.register(MiddlewareType.PARAMS)
class ParamsMiddleware(Middleware):
    """
    Sends params in the query string of GET/HEAD requests and as a form
    payload on every other method. The method is read from the options at
    request time, so this middleware has to come after any method() in the
    chain. With strict=True a request that reaches it without a method is
    rejected instead of being treated as GET.
    """

    def __init__(self, params: Mapping[str, Any] | str, strict: bool = False) -> None:
        self.query_string = stringify_query(params)
        self.strict = strict
        self._query = QueryMiddleware(self.query_string)
        self._body = BodyMiddleware(self.query_string, FORM_CONTENT_TYPE)

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        if options.method is None and self.strict:
            raise MiddlewareOrderError(
                "params() requires the request method to be set by an earlier middleware"
            )

        method = (options.method or "GET").upper()
        delegate = self._query if method in QUERY_METHODS else self._body
        return await delegate(next_call, url, options)


def method(verb: str) -> MethodMiddleware:
    return MethodMiddleware(verb)


def header(name: str, value: str) -> HeaderMiddleware:
    return HeaderMiddleware(name, value)


@MiddlewareFactory.register(MiddlewareType.AUTH)
def auth(value: str) -> HeaderMiddleware:
    """Adds an Authorization header to the request."""
    return HeaderMiddleware("Authorization", value)


@MiddlewareFactory.register(MiddlewareType.ACCEPT)
def accept(content_type: str) -> HeaderMiddleware:
    """Adds an Accept header to the request."""
    return HeaderMiddleware("Accept", content_type)


def base(base_url: str) -> BaseUrlMiddleware:
    return BaseUrlMiddleware(base_url)


def query(value: Mapping[str, Any] | str) -> QueryMiddleware:
    return QueryMiddleware(value)


def body(content: str, content_type: str) -> BodyMiddleware:
    return BodyMiddleware(content, content_type)


@MiddlewareFactory.register(MiddlewareType.JSON)
def json(value: Any) -> BodyMiddleware:
    """Adds an application/json payload. Strings are assumed to be serialized already."""
    content = value if isinstance(value, str) else dumps(value, separators=(",", ":"))
    return BodyMiddleware(content, JSON_CONTENT_TYPE)


def params(value: Mapping[str, Any] | str, strict: bool = False) -> ParamsMiddleware:
    return ParamsMiddleware(value, strict=strict)
