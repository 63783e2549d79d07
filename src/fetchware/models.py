from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Mapping, Protocol


@dataclass
class RequestOptions:
    """
    Mutable options half of a request descriptor. Middleware modify this
    object in place as the request travels toward the transport.
    • method: HTTP verb, None until a middleware or the caller sets one
    • headers: request headers, None until the first header is set
    • body: request payload as text
    """
    method: str | None = None
    headers: dict[str, str] | None = None
    body: str | None = None


class Response(Protocol):
    """
    Structural interface of whatever a transport resolves to. Response-side
    middleware attach text_string, json_data, request_url and request_options
    as plain attributes.
    """

    async def text(self) -> str: ...

    async def json(self) -> Any: ...


class TransportCall(Protocol):
    """The shape shared by a transport, a middleware's next_call and a composed fetch."""

    def __call__(self, url: str, options: RequestOptions) -> Awaitable[Response]: ...


class ComposedFetch(Protocol):
    """A composed fetch keeps a reference to the transport at the bottom of its chain."""

    transport: TransportCall

    def __call__(self, url: str, options: RequestOptions | Mapping[str, Any] | None = None) -> Awaitable[Response]: ...


@dataclass
class FetchResponse:
    """
    Response returned by AiohttpTransport. The body is read eagerly inside
    the session context, so the object stays usable after the connection
    has been released.
    • status: HTTP status code
    • headers: response headers
    • body: raw response body
    • url: final URL of the request
    • text_string / json_data: filled in by parse_text() / parse_json()
    • request_url / request_options: filled in by request_info()
    """
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""
    encoding: str = "utf-8"
    text_string: str | None = None
    json_data: Any | None = None
    request_url: str | None = None
    request_options: RequestOptions | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400

    async def text(self) -> str:
        return self.body.decode(self.encoding)

    async def json(self) -> Any:
        return json.loads(await self.text())
