import json
from dataclasses import dataclass
from typing import Any

from fetchware.models import FetchResponse, RequestOptions


@dataclass
class RecordedCall:
    url: str
    options: RequestOptions


class FakeTransport:
    """
    Stand-in for the network: records every (url, options) pair it receives
    and resolves with a FetchResponse built from the configured body, or
    raises the configured error.
    """

    def __init__(
        self,
        body: bytes | str | dict[str, Any] = b"{}",
        status: int = 200,
        error: BaseException | None = None,
    ) -> None:
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.body = body
        self.status = status
        self.error = error
        self.calls: list[RecordedCall] = []

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]

    async def __call__(self, url: str, options: RequestOptions) -> FetchResponse:
        self.calls.append(RecordedCall(url=url, options=options))
        if self.error is not None:
            raise self.error
        return FetchResponse(status=self.status, body=self.body, url=url)


class FrozenError(Exception):
    """An exception that refuses new attributes"""

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

