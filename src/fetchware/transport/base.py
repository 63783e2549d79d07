from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from types import TracebackType

from fetchware.models import RequestOptions, Response


class TransportType(str, Enum):
    AIOHTTP = "aiohttp"


class Transport(ABC):
    """
    A pluggable HTTP transport: the innermost link of a composed fetch. It
    performs a single HTTP request per call and owns the lifecycle of its
    HTTP session. Instances are callable with the same (url, options) shape
    as every other link, so they can be handed to compose() directly.
    """

    @abstractmethod
    async def __aenter__(self) -> "Transport":
        ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        ...

    @abstractmethod
    async def fetch(self, url: str, options: RequestOptions) -> Response:
        ...

    async def __call__(self, url: str, options: RequestOptions) -> Response:
        return await self.fetch(url, options)
