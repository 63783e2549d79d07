from fetchware.core.abstract_factory import TypeAbstractFactory
from fetchware.core.exceptions import (
    FetchwareError,
    InvalidBodyError,
    MiddlewareOrderError,
    RequestFailedError,
    ResponseParseError,
    TransportClosedError,
)
from fetchware.core.logging import configure_logging, set_aiohttp_logging_level

__all__ = [
    "TypeAbstractFactory",
    "FetchwareError",
    "InvalidBodyError",
    "MiddlewareOrderError",
    "RequestFailedError",
    "ResponseParseError",
    "TransportClosedError",
    "configure_logging",
    "set_aiohttp_logging_level",
]
