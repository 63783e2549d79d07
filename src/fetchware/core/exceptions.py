from typing import Any


class FetchwareError(Exception):
    """Base class for errors raised by fetchware itself"""

    pass


class InvalidBodyError(FetchwareError, TypeError):
    """Raised when body() is constructed with content that is not a string"""

    def __init__(self, content: Any) -> None:
        self.content = content
        super().__init__(
            f"body(content) must be a string, got {type(content).__name__}"
        )


class MiddlewareOrderError(FetchwareError, RuntimeError):
    """
    Raised by a strict params() middleware when no earlier middleware in the
    chain has set the request method.
    """

    pass


class ResponseParseError(FetchwareError, ValueError):
    """Raised when a response payload cannot be parsed. The original error is kept as __cause__."""

    pass


class RequestFailedError(FetchwareError):
    """
    Carries request_url and request_options for a failed request when the
    original exception could not be annotated directly.
    """

    def __init__(self, message: str, request_url: str | None = None, request_options: Any = None) -> None:
        super().__init__(message)
        self.request_url = request_url
        self.request_options = request_options


class TransportClosedError(FetchwareError, RuntimeError):
    """Raised when a transport is used after it has been closed"""

    pass
