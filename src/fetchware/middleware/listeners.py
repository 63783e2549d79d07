# Middleware components that observe but do not change the request or response
import logging
import time

from fetchware.models import RequestOptions, Response
from fetchware.middleware.pipeline import (
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewareType,
)


@MiddlewareFactory.register(MiddlewareType.LOGGING)
class LoggingMiddleware(Middleware):
    """
    Logs the request on the way in and the outcome on the way out. Failures
    are logged and re-raised unchanged.
    """

    def __init__(self, level: int = logging.INFO, logger: logging.Logger | None = None) -> None:
        self.level = level
        self._logger = logger or logging.getLogger(f"[{self.__class__.__name__}]")

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        method = options.method or "GET"
        self._logger.log(self.level, f"-> {method} {url}")
        start = time.monotonic()

        try:
            response = await next_call(url, options)
        except Exception as exc:
            self._logger.error(f"<- FAILED {method} {url}: {type(exc).__name__}: {exc}")
            raise

        elapsed = time.monotonic() - start
        status = getattr(response, "status", None)
        self._logger.log(self.level, f"<- {status} {url} ({elapsed:.2f}s)")
        return response
