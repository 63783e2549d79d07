from fetchware.middleware.pipeline import MIDDLEWARE_FUNC, NEXT_CALL, compose
from fetchware.models import ComposedFetch
from fetchware.transport.engine import AiohttpTransport


def create_fetch(*middleware: MIDDLEWARE_FUNC, transport: NEXT_CALL | None = None) -> ComposedFetch:
    """
    Creates a fetch function using all positional arguments as middleware.

    Without an explicit transport a fresh AiohttpTransport is used. It opens
    its session on the first request; close it with
    `await fetch.transport.close()` once the fetch is no longer needed.
    """
    if transport is None:
        transport = AiohttpTransport()
    return compose(transport, *middleware)
