from fetchware.transport.base import Transport, TransportType
from fetchware.transport.engine import AiohttpTransport, TransportFactory

__all__ = [
    "Transport",
    "TransportType",
    "AiohttpTransport",
    "TransportFactory",
]
