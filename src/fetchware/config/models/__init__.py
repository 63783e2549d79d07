from fetchware.config.models.transport import TcpConnectionConfig, TransportConfigModel
from fetchware.config.models.middleware import (
    AcceptMiddlewareModel,
    AuthMiddlewareModel,
    BaseUrlMiddlewareModel,
    BodyMiddlewareModel,
    HeaderMiddlewareModel,
    JsonMiddlewareModel,
    LoggingMiddlewareModel,
    MethodMiddlewareModel,
    MiddlewareConfig,
    MiddlewareConfigModel,
    ParamsMiddlewareModel,
    QueryMiddlewareModel,
    SimpleMiddlewareModel,
)
from fetchware.config.models.fetch import FetchConfig

__all__ = [
    "TcpConnectionConfig",
    "TransportConfigModel",
    "AcceptMiddlewareModel",
    "AuthMiddlewareModel",
    "BaseUrlMiddlewareModel",
    "BodyMiddlewareModel",
    "HeaderMiddlewareModel",
    "JsonMiddlewareModel",
    "LoggingMiddlewareModel",
    "MethodMiddlewareModel",
    "MiddlewareConfig",
    "MiddlewareConfigModel",
    "ParamsMiddlewareModel",
    "QueryMiddlewareModel",
    "SimpleMiddlewareModel",
    "FetchConfig",
]
