from pydantic import BaseModel, Field

from fetchware.config.models.middleware import MiddlewareConfig
from fetchware.config.models.transport import TransportConfigModel


class FetchConfig(BaseModel):
    """
    Declarative description of a composed fetch: the transport settings and
    the middleware chain, outermost first.
    """
    transport: TransportConfigModel = Field(default_factory=TransportConfigModel)
    middleware: list[MiddlewareConfig] = Field(default_factory=list)
