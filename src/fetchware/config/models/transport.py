from typing import Any
from pydantic import Field, BaseModel

from fetchware.transport.base import TransportType


class TcpConnectionConfig(BaseModel):
    limit: int = 100
    limit_per_host: int = 0
    ttl_dns_cache: int = 300
    force_close: bool = False
    enable_cleanup_closed: bool = False


class TransportConfigModel(BaseModel):
    """Transport settings for a composed fetch"""
    type: TransportType = Field(default=TransportType.AIOHTTP)
    base_url: str = ""
    base_timeout: float = 30
    tcp_connection: TcpConnectionConfig = Field(default_factory=TcpConnectionConfig)

    def to_runtime_args(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "connector_config": self.tcp_connection,
            "base_timeout": self.base_timeout,
        }
