from fetchware.config.models import FetchConfig, TcpConnectionConfig, TransportConfigModel
from fetchware.config.loader import ConfigFormat, ConfigLoader
from fetchware.config.preprocessor import ConfigPreprocessor, EnvVarPreprocessor

__all__ = [
    "FetchConfig",
    "TcpConnectionConfig",
    "TransportConfigModel",
    "ConfigFormat",
    "ConfigLoader",
    "ConfigPreprocessor",
    "EnvVarPreprocessor",
]
