from .configs import minimal_fetch_config, minimal_fetch_config_dict
from .transport import FakeTransport, FrozenError, RecordedCall


__all__ = [
    'minimal_fetch_config',
    'minimal_fetch_config_dict',
    'FakeTransport',
    'FrozenError',
    'RecordedCall',
]
