import pytest
from .fixtures.configs import minimal_fetch_config


@pytest.fixture
def dummy_headers():
    return {
        "Content-Type": "application/json",
        "Authorization": "Bearer dummy-token"
    }

__all__ = [
    'minimal_fetch_config',
]
