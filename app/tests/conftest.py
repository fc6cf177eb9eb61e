import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import reset_providers


@pytest.fixture(autouse=True)
def _fresh_services():
    """Every test starts with empty stores and freshly loaded settings."""
    reset_providers()
    get_limiter().reset()
    yield
    reset_providers()
