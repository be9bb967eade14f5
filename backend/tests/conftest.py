"""Shared test configuration."""

import pytest

from api.router import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Keep per-client request counts from leaking between tests."""
    limiter.reset()
    yield
