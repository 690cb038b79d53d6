"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import datetime, timezone

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.services.exchange_rate import (
    ExchangeRateInfo,
    ExchangeRateService,
    get_exchange_rate_service,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


class StubExchangeRateService(ExchangeRateService):
    """Exchange rate service that never touches the network."""

    def __init__(self, rate: float = 1.35, is_live: bool = True):
        super().__init__()
        self.info = ExchangeRateInfo(
            usd_to_cad=rate,
            is_live=is_live,
            last_updated=datetime(2026, 10, 18, tzinfo=timezone.utc),
        )
        self.calls = 0

    async def get_exchange_rate(self) -> ExchangeRateInfo:
        self.calls += 1
        return self.info


@pytest.fixture
def rate_service():
    """Stub rate service wired into the app for the duration of a test."""
    service = StubExchangeRateService()
    app.dependency_overrides[get_exchange_rate_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_exchange_rate_service, None)


@pytest.fixture
def client(rate_service):
    """Create test client."""
    return TestClient(app)
