from unittest.mock import AsyncMock

import httpx
import pytest

from src.interactions.cache import InteractionCache
from src.utils.storage import InMemoryStore

# Enable asyncio mode for all tests
pytest_plugins = ("pytest_asyncio",)

# Fixed "now" for cache tests: 2025-01-01T00:00:00Z in epoch milliseconds
NOW_MS = 1_735_689_600_000


@pytest.fixture
def mock_http_session():
    """Mock httpx.AsyncClient for all API clients."""
    session = AsyncMock(spec=httpx.AsyncClient)
    return session


@pytest.fixture
def memory_store():
    """Fresh in-memory key-value store."""
    return InMemoryStore()


@pytest.fixture
def clock():
    """Controllable clock; set clock.now to move time."""

    class Clock:
        now = NOW_MS

        def __call__(self):
            return self.now

    return Clock()


@pytest.fixture
def interaction_cache(memory_store, clock):
    """Interaction cache over the in-memory store with a fixed clock."""
    return InteractionCache(memory_store, clock=clock)
