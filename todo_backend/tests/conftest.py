import asyncio
import os

import pytest
from fastapi.testclient import TestClient

# Plain-text logs keep pytest output readable
os.environ.setdefault("LOG_FORMAT", "text")

from tracker.container import build_container  # noqa: E402
from tracker.events import InMemoryEventBus  # noqa: E402
from tracker.main import create_app  # noqa: E402
from tracker.repositories import InMemoryRepository  # noqa: E402
from tracker.settings import get_settings  # noqa: E402
from tracker.uow import UnitOfWork  # noqa: E402


@pytest.fixture
def run_effect():
    """Run an Effect to completion and return its Result."""
    def _run(effect):
        return asyncio.run(effect.run())
    return _run


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def bus():
    return InMemoryEventBus()


@pytest.fixture
def published(bus):
    """Every event the bus delivers, in delivery order."""
    received = []
    bus.subscribe(received.append)
    return received


@pytest.fixture
def uow(bus):
    return UnitOfWork(bus)


@pytest.fixture
def container():
    return build_container(get_settings())


@pytest.fixture
def client():
    # A fresh app per test so the in-memory store starts empty
    return TestClient(create_app())
