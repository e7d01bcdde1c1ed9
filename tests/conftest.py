import pytest

from tests.fixtures import VoeAlertFactory
from tests.mocks import MockResearchBackend


@pytest.fixture(scope="session")
def anyio_backend():
    """Restrict anyio tests to the asyncio backend."""

    yield "asyncio"


@pytest.fixture
def backend():
    """Fresh mock research backend for each test."""

    VoeAlertFactory.reset()
    return MockResearchBackend()
