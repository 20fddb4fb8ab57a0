import pytest

from greeting_server.dispatcher import Dispatcher
from greeting_server.greetings import register_greetings
from greeting_server.registry import CapabilityRegistry


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry() -> CapabilityRegistry:
    registry = CapabilityRegistry()
    register_greetings(registry)
    return registry


@pytest.fixture
def dispatcher(registry: CapabilityRegistry) -> Dispatcher:
    return Dispatcher(registry)
