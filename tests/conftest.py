"""Common fixtures."""

from unittest.mock import Mock

import pytest

from livetv.application.services import (
    ChannelRegistry,
    PlaybackBinding,
    SelectionController,
)
from livetv.application.use_cases import LiveTVSession
from livetv.config import BUILTIN_DEFAULT_CHANNELS
from livetv.infrastructure.persistence import (
    ChannelPersistenceGateway,
    StoreUnavailableError,
)
from livetv.infrastructure.player import JinjaPlayerRenderer


class FakeKeyValueStore:
    """Dict-backed KeyValueStore that can be told to fail."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.writes: list[tuple[str, str]] = []
        self.deleted: list[str] = []
        self.fail_get = False
        self.fail_set = False
        self.fail_delete = False

    async def get(self, key: str) -> str | None:
        if self.fail_get:
            raise StoreUnavailableError("store offline")
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise StoreUnavailableError("store offline")
        self.data[key] = value
        self.writes.append((key, value))

    async def delete(self, key: str) -> None:
        if self.fail_delete:
            raise StoreUnavailableError("store offline")
        self.data.pop(key, None)
        self.deleted.append(key)


@pytest.fixture
def store() -> FakeKeyValueStore:
    """Create an empty fake store."""
    return FakeKeyValueStore()


@pytest.fixture
def gateway(store: FakeKeyValueStore) -> ChannelPersistenceGateway:
    """Create a gateway over the fake store."""
    return ChannelPersistenceGateway(store)


@pytest.fixture
def registry(gateway: ChannelPersistenceGateway) -> ChannelRegistry:
    """Create a registry seeded with the built-in defaults."""
    return ChannelRegistry(gateway, default_channels=BUILTIN_DEFAULT_CHANNELS)


@pytest.fixture
def selection(registry: ChannelRegistry) -> SelectionController:
    """Create a selection controller bound to the registry."""
    return SelectionController(registry)


@pytest.fixture
def binding() -> PlaybackBinding:
    """Create a binding with the real player renderer."""
    return PlaybackBinding(JinjaPlayerRenderer())


@pytest.fixture
def surface() -> Mock:
    """Create a mock rendering surface."""
    return Mock()


@pytest.fixture
def session(
    registry: ChannelRegistry,
    selection: SelectionController,
    binding: PlaybackBinding,
    surface: Mock,
    gateway: ChannelPersistenceGateway,
) -> LiveTVSession:
    """Create a session wired to the fakes."""
    return LiveTVSession(
        registry=registry,
        selection=selection,
        binding=binding,
        surface=surface,
        gateway=gateway,
    )
