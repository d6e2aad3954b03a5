"""Live TV session use case."""

import logging

from livetv.application.services import (
    ChannelRegistry,
    PlaybackBinding,
    SelectionController,
)
from livetv.domain.entities import (
    ActivationToken,
    Channel,
    NavigationPolicy,
    PlaybackState,
    RecoveryAction,
)
from livetv.domain.services import RenderingSurface
from livetv.infrastructure.persistence import ChannelPersistenceGateway

logger = logging.getLogger(__name__)


class LiveTVSession:
    """Owns the channel list, the selection and the playback slot.

    Every user action goes through this class. Mutations run in the order
    registry -> selection -> surface, so the surface is never handed a
    channel that is no longer in the list.
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        selection: SelectionController,
        binding: PlaybackBinding,
        surface: RenderingSurface,
        gateway: ChannelPersistenceGateway,
    ) -> None:
        """Initialize the session.

        Args:
            registry: Channel registry.
            selection: Selection controller bound to the registry.
            binding: Playback binding.
            surface: Rendering surface driven by the session.
            gateway: Gateway used by the registry, flushed on close.
        """
        self._registry = registry
        self._selection = selection
        self._binding = binding
        self._surface = surface
        self._gateway = gateway
        self._reloading = False

    @property
    def channels(self) -> tuple[Channel, ...]:
        """Current channel list."""
        return self._registry.channels

    @property
    def selected(self) -> Channel | None:
        """Currently selected channel."""
        return self._selection.selected

    @property
    def token(self) -> ActivationToken | None:
        """Activation token of the selection."""
        return self._selection.token

    @property
    def state(self) -> PlaybackState:
        """Playback slot state."""
        return self._binding.state

    async def start(self) -> None:
        """Load channels and render the first one."""
        await self.reload(force=False)

    async def reload(self, force: bool = True) -> None:
        """Reload the channel list from persistence.

        Args:
            force: Rebuild the surface even if the selected URL is
                unchanged.
        """
        if self._reloading:
            logger.debug("Reload already in progress")
            return
        self._reloading = True
        try:
            # Pending writes must land before the store is re-read
            await self._gateway.flush()
            channels = await self._registry.bootstrap()
            self._selection.derive_after_load(channels)
            self._present(force=force)
            logger.info("Session loaded %d channels", len(channels))
        finally:
            self._reloading = False

    def add_channel(self, name: str, url: str) -> Channel:
        """Append a channel; it becomes the selection if nothing is selected.

        Raises:
            ChannelValidationError: Invalid name or URL.
        """
        channel = self._registry.add(name, url)
        if self._selection.selected is None:
            self._selection.select(channel)
        self._present()
        return channel

    def edit_channel(self, target: Channel, name: str, url: str) -> Channel:
        """Replace a channel in place; the selection follows the edit.

        Raises:
            ChannelValidationError: Invalid name or URL.
            ChannelNotFoundError: target is not in the list.
        """
        channel = self._registry.edit(target, name, url)
        self._selection.reconcile_after_edit(target, channel)
        self._present()
        return channel

    def remove_channel(self, target: Channel) -> None:
        """Remove a channel; a removed selection moves to the first channel."""
        was_selected = self._selection.is_selected(target)
        self._registry.remove(target)
        self._selection.reconcile_after_removal(was_selected, self._registry.channels)
        self._present()

    def select_channel(self, channel: Channel) -> ActivationToken:
        """Select a channel for playback.

        Raises:
            ChannelNotFoundError: channel is not in the list.
        """
        token = self._selection.select(channel)
        self._present()
        return token

    def _present(self, force: bool = False) -> None:
        channel = self._selection.selected
        token = self._selection.token
        try:
            if channel is None or token is None:
                if self._binding.state is not PlaybackState.EMPTY:
                    self._binding.clear()
                    self._surface.unload()
                return
            if force or self._binding.needs_render(token):
                self._surface.load(self._binding.render(channel, token))
        except Exception:
            logger.exception("Failed to update rendering surface")
            if channel is not None:
                self._binding.on_surface_error("surface", "update failed", channel.url)

    def handle_surface_created(self) -> None:
        """Surface reported that the document was created."""
        self._binding.on_surface_created()

    async def handle_surface_error(
        self, code: int | str, message: str, request_url: str | None = None
    ) -> None:
        """Surface reported a load or network failure."""
        action = self._binding.on_surface_error(code, message, request_url)
        if action is RecoveryAction.RELOAD:
            await self.reload(force=True)

    def handle_surface_http_error(
        self, status: int, request_url: str | None = None
    ) -> None:
        """Surface reported an HTTP status error."""
        self._binding.on_surface_http_error(status, request_url)

    def handle_navigation(self, requested_uri: str | None) -> NavigationPolicy:
        """Surface asks whether it may navigate."""
        return self._binding.guard_navigation(requested_uri)

    def handle_fullscreen_change(self, entered: bool) -> None:
        """Surface entered or left fullscreen."""
        self._surface.evaluate_javascript(self._binding.on_fullscreen_change(entered))

    async def close(self) -> None:
        """Wait for pending saves."""
        await self._gateway.flush()
