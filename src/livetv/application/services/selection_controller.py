"""Selection of the channel to play."""

import logging
from collections.abc import Sequence

from livetv.application.services.channel_registry import ChannelRegistry
from livetv.domain.entities import ActivationToken, Channel
from livetv.domain.exceptions import ChannelNotFoundError

logger = logging.getLogger(__name__)


class SelectionController:
    """Tracks the selected channel and its activation token.

    The token changes only when the selected URL changes. Switching to a
    different channel with the same URL keeps an equal token, so the
    rendering surface is not rebuilt.
    """

    def __init__(self, registry: ChannelRegistry) -> None:
        """Initialize the controller.

        Args:
            registry: Registry whose members may be selected.
        """
        self._registry = registry
        self._selected: Channel | None = None
        self._token: ActivationToken | None = None

    @property
    def selected(self) -> Channel | None:
        """Currently selected channel."""
        return self._selected

    @property
    def token(self) -> ActivationToken | None:
        """Token of the current selection."""
        return self._token

    def is_selected(self, channel: Channel) -> bool:
        """Check whether the channel is the current selection."""
        return self._selected is not None and self._selected.same_as(channel)

    def _set(self, channel: Channel | None) -> Channel | None:
        self._selected = channel
        self._token = ActivationToken.from_url(channel.url) if channel else None
        logger.debug("Selection: %s", channel.name if channel else None)
        return channel

    def clear(self) -> None:
        """Drop the selection."""
        self._set(None)

    def derive_after_load(self, channels: Sequence[Channel]) -> Channel | None:
        """Select the first channel of a freshly loaded list.

        Args:
            channels: Loaded channels.

        Returns:
            The new selection, or None for an empty list.
        """
        return self._set(channels[0] if channels else None)

    def select(self, channel: Channel) -> ActivationToken:
        """Select a channel.

        Args:
            channel: Member of the registry.

        Returns:
            Token for the selection. Equal to the previous token when the
            URL did not change.

        Raises:
            ChannelNotFoundError: channel is not in the registry.
        """
        if not self._registry.contains(channel):
            raise ChannelNotFoundError(channel.id)
        self._set(channel)
        assert self._token is not None
        return self._token

    def reconcile_after_removal(
        self, removed_was_selected: bool, channels: Sequence[Channel]
    ) -> Channel | None:
        """Fix up the selection after a channel was removed.

        Args:
            removed_was_selected: Whether the removed channel was selected.
            channels: List after the removal.

        Returns:
            The selection after reconciliation.
        """
        if removed_was_selected:
            return self._set(channels[0] if channels else None)
        return self._selected

    def reconcile_after_edit(
        self, edited_channel: Channel, new_channel: Channel
    ) -> Channel | None:
        """Follow an edit of the selected channel.

        Args:
            edited_channel: Channel that was replaced.
            new_channel: Replacement in the same slot.

        Returns:
            The selection after reconciliation.
        """
        if self.is_selected(edited_channel):
            return self._set(new_channel)
        return self._selected
