"""Application services."""

from livetv.application.services.channel_registry import ChannelRegistry
from livetv.application.services.playback_binding import PlaybackBinding
from livetv.application.services.selection_controller import SelectionController

__all__ = ["ChannelRegistry", "PlaybackBinding", "SelectionController"]
