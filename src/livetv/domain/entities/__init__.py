"""Domain entities."""

from livetv.domain.entities.activation_token import ActivationToken
from livetv.domain.entities.channel import Channel, create_channel
from livetv.domain.entities.playback import (
    NavigationPolicy,
    PlaybackState,
    RecoveryAction,
    RenderDirective,
)

__all__ = [
    "ActivationToken",
    "Channel",
    "NavigationPolicy",
    "PlaybackState",
    "RecoveryAction",
    "RenderDirective",
    "create_channel",
]
