"""Value types exchanged with the rendering surface."""

from dataclasses import dataclass
from enum import Enum

from livetv.domain.entities.activation_token import ActivationToken


class PlaybackState(Enum):
    """State of the single playback slot."""

    EMPTY = "empty"
    LOADING = "loading"
    PLAYING = "playing"
    ERROR = "error"


class RecoveryAction(Enum):
    """What the session must do after a surface-reported failure."""

    NONE = "none"
    RELOAD = "reload"


class NavigationPolicy(Enum):
    """Answer to a pre-navigation request from the surface."""

    ALLOW = "allow"
    CANCEL = "cancel"


@dataclass(frozen=True)
class RenderDirective:
    """Inline document handed to the rendering surface.

    Attributes:
        document: HTML document with the player.
        token: Token of the channel the document was rendered for.
        mime_type: Content type of the document.
        encoding: Character encoding of the document.
    """

    document: str
    token: ActivationToken
    mime_type: str = "text/html"
    encoding: str = "utf-8"
