"""Player rendering infrastructure."""

from livetv.infrastructure.player.file_surface import HtmlFileSurface
from livetv.infrastructure.player.renderer import (
    DEFAULT_VIDEOJS_VERSION,
    JinjaPlayerRenderer,
    create_jinja_env,
)

__all__ = [
    "DEFAULT_VIDEOJS_VERSION",
    "HtmlFileSurface",
    "JinjaPlayerRenderer",
    "create_jinja_env",
]
