"""Jinja2 rendering of the inline player document."""

from jinja2 import Environment, PackageLoader, select_autoescape

DEFAULT_VIDEOJS_VERSION = "8.10.0"
VIDEOJS_BASE_URL = "https://vjs.zencdn.net"
PLAYER_TEMPLATE = "player.html.j2"


def create_jinja_env() -> Environment:
    """Create Jinja2 environment for the player template.

    Creates a configured Jinja2 environment that loads templates from
    the livetv.infrastructure.player templates directory. Autoescaping is
    enabled for ``.j2`` files so the stream URL is HTML-escaped.

    Returns:
        Configured Jinja2 environment.
    """
    return Environment(
        loader=PackageLoader("livetv.infrastructure.player", "templates"),
        autoescape=select_autoescape(default_for_string=True, default=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class JinjaPlayerRenderer:
    """Renders the video.js HLS player with the stream URL substituted."""

    def __init__(
        self,
        videojs_version: str = DEFAULT_VIDEOJS_VERSION,
        env: Environment | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            videojs_version: video.js release loaded from the CDN.
            env: Jinja2 environment. Defaults to create_jinja_env().
        """
        self._videojs_version = videojs_version
        self._template = (env or create_jinja_env()).get_template(PLAYER_TEMPLATE)

    def render(self, stream_url: str) -> str:
        """Render the player document for a stream.

        Args:
            stream_url: URL of the stream.

        Returns:
            Complete HTML document.
        """
        return self._template.render(
            stream_url=stream_url,
            videojs_base_url=VIDEOJS_BASE_URL,
            videojs_version=self._videojs_version,
            encoding="utf-8",
        )
