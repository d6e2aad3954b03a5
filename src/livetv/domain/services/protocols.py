"""Domain service protocols."""

from typing import Protocol

from livetv.domain.entities import RenderDirective


class RenderingSurface(Protocol):
    """Embeddable view that plays adaptive-bitrate video.

    The surface is torn down and rebuilt each time it is handed a new
    directive. Callbacks from the surface (created, errors, navigation,
    fullscreen) are routed back through LiveTVSession.
    """

    def load(self, directive: RenderDirective) -> None:
        """Rebuild the surface with a new inline document.

        Args:
            directive: Document and content metadata to render.
        """
        ...

    def unload(self) -> None:
        """Tear down the surface and show the empty placeholder."""
        ...

    def evaluate_javascript(self, source: str) -> None:
        """Run a script inside the currently rendered document.

        Args:
            source: JavaScript source.
        """
        ...


class PlayerDocumentRenderer(Protocol):
    """Produces the inline player document for a stream URL."""

    def render(self, stream_url: str) -> str:
        """Render the player document.

        Args:
            stream_url: URL substituted into the player template.

        Returns:
            Complete HTML document.
        """
        ...
