"""Rendering surface that writes the player document to a file."""

import logging
from pathlib import Path

from livetv.domain.entities import RenderDirective

logger = logging.getLogger(__name__)


class HtmlFileSurface:
    """Writes each loaded directive to an HTML file.

    Opening the file in a browser plays the selected stream. Scripts cannot
    be evaluated in a file, so evaluate_javascript only logs.
    """

    def __init__(self, output_path: str | Path) -> None:
        """Initialize the surface.

        Args:
            output_path: File the player document is written to.
        """
        self._output_path = Path(output_path)
        self._loaded: RenderDirective | None = None

    @property
    def loaded(self) -> RenderDirective | None:
        """Directive currently written to the file."""
        return self._loaded

    def load(self, directive: RenderDirective) -> None:
        """Write the directive's document to the output file.

        Args:
            directive: Directive to render.
        """
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_text(directive.document, encoding=directive.encoding)
        self._loaded = directive
        logger.info("Wrote player document to %s", self._output_path)

    def unload(self) -> None:
        """Remove the output file."""
        self._output_path.unlink(missing_ok=True)
        self._loaded = None
        logger.info("Removed player document %s", self._output_path)

    def evaluate_javascript(self, source: str) -> None:
        """Log the script; a file has no running document."""
        logger.debug("Skipping script for file surface: %s", source)
