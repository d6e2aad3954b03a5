"""Binding between the selection and the rendering surface."""

import logging

from livetv.domain.entities import (
    ActivationToken,
    Channel,
    NavigationPolicy,
    PlaybackState,
    RecoveryAction,
    RenderDirective,
)
from livetv.domain.services import PlayerDocumentRenderer

logger = logging.getLogger(__name__)

INLINE_DOCUMENT_PREFIX = "data:text/html"
RESIZE_SCRIPT = "resizePlayer();"


class PlaybackBinding:
    """Turns the selected channel into surface directives.

    Owns the state of the single playback slot:
    EMPTY -> LOADING -> PLAYING, with ERROR reachable from LOADING or
    PLAYING. ERROR is left only through a new render.
    """

    def __init__(self, renderer: PlayerDocumentRenderer) -> None:
        """Initialize the binding.

        Args:
            renderer: Produces the player document for a stream URL.
        """
        self._renderer = renderer
        self._state = PlaybackState.EMPTY
        self._rendered_token: ActivationToken | None = None

    @property
    def state(self) -> PlaybackState:
        """Current playback slot state."""
        return self._state

    @property
    def rendered_token(self) -> ActivationToken | None:
        """Token of the document last handed to the surface."""
        return self._rendered_token

    def needs_render(self, token: ActivationToken | None) -> bool:
        """Check whether the surface must be rebuilt for a token.

        Args:
            token: Token of the current selection.

        Returns:
            True when the token differs from the rendered one, or the slot
            is in ERROR.
        """
        if token is None:
            return self._state is not PlaybackState.EMPTY
        return token != self._rendered_token or self._state is PlaybackState.ERROR

    def render(self, channel: Channel, token: ActivationToken) -> RenderDirective:
        """Build the directive for a selected channel.

        Only the channel URL affects the document.

        Args:
            channel: Selected channel.
            token: Token of the selection.

        Returns:
            Directive for the surface.
        """
        directive = RenderDirective(
            document=self._renderer.render(channel.url),
            token=token,
        )
        self._rendered_token = token
        self._state = PlaybackState.LOADING
        logger.debug("Rendering %s", channel.url)
        return directive

    def clear(self) -> None:
        """Mark the slot as empty."""
        self._rendered_token = None
        self._state = PlaybackState.EMPTY

    def on_surface_created(self) -> None:
        """Surface finished creating the rendered document."""
        if self._state is PlaybackState.LOADING:
            self._state = PlaybackState.PLAYING
        logger.debug("Surface created (state=%s)", self._state.value)

    def on_surface_error(
        self, code: int | str, message: str, request_url: str | None
    ) -> RecoveryAction:
        """Handle a load or network failure reported by the surface.

        The surface cannot tell a bad URL from a transient failure, so the
        only recovery is a full reload from persistence.

        Args:
            code: Surface error code.
            message: Error description.
            request_url: URL of the failed request.

        Returns:
            RecoveryAction.RELOAD
        """
        logger.warning(
            "Surface error: code %s, message: %s, url: %s", code, message, request_url
        )
        self._state = PlaybackState.ERROR
        return RecoveryAction.RELOAD

    def on_surface_http_error(
        self, status: int, request_url: str | None
    ) -> RecoveryAction:
        """Handle an HTTP status error reported by the surface.

        Args:
            status: HTTP status code.
            request_url: URL of the failed request.

        Returns:
            RecoveryAction.NONE
        """
        logger.info("Surface HTTP error: status %s, url: %s", status, request_url)
        return RecoveryAction.NONE

    def guard_navigation(self, requested_uri: str | None) -> NavigationPolicy:
        """Decide whether the surface may navigate.

        Only the inline player document may be loaded.

        Args:
            requested_uri: Navigation target, if any.

        Returns:
            NavigationPolicy.ALLOW or NavigationPolicy.CANCEL.
        """
        if requested_uri is None or requested_uri.startswith(INLINE_DOCUMENT_PREFIX):
            return NavigationPolicy.ALLOW
        logger.info("Blocked navigation to: %s", requested_uri)
        return NavigationPolicy.CANCEL

    def on_fullscreen_change(self, entered: bool) -> str:
        """Script to run in the document after a fullscreen change."""
        logger.debug("Surface %s fullscreen", "entered" if entered else "exited")
        return RESIZE_SCRIPT
