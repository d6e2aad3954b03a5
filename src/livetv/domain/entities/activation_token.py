"""Activation token for the rendering surface."""

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class ActivationToken:
    """Change-detection value for the rendering surface.

    Derived only from the stream URL: two channels sharing a URL produce
    equal tokens, so switching between them does not rebuild the surface.

    Attributes:
        value: Hex digest of the URL.
    """

    value: str

    @classmethod
    def from_url(cls, url: str) -> "ActivationToken":
        """Derive a token from a stream URL.

        Args:
            url: Stream URL.

        Returns:
            ActivationToken for the URL.
        """
        return cls(value=hashlib.sha256(url.encode("utf-8")).hexdigest())
