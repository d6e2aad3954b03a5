"""Domain services."""

from livetv.domain.services.channel_validation import (
    is_absolute_url,
    validate_channel_input,
)
from livetv.domain.services.protocols import PlayerDocumentRenderer, RenderingSurface

__all__ = [
    "PlayerDocumentRenderer",
    "RenderingSurface",
    "is_absolute_url",
    "validate_channel_input",
]
