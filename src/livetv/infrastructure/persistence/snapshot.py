"""Serialization of the channel list."""

import json

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from livetv.domain.entities import Channel, create_channel
from livetv.infrastructure.persistence.exceptions import CorruptSnapshotError


class ChannelRecord(BaseModel):
    """One persisted channel.

    Unknown keys are ignored; ``name`` and ``url`` must be strings.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    url: StrictStr


_records_adapter: TypeAdapter[list[ChannelRecord]] = TypeAdapter(list[ChannelRecord])


def encode_snapshot(channels: list[Channel]) -> str:
    """Serialize the full channel list.

    Args:
        channels: Channels in display order.

    Returns:
        JSON array text.
    """
    return json.dumps([c.to_record() for c in channels], ensure_ascii=False)


def decode_snapshot(raw: str) -> list[Channel]:
    """Deserialize a stored snapshot.

    Any malformed record rejects the whole snapshot.

    Args:
        raw: Stored JSON text.

    Returns:
        Channels in stored order, each with a fresh id.

    Raises:
        CorruptSnapshotError: Text is not a JSON array of channel records.
    """
    try:
        data = json.loads(raw)
        records = _records_adapter.validate_python(data)
    except (json.JSONDecodeError, RecursionError, PydanticValidationError) as e:
        raise CorruptSnapshotError(f"Unreadable channel snapshot: {e}") from e
    return [create_channel(record.name, record.url) for record in records]
