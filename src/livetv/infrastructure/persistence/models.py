"""SQLModel table definitions."""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class KeyValueModel(SQLModel, table=True):
    """キー・バリューテーブル"""

    __tablename__ = "key_values"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
