"""SQLite implementation of KeyValueStore."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from livetv.infrastructure.persistence.exceptions import StoreUnavailableError
from livetv.infrastructure.persistence.models import KeyValueModel


class SQLiteKeyValueStore:
    """SQLite 版 KeyValueStore 実装

    1 キーにつき 1 行を key_values テーブルに保存する。
    SQLAlchemy のエラーは StoreUnavailableError に変換して送出する。
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ) -> None:
        """初期化

        Args:
            session_factory: 非同期セッション生成関数
        """
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        """キーに対応する値を取得する

        Args:
            key: キー

        Returns:
            保存されている値（存在しない場合は None）
        """
        try:
            async with self._session_factory() as session:
                result = await session.exec(
                    select(KeyValueModel).where(KeyValueModel.key == key)
                )
                model = result.first()
                return model.value if model is not None else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to read key '{key}': {e}") from e

    async def set(self, key: str, value: str) -> None:
        """キーに値を保存する（upsert）

        Args:
            key: キー
            value: 保存する値
        """
        try:
            async with self._session_factory() as session:
                result = await session.exec(
                    select(KeyValueModel).where(KeyValueModel.key == key)
                )
                existing = result.first()

                if existing:
                    existing.value = value
                    existing.updated_at = datetime.now(timezone.utc)
                    session.add(existing)
                else:
                    session.add(KeyValueModel(key=key, value=value))

                await session.commit()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to write key '{key}': {e}") from e

    async def delete(self, key: str) -> None:
        """キーを削除する

        Args:
            key: キー
        """
        try:
            async with self._session_factory() as session:
                result = await session.exec(
                    select(KeyValueModel).where(KeyValueModel.key == key)
                )
                existing = result.first()
                if existing is None:
                    return
                await session.delete(existing)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to delete key '{key}': {e}") from e
