"""SQLite database backing the key-value store."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from livetv.config.models import StoreConfig
from livetv.infrastructure.persistence.key_value_store import SQLiteKeyValueStore
from livetv.infrastructure.persistence.models import KeyValueModel

IN_MEMORY = ":memory:"


class DatabaseManager:
    """key_values テーブルだけを持つ SQLite データベース

    StoreConfig の database_path から接続先を決め、
    テーブル作成と SQLiteKeyValueStore の生成を行う。
    """

    def __init__(self, config: StoreConfig) -> None:
        """初期化

        Args:
            config: ストア設定（database_path に ":memory:" も指定可）
        """
        self._config = config
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def url(self) -> str:
        """aiosqlite の接続 URL"""
        return f"sqlite+aiosqlite:///{self._config.database_path}"

    def get_engine(self) -> AsyncEngine:
        """エンジンを取得する（初回呼び出し時に生成）

        ファイルの場合は親ディレクトリを作成する。
        """
        if self._engine is None:
            if self._config.database_path != IN_MEMORY:
                Path(self._config.database_path).parent.mkdir(
                    parents=True, exist_ok=True
                )
            self._engine = create_async_engine(self.url)
            self._session_factory = async_sessionmaker(
                self._engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._engine

    async def create_tables(self) -> None:
        """key_values テーブルを作成する（作成済みなら何もしない）"""
        table = KeyValueModel.__table__  # type: ignore[attr-defined]
        async with self.get_engine().begin() as conn:
            await conn.run_sync(table.create, checkfirst=True)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """セッションを取得する"""
        self.get_engine()
        assert self._session_factory is not None
        async with self._session_factory() as session:
            yield session

    def create_store(self) -> SQLiteKeyValueStore:
        """このデータベースを使う SQLiteKeyValueStore を生成する"""
        return SQLiteKeyValueStore(self.get_session)

    async def close(self) -> None:
        """エンジンを破棄する（再度 get_engine で作り直せる）"""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
