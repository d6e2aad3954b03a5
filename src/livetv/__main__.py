"""アプリケーションのエントリポイント"""

import asyncio
import logging
import sys
from pathlib import Path

from livetv.application.services import (
    ChannelRegistry,
    PlaybackBinding,
    SelectionController,
)
from livetv.application.use_cases import LiveTVSession
from livetv.config import Config, ConfigError, LoggingConfig, load_config
from livetv.infrastructure.persistence import (
    ChannelPersistenceGateway,
    DatabaseManager,
)
from livetv.infrastructure.player import HtmlFileSurface, JinjaPlayerRenderer

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: LoggingConfig | None) -> None:
    """logging セクションの設定を適用する

    ルートロガーのレベルとフォーマットを変更し、
    loggers に指定されたロガーごとのレベルを設定する。
    未知のレベル名は INFO として扱う。

    Args:
        config: ログ設定（None の場合は起動時の設定のまま）
    """
    if config is None:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(_parse_level(config.level))
    formatter = logging.Formatter(config.format)
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)

    for name, level in (config.loggers or {}).items():
        logging.getLogger(name).setLevel(_parse_level(level))
        logger.debug("Logger %s set to %s", name, level.upper())


def build_session(config: Config, db_manager: DatabaseManager) -> LiveTVSession:
    """設定からセッションを組み立てる

    Args:
        config: アプリケーション設定
        db_manager: テーブル作成済みのデータベース

    Returns:
        LiveTVSession インスタンス
    """
    store = db_manager.create_store()
    gateway = ChannelPersistenceGateway(store, key=config.store.key)
    registry = ChannelRegistry(
        gateway,
        default_channels=[(c.name, c.url) for c in config.default_channels],
    )
    return LiveTVSession(
        registry=registry,
        selection=SelectionController(registry),
        binding=PlaybackBinding(JinjaPlayerRenderer(config.player.videojs_version)),
        surface=HtmlFileSurface(config.player.output_path),
        gateway=gateway,
    )


async def main() -> None:
    """チャンネルを読み込み、選択中のチャンネルのプレイヤーを書き出す"""
    config_path = Path("config.yaml")
    if config_path.exists():
        try:
            config = load_config(config_path)
        except ConfigError as e:
            logger.error("Failed to load config: %s", e)
            sys.exit(1)
    else:
        logger.info("config.yaml not found, using defaults")
        config = Config()

    # Apply logging configuration
    configure_logging(config.logging)

    # Initialize database
    db_manager = DatabaseManager(config.store)
    await db_manager.create_tables()

    session = build_session(config, db_manager)
    try:
        await session.start()
        for index, channel in enumerate(session.channels, start=1):
            selected = session.selected
            marker = "*" if selected and channel.same_as(selected) else " "
            logger.info("%s %d. %s <%s>", marker, index, channel.name, channel.url)
    finally:
        await session.close()
        await db_manager.close()


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
