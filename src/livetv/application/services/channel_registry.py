"""Authoritative in-memory channel list."""

import logging
from collections.abc import Sequence

from livetv.domain.entities import Channel, create_channel
from livetv.domain.exceptions import ChannelNotFoundError
from livetv.domain.services import validate_channel_input
from livetv.infrastructure.persistence import (
    ChannelPersistenceGateway,
    CorruptSnapshotError,
)

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """チャンネルリストの管理

    表示順＝保存順＝初期選択順のリストを保持する。
    入力値の検証は変更前に同期的に行い、変更が成功した場合のみ
    リスト全体をバックグラウンドで保存する。
    変更操作は実行中のイベントループ内から呼び出す必要がある。
    """

    def __init__(
        self,
        gateway: ChannelPersistenceGateway,
        default_channels: Sequence[tuple[str, str]],
    ) -> None:
        """初期化

        Args:
            gateway: 永続化ゲートウェイ
            default_channels: 保存データが無い場合に使用する (name, url) のリスト
        """
        self._gateway = gateway
        self._default_channels = list(default_channels)
        self._channels: list[Channel] = []

    @property
    def channels(self) -> tuple[Channel, ...]:
        """現在のチャンネルリスト（読み取り専用）"""
        return tuple(self._channels)

    def index_of(self, channel: Channel) -> int:
        """チャンネルの位置を返す（存在しない場合は -1）"""
        for index, candidate in enumerate(self._channels):
            if candidate.same_as(channel):
                return index
        return -1

    def contains(self, channel: Channel) -> bool:
        """チャンネルが現在のリストに含まれるかどうか"""
        return self.index_of(channel) != -1

    def _seed_defaults(self) -> list[Channel]:
        return [create_channel(name, url) for name, url in self._default_channels]

    def _commit(self, channels: list[Channel]) -> None:
        # submit_save raises without a running loop; the list stays untouched
        self._gateway.submit_save(channels)
        self._channels = channels

    async def bootstrap(self) -> tuple[Channel, ...]:
        """保存データからチャンネルリストを読み込む

        保存データが無い・空の場合、または破損している場合は
        デフォルトのチャンネルを使用する。破損時は保存データを削除する。
        ストアが利用できない場合は削除せずにデフォルトを使用する。

        Returns:
            読み込んだチャンネルリスト
        """
        loaded: list[Channel] | None
        try:
            loaded = await self._gateway.load()
        except CorruptSnapshotError as e:
            logger.warning("Discarding corrupt channel snapshot: %s", e)
            loaded = None
            try:
                await self._gateway.clear()
            except Exception:
                logger.exception("Failed to clear corrupt channel snapshot")
        except Exception:
            logger.exception("Failed to load channels; using defaults")
            loaded = None

        if loaded:
            self._channels = loaded
            logger.info("Loaded %d channels from store", len(loaded))
        else:
            self._channels = self._seed_defaults()
            logger.info("Seeded %d default channels", len(self._channels))
        return self.channels

    def add(self, name: str, url: str) -> Channel:
        """チャンネルを末尾に追加する

        Args:
            name: 表示名
            url: ストリームの URL

        Returns:
            追加したチャンネル

        Raises:
            ChannelValidationError: 入力値が不正な場合
        """
        validate_channel_input(name, url)
        channel = create_channel(name, url)
        self._commit([*self._channels, channel])
        logger.debug("Added channel %s (%s)", channel.name, channel.id)
        return channel

    def edit(self, target: Channel, name: str, url: str) -> Channel:
        """チャンネルを同じ位置で新しい値に置き換える

        Args:
            target: 編集対象のチャンネル
            name: 新しい表示名
            url: 新しい URL

        Returns:
            置き換え後のチャンネル

        Raises:
            ChannelValidationError: 入力値が不正な場合
            ChannelNotFoundError: target がリストに存在しない場合
        """
        validate_channel_input(name, url)
        index = self.index_of(target)
        if index == -1:
            raise ChannelNotFoundError(target.id)
        channel = create_channel(name, url)
        updated = list(self._channels)
        updated[index] = channel
        self._commit(updated)
        logger.debug("Edited channel at %d: %s -> %s", index, target.id, channel.id)
        return channel

    def remove(self, target: Channel) -> None:
        """チャンネルを削除する

        存在しない場合は何もしない。

        Args:
            target: 削除するチャンネル
        """
        index = self.index_of(target)
        if index == -1:
            logger.debug("Channel %s already removed", target.id)
            return
        self._commit(self._channels[:index] + self._channels[index + 1 :])
        logger.debug("Removed channel %s", target.id)
