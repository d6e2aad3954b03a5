"""Key-value store protocol."""

from typing import Protocol


class KeyValueStore(Protocol):
    """文字列キーで値を保存する非同期ストアの抽象インターフェース

    ストアの失敗は実装側で StoreUnavailableError として送出する。
    """

    async def get(self, key: str) -> str | None:
        """キーに対応する値を取得する

        Args:
            key: キー

        Returns:
            保存されている値（存在しない場合は None）
        """
        ...

    async def set(self, key: str, value: str) -> None:
        """キーに値を保存する（既存の値は上書き）

        Args:
            key: キー
            value: 保存する値
        """
        ...

    async def delete(self, key: str) -> None:
        """キーを削除する（存在しない場合は何もしない）

        Args:
            key: キー
        """
        ...
