"""Domain exceptions."""

from enum import Enum


class ValidationErrorKind(Enum):
    """チャンネル入力エラーの種類"""

    EMPTY_FIELD = "empty_field"
    INVALID_URL = "invalid_url"
    NOT_FOUND = "not_found"


class ChannelValidationError(Exception):
    """チャンネルの入力値が不正な場合に発生する例外

    例外が発生した場合、レジストリは変更されない。
    """

    def __init__(self, kind: ValidationErrorKind, message: str = "") -> None:
        """初期化

        Args:
            kind: エラーの種類
            message: エラーメッセージ（オプション）
        """
        self.kind = kind
        super().__init__(message or f"Invalid channel input: {kind.value}")


class ChannelNotFoundError(ChannelValidationError):
    """対象のチャンネルが現在のリストに存在しない場合に発生する例外"""

    def __init__(self, channel_id: str) -> None:
        """初期化

        Args:
            channel_id: 見つからなかったチャンネルの ID
        """
        self.channel_id = channel_id
        super().__init__(
            ValidationErrorKind.NOT_FOUND, f"Channel {channel_id} is not in the list"
        )
