"""Validation of user-supplied channel fields."""

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from livetv.domain.exceptions import ChannelValidationError, ValidationErrorKind

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_absolute_url(url: str) -> bool:
    """URL が絶対 URL として解釈できるかを判定する

    スキームを持ち、ホストまたは絶対パスを持つものを絶対 URL とみなす。

    Args:
        url: 判定対象の文字列

    Returns:
        絶対 URL であれば True
    """
    try:
        parsed = _url_adapter.validate_python(url)
    except PydanticValidationError:
        return False
    return bool(parsed.host) or (parsed.path or "").startswith("/")


def validate_channel_input(name: str, url: str) -> None:
    """チャンネルの入力値を検証する

    空欄のチェックを先に行い、その後 URL の構文を検証する。

    Args:
        name: 表示名
        url: ストリームの URL

    Raises:
        ChannelValidationError: 空欄または URL が不正な場合
    """
    if not name.strip() or not url.strip():
        raise ChannelValidationError(
            ValidationErrorKind.EMPTY_FIELD, "Channel name and URL must not be empty"
        )
    if not is_absolute_url(url):
        raise ChannelValidationError(
            ValidationErrorKind.INVALID_URL, f"Not an absolute URL: {url}"
        )
