"""Channel entity."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass(frozen=True)
class Channel:
    """チャンネルエンティティ

    同じ name / url を持つチャンネルが複数存在してもよいため、
    レジストリ内での同一性は ``id`` で判定する。
    値の比較 (``==``) は name と url のみを対象とする。

    Attributes:
        name: 表示名
        url: ストリームの URL（通常は HLS プレイリスト）
        id: 生成時に割り当てられるサロゲート ID
    """

    name: str
    url: str
    id: str = field(default_factory=lambda: uuid4().hex, compare=False)

    def same_as(self, other: "Channel") -> bool:
        """同一のチャンネルかどうか（ID で比較）"""
        return self.id == other.id

    def to_record(self) -> dict[str, str]:
        """永続化用のレコードに変換する"""
        return {"name": self.name, "url": self.url}


def create_channel(name: str, url: str) -> Channel:
    """新しい ID を持つ Channel エンティティを生成する

    Args:
        name: 表示名
        url: ストリームの URL

    Returns:
        Channel エンティティ
    """
    return Channel(name=name, url=url)
