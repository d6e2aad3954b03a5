"""設定データクラス"""

from dataclasses import dataclass, field

BUILTIN_DEFAULT_CHANNELS: list[tuple[str, str]] = [
    ("MetroTurk", "https://metroturk.castpin.com/hls/metroturk/index.m3u8"),
    (
        "BBC Radio 1 (Audio)",
        "http://as-hls-ww-live.akamaized.net/pool_01505109/live/ww/bbc_radio_one/"
        "bbc_radio_one.isml/bbc_radio_one-audio%3d96000.norewind.m3u8",
    ),
]


@dataclass
class StoreConfig:
    """永続化ストア設定"""

    database_path: str = "data/livetv.db"
    key: str = "channels"


@dataclass
class PlayerConfig:
    """プレイヤー設定"""

    videojs_version: str = "8.10.0"
    output_path: str = "player.html"


@dataclass
class DefaultChannelConfig:
    """保存データが無い場合に使用するチャンネル"""

    name: str
    url: str


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """アプリケーション設定"""

    store: StoreConfig = field(default_factory=StoreConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    default_channels: list[DefaultChannelConfig] = field(
        default_factory=lambda: [
            DefaultChannelConfig(name=name, url=url)
            for name, url in BUILTIN_DEFAULT_CHANNELS
        ]
    )
    logging: LoggingConfig | None = None
