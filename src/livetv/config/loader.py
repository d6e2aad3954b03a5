"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from livetv.config.models import (
    Config,
    DefaultChannelConfig,
    LoggingConfig,
    PlayerConfig,
    StoreConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """任意セクションを取得する（未指定なら空dict）"""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigValidationError(f"Section '{name}' must be a mapping")
    return section


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    すべてのセクションは省略可能で、省略時はデフォルト値を使用する。

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 値の形式が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    if not isinstance(raw_data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # StoreConfig
    store_data = _section(data, "store")
    store_defaults = StoreConfig()
    store = StoreConfig(
        database_path=store_data.get("database_path", store_defaults.database_path),
        key=store_data.get("key", store_defaults.key),
    )

    # PlayerConfig
    player_data = _section(data, "player")
    player_defaults = PlayerConfig()
    player = PlayerConfig(
        videojs_version=str(
            player_data.get("videojs_version", player_defaults.videojs_version)
        ),
        output_path=player_data.get("output_path", player_defaults.output_path),
    )

    # default_channels (未指定なら組み込みのチャンネル)
    config = Config(store=store, player=player)
    channels_data = data.get("default_channels")
    if channels_data is not None:
        if not isinstance(channels_data, list):
            raise ConfigValidationError("'default_channels' must be a list")
        default_channels: list[DefaultChannelConfig] = []
        for i, item in enumerate(channels_data):
            parent = f"default_channels[{i}]"
            if not isinstance(item, dict):
                raise ConfigValidationError(f"'{parent}' must be a mapping")
            default_channels.append(
                DefaultChannelConfig(
                    name=_validate_required_field(item, "name", parent),
                    url=_validate_required_field(item, "url", parent),
                )
            )
        config.default_channels = default_channels

    # LoggingConfig (optional)
    logging_data = data.get("logging")
    if logging_data:
        config.logging = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get(
                "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            loggers=logging_data.get("loggers"),
        )

    return config
