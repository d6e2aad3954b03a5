"""設定管理モジュール"""

from livetv.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from livetv.config.models import (
    BUILTIN_DEFAULT_CHANNELS,
    Config,
    DefaultChannelConfig,
    LoggingConfig,
    PlayerConfig,
    StoreConfig,
)

__all__ = [
    "BUILTIN_DEFAULT_CHANNELS",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "DefaultChannelConfig",
    "EnvironmentVariableError",
    "LoggingConfig",
    "PlayerConfig",
    "StoreConfig",
    "expand_env_vars",
    "load_config",
]
