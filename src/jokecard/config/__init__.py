"""Configuration management for jokecard."""

from jokecard.config.paths import config_dir, config_file
from jokecard.config.settings import (
    Config,
    DisplayConfig,
    FetchConfig,
    PayloadConfig,
    get_config,
    load_config,
    reload_config,
    save_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # settings
    "Config",
    "DisplayConfig",
    "FetchConfig",
    "PayloadConfig",
    "get_config",
    "load_config",
    "reload_config",
    "save_config",
]
