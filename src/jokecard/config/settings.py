"""Configuration structures and loading for jokecard."""

import os
import tomllib
from pathlib import Path

import msgspec
import tomli_w


# Default values
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 5
DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_PAYLOAD_ATTEMPTS = 5
DEFAULT_PAYLOAD_RETRY_DELAY_MS = 500


# Transport configuration
class FetchConfig(msgspec.Struct, omit_defaults=True):
    """HTTP and backoff settings."""

    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS


# Payload-shape retry configuration
class PayloadConfig(msgspec.Struct, omit_defaults=True):
    """Retry settings for well-formed but incomplete joke bodies."""

    max_attempts: int = DEFAULT_PAYLOAD_ATTEMPTS
    retry_delay_ms: int = DEFAULT_PAYLOAD_RETRY_DELAY_MS


# Display configuration
class DisplayConfig(msgspec.Struct, omit_defaults=True):
    """Display settings."""

    show_source: bool = True


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    enabled_sources: list[str] = []
    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    payload: PayloadConfig = msgspec.field(default_factory=PayloadConfig)
    display: DisplayConfig = msgspec.field(default_factory=DisplayConfig)

    def is_source_enabled(self, source_id: str) -> bool:
        """Check if a source is enabled.

        An empty enabled_sources list enables every source.
        """
        if not self.enabled_sources:
            return True
        return source_id in self.enabled_sources


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    JOKECARD_ENABLED_SOURCES: Comma-separated list of sources
    """
    if "JOKECARD_ENABLED_SOURCES" in os.environ:
        sources_str = os.environ["JOKECARD_ENABLED_SOURCES"]
        enabled = [s.strip() for s in sources_str.split(",") if s.strip()]
        config = msgspec.structs.replace(config, enabled_sources=enabled)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()

    _save_to_toml(msgspec.to_builtins(config), config_path)

    # Update singleton
    global _config
    _config = config
