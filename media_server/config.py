"""Configuration settings for LAN Media Server."""

import json
import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# =============================================================================
# Default Constants
# =============================================================================

# Config file location (override with MEDIA_SERVER_CONFIG)
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "lan-media-server" / "config.json"

# Network. The bind address is fixed so other devices on the LAN can connect.
HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Media folders, relative to the working directory
DEFAULT_VIDEO_DIR = "videos"
DEFAULT_PICTURE_DIR = "pictures"

# Bundled frontend shell
DEFAULT_STATIC_DIR = str(Path(__file__).parent / "static")

# Bytes read from disk per chunk while streaming
DEFAULT_CHUNK_SIZE = 64 * 1024

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "/tmp/lan_media_server.log"

VIDEO_EXTENSIONS = frozenset({".mp4", ".webm"})
PICTURE_EXTENSIONS = frozenset({".jpg", ".jpeg"})
ALLOWED_EXTENSIONS = VIDEO_EXTENSIONS | PICTURE_EXTENSIONS


# =============================================================================
# Media roots
# =============================================================================


class MediaKind(StrEnum):
    """Category of media served from a root directory."""

    VIDEO = "video"
    PICTURE = "picture"


@dataclass(frozen=True)
class MediaRoot:
    """A media directory plus the extensions it may serve."""

    kind: MediaKind
    directory: Path
    extensions: frozenset[str]

    def allows(self, extension: str) -> bool:
        return extension.lower() in self.extensions


# =============================================================================
# Settings (loaded from JSON config file)
# =============================================================================


class Settings(BaseModel):
    """Application settings loaded from JSON config file.

    Config file location: ~/.config/lan-media-server/config.json

    The ``PORT`` environment variable takes precedence over ``port``.
    Set ``log_file`` to null to log to the console only.
    """

    port: int = DEFAULT_PORT

    # Media folders
    video_dir: str = DEFAULT_VIDEO_DIR
    picture_dir: str = DEFAULT_PICTURE_DIR
    static_dir: str = DEFAULT_STATIC_DIR

    # Streaming
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = DEFAULT_LOG_FILE

    def media_roots(self) -> tuple[MediaRoot, ...]:
        """Get the configured media roots (videos first)."""
        return (
            MediaRoot(
                kind=MediaKind.VIDEO,
                directory=Path(self.video_dir).resolve(),
                extensions=VIDEO_EXTENSIONS,
            ),
            MediaRoot(
                kind=MediaKind.PICTURE,
                directory=Path(self.picture_dir).resolve(),
                extensions=PICTURE_EXTENSIONS,
            ),
        )


def get_config_path() -> Path:
    """Get the config file path."""
    custom_path = os.environ.get("MEDIA_SERVER_CONFIG")
    if custom_path:
        return Path(custom_path)
    return DEFAULT_CONFIG_PATH


def load_config_from_file(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from JSON file.

    Args:
        config_path: Optional path to config file. Defaults to get_config_path()

    Returns:
        Dictionary of settings (empty if file doesn't exist or is unreadable)
    """
    path = config_path or get_config_path()

    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config at {path}: expected a JSON object")
        return {}

    return data


def load_settings(config_path: Path | None = None) -> Settings:
    """Build settings from the config file and environment."""
    config_data = load_config_from_file(config_path)

    port = os.environ.get("PORT")
    if port:
        config_data["port"] = port

    settings = Settings(**config_data)
    if config_data:
        logger.info(f"Loaded settings from {config_path or get_config_path()}")
    else:
        logger.info("Using default settings")
    return settings


# Cached settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings instance (loaded from config file on first call)."""
    global _settings

    if _settings is None:
        _settings = load_settings()

    return _settings


def reload_settings() -> Settings:
    """Reload settings from config file."""
    global _settings
    _settings = None
    return get_settings()
