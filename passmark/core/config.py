"""Runtime configuration management for Passmark."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


class GlobalConfig(BaseModel):
    """Global runtime configuration."""

    # Processing config file used by the CLI when --config is not given
    config_path: Optional[Path] = Field(
        default_factory=lambda: _optional_path("PASSMARK_CONFIG_PATH")
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("PASSMARK_LOG_LEVEL", "WARNING")
    )
    log_format: str = Field(
        default_factory=lambda: os.getenv(
            "PASSMARK_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    # Performance
    max_concurrent_rows: int = Field(
        default_factory=lambda: int(os.getenv("PASSMARK_MAX_CONCURRENT_ROWS", "50")),
        gt=0,
    )


# Global configuration instance
config = GlobalConfig()


def get_config() -> GlobalConfig:
    """Get global configuration instance."""
    return config


def reload_config() -> GlobalConfig:
    """Reload configuration from environment."""
    load_dotenv(override=True)
    global config
    config = GlobalConfig()
    return config


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    current = get_config()
    logging.basicConfig(
        level=(level or current.log_level).upper(),
        format=current.log_format,
        force=True,
    )
