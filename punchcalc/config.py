"""
Application configuration.

Server, static asset and animation timing settings.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from punchcalc.animation import DEFAULT_FRAME_INTERVAL, DEFAULT_TICK_SECONDS

PACKAGE_STATIC_DIR = Path(__file__).parent / "static"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Configuration for the punch calculator server."""

    # Server settings
    host: str = field(default_factory=lambda: os.getenv("PUNCHCALC_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PUNCHCALC_PORT", "3000")))
    static_dir: Path = field(
        default_factory=lambda: Path(os.getenv("PUNCHCALC_STATIC_DIR", str(PACKAGE_STATIC_DIR)))
    )

    # Animation timing
    tick_seconds: float = field(
        default_factory=lambda: float(os.getenv("PUNCHCALC_TICK_SECONDS", str(DEFAULT_TICK_SECONDS)))
    )
    frame_interval: float = field(
        default_factory=lambda: float(os.getenv("PUNCHCALC_FRAME_INTERVAL", str(DEFAULT_FRAME_INTERVAL)))
    )

    log_level: str = field(default_factory=lambda: os.getenv("PUNCHCALC_LOG_LEVEL", "INFO").upper())

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 0 < self.port < 65536:
            errors.append("PUNCHCALC_PORT must be between 1 and 65535")
        if self.tick_seconds <= 0:
            errors.append("PUNCHCALC_TICK_SECONDS must be positive")
        if self.frame_interval < 0:
            errors.append("PUNCHCALC_FRAME_INTERVAL must not be negative")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"PUNCHCALC_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return errors


# Singleton config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next get_config() re-read the environment.
    Useful for testing.
    """
    global _config
    _config = config
