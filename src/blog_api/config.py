"""
Configuration constants for the Blog API client.

This module centralizes all configurable parameters so the client
can be pointed at a different server or tuned without code changes.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from e


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = field(
        default_factory=lambda: os.getenv(
            "BLOG_API_BASE_URL", "https://jsonplaceholder.typicode.com"
        )
    )
    timeout_seconds: float = field(
        default_factory=lambda: _env_float("BLOG_API_TIMEOUT", 10.0)
    )
    default_headers: Dict[str, str] = field(default_factory=lambda: {
        "Accept": "application/json",
        "Content-Type": "application/json; charset=UTF-8",
    })


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "blog_api.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
