"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all: it listens on port
80, keeps at most 20 quotations and is seeded with the built-in
examples.  Malformed values raise ``ConfigurationError`` naming the
offending variable.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigurationError


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Quotaday"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  When unset, logs only go to the console.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 80))

    # Maximum number of quotations the in-memory store accepts.
    max_quotes: int = field(default_factory=lambda: _env_int("MAX_QUOTES", 20))
    # Whether a new application starts with the built-in example quotations.
    seed_examples: bool = field(default_factory=lambda: _env_flag("SEED_EXAMPLES", "true"))

    # Commit the running build was made from; shown in the version string.
    git_commit: str = field(default_factory=lambda: os.getenv("GIT_COMMIT", ""))

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"PORT must be between 1 and 65535, got {self.port}")
        if self.max_quotes < 1:
            raise ConfigurationError(f"MAX_QUOTES must be at least 1, got {self.max_quotes}")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
