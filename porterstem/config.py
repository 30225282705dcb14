"""
Runtime configuration from environment variables.

Load order:
1. .env.local in the project root (local development, highest priority)
2. .env in the project root
3. Plain process environment

Settings (env vars):
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base log file path; empty disables file logging
        (default: logs/porterstem.log)
    PORT: HTTP port for the service (default: 8080)
    MAX_BATCH_SIZE: Max words per /v1/stem request (default: 1000)
    MAX_WORD_LENGTH: Max characters per word accepted by the service (default: 256)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_LOG_FILE = "logs/porterstem.log"
DEFAULT_PORT = 8080
DEFAULT_MAX_BATCH_SIZE = 1000
DEFAULT_MAX_WORD_LENGTH = 256


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load environment variables from .env.local or .env.

    Args:
        project_root: Directory containing the env files

    Returns:
        Path of the file that was loaded, or None if neither exists
    """
    for env_path in (project_root / ".env.local", project_root / ".env"):
        if env_path.exists():
            load_dotenv(env_path, override=True)
            return env_path
    return None


def get_int(name: str, default: int) -> int:
    """Read a positive integer setting."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_log_level() -> int:
    """Console log level from LOG_LEVEL; unknown names fall back to INFO."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    return level if isinstance(level, int) else logging.INFO


def get_log_file() -> Optional[str]:
    """Base log file path from LOG_FILE ("" disables file logging)."""
    log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
    return log_file or None


def get_port() -> int:
    return get_int("PORT", DEFAULT_PORT)


def get_max_batch_size() -> int:
    return get_int("MAX_BATCH_SIZE", DEFAULT_MAX_BATCH_SIZE)


def get_max_word_length() -> int:
    return get_int("MAX_WORD_LENGTH", DEFAULT_MAX_WORD_LENGTH)
