import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
DEFAULT_LOG_LEVEL = "WARNING"
# Exit diagnostics are logged at ERROR, so the console may never be quieter
QUIETEST_LOG_LEVEL = "ERROR"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[Path] = None
    ignored_log_level: Optional[str] = None


def load_env() -> None:
    """Load .env from the current directory if present. Existing variables win."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def load_settings() -> Settings:
    """
    Read diagnostics settings from the environment.

    CHARSIM_LOG_LEVEL: console level; CRITICAL is lowered to ERROR, and an
        unknown value falls back to WARNING and is kept, as typed, in
        ``ignored_log_level``
    CHARSIM_LOG_DIR: directory for a dated log file; unset means no file
    """
    raw_level = os.getenv("CHARSIM_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = raw_level.strip().upper()
    ignored = None
    if level == "CRITICAL":
        level = QUIETEST_LOG_LEVEL
    elif level not in LOG_LEVELS:
        ignored = raw_level
        level = DEFAULT_LOG_LEVEL

    log_dir = os.getenv("CHARSIM_LOG_DIR", "").strip()
    return Settings(
        log_level=level,
        log_dir=Path(log_dir) if log_dir else None,
        ignored_log_level=ignored,
    )
