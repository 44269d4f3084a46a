import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger("license_notice.config")

ENV_PREFIX = "LICENSE_NOTICE_"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 3


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring negative %s=%r; using %s", name, raw, default)
        return default
    return value


@dataclass(slots=True, frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    log_file: str | None = None
    log_max_bytes: int = DEFAULT_LOG_MAX_BYTES
    log_backup_count: int = DEFAULT_LOG_BACKUP_COUNT


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Read ambient settings from ``LICENSE_NOTICE_*`` environment variables."""
    level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if logging.getLevelName(level) == f"Level {level}":
        logger.warning("Unknown log level %r; using %s", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE") or None
    return Settings(
        log_level=level,
        log_json=_bool_env(f"{ENV_PREFIX}LOG_JSON"),
        log_file=log_file,
        log_max_bytes=_int_env(f"{ENV_PREFIX}LOG_MAX_BYTES", DEFAULT_LOG_MAX_BYTES),
        log_backup_count=_int_env(f"{ENV_PREFIX}LOG_BACKUP_COUNT", DEFAULT_LOG_BACKUP_COUNT),
    )
