"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

ENV_PREFIX = "MYTASKS"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


def _first_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(*names: str, default: int) -> int:
    raw = _first_env(*names)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[Path]

    host: str
    port: int

    redis_host: str
    redis_port: int
    redis_db: int
    tasks_key: str

    @staticmethod
    def from_env() -> "Settings":
        log_file = _first_env(_k("LOG_FILE"))
        return Settings(
            log_level=(_first_env(_k("LOG_LEVEL"), default="INFO") or "INFO").upper(),
            log_file=Path(log_file).expanduser() if log_file else None,
            host=_first_env(_k("HOST"), default="127.0.0.1") or "127.0.0.1",
            port=_env_int(_k("PORT"), default=8000),
            # plain REDIS_* names are what the docker setup exports
            redis_host=_first_env(_k("REDIS_HOST"), "REDIS_HOST", default="localhost") or "localhost",
            redis_port=_env_int(_k("REDIS_PORT"), "REDIS_PORT", default=6379),
            redis_db=_env_int(_k("REDIS_DB"), default=0),
            tasks_key=_first_env(_k("TASKS_KEY"), default="my-tasks") or "my-tasks",
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv_if_available()
    return Settings.from_env()
