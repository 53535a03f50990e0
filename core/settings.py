"""Application settings and environment configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os
from functools import lru_cache
from typing import Optional


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime configuration resolved from environment variables."""

    sweep_interval_seconds: float = 30.0
    due_window_minutes: int = 30
    flag_store_path: Optional[str] = None
    date_scoped_keys: bool = True
    seed_demo_data: bool = True
    log_alerts: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        env_interval = os.getenv("MEDICAMATE_SWEEP_INTERVAL")
        env_window = os.getenv("MEDICAMATE_DUE_WINDOW_MINUTES")
        env_flag_path = os.getenv("MEDICAMATE_FLAG_STORE_PATH")
        env_date_keys = os.getenv("MEDICAMATE_DATE_SCOPED_KEYS")
        env_seed = os.getenv("MEDICAMATE_SEED_DEMO")
        env_log_alerts = os.getenv("MEDICAMATE_LOG_ALERTS")
        env_log_level = os.getenv("MEDICAMATE_LOG_LEVEL")
        if env_interval:
            self.sweep_interval_seconds = float(env_interval)
        if env_window:
            self.due_window_minutes = int(env_window)
        if env_flag_path:
            self.flag_store_path = env_flag_path
        if env_date_keys:
            self.date_scoped_keys = _env_flag(env_date_keys)
        if env_seed:
            self.seed_demo_data = _env_flag(env_seed)
        if env_log_alerts:
            self.log_alerts = _env_flag(env_log_alerts)
        if env_log_level:
            self.log_level = env_log_level.upper()

    @property
    def resolved_flag_store(self) -> str:
        """Choose between the JSON file store or the in-memory store."""

        if self.flag_store_path:
            return "file"
        return "memory"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
