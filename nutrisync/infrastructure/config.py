"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def get_ai_provider() -> str:
    """
    Get AI calorie provider name.

    Returns:
        "gemini" (default) or "openai"
    """
    return os.getenv("AI_CALORIE_PROVIDER", "gemini").strip().lower()


def get_gemini_api_key() -> Optional[str]:
    """
    Get Gemini API key.

    Falls back to EXPO_PUBLIC_GEMINI_API_KEY so a mobile .env can be reused.
    """
    return os.getenv("GEMINI_API_KEY") or os.getenv("EXPO_PUBLIC_GEMINI_API_KEY") or None


def get_openai_api_key() -> Optional[str]:
    return os.getenv("OPENAI_API_KEY") or None


def get_supabase_url() -> Optional[str]:
    return os.getenv("SUPABASE_URL") or os.getenv("EXPO_PUBLIC_SUPABASE_URL") or None


def get_supabase_anon_key() -> Optional[str]:
    return os.getenv("SUPABASE_ANON_KEY") or os.getenv("EXPO_PUBLIC_SUPABASE_ANON_KEY") or None


def get_max_attempts() -> Optional[int]:
    """
    Get dead-letter cutoff for offline queue entries.

    Returns:
        Positive int, or None when unset (retry forever)
    """
    raw = os.getenv("OFFLINE_QUEUE_MAX_ATTEMPTS")
    if raw is None or raw.strip() == "":
        return None
    value = int(raw)
    if value < 1:
        raise ValueError(f"OFFLINE_QUEUE_MAX_ATTEMPTS must be >= 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime configuration resolved from the environment."""

    ai_provider: str = "gemini"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    ai_timeout_s: float = 15.0
    ai_enforce_calorie_floor: bool = True
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    remote_timeout_s: float = 10.0
    storage_path: Path = Path(".nutrisync/storage.json")
    queue_storage_key: str = "supabase_offline_queue"
    drain_interval_s: float = 30.0
    queue_max_attempts: Optional[int] = None
    log_level: str = "INFO"

    @property
    def remote_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Loads ``env_file`` (or ``.env`` in the working directory) first;
    variables already set in the process environment win.
    """
    if env_file is not None:
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")

    return Settings(
        ai_provider=get_ai_provider(),
        gemini_api_key=get_gemini_api_key(),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        openai_api_key=get_openai_api_key(),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        ai_timeout_s=_get_float("AI_TIMEOUT_S", 15.0),
        ai_enforce_calorie_floor=_get_bool("AI_ENFORCE_CALORIE_FLOOR", True),
        supabase_url=get_supabase_url(),
        supabase_anon_key=get_supabase_anon_key(),
        remote_timeout_s=_get_float("REMOTE_TIMEOUT_S", 10.0),
        storage_path=Path(
            os.getenv("OFFLINE_QUEUE_STORAGE_PATH", ".nutrisync/storage.json")
        ),
        queue_storage_key=os.getenv("OFFLINE_QUEUE_STORAGE_KEY", "supabase_offline_queue"),
        drain_interval_s=_get_float("OFFLINE_QUEUE_DRAIN_INTERVAL_S", 30.0),
        queue_max_attempts=get_max_attempts(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
