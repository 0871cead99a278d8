"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from nutrisync.infrastructure.config import Settings, load_settings

ENV_VARS = [
    "AI_CALORIE_PROVIDER",
    "GEMINI_API_KEY",
    "EXPO_PUBLIC_GEMINI_API_KEY",
    "GEMINI_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "AI_TIMEOUT_S",
    "AI_ENFORCE_CALORIE_FLOOR",
    "SUPABASE_URL",
    "EXPO_PUBLIC_SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "EXPO_PUBLIC_SUPABASE_ANON_KEY",
    "REMOTE_TIMEOUT_S",
    "OFFLINE_QUEUE_STORAGE_PATH",
    "OFFLINE_QUEUE_STORAGE_KEY",
    "OFFLINE_QUEUE_DRAIN_INTERVAL_S",
    "OFFLINE_QUEUE_MAX_ATTEMPTS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and .env file."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded by dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings == Settings()
        assert settings.ai_provider == "gemini"
        assert settings.ai_timeout_s == 15.0
        assert settings.drain_interval_s == 30.0
        assert settings.queue_storage_key == "supabase_offline_queue"
        assert settings.queue_max_attempts is None
        assert settings.remote_configured is False

    def test_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("AI_CALORIE_PROVIDER", "OpenAI")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("AI_TIMEOUT_S", "20")
        monkeypatch.setenv("AI_ENFORCE_CALORIE_FLOOR", "false")
        monkeypatch.setenv("OFFLINE_QUEUE_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("OFFLINE_QUEUE_STORAGE_PATH", "/tmp/q.json")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.ai_provider == "openai"
        assert settings.openai_api_key == "sk-test"
        assert settings.ai_timeout_s == 20.0
        assert settings.ai_enforce_calorie_floor is False
        assert settings.queue_max_attempts == 5
        assert settings.storage_path == Path("/tmp/q.json")
        assert settings.log_level == "DEBUG"

    def test_expo_public_fallbacks(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPO_PUBLIC_GEMINI_API_KEY", "AIza-mobile")
        monkeypatch.setenv("EXPO_PUBLIC_SUPABASE_URL", "https://x.supabase.co")
        monkeypatch.setenv("EXPO_PUBLIC_SUPABASE_ANON_KEY", "anon")

        settings = load_settings()

        assert settings.gemini_api_key == "AIza-mobile"
        assert settings.remote_configured is True

    def test_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("GEMINI_API_KEY=from-file\nOFFLINE_QUEUE_DRAIN_INTERVAL_S=5\n")

        settings = load_settings(env_file)

        assert settings.gemini_api_key == "from-file"
        assert settings.drain_interval_s == 5.0

    def test_invalid_number(self, monkeypatch) -> None:
        monkeypatch.setenv("AI_TIMEOUT_S", "soon")

        with pytest.raises(ValueError, match="AI_TIMEOUT_S"):
            load_settings()

    def test_invalid_max_attempts(self, monkeypatch) -> None:
        monkeypatch.setenv("OFFLINE_QUEUE_MAX_ATTEMPTS", "0")

        with pytest.raises(ValueError):
            load_settings()
