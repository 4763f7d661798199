"""
Tests for library settings.
"""

import pytest
from pydantic import ValidationError as SettingsValidationError

from aiconnectify.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "HTTP_TIMEOUT_SECONDS", "OPENAI_API_KEY", "MISTRAL_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.HTTP_TIMEOUT_SECONDS == 10.0
        assert settings.OPENAI_API_KEY is None
        assert settings.MISTRAL_BASE_URL == "https://api.mistral.ai/v1"
        assert settings.ANTHROPIC_VERSION == "2023-06-01"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-env-0123456789abcdef")
        clean_env.setenv("HTTP_TIMEOUT_SECONDS", "30")

        settings = Settings()

        assert settings.OPENAI_API_KEY == "sk-env-0123456789abcdef"
        assert settings.HTTP_TIMEOUT_SECONDS == 30.0

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("MISTRAL_BASE_URL=https://mistral.internal/v1/\n")

        assert Settings().MISTRAL_BASE_URL == "https://mistral.internal/v1"

    def test_api_keys_hidden_from_repr(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-env-0123456789abcdef")

        assert "sk-env-0123456789abcdef" not in repr(Settings())

    def test_log_level_normalized(self, clean_env):
        clean_env.setenv("LOG_LEVEL", " debug ")

        assert Settings().LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(SettingsValidationError):
            Settings()

    def test_timeout_must_be_positive(self, clean_env):
        clean_env.setenv("HTTP_TIMEOUT_SECONDS", "0")

        with pytest.raises(SettingsValidationError):
            Settings()
