"""Settings loading from the environment."""

import pytest
from pydantic import ValidationError

from ticker_dash.config.settings import DEFAULT_API_URL, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["API_KEY", "API_URL", "REQUEST_TIMEOUT", "CURRENCY_SYMBOL", "LOG_LEVEL"]:
        monkeypatch.delenv(f"TICKER_DASH_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_url == DEFAULT_API_URL
    assert settings.api_key == ""
    assert settings.request_timeout is None
    assert settings.currency_symbol == "₹"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKER_DASH_API_KEY", "sk-test")
    monkeypatch.setenv("TICKER_DASH_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("ticker_dash_log_level", "debug")
    settings = Settings(_env_file=None)
    assert settings.api_key == "sk-test"
    assert settings.request_timeout == 12.5
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TICKER_DASH_API_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("TICKER_DASH_API_KEY=from-file\nUNRELATED=1\n", encoding="utf-8")
    settings = Settings(_env_file=env_file)
    assert settings.api_key == "from-file"


def test_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, request_timeout=0)
