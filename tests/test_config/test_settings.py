"""Tests for environment settings."""

import pytest

from gsend.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove gsend variables from the environment."""
    for key in (
        "GSEND_CONFIG",
        "GSEND_LOG_LEVEL",
        "GSEND_LOG_COLORS",
        "GSEND_KNOWN_HOSTS",
        "GSEND_STRICT_HOST_KEY_CHECKING",
        "SSH_AUTH_SOCK",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    """Unset environment gives defaults."""
    settings = Settings.from_env()

    assert settings.config_file is None
    assert settings.log_level == "INFO"
    assert settings.log_colors is True
    assert settings.known_hosts is None
    assert settings.strict_host_key_checking is True
    assert settings.agent_path is None


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every variable is picked up."""
    monkeypatch.setenv("GSEND_CONFIG", "/tmp/g.yaml")
    monkeypatch.setenv("GSEND_LOG_LEVEL", "debug")
    monkeypatch.setenv("GSEND_LOG_COLORS", "false")
    monkeypatch.setenv("GSEND_KNOWN_HOSTS", "none")
    monkeypatch.setenv("GSEND_STRICT_HOST_KEY_CHECKING", "0")
    monkeypatch.setenv("SSH_AUTH_SOCK", "/tmp/agent.sock")

    settings = Settings.from_env()

    assert settings.config_file == "/tmp/g.yaml"
    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False
    assert settings.known_hosts == "none"
    assert settings.strict_host_key_checking is False
    assert settings.agent_path == "/tmp/agent.sock"


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown log level uses INFO."""
    monkeypatch.setenv("GSEND_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "INFO"


def test_empty_agent_sock_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Empty SSH_AUTH_SOCK means no agent."""
    monkeypatch.setenv("SSH_AUTH_SOCK", "")
    assert Settings.from_env().agent_path is None
