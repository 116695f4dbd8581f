"""Tests for config loading (YAML + env)."""

from pathlib import Path

import pytest

from pr_post.config import AppConfig, LoggingConfig, MessageConfig, load_config
from pr_post.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("LOGGING_LEVEL", "LOGGING_FORMAT", "MESSAGE_HEADER", "MESSAGE_TRACKER_AUTHOR"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_match_message_layout() -> None:
    """Default markers reproduce the standard review request message."""
    cfg = MessageConfig()
    assert cfg.header == "Review Request"
    assert cfg.title_marker == ":male-construction-worker::skin-tone-3:"
    assert cfg.pr_marker == ":github:"
    assert cfg.ticket_marker == ":linear:"
    assert cfg.loom_marker == ":loom:"
    assert cfg.tracker_author == "linear"
    assert cfg.strict_tracker_match is False


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Nonexistent config path yields AppConfig defaults."""
    cfg = load_config(tmp_path / "absent.yaml")
    assert isinstance(cfg, AppConfig)
    assert cfg.logging.level == "WARNING"
    assert cfg.message.header == "Review Request"


def test_yaml_sections_loaded(tmp_path: Path) -> None:
    """Logging and message sections are read from YAML."""
    path = tmp_path / "pr-post.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "message:\n"
        "  header: Please review\n"
        "  strict_tracker_match: true\n"
    )
    cfg = load_config(path)
    assert cfg.logging.level == "DEBUG"
    assert cfg.message.header == "Please review"
    assert cfg.message.strict_tracker_match is True
    assert cfg.message.pr_marker == ":github:"


def test_empty_yaml_returns_defaults(tmp_path: Path) -> None:
    """Empty YAML file is treated as no settings."""
    path = tmp_path / "pr-post.yaml"
    path.write_text("")
    cfg = load_config(path)
    assert cfg.message.tracker_author == "linear"


def test_env_placeholder_substituted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """${VAR} values are replaced from the environment."""
    monkeypatch.setenv("TRACKER_LOGIN", "jira-bot")
    path = tmp_path / "pr-post.yaml"
    path.write_text("message:\n  tracker_author: ${TRACKER_LOGIN}\n")
    assert load_config(path).message.tracker_author == "jira-bot"


def test_unset_env_placeholder_kept(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset ${VAR} is left as the literal string."""
    monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
    path = tmp_path / "pr-post.yaml"
    path.write_text("message:\n  header: ${NOT_SET_ANYWHERE}\n")
    assert load_config(path).message.header == "${NOT_SET_ANYWHERE}"


def test_section_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """LOGGING_* and MESSAGE_* env vars override defaults."""
    monkeypatch.setenv("LOGGING_LEVEL", "ERROR")
    monkeypatch.setenv("MESSAGE_HEADER", "Look at this")
    assert LoggingConfig().level == "ERROR"
    assert MessageConfig().header == "Look at this"


@pytest.mark.parametrize("content", ["- a\n- b\n", "just a string\n", "42\n"])
def test_non_mapping_yaml_raises_config_error(tmp_path: Path, content: str) -> None:
    """YAML whose top level is not a mapping raises ConfigError."""
    path = tmp_path / "pr-post.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match="top level must be a mapping"):
        load_config(path)


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    """Unparseable YAML raises ConfigError chained to the YAML error."""
    path = tmp_path / "pr-post.yaml"
    path.write_text("message: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(path)
