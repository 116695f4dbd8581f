"""Configuration loading from YAML and environment.

Every setting has a default, so the tool works without a config file.
Values of the form ``${VAR}`` in the YAML file are replaced from the
environment; section env vars (``LOGGING_LEVEL``, ``MESSAGE_HEADER``, ...)
are read by pydantic-settings.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_post.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("pr-post.yaml")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class MessageConfig(BaseSettings):
    """Message template markers and link lookup settings."""

    model_config = SettingsConfigDict(env_prefix="MESSAGE_", extra="ignore")

    header: str = Field(default="Review Request", description="Header label (rendered in bold)")
    title_marker: str = Field(default=":male-construction-worker::skin-tone-3:", description="Emoji before title")
    pr_marker: str = Field(default=":github:", description="Emoji before PR line")
    ticket_marker: str = Field(default=":linear:", description="Emoji before ticket line")
    loom_marker: str = Field(default=":loom:", description="Emoji before Loom line")
    tracker_author: str = Field(default="linear", description="Login of the bot that comments the ticket link")
    # Tracker comment without a link: skip the ticket line (False) or fail (True)
    strict_tracker_match: bool = Field(default=False, description="Fail when tracker comment has no link")


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    message: MessageConfig = Field(default_factory=MessageConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ``${VAR}`` strings with values from env (left as is if unset)."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            return env.get(value[2:-1].strip(), value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (still overridable through env). Raises
    ConfigError when the file is not valid YAML or its top level is not a
    mapping.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.is_file():
        return AppConfig()

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(raw).__name__}")
    raw = _substitute_env(raw, dict(os.environ))

    return AppConfig(
        logging=LoggingConfig(**(raw.get("logging") or {})),
        message=MessageConfig(**(raw.get("message") or {})),
    )
