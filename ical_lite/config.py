"""Parser settings using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_PREFIX = "ICAL_LITE_"

DEFAULT_CHUNK_SIZE = 2000
DEFAULT_MAX_CONTENT_BYTES = 50 * 1024 * 1024  # 50MB limit


class ParserSettings(BaseSettings):
    """Settings for the iCalendar parser, overridable through ``ICAL_LITE_*`` variables."""

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Lines processed per batch in chunked mode",
    )
    local_timezone: Optional[str] = Field(
        default=None,
        description="Zone used for Outlook custom timezones (detected from the host when unset)",
    )
    max_content_bytes: int = Field(
        default=DEFAULT_MAX_CONTENT_BYTES,
        ge=0,
        description="Maximum accepted input size in bytes, 0 disables the check",
    )
    strip_calendar_scalars: bool = Field(
        default=True,
        description="Drop plain text VCALENDAR properties when the calendar closes",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
    )


def _env_overridden_fields() -> set[str]:
    """Names of settings fields that are set through the environment."""
    fields = set()
    for key in os.environ:
        if key.upper().startswith(ENV_PREFIX):
            fields.add(key[len(ENV_PREFIX):].lower())
    return fields


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        loaded = yaml.safe_load(f)
    # safe_load returns None for empty files
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(loaded).__name__}")
    return loaded


def load_settings(path: Optional[Union[str, Path]] = None) -> ParserSettings:
    """Load settings from an optional YAML file.

    Environment variables take precedence over values from the file.

    Args:
        path: YAML config file; only the environment is consulted when None

    Returns:
        Validated ParserSettings

    Raises:
        FileNotFoundError: If ``path`` does not exist
        ValueError: If the file does not hold a mapping
        pydantic.ValidationError: If a value fails validation
    """
    if path is None:
        return ParserSettings()

    config_path = Path(path)
    file_data = _load_yaml(config_path)
    overridden = _env_overridden_fields()
    data = {key: value for key, value in file_data.items() if key not in overridden}
    if len(data) != len(file_data):
        logger.debug(
            "Environment overrides config file keys: %s",
            sorted(set(file_data) - set(data)),
        )
    logger.debug("Loaded parser settings from %s", config_path)
    return ParserSettings(**data)


_settings_instance: Optional[ParserSettings] = None


def get_settings() -> ParserSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = ParserSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
