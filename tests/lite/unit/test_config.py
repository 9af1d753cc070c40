"""Tests for ical_lite.config settings loading."""

import pytest
from pydantic import ValidationError

from ical_lite.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_CONTENT_BYTES,
    ParserSettings,
    get_settings,
    load_settings,
    reset_settings,
)

pytestmark = pytest.mark.unit


class TestParserSettings:
    """Tests for ParserSettings model."""

    def test_defaults(self):
        settings = ParserSettings()

        assert settings.chunk_size == DEFAULT_CHUNK_SIZE == 2000
        assert settings.local_timezone is None
        assert settings.max_content_bytes == DEFAULT_MAX_CONTENT_BYTES
        assert settings.strip_calendar_scalars is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ICAL_LITE_CHUNK_SIZE", "50")
        monkeypatch.setenv("ICAL_LITE_LOCAL_TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("ICAL_LITE_STRIP_CALENDAR_SCALARS", "false")

        settings = ParserSettings()

        assert settings.chunk_size == 50
        assert settings.local_timezone == "Europe/Berlin"
        assert settings.strip_calendar_scalars is False

    @pytest.mark.parametrize("field", [{"chunk_size": 0}, {"max_content_bytes": -1}])
    def test_invalid_values_rejected(self, field):
        with pytest.raises(ValidationError):
            ParserSettings(**field)


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_load_settings_without_path_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ICAL_LITE_CHUNK_SIZE", "7")

        assert load_settings().chunk_size == 7

    def test_load_settings_from_yaml(self, tmp_path):
        config_file = tmp_path / "ical_lite.yaml"
        config_file.write_text("chunk_size: 10\nlocal_timezone: Europe/Paris\n")

        settings = load_settings(config_file)

        assert settings.chunk_size == 10
        assert settings.local_timezone == "Europe/Paris"

    def test_environment_takes_precedence_over_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "ical_lite.yaml"
        config_file.write_text("chunk_size: 10\n")
        monkeypatch.setenv("ICAL_LITE_CHUNK_SIZE", "25")

        assert load_settings(str(config_file)).chunk_size == 25

    def test_empty_yaml_gives_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_settings(config_file) == ParserSettings()

    def test_non_mapping_yaml_rejected(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- chunk_size\n")

        with pytest.raises(ValueError):
            load_settings(config_file)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")


class TestGlobalSettings:
    """Tests for the cached global settings instance."""

    def test_get_settings_is_cached_until_reset(self):
        first = get_settings()

        assert get_settings() is first

        reset_settings()

        assert get_settings() is not first
