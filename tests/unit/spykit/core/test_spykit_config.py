"""
Test cases for spykit configuration
"""
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from spykit.core.config import LogLevel, SpyKitSettings


class TestEnums:
    """Test enum classes"""

    def test_log_level_enum(self):
        """Test LogLevel enum values"""
        assert LogLevel.DEBUG == "DEBUG"
        assert LogLevel.INFO == "INFO"
        assert LogLevel.WARNING == "WARNING"
        assert LogLevel.ERROR == "ERROR"


class TestSpyKitSettings:
    """Test SpyKitSettings configuration class"""

    def test_settings_defaults(self):
        """Test default settings values"""
        with patch.dict("os.environ", {}, clear=True):
            test_settings = SpyKitSettings(_env_file=None)

            assert test_settings.LOG_LEVEL is LogLevel.WARNING
            assert test_settings.LOG_CALLS is False
            assert test_settings.VALUE_REPR_LIMIT == 120

    def test_settings_from_environment(self):
        """Test prefixed environment variables override defaults"""
        with patch.dict("os.environ", {
            "SPYKIT_LOG_LEVEL": "debug",
            "SPYKIT_LOG_CALLS": "true",
            "SPYKIT_VALUE_REPR_LIMIT": "40",
        }, clear=True):
            test_settings = SpyKitSettings(_env_file=None)

            assert test_settings.LOG_LEVEL is LogLevel.DEBUG
            assert test_settings.LOG_CALLS is True
            assert test_settings.VALUE_REPR_LIMIT == 40

    def test_unprefixed_variables_are_ignored(self):
        """Test only SPYKIT_ variables are read"""
        with patch.dict("os.environ", {"LOG_CALLS": "true"}, clear=True):
            assert SpyKitSettings(_env_file=None).LOG_CALLS is False

    @pytest.mark.parametrize("raw", ["", "none", "NULL"])
    def test_repr_limit_can_be_disabled(self, raw):
        """Test blank/none/null disables truncation"""
        with patch.dict("os.environ", {"SPYKIT_VALUE_REPR_LIMIT": raw}, clear=True):
            assert SpyKitSettings(_env_file=None).VALUE_REPR_LIMIT is None

    def test_repr_limit_lower_bound(self):
        """Test limits below 10 are rejected"""
        with pytest.raises(ValidationError):
            SpyKitSettings(_env_file=None, VALUE_REPR_LIMIT=5)

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            SpyKitSettings(_env_file=None, LOG_LEVEL="LOUD")


class TestShortRepr:

    def test_short_values_untouched(self):
        s = SpyKitSettings(_env_file=None, VALUE_REPR_LIMIT=10)
        assert s.short_repr("abc") == "'abc'"

    def test_long_values_truncated(self):
        s = SpyKitSettings(_env_file=None, VALUE_REPR_LIMIT=10)
        out = s.short_repr("x" * 50)
        assert len(out) == 10
        assert out.endswith("...")

    def test_no_limit(self):
        s = SpyKitSettings(_env_file=None, VALUE_REPR_LIMIT=None)
        assert s.short_repr("x" * 500) == repr("x" * 500)


class TestNoEnvFile:
    """Settings come from the process environment only"""

    def test_env_file_in_working_directory_is_ignored(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("SPYKIT_LOG_CALLS=true\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with patch.dict("os.environ", {}, clear=True):
            assert SpyKitSettings().LOG_CALLS is False

    def test_no_env_file_configured(self):
        assert SpyKitSettings.model_config.get("env_file") is None
