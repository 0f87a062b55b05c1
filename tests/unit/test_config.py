"""
Unit tests for pnrparse settings.
"""

import pytest
from pydantic import ValidationError

from pnrparse.config import Settings
from pnrparse.schemas import ParseOptions


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, clean_env):
        settings = Settings()
        assert settings.forgiving is False
        assert settings.strict is False
        assert settings.normalise_format == "YYYYMMDDNNNN"
        assert settings.log_level == "WARNING"

    def test_from_environment(self, clean_env):
        clean_env.setenv("PNR_FORGIVING", "true")
        clean_env.setenv("PNR_STRICT", "1")
        clean_env.setenv("PNR_NORMALISE_FORMAT", "YYMMDD-NNNN")
        clean_env.setenv("PNR_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.forgiving is True
        assert settings.strict is True
        assert settings.normalise_format == "YYMMDD-NNNN"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("PNR_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings()

    def test_parse_options(self, clean_env):
        clean_env.setenv("PNR_STRICT", "true")
        options = Settings().parse_options()
        assert options == ParseOptions(strict=True)


class TestParseOptions:
    """Tests for option validation."""

    def test_alias(self):
        options = ParseOptions(normaliseFormat="YYMMDD-NNNN")
        assert options.normalise_format == "YYMMDD-NNNN"

    def test_empty_template_rejected(self):
        with pytest.raises(ValidationError):
            ParseOptions(normalise_format="")

    def test_frozen(self):
        options = ParseOptions()
        with pytest.raises(ValidationError):
            options.strict = True
