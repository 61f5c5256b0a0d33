"""
Tests for settings parsing.
"""

import pytest
from pydantic import ValidationError

from src.config import Settings


class TestSettings:
    """Test suite for Settings defaults and validators."""

    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.server_port == 3000
        assert config.cors_origins == []
        assert config.is_development

    def test_cors_origins_from_comma_separated_string(self):
        config = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert config.cors_origins == ["http://a.test", "http://b.test"]

    def test_wildcard_cors_refused_in_production(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, app_env="production", cors_origins="*")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")
