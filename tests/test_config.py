"""
Tests for configuration module.
"""

import pytest
from pydantic import ValidationError

from projdef.core.config import Settings
from projdef.core.crs.constants import EPSLN


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = Settings()
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.default_ellipsoid == "WGS84"
        assert settings.sphere_tolerance == EPSLN
        assert settings.strict_projections is False

    def test_environment_variables(self, monkeypatch) -> None:
        """Test that PROJDEF_ environment variables are read."""
        monkeypatch.setenv("PROJDEF_STRICT_PROJECTIONS", "true")
        monkeypatch.setenv("PROJDEF_DEFAULT_ELLIPSOID", "GRS80")
        monkeypatch.setenv("PROJDEF_LOG_LEVEL", "DEBUG")

        settings = Settings()
        assert settings.strict_projections is True
        assert settings.default_ellipsoid == "GRS80"
        assert settings.log_level == "DEBUG"

    def test_custom_values(self) -> None:
        """Test setting custom configuration values."""
        settings = Settings(environment="production", sphere_tolerance=1e-6)
        assert settings.environment == "production"
        assert settings.sphere_tolerance == 1e-6

    def test_invalid_environment(self) -> None:
        """Test that unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="moon")

    def test_tolerance_must_be_positive(self) -> None:
        """Test that the sphere tolerance must be positive."""
        with pytest.raises(ValidationError):
            Settings(sphere_tolerance=0)
