"""
Configuration settings for projdef.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from projdef.core.crs.constants import EPSLN


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        environment: Deployment environment, controls console log format
        log_level: Default log level used by setup_logging
        default_ellipsoid: Ellipsoid used when a definition names none
        sphere_tolerance: Max |a - b| for an ellipsoid to count as a sphere
        strict_projections: Raise instead of reporting unresolved projections
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="PROJDEF_",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Derivation
    default_ellipsoid: str = "WGS84"
    sphere_tolerance: float = Field(EPSLN, gt=0)

    # Registry
    strict_projections: bool = False


# Global settings instance
settings = Settings()
