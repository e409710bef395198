"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a safe default, so the kernel works unconfigured.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from ddd_kernel.core.config import settings

    # Access config
    limit = settings.projection_max_depth

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ddd_kernel.core.constants import (
    PROJECTION_MAX_DEPTH_CEILING,
    PROJECTION_MAX_DEPTH_DEFAULT,
)
from ddd_kernel.core.enums import Environment, IdentifierVersion


class Settings(BaseSettings):
    """
    Kernel settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Kernel configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Render logs as JSON. None = JSON only in testing/ci",
    )

    # Identity
    identifier_version: IdentifierVersion = Field(
        default=IdentifierVersion.UUID7,
        description="UUID version for generated identifiers (uuid7, uuid4)",
    )

    # Projection engine
    projection_max_depth: int = Field(
        default=PROJECTION_MAX_DEPTH_DEFAULT,
        description="Maximum nesting depth accepted by the projection engine",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level: {v}")
        return normalized

    @field_validator("projection_max_depth")
    @classmethod
    def validate_projection_max_depth(cls, v: int) -> int:
        """
        Validate projection depth stays within the interpreter's recursion budget.

        Args:
            v: Maximum depth.

        Returns:
            int: Validated depth.

        Raises:
            ValueError: If depth is not between 1 and the ceiling.
        """
        if not 1 <= v <= PROJECTION_MAX_DEPTH_CEILING:
            raise ValueError(
                f"projection_max_depth must be between 1 and {PROJECTION_MAX_DEPTH_CEILING}"
            )
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Resolve whether logs should be rendered as JSON.

        Returns:
            bool: Explicit log_json if set, else True for testing/ci.
        """
        if self.log_json is not None:
            return self.log_json
        return self.is_testing or self.is_ci


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Call ``get_settings.cache_clear()`` to reload (tests).

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
