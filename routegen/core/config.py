"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. All variables use the ROUTEGEN_ prefix.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Defaults for every field (the builder is usable without any environment)

Usage:
    from routegen.core.config import settings

    if settings.contracts_enabled:
        # Fail fast on precondition violations
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from routegen.core.enums import Environment
from routegen.domain.enums import GenerationKind, UrlKeyDelimiter


class Settings(BaseSettings):
    """
    Route template builder settings (flat structure).

    Configuration precedence:
        1. Environment variables (ROUTEGEN_*)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Diagnostics
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, contract verification)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Render logs as JSON. Defaults to True in testing/ci environments.",
    )
    verify_contracts: bool | None = Field(
        default=None,
        description="Raise on builder precondition violations. Defaults to the debug flag.",
    )

    # Defaults applied when an operation description omits them
    default_url_key_delimiter: UrlKeyDelimiter = Field(
        default=UrlKeyDelimiter.PARENTHESES,
        description="Key delimiter style (parentheses or slash)",
    )
    default_generation_kind: GenerationKind = Field(
        default=GenerationKind.CLIENT,
        description="Template audience (server or client)",
    )
    use_qualified_operation_names: bool = Field(
        default=False,
        description="Render bound operations by namespace-qualified name",
    )
    allow_unqualified_enum_literal: bool = Field(
        default=False,
        description="Omit the enum type name in front of quoted enum tokens",
    )

    model_config = SettingsConfigDict(
        env_prefix="ROUTEGEN_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def contracts_enabled(self) -> bool:
        """
        Check if builder preconditions should raise.

        Returns:
            bool: verify_contracts when set explicitly, otherwise debug.
        """
        if self.verify_contracts is None:
            return self.debug
        return self.verify_contracts

    @property
    def use_json_logs(self) -> bool:
        """
        Check if logs should be rendered as JSON.

        Returns:
            bool: log_json when set explicitly, otherwise True for testing/ci.
        """
        if self.log_json is None:
            return self.environment in {Environment.TESTING, Environment.CI}
        return self.log_json

    @property
    def log_level_number(self) -> int:
        """
        Numeric logging level for structlog filtering.

        Returns:
            int: Standard library logging level number.
        """
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
