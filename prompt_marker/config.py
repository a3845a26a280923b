"""
Configuration management for the Prompt Marker service.

Uses Pydantic Settings for type-safe configuration loading from environment variables.
The settings object is frozen and handed explicitly to the gate and the engine,
so every component reads the same values for the lifetime of the process.
"""

import secrets
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are validated at startup. Invalid values
    will raise clear validation errors.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # ==========================================================================
    # Access Gate Configuration
    # ==========================================================================
    access_code: str = Field(
        default="ROME-PROMPT-01",
        min_length=1,
        description="Shared access code that unlocks a marking session",
    )

    cookie_secret: str = Field(
        default_factory=lambda: secrets.token_hex(32),
        min_length=16,
        description="Secret used to sign session tokens (random per process if unset)",
    )

    session_minutes: int = Field(
        default=60,
        ge=1,
        le=1440,
        description="Lifetime of a session token in minutes",
    )

    cookie_name: str = Field(
        default="fethink_prompting_session",
        min_length=1,
        description="Name of the session cookie",
    )

    cookie_secure: bool = Field(
        default=True,
        description="Only send the session cookie over HTTPS",
    )

    max_code_chars: int = Field(
        default=80,
        ge=1,
        description="Submitted access codes are truncated to this many characters",
    )

    # ==========================================================================
    # Marking Configuration
    # ==========================================================================
    min_words_gate: int = Field(
        default=20,
        ge=1,
        description="Submissions with fewer words receive a gated verdict",
    )

    max_words: int = Field(
        default=300,
        ge=1,
        description="Upper end of the target length shown to learners",
    )

    max_answer_chars: int = Field(
        default=6000,
        ge=1,
        description="Submissions are truncated to this many characters before marking",
    )

    # ==========================================================================
    # Course Navigation
    # ==========================================================================
    course_back_url: str = Field(
        default="",
        validation_alias=AliasChoices("course_back_url", "back_url"),
        description="Link back to the course page",
    )

    next_lesson_url: str = Field(
        default="",
        description="Link to the next lesson",
    )

    # ==========================================================================
    # Server Configuration
    # ==========================================================================
    host: str = Field(default="0.0.0.0", description="Bind address for the API server")

    port: int = Field(default=3000, ge=1, le=65535, description="Port for the API server")

    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )

    @field_validator("access_code")
    @classmethod
    def strip_access_code(cls, v: str) -> str:
        """Submitted codes are trimmed, so the configured one is too."""
        v = v.strip()
        if not v:
            raise ValueError("access_code must not be blank")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return str(v).upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
