"""
Runtime configuration for the Mood Service.

Settings are read from environment variables once, at startup, and passed
explicitly to whatever needs them. Nothing in the service looks them up at
request time.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .models import MoodPolicy
from .store import MoodStore


class Settings(BaseModel):
    """Application settings."""

    policy: MoodPolicy = Field(
        MoodPolicy.DEFAULT, description="Policy for users with no recorded mood"
    )
    default_mood: str = Field(
        "no mood", description="Mood returned for unknown users (default policy)"
    )
    not_found_message: str = Field(
        "mood not set for user",
        description="Error message for unknown users (strict policy)",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        "INFO", description="Root logger level, also passed to uvicorn"
    )
    host: str = Field("0.0.0.0", description="Interface the server binds to")
    port: int = Field(8000, description="Port the server listens on")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        env = {
            "policy": os.getenv("MOOD_POLICY"),
            "default_mood": os.getenv("DEFAULT_MOOD"),
            "not_found_message": os.getenv("MOOD_NOT_FOUND_MESSAGE"),
            "log_level": os.getenv("LOG_LEVEL"),
            "host": os.getenv("MOOD_HOST"),
            "port": os.getenv("MOOD_PORT"),
        }
        return cls.model_validate({k: v for k, v in env.items() if v is not None})


def build_store(settings: Settings) -> MoodStore:
    """Create the mood store described by the given settings."""
    return MoodStore(
        policy=settings.policy,
        default_mood=settings.default_mood,
        not_found_message=settings.not_found_message,
    )
