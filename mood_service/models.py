"""
Shared data models for the Mood Service.

This module defines the core domain models used across multiple layers
of the application (business logic, CLI, API).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Set on 404 responses for a user with no recorded mood, to tell them apart
# from a request that matched no route at all
MOOD_NOT_SET_HEADER = "X-Mood-Not-Set"


class MoodPolicy(str, Enum):
    """How a lookup for a user with no recorded mood is answered."""

    DEFAULT = "default"
    STRICT = "strict"


class MoodRecord(BaseModel):
    """The mood currently recorded for a user."""

    model_config = ConfigDict(frozen=True)

    user: str = Field(..., min_length=1, description="The user the mood belongs to")
    mood: str = Field(..., description="The current mood value")
