"""
Mood storage implementation for the Mood Service.

This module provides an in-memory mood store keyed by user name. Lookups for
users without a recorded mood follow the store's policy: either a configured
default is returned, or MoodNotSet is raised. The design allows for easy
replacement with persistent storage backends like Redis in the future.
"""

import logging
import threading

from .models import MoodPolicy

logger = logging.getLogger(__name__)


class MoodNotSet(Exception):
    """Raised by a strict store when a user has no recorded mood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MoodStore:
    """
    In-memory mood storage, one entry per user.

    Each read and write is atomic for its key. Request handlers may call into
    the store from any thread, so all access goes through a single lock.
    """

    def __init__(
        self,
        policy: MoodPolicy = MoodPolicy.DEFAULT,
        default_mood: str = "no mood",
        not_found_message: str = "mood not set for user",
    ) -> None:
        self._policy = MoodPolicy(policy)
        self._default_mood = default_mood
        self._not_found_message = not_found_message
        self._moods: dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def policy(self) -> MoodPolicy:
        return self._policy

    def get_mood(self, user: str) -> str:
        """
        Get the mood recorded for a user.

        Args:
            user: The user to look up

        Returns:
            The recorded mood, or the default mood under the default policy

        Raises:
            MoodNotSet: If the user has no mood and the policy is strict
        """
        with self._lock:
            mood = self._moods.get(user)

        if mood is not None:
            return mood
        if self._policy is MoodPolicy.STRICT:
            raise MoodNotSet(self._not_found_message)
        return self._default_mood

    def set_mood(self, user: str, mood: str) -> str | None:
        """
        Record a mood for a user, replacing any previous value.

        Args:
            user: The user whose mood is being set
            mood: The new mood value, stored as given

        Returns:
            The mood previously recorded for the user, if any
        """
        with self._lock:
            previous = self._moods.get(user)
            self._moods[user] = mood

        logger.debug("Mood for %s set to %r (was %r)", user, mood, previous)
        return previous

    def __contains__(self, user: object) -> bool:
        with self._lock:
            return user in self._moods

    def __len__(self) -> int:
        with self._lock:
            return len(self._moods)
