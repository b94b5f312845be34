"""
Mood Service - A per-user mood store exposed over HTTP.

This package provides a small web service that records the current mood of
each user and serves it back, with a configurable policy for users whose
mood has never been set.
"""

__version__ = "0.1.0"
