"""API routers."""

from . import exercises, profiles, sessions

__all__ = ["exercises", "profiles", "sessions"]
