"""CLI commands for cadence-lift."""

from .feedback import feedback
from .generate import generate
from .init import init
from .profile import profile
from .schedule import schedule
from .serve import serve
from .sessions import sessions

__all__ = [
    "feedback",
    "generate",
    "init",
    "profile",
    "schedule",
    "serve",
    "sessions",
]
