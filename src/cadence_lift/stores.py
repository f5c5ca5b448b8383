"""Store interfaces consumed by the workout generator.

The SQLite repositories in `cadence_lift.db` implement these; tests use
in-memory versions.
"""

from typing import Protocol, runtime_checkable

from .models.exercises import Exercise
from .models.feedback import FeedbackRecord
from .models.session import WorkoutSession
from .models.user_profile import UserProfile


@runtime_checkable
class ProfileStore(Protocol):
    """Read access to user profiles."""

    async def get(self, profile_id: int) -> UserProfile | None:
        """Get a profile by ID, or None if it does not exist."""
        ...


@runtime_checkable
class CatalogStore(Protocol):
    """Read access to the exercise catalog."""

    async def list_all(self) -> list[Exercise]:
        """Return the full catalog including equipment and contraindications."""
        ...


@runtime_checkable
class FeedbackStore(Protocol):
    """Append-only feedback history."""

    async def recent(self, profile_id: int, limit: int) -> list[FeedbackRecord]:
        """Most recent feedback for a profile, newest first."""
        ...

    async def recent_by_paths(
        self, profile_id: int, path_names: list[str], limit: int
    ) -> list[FeedbackRecord]:
        """Most recent feedback on exercises of the given progression paths."""
        ...

    async def append(
        self, session_id: int, records: list[FeedbackRecord]
    ) -> WorkoutSession:
        """Attach feedback to a session and return the updated session.

        Raises:
            SessionNotFound: If the session does not exist
        """
        ...


@runtime_checkable
class SessionStore(Protocol):
    """Append-only session history."""

    async def count_for(self, profile_id: int) -> int:
        """Number of sessions generated for a profile."""
        ...

    async def create(self, session: WorkoutSession) -> WorkoutSession:
        """Persist a session with its items and return the stored record."""
        ...
