"""Error types raised by workout generation and feedback recording."""


class CadenceLiftError(Exception):
    """Base class for all cadence-lift errors."""


class ProfileNotFound(CadenceLiftError):
    """No profile exists for the requested id."""

    def __init__(self, profile_id: int):
        self.profile_id = profile_id
        super().__init__(f"Profile ID {profile_id} not found")


class NoEligibleExercises(CadenceLiftError):
    """The catalog has no exercise usable by the profile.

    Recoverable by the caller adjusting equipment, limitations or exclusions.
    """

    def __init__(self, profile_id: int | None = None):
        self.profile_id = profile_id
        super().__init__(
            "No eligible exercises found. Adjust equipment, limitations or exclusions."
        )


class InvalidFeedback(CadenceLiftError):
    """A feedback record failed validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid feedback ({field}): {message}")


class SessionNotFound(CadenceLiftError):
    """Feedback referenced a session that does not exist."""

    def __init__(self, session_id: int):
        self.session_id = session_id
        super().__init__(f"Session ID {session_id} not found")
