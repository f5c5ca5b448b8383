"""Post-workout feedback recording."""

import logging

from ..models.feedback import FeedbackRecord, validate_feedback
from ..models.session import WorkoutSession
from ..stores import FeedbackStore

logger = logging.getLogger(__name__)


async def record_feedback(
    store: FeedbackStore, session_id: int, records: list[FeedbackRecord]
) -> WorkoutSession:
    """Validate feedback and attach it to a session.

    Every record is validated before the store is touched, so an invalid
    batch leaves no trace.

    Raises:
        InvalidFeedback: If any record is out of range
        SessionNotFound: If the session does not exist
    """
    validate_feedback(records)
    for record in records:
        record.session_id = session_id

    session = await store.append(session_id, records)
    logger.info("Recorded %d feedback record(s) for session %s", len(records), session_id)
    return session
