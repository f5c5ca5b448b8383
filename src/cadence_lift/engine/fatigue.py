"""Readiness estimation from recent feedback.

The signal is driven purely by reported effort, never by calendar time.
"""

from dataclasses import dataclass

from ..models.feedback import Difficulty, FeedbackRecord

# Number of most recent feedback records considered
FEEDBACK_WINDOW = 18

# Assumed average RPE when no feedback exists yet
DEFAULT_AVG_RPE = 7.0

# RPE below which effort contributes nothing to fatigue
FATIGUE_RPE_BASELINE = 6.5

DELOAD_FATIGUE_THRESHOLD = 2.4
DELOAD_HARD_STREAK = 3


@dataclass(frozen=True)
class FeedbackSummary:
    """Aggregates over the recent feedback window."""

    avg_rpe: float = DEFAULT_AVG_RPE
    hard_ratio: float = 0.0
    hard_streak: int = 0
    last_difficulty: Difficulty | None = None


@dataclass(frozen=True)
class Readiness:
    """Fatigue score and whether it calls for a deload."""

    summary: FeedbackSummary
    fatigue_score: float
    deload: bool


def summarize_feedback(records: list[FeedbackRecord]) -> FeedbackSummary:
    """Summarize feedback records ordered most-recent-first.

    Only the first FEEDBACK_WINDOW records are considered.
    """
    window = records[:FEEDBACK_WINDOW]
    if not window:
        return FeedbackSummary()

    avg_rpe = sum(record.avg_rpe for record in window) / len(window)
    hard_count = sum(1 for record in window if record.is_hard)

    hard_streak = 0
    for record in window:
        if not record.is_hard:
            break
        hard_streak += 1

    return FeedbackSummary(
        avg_rpe=avg_rpe,
        hard_ratio=hard_count / len(window),
        hard_streak=hard_streak,
        last_difficulty=window[0].difficulty,
    )


def calc_fatigue_score(avg_rpe: float, hard_ratio: float) -> float:
    """Fatigue score rounded to two decimals."""
    base = max(0.0, avg_rpe - FATIGUE_RPE_BASELINE)
    return round(base + hard_ratio * 2, 2)


def should_deload(fatigue_score: float, hard_streak: int) -> bool:
    """Whether readiness alone calls for a deload session."""
    return fatigue_score >= DELOAD_FATIGUE_THRESHOLD or hard_streak >= DELOAD_HARD_STREAK


def assess_readiness(records: list[FeedbackRecord]) -> Readiness:
    """Summarize feedback and derive the fatigue score and deload trigger."""
    summary = summarize_feedback(records)
    score = calc_fatigue_score(summary.avg_rpe, summary.hard_ratio)
    return Readiness(
        summary=summary,
        fatigue_score=score,
        deload=should_deload(score, summary.hard_streak),
    )
