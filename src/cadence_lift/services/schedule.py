"""Weekly training schedule layout."""

from dataclasses import dataclass
from datetime import date

# Weekday indexes with Sunday = 0
TRAINING_DAYS: dict[int, list[int]] = {
    1: [3],
    2: [1, 4],
    3: [1, 3, 5],
    4: [1, 2, 4, 5],
    5: [1, 2, 3, 5, 6],
    6: [1, 2, 3, 4, 5, 6],
    7: [0, 1, 2, 3, 4, 5, 6],
}

FOCUS_ROTATION: dict[int, list[str]] = {
    1: ["Full Body"],
    2: ["Upper Body", "Lower Body"],
    3: ["Push", "Pull", "Legs"],
    4: ["Upper Body", "Lower Body", "Push", "Pull"],
    5: ["Push", "Pull", "Legs", "Upper Body", "Conditioning"],
    6: ["Push", "Pull", "Legs", "Upper Body", "Lower Body", "Conditioning"],
    7: ["Push", "Pull", "Legs", "Upper Body", "Lower Body", "Conditioning", "Recovery"],
}

DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass
class DayPlan:
    """One day of the weekly schedule."""

    day_index: int
    label: str
    is_training_day: bool
    focus: str | None = None
    is_today: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_index": self.day_index,
            "label": self.label,
            "is_training_day": self.is_training_day,
            "focus": self.focus,
            "is_today": self.is_today,
        }


def _weekday_index(today: date | None) -> int:
    # date.weekday() has Monday = 0
    today = today or date.today()
    return (today.weekday() + 1) % 7


def _training_days(training_days_per_week: int) -> list[int]:
    clamped = min(7, max(1, training_days_per_week))
    return TRAINING_DAYS[clamped]


def generate_weekly_schedule(
    training_days_per_week: int, today: date | None = None
) -> list[DayPlan]:
    """Lay out a week, Sunday first, with a focus for each training day."""
    days = _training_days(training_days_per_week)
    focuses = FOCUS_ROTATION[len(days)]
    today_index = _weekday_index(today)

    plan = []
    for index, label in enumerate(DAY_LABELS):
        is_training_day = index in days
        plan.append(
            DayPlan(
                day_index=index,
                label=label,
                is_training_day=is_training_day,
                focus=focuses[days.index(index) % len(focuses)] if is_training_day else None,
                is_today=index == today_index,
            )
        )
    return plan


def is_training_day(training_days_per_week: int, today: date | None = None) -> bool:
    """Whether `today` is a planned training day."""
    return _weekday_index(today) in _training_days(training_days_per_week)


def todays_focus(training_days_per_week: int, today: date | None = None) -> str | None:
    """Focus of `today`, or None on a rest day."""
    days = _training_days(training_days_per_week)
    today_index = _weekday_index(today)
    if today_index not in days:
        return None
    focuses = FOCUS_ROTATION[len(days)]
    return focuses[days.index(today_index) % len(focuses)]
