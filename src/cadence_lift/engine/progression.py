"""Progression-path resolution.

Exercises sharing a progression path form a ladder ordered by
`progression_step`. The most recent feedback on any rung of a ladder moves
the selected exercise one rung up (too easy) or down (too hard).
"""

from collections.abc import Iterable

from ..models.exercises import Exercise
from ..models.feedback import Difficulty, FeedbackRecord

# Upper bound on feedback rows scanned for path difficulties
PATH_FEEDBACK_LIMIT = 60


def unique_by_slug(exercises: Iterable[Exercise]) -> list[Exercise]:
    """Drop repeated exercises, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for exercise in exercises:
        if exercise.slug in seen:
            continue
        seen.add(exercise.slug)
        result.append(exercise)
    return result


def next_step_from_difficulty(step: int, difficulty: Difficulty) -> int:
    """Target progression step after the given feedback."""
    if difficulty == Difficulty.TOO_EASY:
        return step + 1
    if difficulty == Difficulty.TOO_HARD:
        return step - 1
    return step


def latest_difficulty_by_path(
    records: list[FeedbackRecord],
    exercises: Iterable[Exercise],
    paths: Iterable[str] | None = None,
) -> dict[str, Difficulty]:
    """Map each progression path to the most recent difficulty reported on it.

    Args:
        records: Feedback slice, any order; sorted newest first here
        exercises: Catalog used to look up each record's path
        paths: Restrict the map to these paths (all paths if None)

    Returns:
        Dict of path name to difficulty
    """
    path_by_slug = {
        ex.slug: ex.progression_path for ex in exercises if ex.progression_path
    }
    wanted = set(paths) if paths is not None else None

    latest: dict[str, Difficulty] = {}
    for record in sorted(records, key=lambda r: r.created_at, reverse=True):
        path = path_by_slug.get(record.exercise_slug)
        if not path or path in latest:
            continue
        if wanted is not None and path not in wanted:
            continue
        latest[path] = record.difficulty
    return latest


def group_by_path(exercises: Iterable[Exercise]) -> dict[str, list[Exercise]]:
    """Group exercises on a progression path, each ladder sorted by step."""
    by_path: dict[str, list[Exercise]] = {}
    for exercise in exercises:
        if not exercise.has_progression:
            continue
        by_path.setdefault(exercise.progression_path, []).append(exercise)

    for ladder in by_path.values():
        ladder.sort(key=lambda ex: ex.progression_step)
    return by_path


def resolve_progression(
    exercise: Exercise,
    ladder: list[Exercise],
    difficulty: Difficulty,
) -> Exercise:
    """Pick the rung of `ladder` that should replace `exercise`."""
    target = next_step_from_difficulty(exercise.progression_step, difficulty)
    for candidate in ladder:
        if candidate.progression_step == target:
            return candidate

    slugs = [candidate.slug for candidate in ladder]
    if exercise.slug not in slugs:
        return exercise
    index = slugs.index(exercise.slug)

    if difficulty == Difficulty.TOO_EASY:
        return ladder[min(len(ladder) - 1, index + 1)]
    if difficulty == Difficulty.TOO_HARD:
        return ladder[max(0, index - 1)]
    return exercise


def apply_progression_paths(
    selected: list[Exercise],
    eligible: list[Exercise],
    latest_by_path: dict[str, Difficulty],
) -> list[Exercise]:
    """Replace selected exercises by their progressed variants.

    Exercises without a path, or without feedback on their path, pass
    through unchanged. The result never contains the same exercise twice.
    """
    ladders = group_by_path(eligible)

    evolved = []
    for exercise in selected:
        difficulty = latest_by_path.get(exercise.progression_path or "")
        ladder = ladders.get(exercise.progression_path or "")
        if not exercise.has_progression or difficulty is None or not ladder:
            evolved.append(exercise)
            continue
        evolved.append(resolve_progression(exercise, ladder, difficulty))

    return unique_by_slug(evolved)
