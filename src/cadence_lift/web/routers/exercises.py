"""Exercise catalog routes."""

from fastapi import APIRouter

from ...db.repositories import ExerciseRepository
from ...models.exercises import MovementPattern

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(movement_pattern: MovementPattern | None = None):
    """The exercise catalog, optionally filtered by movement pattern."""
    repo = ExerciseRepository()
    if movement_pattern is not None:
        exercises = await repo.get_by_movement_pattern(movement_pattern)
    else:
        exercises = await repo.list_all()
    return [{"id": ex.id, **ex.to_dict()} for ex in exercises]
