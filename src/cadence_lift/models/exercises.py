"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum


class MovementPattern(str, Enum):
    """Movement patterns used to balance session composition."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"
    CONDITIONING = "conditioning"
    STRETCHING = "stretching"


class EquipmentType(str, Enum):
    """Equipment types for exercises."""

    BODYWEIGHT = "bodyweight"
    DUMBBELL = "dumbbell"
    BARBELL = "barbell"
    KETTLEBELL = "kettlebell"
    PULLUP_BAR = "pullup_bar"
    ROWING_MACHINE = "rowing_machine"
    RESISTANCE_BAND = "resistance_band"
    BENCH = "bench"
    CHAIR = "chair"
    CABLE_MACHINE = "cable_machine"
    MED_BALL = "med_ball"


class Limitation(str, Enum):
    """Physical limitations an exercise may be contraindicated for."""

    SHOULDER_PAIN = "shoulder_pain"
    KNEE_PAIN = "knee_pain"
    LOWER_BACK_PAIN = "lower_back_pain"
    WRIST_PAIN = "wrist_pain"
    LOW_IMPACT_ONLY = "low_impact_only"


@dataclass
class Exercise:
    """Represents an exercise with metadata.

    The slug is the exercise's identity across the catalog, profile
    exclusions, session items and feedback records.
    """

    slug: str
    name: str
    movement_pattern: MovementPattern
    equipment: list[EquipmentType] = field(default_factory=list)
    contraindications: list[Limitation] = field(default_factory=list)
    progression_path: str | None = None
    progression_step: int | None = None  # 1 = easiest variant on the path
    min_reps: int = 6
    max_reps: int = 12
    primary_muscle: str = ""
    description: str = ""
    strain_score: int = 2  # 1 (light) to 5 (very demanding)
    id: int | None = None

    @property
    def has_progression(self) -> bool:
        """True if the exercise sits on a progression path."""
        return bool(self.progression_path) and self.progression_step is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "slug": self.slug,
            "name": self.name,
            "movement_pattern": self.movement_pattern.value,
            "equipment": [eq.value for eq in self.equipment],
            "contraindications": [c.value for c in self.contraindications],
            "progression_path": self.progression_path,
            "progression_step": self.progression_step,
            "min_reps": self.min_reps,
            "max_reps": self.max_reps,
            "primary_muscle": self.primary_muscle,
            "description": self.description,
            "strain_score": self.strain_score,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id,
            slug=data["slug"],
            name=data["name"],
            movement_pattern=MovementPattern(data["movement_pattern"]),
            equipment=[EquipmentType(eq) for eq in data.get("equipment", [])],
            contraindications=[
                Limitation(c) for c in data.get("contraindications", [])
            ],
            progression_path=data.get("progression_path"),
            progression_step=data.get("progression_step"),
            min_reps=data.get("min_reps", 6),
            max_reps=data.get("max_reps", 12),
            primary_muscle=data.get("primary_muscle", ""),
            description=data.get("description", ""),
            strain_score=data.get("strain_score", 2),
        )


# Built-in exercise catalog, seeded by `cadence-lift init`.
# Progression paths order variants from easiest (step 1) to hardest.
COMMON_EXERCISES: list[Exercise] = [
    # Push - push-up path
    Exercise(
        slug="wall-push-up",
        name="Wall Push-Up",
        movement_pattern=MovementPattern.PUSH,
        progression_path="push-up",
        progression_step=1,
        min_reps=8,
        max_reps=20,
        primary_muscle="chest",
        description="Hands on a wall at shoulder height, lower the chest toward the wall.",
        strain_score=1,
    ),
    Exercise(
        slug="incline-push-up",
        name="Incline Push-Up",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.BENCH, EquipmentType.CHAIR],
        contraindications=[Limitation.WRIST_PAIN],
        progression_path="push-up",
        progression_step=2,
        min_reps=6,
        max_reps=15,
        primary_muscle="chest",
        description="Hands on a bench or sturdy chair, body in one straight line.",
        strain_score=2,
    ),
    Exercise(
        slug="push-up",
        name="Push-Up",
        movement_pattern=MovementPattern.PUSH,
        contraindications=[Limitation.WRIST_PAIN, Limitation.SHOULDER_PAIN],
        progression_path="push-up",
        progression_step=3,
        min_reps=5,
        max_reps=15,
        primary_muscle="chest",
        description="Classic floor push-up with elbows at roughly 45 degrees.",
        strain_score=3,
    ),
    Exercise(
        slug="decline-push-up",
        name="Decline Push-Up",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.BENCH, EquipmentType.CHAIR],
        contraindications=[Limitation.WRIST_PAIN, Limitation.SHOULDER_PAIN],
        progression_path="push-up",
        progression_step=4,
        min_reps=4,
        max_reps=12,
        primary_muscle="chest",
        description="Feet elevated on a bench, emphasis on the upper chest.",
        strain_score=4,
    ),
    # Push - loaded
    Exercise(
        slug="dumbbell-floor-press",
        name="Dumbbell Floor Press",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.DUMBBELL],
        min_reps=6,
        max_reps=12,
        primary_muscle="chest",
        description="Lying on the floor, press the dumbbells until the arms are straight.",
        strain_score=2,
    ),
    Exercise(
        slug="barbell-bench-press",
        name="Barbell Bench Press",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.BARBELL],
        contraindications=[Limitation.SHOULDER_PAIN],
        min_reps=3,
        max_reps=10,
        primary_muscle="chest",
        description="Flat bench press with a controlled descent to the chest.",
        strain_score=4,
    ),
    Exercise(
        slug="dumbbell-shoulder-press",
        name="Dumbbell Shoulder Press",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.DUMBBELL],
        contraindications=[Limitation.SHOULDER_PAIN],
        min_reps=6,
        max_reps=12,
        primary_muscle="shoulders",
        description="Seated or standing overhead press with dumbbells.",
        strain_score=3,
    ),
    Exercise(
        slug="band-chest-press",
        name="Band Chest Press",
        movement_pattern=MovementPattern.PUSH,
        equipment=[EquipmentType.RESISTANCE_BAND],
        min_reps=10,
        max_reps=20,
        primary_muscle="chest",
        description="Band anchored behind the back, press forward at chest height.",
        strain_score=1,
    ),
    # Pull - pull-up path
    Exercise(
        slug="band-assisted-pull-up",
        name="Band-Assisted Pull-Up",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.PULLUP_BAR],
        contraindications=[Limitation.SHOULDER_PAIN],
        progression_path="pull-up",
        progression_step=1,
        min_reps=4,
        max_reps=12,
        primary_muscle="lats",
        description="Pull-up with a resistance band looped under the knees.",
        strain_score=2,
    ),
    Exercise(
        slug="negative-pull-up",
        name="Negative Pull-Up",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.PULLUP_BAR],
        contraindications=[Limitation.SHOULDER_PAIN],
        progression_path="pull-up",
        progression_step=2,
        min_reps=3,
        max_reps=8,
        primary_muscle="lats",
        description="Jump to the top position and lower yourself slowly.",
        strain_score=3,
    ),
    Exercise(
        slug="pull-up",
        name="Pull-Up",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.PULLUP_BAR],
        contraindications=[Limitation.SHOULDER_PAIN],
        progression_path="pull-up",
        progression_step=3,
        min_reps=3,
        max_reps=10,
        primary_muscle="lats",
        description="Strict pull-up from a dead hang, chin over the bar.",
        strain_score=4,
    ),
    # Pull - loaded
    Exercise(
        slug="dumbbell-row",
        name="One-Arm Dumbbell Row",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.DUMBBELL],
        min_reps=6,
        max_reps=12,
        primary_muscle="upper back",
        description="Supported on a bench or knee, row the dumbbell to the hip.",
        strain_score=2,
    ),
    Exercise(
        slug="band-row",
        name="Band Row",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.RESISTANCE_BAND],
        min_reps=10,
        max_reps=20,
        primary_muscle="upper back",
        description="Band anchored in front, pull the handles toward the ribs.",
        strain_score=1,
    ),
    Exercise(
        slug="barbell-row",
        name="Barbell Bent-Over Row",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.BARBELL],
        contraindications=[Limitation.LOWER_BACK_PAIN],
        min_reps=5,
        max_reps=10,
        primary_muscle="upper back",
        description="Hinged torso, row the bar to the lower chest.",
        strain_score=4,
    ),
    Exercise(
        slug="cable-lat-pulldown",
        name="Cable Lat Pulldown",
        movement_pattern=MovementPattern.PULL,
        equipment=[EquipmentType.CABLE_MACHINE],
        min_reps=8,
        max_reps=15,
        primary_muscle="lats",
        description="Pull the bar to the upper chest, elbows driving down.",
        strain_score=2,
    ),
    # Legs - squat path
    Exercise(
        slug="chair-squat",
        name="Chair Squat",
        movement_pattern=MovementPattern.LEGS,
        equipment=[EquipmentType.CHAIR],
        progression_path="squat",
        progression_step=1,
        min_reps=8,
        max_reps=20,
        primary_muscle="quads",
        description="Sit down to a chair and stand back up without using the hands.",
        strain_score=1,
    ),
    Exercise(
        slug="bodyweight-squat",
        name="Bodyweight Squat",
        movement_pattern=MovementPattern.LEGS,
        contraindications=[Limitation.KNEE_PAIN],
        progression_path="squat",
        progression_step=2,
        min_reps=10,
        max_reps=20,
        primary_muscle="quads",
        description="Free squat to parallel with arms forward for balance.",
        strain_score=2,
    ),
    Exercise(
        slug="goblet-squat",
        name="Goblet Squat",
        movement_pattern=MovementPattern.LEGS,
        equipment=[EquipmentType.DUMBBELL, EquipmentType.KETTLEBELL],
        contraindications=[Limitation.KNEE_PAIN],
        progression_path="squat",
        progression_step=3,
        min_reps=6,
        max_reps=15,
        primary_muscle="quads",
        description="Squat holding a dumbbell or kettlebell at the chest.",
        strain_score=3,
    ),
    Exercise(
        slug="bulgarian-split-squat",
        name="Bulgarian Split Squat",
        movement_pattern=MovementPattern.LEGS,
        equipment=[EquipmentType.BENCH, EquipmentType.CHAIR],
        contraindications=[Limitation.KNEE_PAIN],
        progression_path="squat",
        progression_step=4,
        min_reps=6,
        max_reps=12,
        primary_muscle="quads",
        description="Rear foot elevated split squat, torso upright.",
        strain_score=4,
    ),
    # Legs - hinge and others
    Exercise(
        slug="glute-bridge",
        name="Glute Bridge",
        movement_pattern=MovementPattern.LEGS,
        progression_path="hip-hinge",
        progression_step=1,
        min_reps=10,
        max_reps=20,
        primary_muscle="glutes",
        description="Lying on the back, drive the hips up until knees, hips and shoulders align.",
        strain_score=1,
    ),
    Exercise(
        slug="single-leg-glute-bridge",
        name="Single-Leg Glute Bridge",
        movement_pattern=MovementPattern.LEGS,
        progression_path="hip-hinge",
        progression_step=2,
        min_reps=8,
        max_reps=15,
        primary_muscle="glutes",
        description="Glute bridge on one leg with the other extended.",
        strain_score=2,
    ),
    Exercise(
        slug="dumbbell-romanian-deadlift",
        name="Dumbbell Romanian Deadlift",
        movement_pattern=MovementPattern.LEGS,
        equipment=[EquipmentType.DUMBBELL],
        contraindications=[Limitation.LOWER_BACK_PAIN],
        progression_path="hip-hinge",
        progression_step=3,
        min_reps=6,
        max_reps=12,
        primary_muscle="hamstrings",
        description="Soft knees, push the hips back and lower the dumbbells along the legs.",
        strain_score=3,
    ),
    Exercise(
        slug="barbell-back-squat",
        name="Barbell Back Squat",
        movement_pattern=MovementPattern.LEGS,
        equipment=[EquipmentType.BARBELL],
        contraindications=[Limitation.KNEE_PAIN, Limitation.LOWER_BACK_PAIN],
        min_reps=3,
        max_reps=10,
        primary_muscle="quads",
        description="High-bar back squat to depth.",
        strain_score=5,
    ),
    Exercise(
        slug="reverse-lunge",
        name="Reverse Lunge",
        movement_pattern=MovementPattern.LEGS,
        contraindications=[Limitation.KNEE_PAIN],
        min_reps=8,
        max_reps=15,
        primary_muscle="quads",
        description="Step back into a lunge, alternate legs.",
        strain_score=2,
    ),
    # Core - plank path
    Exercise(
        slug="dead-bug",
        name="Dead Bug",
        movement_pattern=MovementPattern.CORE,
        progression_path="anti-extension",
        progression_step=1,
        min_reps=8,
        max_reps=16,
        primary_muscle="abs",
        description="Lying on the back, extend opposite arm and leg while bracing.",
        strain_score=1,
    ),
    Exercise(
        slug="plank",
        name="Plank",
        movement_pattern=MovementPattern.CORE,
        contraindications=[Limitation.SHOULDER_PAIN],
        progression_path="anti-extension",
        progression_step=2,
        min_reps=3,
        max_reps=6,
        primary_muscle="abs",
        description="Forearm plank; one rep is a 10 second hold.",
        strain_score=2,
    ),
    Exercise(
        slug="plank-shoulder-tap",
        name="Plank Shoulder Tap",
        movement_pattern=MovementPattern.CORE,
        contraindications=[Limitation.SHOULDER_PAIN, Limitation.WRIST_PAIN],
        progression_path="anti-extension",
        progression_step=3,
        min_reps=10,
        max_reps=20,
        primary_muscle="abs",
        description="High plank, tap the opposite shoulder without rotating the hips.",
        strain_score=3,
    ),
    Exercise(
        slug="side-plank",
        name="Side Plank",
        movement_pattern=MovementPattern.CORE,
        contraindications=[Limitation.SHOULDER_PAIN],
        min_reps=3,
        max_reps=6,
        primary_muscle="obliques",
        description="Side plank on the forearm; one rep is a 10 second hold.",
        strain_score=2,
    ),
    Exercise(
        slug="med-ball-russian-twist",
        name="Med Ball Russian Twist",
        movement_pattern=MovementPattern.CORE,
        equipment=[EquipmentType.MED_BALL],
        contraindications=[Limitation.LOWER_BACK_PAIN],
        min_reps=12,
        max_reps=24,
        primary_muscle="obliques",
        description="Seated, lean back slightly and rotate the ball side to side.",
        strain_score=2,
    ),
    # Conditioning
    Exercise(
        slug="jumping-jacks",
        name="Jumping Jacks",
        movement_pattern=MovementPattern.CONDITIONING,
        contraindications=[Limitation.KNEE_PAIN, Limitation.LOW_IMPACT_ONLY],
        min_reps=20,
        max_reps=50,
        primary_muscle="full body",
        description="Classic jumping jacks at a steady rhythm.",
        strain_score=1,
    ),
    Exercise(
        slug="burpee",
        name="Burpee",
        movement_pattern=MovementPattern.CONDITIONING,
        contraindications=[
            Limitation.KNEE_PAIN,
            Limitation.WRIST_PAIN,
            Limitation.LOW_IMPACT_ONLY,
        ],
        min_reps=6,
        max_reps=15,
        primary_muscle="full body",
        description="Squat, kick back to a plank, return and jump.",
        strain_score=4,
    ),
    Exercise(
        slug="kettlebell-swing",
        name="Kettlebell Swing",
        movement_pattern=MovementPattern.CONDITIONING,
        equipment=[EquipmentType.KETTLEBELL],
        contraindications=[Limitation.LOWER_BACK_PAIN],
        min_reps=12,
        max_reps=25,
        primary_muscle="posterior chain",
        description="Hip-driven swing to chest height.",
        strain_score=3,
    ),
    Exercise(
        slug="rowing-intervals",
        name="Rowing Intervals",
        movement_pattern=MovementPattern.CONDITIONING,
        equipment=[EquipmentType.ROWING_MACHINE],
        min_reps=4,
        max_reps=8,
        primary_muscle="full body",
        description="One rep is 250 m at a hard pace followed by easy rowing.",
        strain_score=3,
    ),
    Exercise(
        slug="marching-in-place",
        name="High-Knee March",
        movement_pattern=MovementPattern.CONDITIONING,
        min_reps=20,
        max_reps=60,
        primary_muscle="full body",
        description="Brisk march with high knees, arms swinging.",
        strain_score=1,
    ),
    # Stretching
    Exercise(
        slug="hip-flexor-stretch",
        name="Hip Flexor Stretch",
        movement_pattern=MovementPattern.STRETCHING,
        min_reps=2,
        max_reps=4,
        primary_muscle="hip flexors",
        description="Half-kneeling stretch; one rep is a 30 second hold per side.",
        strain_score=1,
    ),
    Exercise(
        slug="cat-cow",
        name="Cat-Cow",
        movement_pattern=MovementPattern.STRETCHING,
        min_reps=6,
        max_reps=12,
        primary_muscle="spine",
        description="On hands and knees, alternate spinal flexion and extension.",
        strain_score=1,
    ),
]


def get_exercise_by_slug(
    slug: str, exercises: list[Exercise] | None = None
) -> Exercise | None:
    """Look up an exercise by slug (defaults to the built-in catalog)."""
    if exercises is None:
        exercises = COMMON_EXERCISES
    for exercise in exercises:
        if exercise.slug == slug:
            return exercise
    return None
