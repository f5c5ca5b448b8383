"""Interactive profile setup via questionnaire."""

import questionary
from questionary import Style

from ...models.exercises import COMMON_EXERCISES, EquipmentType, Limitation
from ...models.user_profile import Goal, UserProfile
from ...services.profiles import normalize_equipment

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

EQUIPMENT_LABELS = {
    EquipmentType.BODYWEIGHT: "Bodyweight",
    EquipmentType.DUMBBELL: "Dumbbells",
    EquipmentType.BARBELL: "Barbell",
    EquipmentType.KETTLEBELL: "Kettlebell",
    EquipmentType.PULLUP_BAR: "Pull-up bar",
    EquipmentType.ROWING_MACHINE: "Rowing machine",
    EquipmentType.RESISTANCE_BAND: "Resistance bands",
    EquipmentType.BENCH: "Weight bench",
    EquipmentType.CHAIR: "Sturdy chair",
    EquipmentType.CABLE_MACHINE: "Cable machine",
    EquipmentType.MED_BALL: "Medicine ball",
}

LIMITATION_LABELS = {
    Limitation.SHOULDER_PAIN: "Shoulder problems",
    Limitation.KNEE_PAIN: "Knee problems",
    Limitation.LOWER_BACK_PAIN: "Lower back problems",
    Limitation.WRIST_PAIN: "Wrist problems",
    Limitation.LOW_IMPACT_ONLY: "Low impact only (no jumping)",
}


def _parse_int(value: str | None, default: int | None) -> int | None:
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


class ManualInputClient:
    """Interactive questionnaire for collecting a training profile."""

    async def collect_profile(self) -> UserProfile:
        """Run interactive questionnaire to collect a profile."""
        print("\n=== Training Profile Questionnaire ===\n")

        name = await questionary.text(
            "Profile name:",
            validate=lambda text: 2 <= len(text.strip()) <= 50 or "2-50 characters",
            style=custom_style,
        ).ask_async()

        goal = await questionary.select(
            "What is your main goal?",
            choices=[
                questionary.Choice("Build muscle (hypertrophy)", Goal.HYPERTROPHY),
                questionary.Choice("Get stronger", Goal.STRENGTH),
                questionary.Choice("Improve endurance", Goal.ENDURANCE),
            ],
            style=custom_style,
        ).ask_async()

        equipment = await questionary.checkbox(
            "What equipment do you have access to?",
            choices=[
                questionary.Choice(label, eq) for eq, label in EQUIPMENT_LABELS.items()
            ],
            style=custom_style,
        ).ask_async()

        training_days = await questionary.select(
            "How many days per week can you train?",
            choices=[str(n) for n in range(1, 8)],
            default="3",
            style=custom_style,
        ).ask_async()

        session_duration = await questionary.select(
            "How long are your typical training sessions?",
            choices=[
                questionary.Choice("20 minutes", 20),
                questionary.Choice("30 minutes", 30),
                questionary.Choice("40 minutes", 40),
                questionary.Choice("50 minutes", 50),
                questionary.Choice("60 minutes", 60),
                questionary.Choice("90 minutes", 90),
            ],
            default=40,
            style=custom_style,
        ).ask_async()

        cycle_length = await questionary.text(
            "Training cycle length in weeks (4-12):",
            default="6",
            validate=lambda text: 4 <= (_parse_int(text, 0) or 0) <= 12 or "Enter 4-12",
            style=custom_style,
        ).ask_async()

        limitations = []
        has_limitations = await questionary.confirm(
            "Do you have any injuries or movement limitations?",
            default=False,
            style=custom_style,
        ).ask_async()

        if has_limitations:
            limitations = await questionary.checkbox(
                "Select all that apply:",
                choices=[
                    questionary.Choice(label, lim)
                    for lim, label in LIMITATION_LABELS.items()
                ],
                style=custom_style,
            ).ask_async()

        excluded = await self._collect_exclusions()

        age_str = await questionary.text(
            "Your age (optional):",
            default="",
            style=custom_style,
        ).ask_async()

        return UserProfile(
            name=(name or "User").strip(),
            goal=goal or Goal.HYPERTROPHY,
            training_days_per_week=_parse_int(training_days, 3),
            cycle_length_weeks=_parse_int(cycle_length, 6),
            session_duration=session_duration or 40,
            available_equipment=normalize_equipment(equipment or []),
            limitations=limitations or [],
            excluded_exercises=excluded,
            age=_parse_int(age_str, None),
        )

    async def _collect_exclusions(self) -> list[str]:
        """Ask for exercises to leave out entirely."""
        exclude = await questionary.confirm(
            "Are there exercises you never want to do?",
            default=False,
            style=custom_style,
        ).ask_async()

        if not exclude:
            return []

        return await questionary.checkbox(
            "Select exercises to exclude:",
            choices=[
                questionary.Choice(ex.name, ex.slug)
                for ex in sorted(COMMON_EXERCISES, key=lambda e: e.name)
            ],
            style=custom_style,
        ).ask_async() or []
