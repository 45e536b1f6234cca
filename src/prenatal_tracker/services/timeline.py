"""Fetal development timeline."""

from prenatal_tracker.domain.timeline import DevelopmentStage, TimelineEntry
from prenatal_tracker.services.gestation import development_month

DEVELOPMENT_STAGES = (
    DevelopmentStage(
        month=1,
        weeks="1-4",
        size="Poppy seed",
        description="The fertilized egg implants in the uterus.",
    ),
    DevelopmentStage(
        month=2,
        weeks="5-8",
        size="Raspberry",
        description="The heart starts beating. The neural tube forms.",
    ),
    DevelopmentStage(
        month=3,
        weeks="9-12",
        size="Plum",
        description="Fingers and nails form. Kidneys start working.",
    ),
    DevelopmentStage(
        month=4,
        weeks="13-16",
        size="Avocado",
        description="Fingerprints form. The sex may be identifiable.",
    ),
    DevelopmentStage(
        month=5,
        weeks="17-20",
        size="Banana",
        description="You may start to feel the baby move.",
    ),
    DevelopmentStage(
        month=6,
        weeks="21-24",
        size="Ear of corn",
        description="The baby responds to sounds. Eyebrows are visible.",
    ),
    DevelopmentStage(
        month=7,
        weeks="25-28",
        size="Eggplant",
        description="Eyes open and close. Lungs are maturing.",
    ),
    DevelopmentStage(
        month=8,
        weeks="29-32",
        size="Pineapple",
        description="Rapid weight gain. Bones are hardening.",
    ),
    DevelopmentStage(
        month=9,
        weeks="33-40",
        size="Watermelon",
        description="Ready to be born. Turns head down.",
    ),
)


def timeline_for_week(week: int) -> list[TimelineEntry]:
    """Return every stage tagged past, current or upcoming."""
    current = development_month(week)
    entries = []
    for stage in DEVELOPMENT_STAGES:
        if stage.month < current:
            status = "past"
        elif stage.month == current:
            status = "current"
        else:
            status = "upcoming"
        entries.append(TimelineEntry(stage=stage, status=status))
    return entries
