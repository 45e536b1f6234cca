"""Domain models for the fetal development timeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DevelopmentStage:
    """Monthly stage of fetal development."""

    month: int
    weeks: str
    size: str
    description: str


@dataclass(frozen=True)
class TimelineEntry:
    """Development stage tagged relative to the current month."""

    stage: DevelopmentStage
    status: str
