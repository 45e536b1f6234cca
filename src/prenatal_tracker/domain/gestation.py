"""Value types for gestational dating and growth-curve charting."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class BmiCategory(StrEnum):
    """Ordered BMI bands used on the dashboard."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class GestationRecord:
    """Reference dates for a pregnancy."""

    last_menstrual_period: date


@dataclass(frozen=True)
class WeightObservation:
    """Weight recorded at a given gestational week."""

    gestational_age_weeks: int
    weight_kg: float


@dataclass(frozen=True)
class AnthropometricProfile:
    """Body measurements held constant across the pregnancy."""

    height_cm: float


@dataclass(frozen=True)
class GrowthPoint:
    """Single plot point of the weight/BMI growth curve."""

    week: int
    bmi: float
    weight: float
    min_normal: float
    max_normal: float
