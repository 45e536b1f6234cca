"""Gestational dating, BMI and growth-curve calculations.

Every function here is pure: the current date is always passed in by the
caller and nothing is cached between calls.
"""

import math
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from dateutil.relativedelta import relativedelta

from prenatal_tracker.domain.gestation import (
    AnthropometricProfile,
    BmiCategory,
    GrowthPoint,
    WeightObservation,
)

NAEGELE_DAYS = 7
NAEGELE_MONTHS = 9
DAYS_PER_WEEK = 7
WEEKS_PER_MONTH = 4.3

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 24.9
OBESE_FROM = 29.9

# Simplified reference band for the chart, not a clinical curve.
CURVE_MIN_NORMAL = 20.0
CURVE_MAX_NORMAL_BASE = 26.0
CURVE_MAX_NORMAL_SLOPE = 0.15


def due_date(last_menstrual_period: date) -> date:
    """Estimate the due date with Naegele's rule.

    Adds 7 days, then 9 calendar months. Days missing from the target month
    are clamped to its last day.
    """
    shifted = last_menstrual_period + timedelta(days=NAEGELE_DAYS)
    return shifted + relativedelta(months=NAEGELE_MONTHS)


def gestational_age_weeks(last_menstrual_period: date, today: date) -> int:
    """Return completed weeks between the LMP and ``today``.

    A ``today`` earlier than the LMP is measured by absolute distance.
    """
    days = abs((today - last_menstrual_period).days)
    return days // DAYS_PER_WEEK


def bmi(weight_kg: float, height_cm: float) -> float:
    """Return BMI rounded to one decimal, or 0 when height is unknown."""
    height_m = height_cm / 100
    if height_m == 0:
        return 0
    return _round_tenth(weight_kg / (height_m * height_m))


def classify_bmi(value: float) -> BmiCategory:
    """Map a BMI to its band; lower bounds are inclusive."""
    if value < UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if value < OVERWEIGHT_FROM:
        return BmiCategory.NORMAL
    if value < OBESE_FROM:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def max_normal_for_week(week: int) -> float:
    """Upper bound of the chart's reference band at a gestational week."""
    return CURVE_MAX_NORMAL_BASE + week * CURVE_MAX_NORMAL_SLOPE


def build_growth_curve(
    observations: Iterable[WeightObservation], profile: AnthropometricProfile
) -> list[GrowthPoint]:
    """Build chart points ordered by gestational week.

    Observations sharing a week keep their input order.
    """
    ordered = sorted(observations, key=lambda obs: obs.gestational_age_weeks)
    return [
        GrowthPoint(
            week=obs.gestational_age_weeks,
            bmi=bmi(obs.weight_kg, profile.height_cm),
            weight=obs.weight_kg,
            min_normal=CURVE_MIN_NORMAL,
            max_normal=max_normal_for_week(obs.gestational_age_weeks),
        )
        for obs in ordered
    ]


def weight_gain(initial_weight_kg: float, current_weight_kg: float) -> float:
    """Weight gained since the start of the pregnancy, one decimal."""
    return _round_tenth(current_weight_kg - initial_weight_kg)


def development_month(week: int) -> int:
    """Approximate pregnancy month for a gestational week."""
    return math.ceil(week / WEEKS_PER_MONTH)


def _round_tenth(value: float) -> float:
    """Round to one decimal, ties away from zero."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
