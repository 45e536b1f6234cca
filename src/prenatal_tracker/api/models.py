"""Pydantic models for API payloads."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from prenatal_tracker.domain.gestation import GestationRecord
from prenatal_tracker.domain.pregnancy import BloodType, PregnancySetup


class PregnancySetupRequest(BaseModel):
    """Pregnancy setup form payload."""

    last_menstrual_period: date
    initial_weight_kg: float = Field(ge=30, le=200)
    height_cm: float = Field(ge=100, le=250)
    blood_type: BloodType
    spouse_blood_type: BloodType | None = None
    weight_goal_min_kg: float = Field(default=9, ge=0)
    weight_goal_max_kg: float = Field(default=12, ge=0)

    @model_validator(mode="after")
    def check_goal_range(self) -> "PregnancySetupRequest":
        if self.weight_goal_max_kg < self.weight_goal_min_kg:
            raise ValueError("weight_goal_max_kg must be >= weight_goal_min_kg")
        return self

    def to_domain(self) -> PregnancySetup:
        """Convert to the domain setup value."""
        return PregnancySetup(
            last_menstrual_period=self.last_menstrual_period,
            initial_weight_kg=self.initial_weight_kg,
            height_cm=self.height_cm,
            blood_type=self.blood_type,
            spouse_blood_type=self.spouse_blood_type,
            weight_goal_min_kg=self.weight_goal_min_kg,
            weight_goal_max_kg=self.weight_goal_max_kg,
        )


class CalculatorSummaryRequest(BaseModel):
    """Stateless calculator input."""

    last_menstrual_period: date
    today: date | None = None
    weight_kg: float | None = Field(default=None, gt=0)
    height_cm: float | None = Field(default=None, ge=0)

    def to_gestation(self) -> GestationRecord:
        """Dating reference for the calculation."""
        return GestationRecord(last_menstrual_period=self.last_menstrual_period)


class WeightObservationPayload(BaseModel):
    """Weight recorded at a gestational week."""

    gestational_age_weeks: int = Field(ge=0)
    weight_kg: float = Field(gt=0)


class GrowthCurveRequest(BaseModel):
    """Stateless growth-curve input."""

    height_cm: float = Field(ge=0)
    observations: list[WeightObservationPayload] = Field(default_factory=list)
