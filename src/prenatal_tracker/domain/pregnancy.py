"""Domain models for pregnancy records and consultations."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from prenatal_tracker.domain.gestation import BmiCategory, GestationRecord


class BloodType(StrEnum):
    """ABO/Rh blood groups as stored in the database."""

    A_POS = "A_POS"
    A_NEG = "A_NEG"
    B_POS = "B_POS"
    B_NEG = "B_NEG"
    AB_POS = "AB_POS"
    AB_NEG = "AB_NEG"
    O_POS = "O_POS"
    O_NEG = "O_NEG"


class ConsultationStatus(StrEnum):
    """Lifecycle of a prenatal consultation."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


_BLOOD_TYPE_LABELS = {
    BloodType.A_POS: "A+",
    BloodType.A_NEG: "A-",
    BloodType.B_POS: "B+",
    BloodType.B_NEG: "B-",
    BloodType.AB_POS: "AB+",
    BloodType.AB_NEG: "AB-",
    BloodType.O_POS: "O+",
    BloodType.O_NEG: "O-",
}


def format_blood_type(value: BloodType | str | None) -> str:
    """Return the short display label for a blood type."""
    if not value:
        return "N/A"
    try:
        return _BLOOD_TYPE_LABELS[BloodType(value)]
    except ValueError:
        return str(value)


@dataclass(frozen=True)
class PregnancySetup:
    """Values entered on the pregnancy setup form."""

    last_menstrual_period: date
    initial_weight_kg: float
    height_cm: float
    blood_type: BloodType
    spouse_blood_type: BloodType | None
    weight_goal_min_kg: float
    weight_goal_max_kg: float


@dataclass(frozen=True)
class PregnancyRecord:
    """Persisted pregnancy data for a patient."""

    id: UUID
    patient_id: UUID
    last_menstrual_period: date
    due_date: date
    initial_weight_kg: float
    height_cm: float
    pre_gestational_bmi: float
    blood_type: BloodType
    spouse_blood_type: BloodType | None
    weight_goal_min_kg: float
    weight_goal_max_kg: float

    @property
    def gestation(self) -> GestationRecord:
        """Dating reference for this pregnancy."""
        return GestationRecord(last_menstrual_period=self.last_menstrual_period)


@dataclass(frozen=True)
class ConsultationRecord:
    """Prenatal consultation with the weight taken at the visit."""

    id: UUID
    patient_id: UUID
    consulted_at: datetime
    gestational_age_weeks: int
    current_weight_kg: float
    status: ConsultationStatus


@dataclass(frozen=True)
class PregnancyDashboard:
    """Derived values shown on the patient dashboard."""

    patient_id: UUID
    gestational_age_weeks: int
    due_date: date
    current_weight_kg: float
    weight_gain_kg: float
    current_bmi: float
    bmi_category: BmiCategory | None
    pre_gestational_bmi: float
    weight_goal_min_kg: float
    weight_goal_max_kg: float
    blood_type: str
    spouse_blood_type: str
    development_month: int
