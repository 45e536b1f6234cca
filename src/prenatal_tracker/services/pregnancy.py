"""Pregnancy dashboard and setup logic."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from prenatal_tracker.domain.gestation import (
    AnthropometricProfile,
    GrowthPoint,
    WeightObservation,
)
from prenatal_tracker.domain.pregnancy import (
    ConsultationRecord,
    PregnancyDashboard,
    PregnancyRecord,
    PregnancySetup,
    format_blood_type,
)
from prenatal_tracker.services.gestation import (
    bmi,
    build_growth_curve,
    classify_bmi,
    development_month,
    due_date,
    gestational_age_weeks,
    weight_gain,
)

_logger = logging.getLogger(__name__)


class PregnancyNotFoundError(LookupError):
    """Raised when a patient has no pregnancy record."""

    def __init__(self, patient_id: UUID) -> None:
        super().__init__(f"No pregnancy data for patient {patient_id}")
        self.patient_id = patient_id


class PregnancyRepository(Protocol):
    """Persistence interface for pregnancy data."""

    def get_by_patient(self, patient_id: UUID) -> PregnancyRecord | None:
        """Return the pregnancy record for a patient, if present."""

    def create(self, patient_id: UUID, payload: dict[str, object]) -> PregnancyRecord:
        """Create a pregnancy record and return it."""

    def update(
        self, pregnancy_id: UUID, payload: dict[str, object]
    ) -> PregnancyRecord:
        """Update a pregnancy record and return it."""


class ConsultationRepository(Protocol):
    """Persistence interface for consultations."""

    def list_by_patient(self, patient_id: UUID) -> list[ConsultationRecord]:
        """Return a patient's consultations ordered by date."""


@dataclass
class PregnancyService:
    """Service deriving dashboard values from stored pregnancy data."""

    pregnancy_repository: PregnancyRepository
    consultation_repository: ConsultationRepository

    def get_pregnancy(self, patient_id: UUID) -> PregnancyRecord | None:
        """Return the patient's pregnancy record, if any."""
        return self.pregnancy_repository.get_by_patient(patient_id)

    def setup_pregnancy(
        self, patient_id: UUID, setup: PregnancySetup
    ) -> PregnancyRecord:
        """Store setup values along with the derived due date and BMI."""
        payload = _setup_payload(setup)
        existing = self.pregnancy_repository.get_by_patient(patient_id)
        if existing:
            record = self.pregnancy_repository.update(existing.id, payload)
        else:
            record = self.pregnancy_repository.create(patient_id, payload)
        _logger.info(
            "Pregnancy setup saved: patient_id=%s due_date=%s",
            patient_id,
            record.due_date,
        )
        return record

    def get_dashboard(self, patient_id: UUID, today: date) -> PregnancyDashboard:
        """Return dashboard values as of ``today``."""
        pregnancy = self._require_pregnancy(patient_id)
        consultations = self.consultation_repository.list_by_patient(patient_id)
        current_weight = _current_weight(pregnancy, consultations)
        gestation = pregnancy.gestation
        weeks = gestational_age_weeks(gestation.last_menstrual_period, today)
        current_bmi = bmi(current_weight, pregnancy.height_cm)
        return PregnancyDashboard(
            patient_id=patient_id,
            gestational_age_weeks=weeks,
            due_date=pregnancy.due_date,
            current_weight_kg=current_weight,
            weight_gain_kg=weight_gain(pregnancy.initial_weight_kg, current_weight),
            current_bmi=current_bmi,
            bmi_category=classify_bmi(current_bmi) if current_bmi > 0 else None,
            pre_gestational_bmi=pregnancy.pre_gestational_bmi,
            weight_goal_min_kg=pregnancy.weight_goal_min_kg,
            weight_goal_max_kg=pregnancy.weight_goal_max_kg,
            blood_type=format_blood_type(pregnancy.blood_type),
            spouse_blood_type=format_blood_type(pregnancy.spouse_blood_type),
            development_month=development_month(weeks),
        )

    def get_growth_curve(self, patient_id: UUID) -> list[GrowthPoint]:
        """Return the weight/BMI curve from weighed consultations."""
        pregnancy = self._require_pregnancy(patient_id)
        consultations = self.consultation_repository.list_by_patient(patient_id)
        observations = [
            WeightObservation(
                gestational_age_weeks=consultation.gestational_age_weeks,
                weight_kg=consultation.current_weight_kg,
            )
            for consultation in consultations
            if consultation.current_weight_kg > 0
        ]
        return build_growth_curve(
            observations, AnthropometricProfile(height_cm=pregnancy.height_cm)
        )

    def _require_pregnancy(self, patient_id: UUID) -> PregnancyRecord:
        pregnancy = self.pregnancy_repository.get_by_patient(patient_id)
        if pregnancy is None:
            raise PregnancyNotFoundError(patient_id)
        return pregnancy


def _setup_payload(setup: PregnancySetup) -> dict[str, object]:
    return {
        "dum": setup.last_menstrual_period.isoformat(),
        "dpp": due_date(setup.last_menstrual_period).isoformat(),
        "initial_weight": setup.initial_weight_kg,
        "pre_gestational_height": setup.height_cm,
        "pre_gestational_bmi": bmi(setup.initial_weight_kg, setup.height_cm),
        "blood_type": setup.blood_type.value,
        "spouse_blood_type": setup.spouse_blood_type.value
        if setup.spouse_blood_type
        else None,
        "weight_goal_min": setup.weight_goal_min_kg,
        "weight_goal_max": setup.weight_goal_max_kg,
    }


def _current_weight(
    pregnancy: PregnancyRecord, consultations: list[ConsultationRecord]
) -> float:
    """Latest weighed consultation, falling back to the initial weight."""
    weighed = [c for c in consultations if c.current_weight_kg > 0]
    if not weighed:
        return pregnancy.initial_weight_kg
    latest = max(weighed, key=lambda consultation: consultation.consulted_at)
    return latest.current_weight_kg
