"""Supabase repository for pregnancy data."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from prenatal_tracker.domain.pregnancy import BloodType, PregnancyRecord
from prenatal_tracker.services.pregnancy import PregnancyRepository


@dataclass
class SupabasePregnancyRepository(PregnancyRepository):
    """Supabase implementation for pregnancy data."""

    client: Client

    def get_by_patient(self, patient_id: UUID) -> PregnancyRecord | None:
        """Return the pregnancy row for a patient, if present."""
        response = (
            self.client.table("pregnancy_data")
            .select("*")
            .eq("patient_id", str(patient_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_pregnancy(response.data[0])

    def create(self, patient_id: UUID, payload: dict[str, object]) -> PregnancyRecord:
        """Create a pregnancy row and return it."""
        response = (
            self.client.table("pregnancy_data")
            .insert({"patient_id": str(patient_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create pregnancy data")
        return _parse_pregnancy(response.data[0])

    def update(
        self, pregnancy_id: UUID, payload: dict[str, object]
    ) -> PregnancyRecord:
        """Update a pregnancy row and return it."""
        response = (
            self.client.table("pregnancy_data")
            .update(payload)
            .eq("id", str(pregnancy_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update pregnancy data")
        return _parse_pregnancy(response.data[0])


def _parse_date(value: object) -> date:
    # timestamp columns come back as full ISO datetimes
    return date.fromisoformat(str(value)[:10])


def _parse_pregnancy(row: dict[str, object]) -> PregnancyRecord:
    spouse = row.get("spouse_blood_type")
    return PregnancyRecord(
        id=UUID(str(row["id"])),
        patient_id=UUID(str(row["patient_id"])),
        last_menstrual_period=_parse_date(row["dum"]),
        due_date=_parse_date(row["dpp"]),
        initial_weight_kg=float(row.get("initial_weight", 0.0)),
        height_cm=float(row.get("pre_gestational_height", 0.0)),
        pre_gestational_bmi=float(row.get("pre_gestational_bmi", 0.0)),
        blood_type=BloodType(row["blood_type"]),
        spouse_blood_type=BloodType(spouse) if spouse else None,
        weight_goal_min_kg=float(row.get("weight_goal_min", 0.0)),
        weight_goal_max_kg=float(row.get("weight_goal_max", 0.0)),
    )
