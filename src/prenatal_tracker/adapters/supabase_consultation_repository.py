"""Supabase repository for consultations."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from prenatal_tracker.domain.pregnancy import ConsultationRecord, ConsultationStatus
from prenatal_tracker.services.pregnancy import ConsultationRepository


@dataclass
class SupabaseConsultationRepository(ConsultationRepository):
    """Supabase implementation for consultation queries."""

    client: Client

    def list_by_patient(self, patient_id: UUID) -> list[ConsultationRecord]:
        """Return a patient's consultations, oldest first."""
        response = (
            self.client.table("consultations")
            .select(
                "id, patient_id, date, gestational_age_weeks, current_weight, status"
            )
            .eq("patient_id", str(patient_id))
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_consulted_at(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        return datetime.min.replace(tzinfo=UTC)
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _parse_row(row: dict[str, object]) -> ConsultationRecord:
    return ConsultationRecord(
        id=UUID(str(row["id"])),
        patient_id=UUID(str(row["patient_id"])),
        consulted_at=_parse_consulted_at(row.get("date")),
        gestational_age_weeks=int(row.get("gestational_age_weeks", 0)),
        current_weight_kg=float(row.get("current_weight") or 0.0),
        status=ConsultationStatus(row.get("status", "SCHEDULED")),
    )
