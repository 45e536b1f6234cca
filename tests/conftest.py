"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from prenatal_tracker.config import Settings
from prenatal_tracker.containers import AppContainer
from prenatal_tracker.domain.pregnancy import (
    BloodType,
    ConsultationRecord,
    PregnancyRecord,
)
from prenatal_tracker.domain.tips import Tip
from prenatal_tracker.services.pregnancy import (
    ConsultationRepository,
    PregnancyRepository,
    PregnancyService,
)
from prenatal_tracker.services.tips import TipRepository, TipsService


@dataclass
class InMemoryPregnancyRepository(PregnancyRepository):
    """In-memory pregnancy repository for tests."""

    records: dict[UUID, PregnancyRecord] = field(default_factory=dict)
    updated: list[UUID] = field(default_factory=list)

    def get_by_patient(self, patient_id: UUID) -> PregnancyRecord | None:
        return self.records.get(patient_id)

    def create(self, patient_id: UUID, payload: dict[str, object]) -> PregnancyRecord:
        record = _record_from_payload(uuid4(), patient_id, payload)
        self.records[patient_id] = record
        return record

    def update(
        self, pregnancy_id: UUID, payload: dict[str, object]
    ) -> PregnancyRecord:
        self.updated.append(pregnancy_id)
        for patient_id, existing in self.records.items():
            if existing.id == pregnancy_id:
                record = _record_from_payload(pregnancy_id, patient_id, payload)
                self.records[patient_id] = record
                return record
        raise RuntimeError("Unknown pregnancy id")


def _record_from_payload(
    pregnancy_id: UUID, patient_id: UUID, payload: dict[str, object]
) -> PregnancyRecord:
    spouse = payload.get("spouse_blood_type")
    return PregnancyRecord(
        id=pregnancy_id,
        patient_id=patient_id,
        last_menstrual_period=date.fromisoformat(str(payload["dum"])),
        due_date=date.fromisoformat(str(payload["dpp"])),
        initial_weight_kg=float(payload["initial_weight"]),
        height_cm=float(payload["pre_gestational_height"]),
        pre_gestational_bmi=float(payload["pre_gestational_bmi"]),
        blood_type=BloodType(payload["blood_type"]),
        spouse_blood_type=BloodType(spouse) if spouse else None,
        weight_goal_min_kg=float(payload["weight_goal_min"]),
        weight_goal_max_kg=float(payload["weight_goal_max"]),
    )


@dataclass
class InMemoryConsultationRepository(ConsultationRepository):
    """In-memory consultation repository for tests."""

    consultations: list[ConsultationRecord] = field(default_factory=list)

    def list_by_patient(self, patient_id: UUID) -> list[ConsultationRecord]:
        matching = [c for c in self.consultations if c.patient_id == patient_id]
        return sorted(matching, key=lambda c: c.consulted_at)


@dataclass
class InMemoryTipRepository(TipRepository):
    """In-memory tip repository for tests."""

    tips: list[Tip] = field(default_factory=list)

    def list_tips(self) -> list[Tip]:
        return list(self.tips)


def make_pregnancy(patient_id: UUID, **overrides: object) -> PregnancyRecord:
    values: dict[str, object] = {
        "id": uuid4(),
        "patient_id": patient_id,
        "last_menstrual_period": date(2024, 1, 1),
        "due_date": date(2024, 10, 8),
        "initial_weight_kg": 62.0,
        "height_cm": 165.0,
        "pre_gestational_bmi": 22.8,
        "blood_type": BloodType.O_POS,
        "spouse_blood_type": None,
        "weight_goal_min_kg": 9.0,
        "weight_goal_max_kg": 12.0,
    }
    values.update(overrides)
    return PregnancyRecord(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def pregnancy_repository() -> InMemoryPregnancyRepository:
    return InMemoryPregnancyRepository()


@pytest.fixture
def consultation_repository() -> InMemoryConsultationRepository:
    return InMemoryConsultationRepository()


@pytest.fixture
def tip_repository() -> InMemoryTipRepository:
    return InMemoryTipRepository()


@pytest.fixture
def container(
    settings: Settings,
    pregnancy_repository: InMemoryPregnancyRepository,
    consultation_repository: InMemoryConsultationRepository,
    tip_repository: InMemoryTipRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        pregnancy_service=PregnancyService(
            pregnancy_repository=pregnancy_repository,
            consultation_repository=consultation_repository,
        ),
        tips_service=TipsService(tip_repository),
    )
