"""Tests for pregnancy service."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from prenatal_tracker.domain.gestation import BmiCategory
from prenatal_tracker.domain.pregnancy import (
    BloodType,
    ConsultationRecord,
    ConsultationStatus,
    PregnancySetup,
)
from prenatal_tracker.services.pregnancy import (
    PregnancyNotFoundError,
    PregnancyService,
)
from tests.conftest import (
    InMemoryConsultationRepository,
    InMemoryPregnancyRepository,
    make_pregnancy,
)


def _consultation(patient_id, consulted_at, week, weight, status=None):  # type: ignore[no-untyped-def]
    return ConsultationRecord(
        id=uuid4(),
        patient_id=patient_id,
        consulted_at=consulted_at,
        gestational_age_weeks=week,
        current_weight_kg=weight,
        status=status or ConsultationStatus.COMPLETED,
    )


def _setup() -> PregnancySetup:
    return PregnancySetup(
        last_menstrual_period=date(2023, 11, 15),
        initial_weight_kg=70.0,
        height_cm=170.0,
        blood_type=BloodType.A_POS,
        spouse_blood_type=BloodType.O_NEG,
        weight_goal_min_kg=9.0,
        weight_goal_max_kg=12.0,
    )


def test_setup_pregnancy_derives_due_date_and_bmi() -> None:
    pregnancies = InMemoryPregnancyRepository()
    service = PregnancyService(pregnancies, InMemoryConsultationRepository())
    patient_id = uuid4()

    record = service.setup_pregnancy(patient_id, _setup())

    assert record.due_date == date(2024, 8, 22)
    assert record.pre_gestational_bmi == 24.2
    assert record.spouse_blood_type == BloodType.O_NEG
    assert pregnancies.records[patient_id] == record


def test_setup_pregnancy_updates_existing_record() -> None:
    pregnancies = InMemoryPregnancyRepository()
    patient_id = uuid4()
    existing = make_pregnancy(patient_id)
    pregnancies.records[patient_id] = existing
    service = PregnancyService(pregnancies, InMemoryConsultationRepository())

    record = service.setup_pregnancy(patient_id, _setup())

    assert pregnancies.updated == [existing.id]
    assert record.id == existing.id
    assert record.last_menstrual_period == date(2023, 11, 15)


def test_dashboard_uses_latest_weighed_consultation() -> None:
    patient_id = uuid4()
    pregnancies = InMemoryPregnancyRepository()
    pregnancies.records[patient_id] = make_pregnancy(
        patient_id, spouse_blood_type=BloodType.AB_NEG
    )
    consultations = InMemoryConsultationRepository(
        consultations=[
            _consultation(patient_id, datetime(2024, 2, 26, tzinfo=UTC), 8, 63.5),
            _consultation(patient_id, datetime(2024, 4, 1, tzinfo=UTC), 13, 64.8),
            _consultation(
                patient_id,
                datetime(2024, 5, 6, tzinfo=UTC),
                18,
                0,
                ConsultationStatus.SCHEDULED,
            ),
        ]
    )
    service = PregnancyService(pregnancies, consultations)

    dashboard = service.get_dashboard(patient_id, today=date(2024, 4, 1))

    assert dashboard.gestational_age_weeks == 13
    assert dashboard.due_date == date(2024, 10, 8)
    assert dashboard.current_weight_kg == 64.8
    assert dashboard.weight_gain_kg == 2.8
    assert dashboard.current_bmi == 23.8
    assert dashboard.bmi_category == BmiCategory.NORMAL
    assert dashboard.blood_type == "O+"
    assert dashboard.spouse_blood_type == "AB-"
    assert dashboard.development_month == 4


def test_dashboard_falls_back_to_initial_weight() -> None:
    patient_id = uuid4()
    pregnancies = InMemoryPregnancyRepository()
    pregnancies.records[patient_id] = make_pregnancy(patient_id)
    service = PregnancyService(pregnancies, InMemoryConsultationRepository())

    dashboard = service.get_dashboard(patient_id, today=date(2024, 1, 1))

    assert dashboard.current_weight_kg == 62.0
    assert dashboard.weight_gain_kg == 0
    assert dashboard.spouse_blood_type == "N/A"


def test_dashboard_without_height_has_no_category() -> None:
    patient_id = uuid4()
    pregnancies = InMemoryPregnancyRepository()
    pregnancies.records[patient_id] = make_pregnancy(patient_id, height_cm=0.0)
    service = PregnancyService(pregnancies, InMemoryConsultationRepository())

    dashboard = service.get_dashboard(patient_id, today=date(2024, 1, 1))

    assert dashboard.current_bmi == 0
    assert dashboard.bmi_category is None


def test_dashboard_missing_pregnancy_raises() -> None:
    service = PregnancyService(
        InMemoryPregnancyRepository(), InMemoryConsultationRepository()
    )

    with pytest.raises(PregnancyNotFoundError):
        service.get_dashboard(uuid4(), today=date(2024, 1, 1))


def test_growth_curve_skips_unweighed_consultations() -> None:
    patient_id = uuid4()
    pregnancies = InMemoryPregnancyRepository()
    pregnancies.records[patient_id] = make_pregnancy(patient_id)
    consultations = InMemoryConsultationRepository(
        consultations=[
            _consultation(patient_id, datetime(2024, 4, 1, tzinfo=UTC), 13, 64.8),
            _consultation(patient_id, datetime(2024, 2, 26, tzinfo=UTC), 8, 63.5),
            _consultation(patient_id, datetime(2024, 5, 6, tzinfo=UTC), 18, 0),
            _consultation(uuid4(), datetime(2024, 3, 1, tzinfo=UTC), 9, 80.0),
        ]
    )
    service = PregnancyService(pregnancies, consultations)

    points = service.get_growth_curve(patient_id)

    assert [point.week for point in points] == [8, 13]
    assert points[0].bmi == 23.3
    assert points[0].max_normal == pytest.approx(27.2)
