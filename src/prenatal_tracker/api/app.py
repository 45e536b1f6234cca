"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date, datetime
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from prenatal_tracker.api.models import (
    CalculatorSummaryRequest,
    GrowthCurveRequest,
    PregnancySetupRequest,
)
from prenatal_tracker.app_logging import configure_logging
from prenatal_tracker.config import parse_timezone
from prenatal_tracker.containers import AppContainer
from prenatal_tracker.domain.gestation import (
    AnthropometricProfile,
    GrowthPoint,
    WeightObservation,
)
from prenatal_tracker.domain.pregnancy import PregnancyDashboard, PregnancyRecord
from prenatal_tracker.domain.tips import Tip
from prenatal_tracker.domain.timeline import TimelineEntry
from prenatal_tracker.services.gestation import (
    bmi,
    build_growth_curve,
    classify_bmi,
    development_month,
    due_date,
    gestational_age_weeks,
)
from prenatal_tracker.services.pregnancy import PregnancyNotFoundError
from prenatal_tracker.services.timeline import timeline_for_week


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    tz = parse_timezone(container.settings.default_timezone)

    app = FastAPI(title="Prenatal Tracker")
    app.state.container = container

    def _today(value: date | None) -> date:
        return value or datetime.now(tz=tz).date()

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/patients/{patient_id}/pregnancy")
    async def get_pregnancy(patient_id: UUID, request: Request) -> dict[str, object]:
        """Return the stored pregnancy data."""
        state_container: AppContainer = request.app.state.container
        record = state_container.pregnancy_service.get_pregnancy(patient_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _serialize_pregnancy(record)

    @app.put("/patients/{patient_id}/pregnancy")
    async def setup_pregnancy(
        patient_id: UUID, payload: PregnancySetupRequest, request: Request
    ) -> dict[str, object]:
        """Create or replace pregnancy data from the setup form."""
        state_container: AppContainer = request.app.state.container
        record = state_container.pregnancy_service.setup_pregnancy(
            patient_id, payload.to_domain()
        )
        return _serialize_pregnancy(record)

    @app.get("/patients/{patient_id}/dashboard")
    async def dashboard(
        patient_id: UUID, request: Request, today: date | None = None
    ) -> dict[str, object]:
        """Return derived dashboard values."""
        state_container: AppContainer = request.app.state.container
        try:
            summary = state_container.pregnancy_service.get_dashboard(
                patient_id, _today(today)
            )
        except PregnancyNotFoundError as exc:
            logger.info("Dashboard requested without pregnancy: %s", patient_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return _serialize_dashboard(summary)

    @app.get("/patients/{patient_id}/growth-curve")
    async def growth_curve(patient_id: UUID, request: Request) -> dict[str, object]:
        """Return the patient's weight/BMI curve."""
        state_container: AppContainer = request.app.state.container
        try:
            points = state_container.pregnancy_service.get_growth_curve(patient_id)
        except PregnancyNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return {"points": [_serialize_point(point) for point in points]}

    @app.get("/patients/{patient_id}/timeline")
    async def timeline(
        patient_id: UUID, request: Request, today: date | None = None
    ) -> dict[str, object]:
        """Return the fetal development timeline for the current week."""
        state_container: AppContainer = request.app.state.container
        record = state_container.pregnancy_service.get_pregnancy(patient_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        weeks = gestational_age_weeks(
            record.gestation.last_menstrual_period, _today(today)
        )
        return {
            "gestational_age_weeks": weeks,
            "stages": [_serialize_timeline(entry) for entry in timeline_for_week(weeks)],
        }

    @app.get("/tips")
    async def list_tips(request: Request, week: int | None = None) -> dict[str, object]:
        """Return tips, optionally only those for a gestational week."""
        state_container: AppContainer = request.app.state.container
        if week is None:
            tips = state_container.tips_service.list_tips()
        else:
            tips = state_container.tips_service.tips_for_week(week)
        return {"tips": [_serialize_tip(tip) for tip in tips]}

    @app.post("/calculator/summary")
    async def calculator_summary(payload: CalculatorSummaryRequest) -> dict[str, object]:
        """Compute gestational dates and BMI without touching storage."""
        gestation = payload.to_gestation()
        weeks = gestational_age_weeks(
            gestation.last_menstrual_period, _today(payload.today)
        )
        result: dict[str, object] = {
            "due_date": due_date(gestation.last_menstrual_period).isoformat(),
            "gestational_age_weeks": weeks,
            "development_month": development_month(weeks),
            "bmi": None,
            "bmi_category": None,
        }
        if payload.weight_kg is not None and payload.height_cm is not None:
            value = bmi(payload.weight_kg, payload.height_cm)
            result["bmi"] = value
            result["bmi_category"] = classify_bmi(value).value if value > 0 else None
        return result

    @app.post("/calculator/growth-curve")
    async def calculator_growth_curve(payload: GrowthCurveRequest) -> dict[str, object]:
        """Build a growth curve from posted observations."""
        points = build_growth_curve(
            [
                WeightObservation(
                    gestational_age_weeks=obs.gestational_age_weeks,
                    weight_kg=obs.weight_kg,
                )
                for obs in payload.observations
            ],
            AnthropometricProfile(height_cm=payload.height_cm),
        )
        return {"points": [_serialize_point(point) for point in points]}

    return app


def _serialize_pregnancy(record: PregnancyRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "patient_id": str(record.patient_id),
        "last_menstrual_period": record.last_menstrual_period.isoformat(),
        "due_date": record.due_date.isoformat(),
        "initial_weight_kg": record.initial_weight_kg,
        "height_cm": record.height_cm,
        "pre_gestational_bmi": record.pre_gestational_bmi,
        "blood_type": record.blood_type.value,
        "spouse_blood_type": record.spouse_blood_type.value
        if record.spouse_blood_type
        else None,
        "weight_goal_min_kg": record.weight_goal_min_kg,
        "weight_goal_max_kg": record.weight_goal_max_kg,
    }


def _serialize_dashboard(summary: PregnancyDashboard) -> dict[str, object]:
    data = asdict(summary)
    data["patient_id"] = str(summary.patient_id)
    data["due_date"] = summary.due_date.isoformat()
    data["bmi_category"] = summary.bmi_category.value if summary.bmi_category else None
    return data


def _serialize_point(point: GrowthPoint) -> dict[str, object]:
    return {
        "week": point.week,
        "bmi": point.bmi,
        "weight": point.weight,
        "min_normal": point.min_normal,
        "max_normal": point.max_normal,
    }


def _serialize_tip(tip: Tip) -> dict[str, object]:
    return {
        "id": str(tip.id),
        "month": tip.month,
        "category": tip.category,
        "title": tip.title,
        "content": tip.content,
        "read_time": tip.read_time,
    }


def _serialize_timeline(entry: TimelineEntry) -> dict[str, object]:
    return {
        "month": entry.stage.month,
        "weeks": entry.stage.weeks,
        "size": entry.stage.size,
        "description": entry.stage.description,
        "status": entry.status,
    }
