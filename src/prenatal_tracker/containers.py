"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from prenatal_tracker.adapters.supabase_consultation_repository import (
    SupabaseConsultationRepository,
)
from prenatal_tracker.adapters.supabase_pregnancy_repository import (
    SupabasePregnancyRepository,
)
from prenatal_tracker.adapters.supabase_tip_repository import SupabaseTipRepository
from prenatal_tracker.config import Settings
from prenatal_tracker.services.pregnancy import PregnancyService
from prenatal_tracker.services.tips import TipsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pregnancy_service: PregnancyService
    tips_service: TipsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    pregnancy_service = PregnancyService(
        pregnancy_repository=SupabasePregnancyRepository(supabase_client),
        consultation_repository=SupabaseConsultationRepository(supabase_client),
    )
    tips_service = TipsService(SupabaseTipRepository(supabase_client))
    return AppContainer(
        settings=resolved_settings,
        pregnancy_service=pregnancy_service,
        tips_service=tips_service,
    )
