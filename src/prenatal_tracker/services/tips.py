"""Tips service."""

from dataclasses import dataclass
from typing import Protocol

from prenatal_tracker.domain.tips import Tip
from prenatal_tracker.services.gestation import development_month


class TipRepository(Protocol):
    """Persistence interface for tips."""

    def list_tips(self) -> list[Tip]:
        """Return all tips."""


@dataclass
class TipsService:
    """Service for month-based pregnancy tips."""

    repository: TipRepository

    def list_tips(self) -> list[Tip]:
        """Return all tips ordered by month."""
        return sorted(self.repository.list_tips(), key=lambda tip: tip.month)

    def tips_for_week(self, week: int) -> list[Tip]:
        """Return tips for the pregnancy month containing ``week``."""
        month = development_month(week)
        return [tip for tip in self.list_tips() if tip.month == month]
