"""Supabase repository for tips."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from prenatal_tracker.domain.tips import Tip
from prenatal_tracker.services.tips import TipRepository


@dataclass
class SupabaseTipRepository(TipRepository):
    """Supabase implementation for tips."""

    client: Client

    def list_tips(self) -> list[Tip]:
        """Return all tips."""
        response = self.client.table("tips").select("*").execute()
        return [
            Tip(
                id=UUID(str(row["id"])),
                month=int(row.get("month", 0)),
                category=str(row.get("category") or ""),
                title=str(row.get("title") or ""),
                content=str(row.get("content") or ""),
                read_time=str(row.get("read_time") or ""),
            )
            for row in response.data or []
        ]
