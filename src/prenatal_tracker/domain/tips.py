"""Domain models for pregnancy tips."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Tip:
    """Editorial tip attached to a pregnancy month."""

    id: UUID
    month: int
    category: str
    title: str
    content: str
    read_time: str
