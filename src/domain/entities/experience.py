"""Experience domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4


@dataclass
class Experience:
    """Domain entity for a work experience entry on a profile."""

    profile_id: UUID
    company: str
    role: str
    id: UUID = field(default_factory=uuid4)
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None
    order_index: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
