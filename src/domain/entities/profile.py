"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Public-facing portfolio owner record, one per Supabase user."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    bio: str = ""
    avatar_url: str | None = None
    is_featured: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
