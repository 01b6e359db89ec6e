"""Identity domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Identity:
    """Authenticated account with a stable opaque handle."""

    handle: str
    email: str
    created_at: datetime
