"""Category aggregate: a flat label products can optionally point to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Category:

    id: str
    name: str
    description: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
