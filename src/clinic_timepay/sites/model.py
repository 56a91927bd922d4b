from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorkSite:
    """A clinic branch where shifts are worked."""

    site_id: int
    name: str
    code: Optional[str] = None
    is_active: bool = True
