from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as seen by the engine.

    Note: Owned by the employee directory; the engine only reads it.
    """

    employee_id: int
    full_name: str
    hourly_rate: Decimal
    is_active: bool = True
    primary_site_id: Optional[int] = None
    position: Optional[str] = None
