from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from types import ModuleType

from ..common.datetime_utils import parse_clock_time
from ..core import constants
from ..core.enums import OvernightPolicy
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class EngineSettings:
    """Typed view over a settings module, consumed by the services."""

    grace_period_end: time = parse_clock_time(constants.DEFAULT_GRACE_PERIOD_END)
    standard_shift_hours: int = constants.DEFAULT_STANDARD_SHIFT_HOURS
    overnight_policy: OvernightPolicy = OvernightPolicy.REJECT
    base_start_hour: int = constants.DEFAULT_BASE_START_HOUR
    stagger_hours: int = constants.DEFAULT_STAGGER_HOURS
    cutoff_hour: int = constants.DEFAULT_CUTOFF_HOUR
    health_insurance_rate: Decimal = Decimal("0.05")

    @classmethod
    def from_module(cls, settings: ModuleType) -> "EngineSettings":
        defaults = cls()
        policy = getattr(settings, "OVERNIGHT_POLICY", defaults.overnight_policy.value)
        try:
            overnight_policy = OvernightPolicy(str(policy).lower())
        except ValueError:
            raise ValidationError(f"Unknown OVERNIGHT_POLICY {policy!r}") from None

        return cls(
            grace_period_end=parse_clock_time(
                getattr(settings, "GRACE_PERIOD_END", constants.DEFAULT_GRACE_PERIOD_END)
            ),
            standard_shift_hours=int(getattr(settings, "STANDARD_SHIFT_HOURS", defaults.standard_shift_hours)),
            overnight_policy=overnight_policy,
            base_start_hour=int(getattr(settings, "BASE_START_HOUR", defaults.base_start_hour)),
            stagger_hours=int(getattr(settings, "STAGGER_HOURS", defaults.stagger_hours)),
            cutoff_hour=int(getattr(settings, "CUTOFF_HOUR", defaults.cutoff_hour)),
            health_insurance_rate=Decimal(str(getattr(settings, "HEALTH_INSURANCE_RATE", defaults.health_insurance_rate))),
        )
