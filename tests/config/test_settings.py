from datetime import time
from decimal import Decimal
from types import SimpleNamespace

import pytest

from clinic_timepay.config import get_settings_module
from clinic_timepay.config.settings import EngineSettings
from clinic_timepay.core.enums import OvernightPolicy
from clinic_timepay.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "clinic_timepay.config.production"),
        ("PROD", "clinic_timepay.config.production"),
        ("testing", "clinic_timepay.config.testing"),
        ("anything", "clinic_timepay.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_engine_settings_read_module_values():
    module = SimpleNamespace(
        GRACE_PERIOD_END="08:30",
        OVERNIGHT_POLICY="NEXT_DAY",
        CUTOFF_HOUR=22,
        HEALTH_INSURANCE_RATE="0.025",
    )

    settings = EngineSettings.from_module(module)

    assert settings.grace_period_end == time(8, 30)
    assert settings.overnight_policy is OvernightPolicy.NEXT_DAY
    assert settings.cutoff_hour == 22
    assert settings.standard_shift_hours == 8
    assert settings.health_insurance_rate == Decimal("0.025")


def test_unknown_overnight_policy_is_rejected():
    with pytest.raises(ValidationError):
        EngineSettings.from_module(SimpleNamespace(OVERNIGHT_POLICY="whatever"))
