"""Statutory deductions computed from gross pay.

All four formulas read their numbers from a single ``DeductionPolicy`` table
so a rate change happens in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from ..common.money import round2, to_decimal
from .model import DeductionBreakdown


@dataclass(frozen=True)
class TaxBracket:
    """Gross up to ``upper`` (inclusive, ``None`` = no limit) pays ``base`` + ``rate`` over ``floor``."""

    upper: Decimal | None
    floor: Decimal
    base: Decimal
    rate: Decimal


def _d(value: str) -> Decimal:
    return Decimal(value)


DEFAULT_TAX_BRACKETS = (
    TaxBracket(upper=_d("20833"), floor=_d("0"), base=_d("0"), rate=_d("0")),
    TaxBracket(upper=_d("33333"), floor=_d("20833"), base=_d("0"), rate=_d("0.15")),
    TaxBracket(upper=_d("66667"), floor=_d("33333"), base=_d("1875"), rate=_d("0.20")),
    TaxBracket(upper=_d("166667"), floor=_d("66667"), base=_d("8541.80"), rate=_d("0.25")),
    TaxBracket(upper=_d("666667"), floor=_d("166667"), base=_d("33541.80"), rate=_d("0.30")),
    TaxBracket(upper=None, floor=_d("666667"), base=_d("183541.80"), rate=_d("0.35")),
)


@dataclass(frozen=True)
class DeductionPolicy:
    tax_brackets: tuple[TaxBracket, ...] = DEFAULT_TAX_BRACKETS

    # Social insurance
    social_min_gross: Decimal = _d("4000")
    social_min_contribution: Decimal = _d("180")
    social_max_gross: Decimal = _d("30000")
    social_max_contribution: Decimal = _d("1350")
    social_bracket_step: Decimal = _d("1000")
    social_rate: Decimal = _d("0.045")

    # Health insurance
    health_min_gross: Decimal = _d("10000")
    health_min_contribution: Decimal = _d("500")
    health_max_gross: Decimal = _d("100000")
    health_max_contribution: Decimal = _d("5000")
    health_rate: Decimal = _d("0.05")

    # Housing fund
    housing_low_gross: Decimal = _d("1500")
    housing_low_rate: Decimal = _d("0.01")
    housing_rate: Decimal = _d("0.02")
    housing_cap: Decimal = _d("200")

    def withholding_tax(self, gross: Decimal) -> Decimal:
        for bracket in self.tax_brackets:
            if bracket.upper is None or gross <= bracket.upper:
                return bracket.base + (gross - bracket.floor) * bracket.rate
        raise AssertionError("tax bracket table must end with an open bracket")

    def social_insurance(self, gross: Decimal) -> Decimal:
        if gross < self.social_min_gross:
            return self.social_min_contribution
        if gross >= self.social_max_gross:
            return self.social_max_contribution
        steps = (gross / self.social_bracket_step).to_integral_value(rounding=ROUND_FLOOR)
        return min(steps * self.social_bracket_step * self.social_rate, self.social_max_contribution)

    def health_insurance(self, gross: Decimal) -> Decimal:
        if gross <= self.health_min_gross:
            return self.health_min_contribution
        if gross >= self.health_max_gross:
            return self.health_max_contribution
        return gross * self.health_rate

    def housing_fund(self, gross: Decimal) -> Decimal:
        if gross <= self.housing_low_gross:
            return gross * self.housing_low_rate
        return min(gross * self.housing_rate, self.housing_cap)

    def breakdown(self, gross_pay: Decimal | int | str) -> DeductionBreakdown:
        gross = to_decimal(gross_pay)
        return DeductionBreakdown(
            withholding_tax=round2(self.withholding_tax(gross)),
            social_insurance=round2(self.social_insurance(gross)),
            health_insurance=round2(self.health_insurance(gross)),
            housing_fund=round2(self.housing_fund(gross)),
        )
