from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class DeductionBreakdown:
    withholding_tax: Decimal
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal

    @property
    def total(self) -> Decimal:
        return self.withholding_tax + self.social_insurance + self.health_insurance + self.housing_fund


@dataclass(frozen=True)
class PayrollCalculation:
    """Result of the payroll formulas for one employee and period."""

    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    deductions: DeductionBreakdown
    net_pay: Decimal


@dataclass(frozen=True)
class PayrollEntry:
    """Domain entity: one employee's payroll for one pay period."""

    payroll_id: Optional[int]
    employee_id: int
    period_start: date
    period_end: date
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    deductions: DeductionBreakdown
    net_pay: Decimal
    status: PayrollStatus = PayrollStatus.PENDING

    @classmethod
    def from_calculation(
        cls,
        calc: PayrollCalculation,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
    ) -> "PayrollEntry":
        return cls(
            payroll_id=None,
            employee_id=employee_id,
            period_start=period_start,
            period_end=period_end,
            regular_hours=calc.regular_hours,
            overtime_hours=calc.overtime_hours,
            regular_pay=calc.regular_pay,
            overtime_pay=calc.overtime_pay,
            gross_pay=calc.gross_pay,
            deductions=calc.deductions,
            net_pay=calc.net_pay,
            status=PayrollStatus.PENDING,
        )
