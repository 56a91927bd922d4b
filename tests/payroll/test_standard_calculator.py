from datetime import date, time, timedelta
from decimal import Decimal

from clinic_timepay.attendance.model import AttendanceRecord
from clinic_timepay.core.enums import AttendanceStatus
from clinic_timepay.payroll.calculator.standard_calculator import StandardPayrollCalculator


def worked(day: date, total: str, overtime: str) -> AttendanceRecord:
    total_d = Decimal(total)
    overtime_d = Decimal(overtime)
    return AttendanceRecord(
        attendance_id=None,
        employee_id=1,
        work_date=day,
        clock_in=time(8),
        clock_out=time(17),
        status=AttendanceStatus.PRESENT,
        total_hours=total_d,
        regular_hours=total_d - overtime_d,
        overtime_hours=overtime_d,
    )


def test_monthly_scenario_with_overtime():
    start = date(2026, 3, 2)
    records = [worked(start + timedelta(days=i), "8.50", "0.50") for i in range(20)]

    calc = StandardPayrollCalculator().calculate(hourly_rate=Decimal("100"), records=records)

    assert calc.regular_hours == Decimal("160.00")
    assert calc.overtime_hours == Decimal("10.00")
    assert calc.regular_pay == Decimal("16000.00")
    assert calc.overtime_pay == Decimal("1500.00")
    assert calc.gross_pay == Decimal("17500.00")
    assert calc.deductions.withholding_tax == Decimal("0.00")
    assert calc.deductions.social_insurance == Decimal("765.00")
    assert calc.deductions.health_insurance == Decimal("875.00")
    assert calc.deductions.housing_fund == Decimal("200.00")
    assert calc.net_pay == Decimal("15660.00")


def test_gross_and_net_add_up_exactly():
    records = [
        worked(date(2026, 3, 2), "9.33", "1.33"),
        worked(date(2026, 3, 3), "7.17", "0"),
        worked(date(2026, 3, 4), "11.02", "3.02"),
    ]

    calc = StandardPayrollCalculator().calculate(hourly_rate=Decimal("123.45"), records=records)

    assert calc.gross_pay == calc.regular_pay + calc.overtime_pay
    assert calc.net_pay == calc.gross_pay - calc.deductions.total
    assert calc.regular_hours == Decimal("23.17")
    assert calc.overtime_hours == Decimal("4.35")


def test_open_records_carry_no_hours():
    open_record = AttendanceRecord(
        attendance_id=None,
        employee_id=1,
        work_date=date(2026, 3, 2),
        clock_in=time(8),
        status=AttendanceStatus.LATE,
    )

    calc = StandardPayrollCalculator().calculate(hourly_rate=Decimal("100"), records=[open_record])

    assert calc.gross_pay == Decimal("0.00")
