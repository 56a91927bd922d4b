from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .config.settings import EngineSettings
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.deductions import DeductionPolicy
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .sites.mysql_site_repository import MySQLSiteRepository
from .sites.repository import SiteRepository


@dataclass(frozen=True)
class Container:
    settings: EngineSettings

    employees_repo: EmployeeRepository
    sites_repo: SiteRepository
    attendance_repo: AttendanceRepository
    schedules_repo: ScheduleRepository
    payroll_repo: PayrollRepository

    attendance_service: AttendanceService
    schedule_service: ScheduleService
    payroll_service: PayrollService

    conn: Optional[DatabaseConnection] = None


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    sites_repo: SiteRepository,
    attendance_repo: AttendanceRepository,
    schedules_repo: ScheduleRepository,
    payroll_repo: PayrollRepository,
    settings: Optional[EngineSettings] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    settings = settings or EngineSettings()

    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        settings=settings,
    )
    schedule_service = ScheduleService(
        schedules_repo,
        employees_repo,
        attendance_repo,
        sites_repo,
        settings=settings,
    )
    calculator = StandardPayrollCalculator(DeductionPolicy(health_rate=settings.health_insurance_rate))
    payroll_service = PayrollService(payroll_repo, employees_repo, attendance_repo, calculator=calculator)

    return Container(
        settings=settings,
        employees_repo=employees_repo,
        sites_repo=sites_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        payroll_repo=payroll_repo,
        attendance_service=attendance_service,
        schedule_service=schedule_service,
        payroll_service=payroll_service,
        conn=conn,
    )


def build_container(*, db_config: dict, settings: Optional[EngineSettings] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        sites_repo=MySQLSiteRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        settings=settings,
        conn=conn,
    )
