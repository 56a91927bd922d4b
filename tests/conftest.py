from __future__ import annotations

import pytest

from fakes import InMemoryAttendance, InMemoryEmployees, InMemoryPayroll, InMemorySchedules, InMemorySites, make_employee


@pytest.fixture
def employees_repo():
    return InMemoryEmployees([make_employee(1), make_employee(2, rate="150"), make_employee(3, active=False)])


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def schedules_repo():
    return InMemorySchedules()


@pytest.fixture
def payroll_repo():
    return InMemoryPayroll()


@pytest.fixture
def sites_repo():
    return InMemorySites()
