"""Clinic Time & Pay Engine.

This package is organized by feature modules (attendance, schedules, payroll)
with repository protocols for persistence and a thin Flask JSON layer.
"""

__version__ = "0.1.0"
