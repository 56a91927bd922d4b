"""Advisory overlap detection for shift assignments.

Nothing here blocks the creation of overlapping assignments; callers use the
result to flag problems.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Sequence

from .model import ShiftAssignment

ConflictPair = tuple[ShiftAssignment, ShiftAssignment]


def overlaps(a: ShiftAssignment, b: ShiftAssignment) -> bool:
    # Half-open [start, end): back-to-back shifts do not overlap.
    return a.start_time < b.end_time and b.start_time < a.end_time


def find_conflicts(assignments: Sequence[ShiftAssignment]) -> list[ConflictPair]:
    """Return every overlapping same-employee, same-date pair, in input order."""
    conflicts: list[ConflictPair] = []
    for i in range(len(assignments)):
        for j in range(i + 1, len(assignments)):
            a, b = assignments[i], assignments[j]
            if a.employee_id != b.employee_id or a.work_date != b.work_date:
                continue
            if overlaps(a, b):
                conflicts.append((a, b))
    return conflicts


def conflicts_by_date(assignments: Iterable[ShiftAssignment]) -> dict[date, list[ConflictPair]]:
    by_day: dict[date, list[ShiftAssignment]] = defaultdict(list)
    for assignment in assignments:
        by_day[assignment.work_date].append(assignment)

    result: dict[date, list[ConflictPair]] = {}
    for day in sorted(by_day):
        pairs = find_conflicts(by_day[day])
        if pairs:
            result[day] = pairs
    return result
