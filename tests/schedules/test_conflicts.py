from datetime import date, time

from clinic_timepay.schedules.conflicts import conflicts_by_date, find_conflicts
from clinic_timepay.schedules.model import ShiftAssignment

DAY = date(2026, 3, 2)


def shift(employee_id: int, start: int, end: int, *, day: date = DAY, schedule_id: int = 0) -> ShiftAssignment:
    return ShiftAssignment(
        schedule_id=schedule_id,
        employee_id=employee_id,
        work_date=day,
        start_time=time(start),
        end_time=time(end),
    )


def test_overlapping_shifts_for_same_employee_conflict():
    a = shift(1, 9, 13, schedule_id=1)
    b = shift(1, 12, 16, schedule_id=2)

    assert find_conflicts([a, b]) == [(a, b)]


def test_detection_is_symmetric():
    a = shift(1, 9, 13, schedule_id=1)
    b = shift(1, 12, 16, schedule_id=2)

    assert len(find_conflicts([a, b])) == len(find_conflicts([b, a])) == 1
    assert find_conflicts([b, a]) == [(b, a)]


def test_back_to_back_shifts_do_not_conflict():
    assert find_conflicts([shift(1, 8, 12), shift(1, 12, 16)]) == []


def test_different_employees_never_conflict():
    assert find_conflicts([shift(1, 8, 16), shift(2, 8, 16)]) == []


def test_three_way_overlap_reports_each_pair():
    shifts = [shift(1, 8, 16, schedule_id=1), shift(1, 10, 12, schedule_id=2), shift(1, 11, 18, schedule_id=3)]

    assert len(find_conflicts(shifts)) == 3


def test_conflicts_grouped_by_day():
    other_day = date(2026, 3, 3)
    shifts = [
        shift(1, 8, 16, schedule_id=1),
        shift(1, 15, 20, schedule_id=2),
        shift(1, 8, 16, day=other_day, schedule_id=3),
        shift(1, 16, 20, day=other_day, schedule_id=4),
    ]

    result = conflicts_by_date(shifts)

    assert list(result) == [DAY]
    assert len(result[DAY]) == 1
