from datetime import date, time
from decimal import Decimal

from clinic_timepay.schedules.balancer import (
    SchedulingState,
    SlotRules,
    employees_needed,
    plan_day,
    select_candidates,
    select_round_robin,
)
from clinic_timepay.sites.model import WorkSite

from fakes import make_employee

DAY = date(2026, 3, 2)


def test_least_loaded_employee_is_selected_first():
    pool = [make_employee(i) for i in range(1, 6)]
    hours = {1: Decimal(40), 2: Decimal(40), 3: Decimal(42), 4: Decimal(10), 5: Decimal(40)}

    selected = select_candidates(pool, hours, {}, 5)

    assert selected[0].employee_id == 4


def test_hours_within_two_are_ordered_by_reliability():
    pool = [make_employee(1), make_employee(2), make_employee(3)]
    hours = {1: Decimal(40), 2: Decimal(41), 3: Decimal(42)}
    reliability = {1: 70, 2: 95, 3: 80}

    selected = select_candidates(pool, hours, reliability, 3)

    assert [e.employee_id for e in selected] == [2, 3, 1]


def test_full_ties_keep_input_order():
    pool = [make_employee(1), make_employee(2), make_employee(3)]

    selected = select_candidates(pool, {}, {}, 2)

    assert [e.employee_id for e in selected] == [1, 2]


def test_employees_needed_rounds_up_and_caps_at_headcount():
    assert employees_needed(5, 5) == 4
    assert employees_needed(7, 5) == 5
    assert employees_needed(3, 7) == 3
    assert employees_needed(1, 1) == 1


def test_round_robin_wraps_around_the_pool():
    pool = [make_employee(1), make_employee(2), make_employee(3)]

    assert [e.employee_id for e in select_round_robin(pool, 2, 3)] == [3, 1, 2]


def test_plan_day_staggers_starts_and_drops_past_cutoff():
    employees = [make_employee(i) for i in range(1, 8)]

    plan, _ = plan_day(
        SchedulingState(),
        work_date=DAY,
        employees=employees,
        sites=[],
        reliability={},
        work_days_per_week=5,
        shift_hours=8,
        balance_workload=True,
    )

    starts = [(p.start_time, p.end_time) for p in plan.proposals]
    assert starts == [(time(8), time(16)), (time(10), time(18)), (time(12), time(20))]
    assert [e.employee_id for e in plan.dropped] == [4, 5]


def test_plan_day_assigns_primary_site_then_round_robin_sites():
    employees = [make_employee(1, site=99), make_employee(2), make_employee(3)]
    sites = [WorkSite(site_id=10, name="North"), WorkSite(site_id=20, name="South")]

    plan, _ = plan_day(
        SchedulingState(),
        work_date=DAY,
        employees=employees,
        sites=sites,
        reliability={},
        work_days_per_week=7,
        shift_hours=4,
        balance_workload=True,
    )

    assert [p.site_id for p in plan.proposals] == [99, 20, 10]


def test_round_robin_cursor_lives_in_state():
    employees = [make_employee(i) for i in range(1, 8)]
    state = SchedulingState()
    picked = []
    for _ in range(4):
        plan, state = plan_day(
            state,
            work_date=DAY,
            employees=employees,
            sites=[],
            reliability={},
            work_days_per_week=2,
            shift_hours=8,
            balance_workload=False,
        )
        picked.append([p.employee_id for p in plan.proposals])

    assert picked == [[1, 2], [3, 4], [5, 6], [7, 1]]
    assert state.cursor == 8


def test_state_updates_do_not_mutate_previous_state():
    first = SchedulingState()
    second = first.add_hours(1, 8)

    assert first.hours_for(1) == 0
    assert second.hours_for(1) == Decimal(8)


def test_custom_slot_rules():
    employees = [make_employee(1), make_employee(2)]

    plan, _ = plan_day(
        SchedulingState(),
        work_date=DAY,
        employees=employees,
        sites=[],
        reliability={},
        work_days_per_week=7,
        shift_hours=6,
        balance_workload=True,
        rules=SlotRules(base_start_hour=7, stagger_hours=3, cutoff_hour=15),
    )

    assert [(p.start_time, p.end_time) for p in plan.proposals] == [(time(7), time(13))]
    assert [e.employee_id for e in plan.dropped] == [2]
