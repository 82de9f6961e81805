from datetime import date, timedelta

import pytest

from cyclekinetics.compounds import find_compound
from cyclekinetics.dosing import dose_dates, every_n_days, for_compound, plot_dates, single_dose, to_timestamp
from cyclekinetics.helpers import group_schedules, group_schedules_by_type
from cyclekinetics.types import DosingSchedule


def test_plot_dates_are_consecutive_calendar_days():
    # spans the March DST switch in most zones; calendar arithmetic is unaffected
    dates = plot_dates(date(2024, 3, 28), date(2024, 4, 2))
    assert dates == tuple(date(2024, m, d) for m, d in
                          [(3, 28), (3, 29), (3, 30), (3, 31), (4, 1), (4, 2)])


def test_plot_dates_extra_days_and_reversed_window():
    assert len(plot_dates(date(2024, 1, 1), date(2024, 1, 1), 28)) == 29
    assert plot_dates(date(2024, 3, 1), date(2024, 1, 1), 28) == ()


def test_dose_dates_stop_at_end_date():
    s = every_n_days("A", 100, 7, date(2024, 1, 1), date(2024, 1, 29), 24)
    assert list(dose_dates(s)) == [date(2024, 1, d) for d in (1, 8, 15, 22, 29)]


def test_dose_dates_respect_until():
    s = every_n_days("A", 100, 3, date(2024, 1, 1), date(2024, 2, 1), 24)
    assert list(dose_dates(s, until=date(2024, 1, 9))) == [date(2024, 1, d) for d in (1, 4, 7)]


def test_dose_dates_degenerate_schedules():
    reversed_window = DosingSchedule("A", 100, 7, date(2024, 2, 1), date(2024, 1, 1), 24)
    zero_period = DosingSchedule("B", 100, 0, date(2024, 1, 1), date(2024, 2, 1), 24)
    assert list(dose_dates(reversed_window)) == []
    assert list(dose_dates(zero_period)) == []


def test_to_timestamp_is_local_midnight():
    assert to_timestamp(date(2024, 1, 1)) == "2024-01-01T00:00:00"


def test_builders_validate_inputs():
    with pytest.raises(ValueError, match="amount must be > 0"):
        single_dose("A", 0, date(2024, 1, 1), 24)
    with pytest.raises(ValueError, match="half_life_hours must be > 0"):
        every_n_days("A", 100, 7, date(2024, 1, 1), date(2024, 2, 1), 0)
    with pytest.raises(ValueError, match="every_days must be a positive integer"):
        every_n_days("A", 100, 1.5, date(2024, 1, 1), date(2024, 2, 1), 24)
    with pytest.raises(ValueError, match="start must be <= end"):
        every_n_days("A", 100, 7, date(2024, 2, 1), date(2024, 1, 1), 24)


def test_for_compound_takes_name_type_and_half_life():
    c = find_compound("oxandrolone (anavar)")
    s = for_compound(c, 20, 1, date(2024, 1, 1), date(2024, 2, 1))
    assert s.name == "Oxandrolone (Anavar)"
    assert s.compound_type == "oral"
    assert s.half_life_hours == 9


def test_group_schedules_keeps_first_seen_order():
    schedules = [single_dose(n, 1, date(2024, 1, 1), 1) for n in ["b", "a", "b", "c"]]
    buckets = group_schedules(schedules)
    assert list(buckets) == ["b", "a", "c"]
    assert len(buckets["b"]) == 2
    assert sum(len(v) for v in buckets.values()) == len(schedules)


def test_group_by_type_maps_unknown_to_injectables():
    schedules = [
        single_dose("x", 1, date(2024, 1, 1), 1, compound_type="peptide"),
        DosingSchedule("y", 1, 1, date(2024, 1, 1), date(2024, 1, 1), 1, compound_type="cream"),
    ]
    assert list(group_schedules_by_type(schedules)) == ["Injectables", "Peptides"]


def test_plot_dates_clamp_at_date_max():
    dates = plot_dates(date.max - timedelta(days=2), date.max, 28)
    assert dates[-1] == date.max
    assert len(dates) == 3


def test_dose_dates_stop_before_overflowing():
    s = DosingSchedule("A", 100, 30, date.max - timedelta(days=40), date.max, 24)
    assert list(dose_dates(s)) == [date.max - timedelta(days=40), date.max - timedelta(days=10)]
