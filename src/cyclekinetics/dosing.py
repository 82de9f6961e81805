# src/cyclekinetics/dosing.py
from __future__ import annotations

import numbers
from datetime import date, datetime, time, timedelta
from typing import Iterator

from .types import AmountUnit, Compound, CompoundType, DosingSchedule


def plot_dates(start: date, end: date, extra_days: int = 0) -> tuple[date, ...]:
    """
    Calendar dates from start to end + extra_days, inclusive, one per day.
    Empty when start falls after the extended end. The end is clamped to
    the representable date range.
    """
    try:
        plot_end = end + timedelta(days=extra_days)
    except OverflowError:
        plot_end = date.max if extra_days > 0 else date.min
    n_days = (plot_end - start).days + 1
    return tuple(start + timedelta(days=i) for i in range(max(n_days, 0)))


def dose_dates(schedule: DosingSchedule, until: date | None = None) -> Iterator[date]:
    """
    Administration dates of a schedule: start_date, start_date + period, ...
    while <= end_date (and <= until, if given).

    A period below one day yields nothing.
    """
    period = schedule.dosing_period_days
    if not (isinstance(period, numbers.Integral) and period >= 1):
        return
    period = int(period)
    last = schedule.end_date if until is None else min(schedule.end_date, until)
    k = 0
    while True:
        try:
            d = schedule.start_date + timedelta(days=k * period)
        except OverflowError:
            return
        if d > last:
            return
        yield d
        k += 1


def to_timestamp(d: date) -> str:
    """ISO-8601 timestamp for local midnight of d."""
    return datetime.combine(d, time.min).isoformat()


def single_dose(name: str, amount: float, on: date, half_life_hours: float, *,
                amount_unit: AmountUnit = "mg", compound_type: CompoundType = "injectable") -> DosingSchedule:
    """
    A schedule with exactly one administration.
    Example: 250 mg testosterone enanthate on 2024-01-01 (t½ 108 h).
    """
    _validate_positive("amount", amount)
    _validate_positive("half_life_hours", half_life_hours)
    return DosingSchedule(name=name, amount=float(amount), dosing_period_days=1,
                          start_date=on, end_date=on, half_life_hours=float(half_life_hours),
                          amount_unit=amount_unit, compound_type=compound_type)


def every_n_days(name: str, amount: float, every_days: int, start: date, end: date,
                 half_life_hours: float, *, amount_unit: AmountUnit = "mg",
                 compound_type: CompoundType = "injectable") -> DosingSchedule:
    """
    Repeated schedule like: 250 mg every 7 days from start to end.

    every_days      : spacing between administrations in whole days
    start, end      : inclusive administration window
    half_life_hours : elimination half-life of the compound
    """
    _validate_positive("amount", amount)
    _validate_positive_int("every_days", every_days)
    _validate_positive("half_life_hours", half_life_hours)
    if start > end:
        raise ValueError(f"start must be <= end (got {start} > {end}).")
    return DosingSchedule(name=name, amount=float(amount), dosing_period_days=every_days,
                          start_date=start, end_date=end, half_life_hours=float(half_life_hours),
                          amount_unit=amount_unit, compound_type=compound_type)


def for_compound(compound: Compound, amount: float, every_days: int, start: date, end: date, *,
                 amount_unit: AmountUnit = "mg") -> DosingSchedule:
    """
    Repeated schedule for a catalogue compound, named and typed after it.
    """
    return every_n_days(compound.name, amount, every_days, start, end, compound.half_life_hours,
                        amount_unit=amount_unit, compound_type=compound.compound_type)


# --------------------------
# Small input validators
# --------------------------
def _validate_positive(name: str, x: float) -> None:
    if not (x > 0):
        raise ValueError(f"{name} must be > 0 (got {x}).")

def _validate_positive_int(name: str, x: int) -> None:
    if not (isinstance(x, int) and x > 0):
        raise ValueError(f"{name} must be a positive integer (got {x}).")
