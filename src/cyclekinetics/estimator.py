# src/cyclekinetics/estimator.py
import logging
from datetime import date
from typing import Literal, Sequence

from .config import ESTIMATOR_CONFIG
from .dosing import plot_dates, to_timestamp
from .helpers import TYPE_GROUPS, group_schedules, group_schedules_by_type
from .solvers import closed_form_amounts, ode_amounts
from .types import CompoundSeries, DataPoint, DosingSchedule

logger = logging.getLogger(__name__)

GroupBy = Literal["name", "type"]
Method = Literal["closed_form", "ode"]

_SOLVERS = {
    "closed_form": closed_form_amounts,
    "ode": ode_amounts,
}


def compute_series(schedules: Sequence[DosingSchedule], cycle_start: date, cycle_end: date, *,
                   group_by: GroupBy = "name", extra_days: int | None = None,
                   method: Method = "closed_form") -> list[CompoundSeries]:
    """
    Estimate the active amount remaining per compound, once per calendar day,
    from cycle_start to cycle_end plus a clearance tail (28 days by default).

    Parameters
    ----------
    schedules : sequence of DosingSchedule
        Every compound entry of the cycle. Schedules sharing a name are summed
        into one series.
    cycle_start, cycle_end : date
        Nominal cycle window. A reversed window gives a short or empty range.
    group_by : "name" or "type"
        "name" emits one series per distinct name in first-seen order.
        "type" emits Injectables / Orals / Peptides in that fixed order.
    extra_days : int, optional
        Length of the post-cycle clearance tail.
    method : "closed_form" or "ode"
        Closed-form decay sum, or numerical integration of the same model.

    Raises ValueError for an unknown group_by or method; never for schedule data.

    Returns
    -------
    list[CompoundSeries]
        Empty when there is nothing to plot.
    """
    if group_by not in ("name", "type"):
        raise ValueError(f"group_by must be 'name' or 'type' (got {group_by!r}).")
    if method not in _SOLVERS:
        raise ValueError(f"method must be one of {sorted(_SOLVERS)} (got {method!r}).")

    if not schedules:
        return []

    tail = ESTIMATOR_CONFIG['clearance_tail_days'] if extra_days is None else extra_days
    dates = plot_dates(cycle_start, cycle_end, tail)
    timestamps = [to_timestamp(d) for d in dates]
    solve = _SOLVERS[method]

    if group_by == "type":
        buckets = group_schedules_by_type(schedules)
        # Each type keeps its own colour whether or not the others are present
        labels = [label for _, label in TYPE_GROUPS]
        color_indices = [labels.index(name) for name in buckets]
    else:
        buckets = group_schedules(schedules)
        color_indices = list(range(len(buckets)))

    palette = ESTIMATOR_CONFIG['palette']
    series: list[CompoundSeries] = []
    for color_index, (name, bucket) in zip(color_indices, buckets.items()):
        amounts = solve(bucket, dates)
        data = tuple(DataPoint(date=ts, value=float(v)) for ts, v in zip(timestamps, amounts))
        series.append(CompoundSeries(name=name, color=palette[color_index % len(palette)], data=data))

    logger.debug("Computed %d series over %d days (%s to %s, method=%s)",
                 len(series), len(dates), cycle_start, cycle_end, method)
    return series
