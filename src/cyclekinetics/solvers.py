# src/cyclekinetics/solvers.py
import logging
from datetime import date
from typing import Sequence

import numpy as np
from scipy.integrate import solve_ivp

from .config import ESTIMATOR_CONFIG
from .dosing import dose_dates
from .models.first_order import first_order_elimination, remaining_amount
from .types import DosingSchedule

logger = logging.getLogger(__name__)


def _is_usable(schedule: DosingSchedule) -> bool:
    """A schedule counts only if a fresh dose leaves a positive amount."""
    return remaining_amount(schedule.amount, schedule.half_life_hours, 0.0) > 0


def _grid_hours(dates: Sequence[date]) -> np.ndarray:
    """Hours from the first plotted date to each plotted date (whole days * 24)."""
    if not dates:
        return np.zeros(0, dtype=float)
    return np.asarray([(d - dates[0]).days * 24.0 for d in dates], dtype=float)


def _dose_hours(schedule: DosingSchedule, dates: Sequence[date]) -> np.ndarray:
    """Dose times in hours relative to the first plotted date, up to the last one."""
    return np.asarray([(d - dates[0]).days * 24.0 for d in dose_dates(schedule, until=dates[-1])],
                      dtype=float)


def closed_form_amounts(schedules: Sequence[DosingSchedule], dates: Sequence[date]) -> np.ndarray:
    """
    Active amount on each date, summed over every dose of every schedule:
      A(d) = sum amount * 0.5 ** ((d - dose) / t½)   over doses with dose <= d

    Schedules with a non-positive/non-finite half-life or amount contribute zero.
    """
    t = _grid_hours(dates)
    total = np.zeros_like(t)
    if t.size == 0:
        return total

    for s in schedules:
        if not _is_usable(s):
            logger.debug("Schedule %r contributes nothing: amount=%r half_life_hours=%r",
                         s.name, s.amount, s.half_life_hours)
            continue
        for t_dose in _dose_hours(s, dates):
            total += remaining_amount(s.amount, s.half_life_hours, t - t_dose)
    return total


def ode_amounts(schedules: Sequence[DosingSchedule], dates: Sequence[date],
                rtol: float | None = None, atol: float | None = None) -> np.ndarray:
    """
    Same quantity as closed_form_amounts, obtained by integrating
      dA/dt = -ln2 / t½ * A
    per schedule, with each dose applied as an instantaneous jump.

    Returns the summed amounts sampled at the plotted dates.
    """
    rtol = ESTIMATOR_CONFIG['ode_rtol'] if rtol is None else rtol
    atol = ESTIMATOR_CONFIG['ode_atol'] if atol is None else atol

    t_grid = _grid_hours(dates)
    total = np.zeros_like(t_grid)
    if t_grid.size == 0:
        return total

    for s in schedules:
        if not _is_usable(s):
            continue
        doses_h = _dose_hours(s, dates)
        if doses_h.size == 0:
            continue
        total += _integrate_schedule(s, doses_h, t_grid, rtol, atol)
    return total


def _integrate_schedule(schedule: DosingSchedule, doses_h: np.ndarray, t_grid: np.ndarray,
                        rtol: float, atol: float) -> np.ndarray:
    out = np.zeros_like(t_grid)

    # Segment boundaries: every dose time plus the end of the grid
    boundaries = sorted(set(doses_h.tolist()) | {float(t_grid[-1])})

    def rhs(t, y):
        return first_order_elimination(t, y, schedule.half_life_hours)

    A = 0.0
    for i, t_a in enumerate(boundaries):
        # Apply doses at exactly t_a before sampling or integrating from it
        A += schedule.amount * int(np.count_nonzero(doses_h == t_a))

        if i + 1 == len(boundaries):
            out[t_grid == t_a] = A
            break

        t_b = boundaries[i + 1]
        sol = solve_ivp(rhs, t_span=(t_a, t_b), y0=[A], method="RK45",
                        rtol=rtol, atol=atol, dense_output=True)
        if not sol.success:
            logger.warning("Integration failed for %r on [%.1f, %.1f] h: %s",
                           schedule.name, t_a, t_b, sol.message)
        mask = (t_grid >= t_a) & (t_grid < t_b)
        if np.any(mask):
            out[mask] = sol.sol(t_grid[mask])[0]
        A = float(sol.y[0, -1])

    return np.maximum(out, 0.0)
