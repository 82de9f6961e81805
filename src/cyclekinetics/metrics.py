# src/cyclekinetics/metrics.py
import numpy as np
from typing import Optional, Tuple

from .types import CompoundSeries


def peak(series: CompoundSeries) -> Optional[Tuple[str, float]]:
    """Date and value of the highest active amount. None for an empty series."""
    v = series.values()
    if v.size == 0:
        return None
    idx = int(np.argmax(v))
    return series.data[idx].date, float(v[idx])

def trough(series: CompoundSeries, after_first_dose: bool = True) -> Optional[Tuple[str, float]]:
    """
    Date and value of the lowest active amount.
    By default only days from the first non-zero value on are considered,
    so the empty lead-in before the first dose is ignored.
    """
    v = series.values()
    if v.size == 0:
        return None
    start = 0
    if after_first_dose:
        nonzero = np.flatnonzero(v > 0)
        if nonzero.size:
            start = int(nonzero[0])
    idx = start + int(np.argmin(v[start:]))
    return series.data[idx].date, float(v[idx])

def auc(series: CompoundSeries) -> float:
    """Area under the daily curve via trapezoidal rule (amount * h)."""
    v = series.values()
    if v.size < 2:
        return 0.0
    t_h = np.arange(v.size, dtype=float) * 24.0
    return float(np.trapezoid(v, t_h))

def clearance_date(series: CompoundSeries, fraction: float = 0.05) -> str | None:
    """
    First date after the peak from which the active amount stays below
    fraction * peak for the rest of the series. None if it never does.
    """
    v = series.values()
    if v.size == 0:
        return None
    idx_peak = int(np.argmax(v))
    threshold = fraction * float(v[idx_peak])
    above = np.flatnonzero(v[idx_peak:] >= threshold)
    idx = idx_peak + int(above[-1]) + 1
    if idx >= v.size:
        return None
    return series.data[idx].date
