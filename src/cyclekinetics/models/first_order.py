# src/cyclekinetics/models/first_order.py
import math

import numpy as np

LN2 = math.log(2.0)


def remaining_amount(amount: float, half_life_hours: float, hours_since_dose):
    """
    Amount left from a single dose after first-order elimination:
      A(t) = amount * 0.5 ** (t / t½)

    hours_since_dose may be a scalar or an array; the result has the same shape
    (a float for scalar input). It is 0.0 for a non-positive or non-finite
    half-life, a non-finite or non-positive amount, and where t < 0 (a dose
    still in the future).
    """
    t = np.asarray(hours_since_dose, dtype=float)
    usable = (math.isfinite(half_life_hours) and half_life_hours > 0) and \
             (math.isfinite(amount) and amount > 0)
    if usable:
        elapsed = np.where(t >= 0, t, 0.0)
        out = np.where(t >= 0, amount * np.power(0.5, elapsed / half_life_hours), 0.0)
    else:
        out = np.zeros_like(t)
    return float(out) if out.ndim == 0 else out


def first_order_elimination(t, y, half_life_hours):
    """
    Single-state elimination model for solve_ivp.
      y[0] = active amount in the body

    Parameters:
      t               : current time (h), unused (autonomous system)
      y               : current state vector [A]
      half_life_hours : elimination half-life (h)
    """
    k = LN2 / half_life_hours
    return [-k * y[0]]
