import math
from datetime import date

import numpy as np

from cyclekinetics.dosing import every_n_days, single_dose
from cyclekinetics.estimator import compute_series
from cyclekinetics.metrics import auc, clearance_date, peak, trough


def _single(amount=100, half_life=24, on=date(2024, 1, 3)):
    return compute_series([single_dose("A", amount, on, half_life)], date(2024, 1, 1), date(2024, 1, 3))[0]


def test_peak_is_on_dose_day():
    assert peak(_single()) == ("2024-01-03T00:00:00", 100.0)


def test_trough_ignores_lead_in_before_first_dose():
    s = _single()
    d, v = trough(s)
    assert d == s.data[-1].date
    assert 0.0 < v < 1e-6
    assert trough(s, after_first_dose=False)[1] == 0.0


def test_auc_matches_trapezoid_over_hours():
    s = _single(on=date(2024, 1, 1))
    v = s.values()
    expected = np.trapezoid(v, np.arange(v.size) * 24.0)
    assert math.isclose(auc(s), expected)
    # close to the analytical A0 * t½ / ln2 for a fully cleared single dose
    assert math.isclose(auc(s), 100 * 24 / math.log(2.0), rel_tol=0.2)


def test_clearance_after_about_four_and_a_third_half_lives():
    """0.5 ** n < 0.05 first holds for n > 4.32, i.e. day 5 at t½ = 24 h."""
    s = _single()
    assert clearance_date(s, fraction=0.05) == "2024-01-08T00:00:00"


def test_clearance_none_when_still_dosing_at_the_end():
    sched = every_n_days("A", 100, 1, date(2024, 1, 1), date(2024, 3, 1), 500)
    s = compute_series([sched], date(2024, 1, 1), date(2024, 1, 20), extra_days=0)[0]
    assert clearance_date(s) is None


def test_metrics_on_empty_series():
    s = compute_series([single_dose("A", 1, date(2024, 1, 1), 1)], date(2024, 6, 1), date(2024, 1, 1))[0]
    assert len(s.data) == 0
    assert peak(s) is None
    assert trough(s) is None
    assert trough(s, after_first_dose=False) is None
    assert auc(s) == 0.0
    assert clearance_date(s) is None
