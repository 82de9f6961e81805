from datetime import date, datetime

import numpy as np
import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from cyclekinetics.dosing import single_dose  # noqa: E402
from cyclekinetics.estimator import compute_series  # noqa: E402
from cycleviz.ui.plots import parse_rgba, series_to_xy  # noqa: E402


def test_series_to_xy_uses_epoch_seconds_one_day_apart():
    s = compute_series([single_dose("A", 100, date(2024, 1, 1), 24)], date(2024, 1, 1), date(2024, 1, 1))[0]
    x, y = series_to_xy(s)

    assert x[0] == datetime(2024, 1, 1).timestamp()
    assert len(x) == len(y) == 29
    assert np.all(np.diff(x) > 0)
    assert y[0] == 100.0


def test_parse_rgba():
    assert parse_rgba("rgba(255, 99, 132, 1)") == (255, 99, 132, 255)
    assert parse_rgba("rgba(54, 162, 235, 0.5)") == (54, 162, 235, 128)
