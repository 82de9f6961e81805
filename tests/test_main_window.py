from datetime import date

import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from cyclekinetics.dosing import single_dose  # noqa: E402
from cyclekinetics.estimator import compute_series  # noqa: E402
from cycleviz.ui.main_window import describe_series  # noqa: E402


def test_status_summary_reports_peak_and_clearance():
    series = compute_series([single_dose("Prop", 100, date(2024, 1, 3), 24)],
                            date(2024, 1, 1), date(2024, 1, 3))
    msg = describe_series(series)
    assert msg.startswith("1 series | Prop: peak 100.0 on 2024-01-03")
    assert "<5% by 2024-01-08" in msg


def test_status_summary_for_reversed_cycle_window():
    """Cycle start more than 28 days after its end: empty data, no crash."""
    series = compute_series([single_dose("Prop", 100, date(2024, 1, 1), 24)],
                            date(2024, 6, 1), date(2024, 1, 1))
    assert len(series[0].data) == 0
    assert "empty date range" in describe_series(series)
