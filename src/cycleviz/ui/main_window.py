# src/cycleviz/ui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QStatusBar

from cyclekinetics.config import VIEWER_CONFIG
from cyclekinetics.estimator import compute_series
from cyclekinetics.metrics import peak, clearance_date
from cyclekinetics.types import CompoundSeries
from .controls import ControlsPanel, EstimateRequest
from .plots import PlotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(VIEWER_CONFIG['title'])
        self.resize(*VIEWER_CONFIG['size'])

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel()
        self.plot = PlotWidget()
        root.addWidget(self.controls, 0)
        root.addWidget(self.plot, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.estimateRequested.connect(self.on_estimate)

    def on_estimate(self, req: EstimateRequest):
        try:
            series = compute_series(req.schedules, req.cycle_start, req.cycle_end,
                                    group_by=req.group_by, method=req.method)
            if not series:
                self.plot.clear()
                self.status.showMessage("Nothing to plot: add a compound first", 5000)
                return

            self.plot.plot_series(series)
            self.status.showMessage(describe_series(series), 8000)
        except Exception as e:
            logger.exception("Estimate failed")
            self.status.showMessage(f"Error: {e}", 8000)


def describe_series(series: list[CompoundSeries]) -> str:
    """Status-bar summary: series count plus peak and clearance of the first series."""
    first = series[0]
    top = peak(first)
    if top is None:
        return f"{len(series)} series | empty date range: cycle start is after the plotted end"
    peak_date, peak_value = top
    cleared = clearance_date(first) or "after plotted range"
    return (f"{len(series)} series | {first.name}: peak {peak_value:.1f} on {peak_date[:10]}, "
            f"<5% by {cleared[:10]}")
