# src/cycleviz/ui/plots.py
from datetime import datetime

import numpy as np
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg

from cyclekinetics.types import CompoundSeries


def series_to_xy(series: CompoundSeries) -> tuple[np.ndarray, np.ndarray]:
    """Epoch seconds (local time) and values, as DateAxisItem expects them."""
    x = np.asarray([datetime.fromisoformat(ts).timestamp() for ts in series.dates()], dtype=float)
    return x, series.values()


def parse_rgba(color: str) -> tuple[int, int, int, int]:
    """'rgba(255, 99, 132, 1)' -> (255, 99, 132, 255)"""
    inner = color[color.index("(") + 1:color.rindex(")")]
    r, g, b, a = (p.strip() for p in inner.split(","))
    return int(r), int(g), int(b), int(round(float(a) * 255))


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area
        self.plot_widget = pg.PlotWidget(axisItems={"bottom": pg.DateAxisItem()})
        self.plot_widget.setLabel("left", "Active amount")
        self.plot_widget.setLabel("bottom", "Date")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

        self.curves = {}  # store references for updates

    def plot_series(self, series: list[CompoundSeries]):
        self.clear()
        for s in series:
            x, y = series_to_xy(s)
            curve = self.plot_widget.plot(
                x, y,
                pen=pg.mkPen(color=parse_rgba(s.color), width=2),
                name=s.name
            )
            self.curves[s.name] = curve

    def clear(self):
        self.plot_widget.clear()
        self.curves = {}
