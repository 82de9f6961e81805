# src/cycleviz/ui/controls.py
from dataclasses import dataclass, field
from datetime import date, timedelta

from PySide6.QtCore import QDate, Signal
from PySide6.QtWidgets import (QVBoxLayout, QHBoxLayout, QPushButton, QDoubleSpinBox, QSpinBox,
                               QComboBox, QFrame, QLabel, QDateEdit, QListWidget)

from cyclekinetics.compounds import DEFAULT_COMPOUNDS, to_mg_equivalent
from cyclekinetics.config import VIEWER_CONFIG
from cyclekinetics.dosing import for_compound
from cyclekinetics.types import DosingSchedule


@dataclass
class EstimateRequest:
    schedules: list[DosingSchedule] = field(default_factory=list)
    cycle_start: date = field(default_factory=date.today)
    cycle_end: date = field(default_factory=date.today)
    group_by: str = "name"
    method: str = "closed_form"


def _to_date(q: QDate) -> date:
    return date(q.year(), q.month(), q.day())

def _to_qdate(d: date) -> QDate:
    return QDate(d.year, d.month, d.day)


class ControlsPanel(QFrame):
    estimateRequested = Signal(EstimateRequest)

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Controls"))

        today = date.today()
        cycle_end = today + timedelta(weeks=VIEWER_CONFIG['default_cycle_weeks'])

        # --- Cycle window ---
        layout.addWidget(QLabel("Cycle"))
        self.cycle_start = QDateEdit(_to_qdate(today)); self.cycle_start.setCalendarPopup(True)
        self.cycle_end = QDateEdit(_to_qdate(cycle_end)); self.cycle_end.setCalendarPopup(True)
        layout.addWidget(QLabel("Start"))
        layout.addWidget(self.cycle_start)
        layout.addWidget(QLabel("End"))
        layout.addWidget(self.cycle_end)

        # --- Compound entry ---
        layout.addWidget(QLabel("Compound"))
        self.compound = QComboBox(); self.compound.addItems([c.name for c in DEFAULT_COMPOUNDS])
        layout.addWidget(self.compound)

        amount_row = QHBoxLayout()
        self.amount = QDoubleSpinBox(); self.amount.setDecimals(2); self.amount.setRange(0.01, 1e6)
        self.amount.setValue(250)
        self.unit = QComboBox(); self.unit.addItems(["mg", "mcg", "iu"])
        amount_row.addWidget(self.amount, 1)
        amount_row.addWidget(self.unit)
        layout.addWidget(QLabel("Amount per dose"))
        layout.addLayout(amount_row)

        self.period = QSpinBox(); self.period.setRange(1, 90); self.period.setValue(7)
        self.period.setSuffix(" days")
        layout.addWidget(QLabel("Dosing period"))
        layout.addWidget(self.period)

        self.dose_start = QDateEdit(_to_qdate(today)); self.dose_start.setCalendarPopup(True)
        self.dose_end = QDateEdit(_to_qdate(cycle_end)); self.dose_end.setCalendarPopup(True)
        layout.addWidget(QLabel("First dose"))
        layout.addWidget(self.dose_start)
        layout.addWidget(QLabel("Last dose"))
        layout.addWidget(self.dose_end)

        add = QPushButton("Add compound"); layout.addWidget(add)
        add.clicked.connect(self._add_schedule)

        # --- Entered schedules ---
        self.schedule_list = QListWidget()
        layout.addWidget(self.schedule_list)
        remove = QPushButton("Remove selected"); layout.addWidget(remove)
        remove.clicked.connect(self._remove_selected)
        self.schedules: list[DosingSchedule] = []

        # --- Chart options ---
        layout.addWidget(QLabel("Group by"))
        self.group_by = QComboBox(); self.group_by.addItems(["name", "type"])
        layout.addWidget(self.group_by)
        layout.addWidget(QLabel("Solver"))
        self.method = QComboBox(); self.method.addItems(["closed_form", "ode"])
        layout.addWidget(self.method)

        go = QPushButton("Plot"); layout.addWidget(go)
        go.clicked.connect(self._emit_request)

        self.message = QLabel(); self.message.setWordWrap(True)
        layout.addWidget(self.message)

    def _add_schedule(self):
        compound = DEFAULT_COMPOUNDS[self.compound.currentIndex()]
        unit = self.unit.currentText()
        # Amounts are plotted in mg-equivalents so mixed units stay comparable
        try:
            schedule = for_compound(compound,
                                    amount=to_mg_equivalent(float(self.amount.value()), unit),
                                    every_days=int(self.period.value()),
                                    start=_to_date(self.dose_start.date()),
                                    end=_to_date(self.dose_end.date()))
        except ValueError as e:
            self.message.setText(str(e))
            return
        self.message.clear()
        self.schedules.append(schedule)
        self.schedule_list.addItem(
            f"{schedule.name}: {self.amount.value():g} {unit} every {schedule.dosing_period_days} d "
            f"({schedule.start_date} to {schedule.end_date})")

    def _remove_selected(self):
        row = self.schedule_list.currentRow()
        if row < 0:
            return
        self.schedule_list.takeItem(row)
        del self.schedules[row]

    def _emit_request(self):
        req = EstimateRequest(
            schedules=list(self.schedules),
            cycle_start=_to_date(self.cycle_start.date()),
            cycle_end=_to_date(self.cycle_end.date()),
            group_by=self.group_by.currentText(),
            method=self.method.currentText(),
        )
        self.estimateRequested.emit(req)
