# src/cyclekinetics/types.py
from dataclasses import dataclass
from datetime import date
from typing import Literal, Sequence

import numpy as np

# Dates are calendar dates; elapsed time is always whole days * 24 hours.
AmountUnit = Literal["mg", "mcg", "iu"]
CompoundType = Literal["injectable", "oral", "peptide"]


@dataclass(frozen=True)
class DosingSchedule:
    """
    One compound entry within a cycle.

    name               : display/grouping key (schedules sharing a name are summed)
    amount             : dose size per administration (unit-agnostic)
    dosing_period_days : days between administrations (>= 1)
    start_date         : first administration
    end_date           : last possible administration (inclusive)
    half_life_hours    : elimination half-life of the compound
    amount_unit        : unit the amount was entered in (mg, mcg, iu)
    compound_type      : injectable, oral or peptide; only used for type grouping
    """
    name: str
    amount: float
    dosing_period_days: int
    start_date: date
    end_date: date
    half_life_hours: float
    amount_unit: AmountUnit = "mg"
    compound_type: CompoundType = "injectable"


@dataclass(frozen=True)
class Compound:
    """
    Catalogue entry: a compound and its elimination half-life.
    """
    name: str
    compound_type: CompoundType
    half_life_hours: float
    compound_id: int | None = None


@dataclass(frozen=True)
class DataPoint:
    date: str  # ISO-8601 timestamp at local midnight
    value: float


@dataclass(frozen=True)
class CompoundSeries:
    """
    One compound's aggregated active-amount curve, sampled once per calendar day.
    """
    name: str
    color: str
    data: Sequence[DataPoint]

    def dates(self) -> list[str]:
        return [p.date for p in self.data]

    def values(self) -> np.ndarray:
        return np.asarray([p.value for p in self.data], dtype=float)
