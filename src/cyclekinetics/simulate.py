# src/cyclekinetics/simulate.py
from typing import Any, Iterable, Mapping

from .estimator import compute_series
from .records import parse_record_date, schedules_from_records
from .types import Compound, CompoundSeries


def run_cycle(cycle: Mapping[str, Any], rows: Iterable[Mapping[str, Any]],
              compounds: Mapping[int, Compound] | Iterable[Compound] | None = None,
              **options) -> list[CompoundSeries]:
    """
    High-level wrapper: stored cycle row + its cycle-compound rows -> chart series.
    cycle needs start_date and end_date; options go to compute_series.
    """
    schedules = schedules_from_records(rows, compounds)
    return compute_series(
        schedules,
        parse_record_date(cycle["start_date"]),
        parse_record_date(cycle["end_date"]),
        **options,
    )
