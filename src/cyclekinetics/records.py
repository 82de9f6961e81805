# src/cyclekinetics/records.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from dateutil.parser import isoparse

from .compounds import to_mg_equivalent
from .types import Compound, DosingSchedule

logger = logging.getLogger(__name__)


def parse_record_date(value: str | date) -> date:
    """
    Date part of a stored value ("2024-01-01", "2024-01-01T00:00:00.000Z", or a date).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(value).date()


def schedule_from_record(row: Mapping[str, Any], compounds: Mapping[int, Compound] | None = None, *,
                         normalize_units: bool = False) -> DosingSchedule:
    """
    Build a DosingSchedule from one stored cycle-compound row.

    The row carries name, amount, amount_unit, dosing_period, start_date and
    end_date, plus either half_life_hours or a compound_id resolvable through
    `compounds`. With normalize_units=True the amount is converted to
    mg-equivalents and the unit becomes "mg".
    """
    compound = None
    if compounds is not None and row.get("compound_id") is not None:
        compound = compounds.get(row["compound_id"])

    half_life = row.get("half_life_hours")
    if half_life is None:
        if compound is None:
            raise KeyError(f"No half-life for '{row.get('name')}' "
                           f"(compound_id={row.get('compound_id')!r}).")
        half_life = compound.half_life_hours

    unit = row.get("amount_unit") or "mg"
    amount = float(row["amount"])
    if normalize_units:
        amount = to_mg_equivalent(amount, unit)
        unit = "mg"

    compound_type = row.get("type") or (compound.compound_type if compound else "injectable")

    return DosingSchedule(
        name=str(row["name"]),
        amount=amount,
        dosing_period_days=int(row["dosing_period"]),
        start_date=parse_record_date(row["start_date"]),
        end_date=parse_record_date(row["end_date"]),
        half_life_hours=float(half_life),
        amount_unit=unit,
        compound_type=compound_type,
    )


def schedules_from_records(rows: Iterable[Mapping[str, Any]],
                           compounds: Mapping[int, Compound] | Iterable[Compound] | None = None, *,
                           normalize_units: bool = False) -> list[DosingSchedule]:
    """
    Convert stored cycle-compound rows into schedules, in row order.

    compounds may be a mapping compound_id -> Compound or an iterable of
    Compound objects carrying their compound_id.
    """
    if compounds is not None and not isinstance(compounds, Mapping):
        compounds = {c.compound_id: c for c in compounds if c.compound_id is not None}
    schedules = [schedule_from_record(r, compounds, normalize_units=normalize_units) for r in rows]
    logger.debug("Loaded %d dosing schedules", len(schedules))
    return schedules
