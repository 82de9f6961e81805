from typing import Callable, Iterable

from .types import DosingSchedule

# Fixed order and labels of the per-type chart
TYPE_GROUPS = (
    ("injectable", "Injectables"),
    ("oral", "Orals"),
    ("peptide", "Peptides"),
)


def group_schedules(schedules: Iterable[DosingSchedule],
                    key: Callable[[DosingSchedule], str] = lambda s: s.name) -> dict[str, list[DosingSchedule]]:
    """
    Bucket schedules by key; buckets keep first-seen order.
    """
    buckets: dict[str, list[DosingSchedule]] = {}
    for s in schedules:
        buckets.setdefault(key(s), []).append(s)
    return buckets


def group_schedules_by_type(schedules: Iterable[DosingSchedule]) -> dict[str, list[DosingSchedule]]:
    """
    Bucket schedules by compound type under the labels of TYPE_GROUPS, in that order.
    Unknown types count as injectables.
    """
    labels = dict(TYPE_GROUPS)
    by_type = group_schedules(
        schedules, key=lambda s: s.compound_type if s.compound_type in labels else "injectable")
    return {labels[t]: by_type[t] for t, _ in TYPE_GROUPS if by_type.get(t)}
