"""
lottery_generator/models/statistical/frequency_counter.py
Count how often values appear across a set of fields in the draw history.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lottery_generator.models.draw import get_field


def count(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str],
    exclude: Iterable[Any] = (),
) -> Counter:
    """
    Returns {value: occurrences} over every field of every record.
    A record holding the same value in two fields counts it twice.
    Keys keep first-seen order, which is what ties are broken on.
    """
    excluded = list(exclude)
    counts: Counter = Counter()
    for record in records:
        for field in fields:
            value = get_field(record, field)
            if value not in excluded:
                counts[value] += 1
    return counts


def most_frequent(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str],
    exclude: Iterable[Any] = (),
    default: Any = None,
) -> Any:
    """
    Value with the highest count; on a tie the one seen first wins.
    Returns `default` when nothing is left to count (no records, or every
    value excluded).
    """
    counts = count(records, fields, exclude)
    if not counts:
        return default
    # max() keeps the first of equal keys, i.e. first-seen order
    return max(counts, key=counts.__getitem__)


def rank_values(records: Iterable[Mapping[str, Any]], field: str) -> list[Any]:
    """Distinct values of one field, most frequent first, ties in first-seen order."""
    counts = count(records, [field])
    return [value for value, _ in counts.most_common()]
