"""
lottery_generator/models/statistical/ball_selector.py
Greedy "pick N distinct most-frequent values" over the draw history.

Independent mode ranks every pick against the whole history. Together mode
narrows the history after each pick to draws containing that value, so later
picks favour numbers drawn alongside the earlier ones.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from lottery_generator.models.errors import DegenerateSelectionError
from lottery_generator.models.statistical.draw_filter import filter_by
from lottery_generator.models.statistical.frequency_counter import most_frequent
from lottery_generator.utils.logger import get_logger

log = get_logger("selector")


def select_frequent(
    records: Sequence[Mapping[str, Any]],
    fields: Sequence[str],
    count: int,
    together: bool = False,
    strict: bool = False,
) -> list[Any]:
    """
    Returns `count` distinct values, ascending.

    When the narrowed history of together mode has nothing left to offer, the
    pick is made from the full history instead. If the full history holds
    fewer than `count` distinct values the selection is degenerate: padded
    with None (logged) or, when `strict`, DegenerateSelectionError.
    """
    records = list(records)
    selected: list[Any] = []
    working = records

    for _ in range(count):
        value = most_frequent(working, fields, exclude=selected)
        if value is None and working is not records:
            log.debug(f"No co-occurring value left after {selected} in {list(fields)}, using full history")
            value = most_frequent(records, fields, exclude=selected)
        if value is None:
            break
        selected.append(value)
        if together:
            working = filter_by(fields, working, value)

    selected.sort()

    if len(selected) < count:
        msg = (
            f"Only {len(selected)} of {count} distinct values available "
            f"for {list(fields)} in {len(records)} draws"
        )
        if strict:
            raise DegenerateSelectionError(msg)
        log.warning(msg)
        selected.extend([None] * (count - len(selected)))

    return selected
