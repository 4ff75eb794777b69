"""
lottery_generator/models/statistical/draw_filter.py
Subset draw records by field/value match.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lottery_generator.models.draw import get_field


def filter_by(
    fields: Sequence[str],
    records: Iterable[Mapping[str, Any]],
    value: Any,
) -> list[Mapping[str, Any]]:
    """Records where any of `fields` equals `value`, in their original order."""
    return [
        record for record in records
        if any(get_field(record, field) == value for field in fields)
    ]
