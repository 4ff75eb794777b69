"""
lottery_generator/models/draw.py
Immutable draw record plus field/date helpers shared by the engine.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import date, datetime
from typing import Any

from lottery_generator.models.errors import MalformedRecordError

# National lottery CSVs use 19-Oct-2024; ISO is accepted for hand-built records
DRAW_DATE_FORMATS = ("%d-%b-%Y", "%Y-%m-%d")


class DrawRecord(Mapping):
    """One historical draw, keyed by field name. Read-only once built."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None, **kwargs: Any):
        data = dict(fields or {})
        data.update(kwargs)
        self._fields = data

    def __getitem__(self, field: str) -> Any:
        try:
            return self._fields[field]
        except KeyError:
            raise MalformedRecordError(field, self) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"DrawRecord({self._fields!r})"


def get_field(record: Mapping[str, Any], field: str) -> Any:
    """Read a field, failing fast with MalformedRecordError when it is absent."""
    try:
        return record[field]
    except KeyError:
        raise MalformedRecordError(field, record) from None


def parse_draw_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in DRAW_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised draw date: {value!r}")
