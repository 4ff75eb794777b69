"""
lottery_generator/models/errors.py
Errors raised by the generation engine and its collaborators.
"""
from __future__ import annotations


class EmptyHistoryError(RuntimeError):
    """No draw records were available to generate from."""


class MalformedRecordError(KeyError):
    """A draw record lacks a field the active game needs."""

    def __init__(self, field: str, record: object | None = None):
        super().__init__(field)
        self.field = field
        self.record = record

    def __str__(self) -> str:
        return f"Draw record is missing field '{self.field}'"


class DegenerateSelectionError(ValueError):
    """History holds fewer distinct values than a pool needs."""


class DownloadError(RuntimeError):
    """A draw history could not be fetched or put in place."""
