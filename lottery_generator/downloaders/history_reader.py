"""
lottery_generator/downloaders/history_reader.py
Read a national lottery draw-history CSV into DrawRecords.
Rows that fail to parse are logged and skipped; an unreadable file
yields no records at all.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

from lottery_generator.models.draw import DrawRecord, parse_draw_date
from lottery_generator.utils.config import get_history_path
from lottery_generator.utils.logger import get_logger

log = get_logger("reader")

# record field -> CSV column
_COMMON_COLUMNS: dict[str, str] = {
    "draw_date": "DrawDate",
    "draw_number": "DrawNumber",
    "ball1": "Ball 1",
    "ball2": "Ball 2",
    "ball3": "Ball 3",
    "ball4": "Ball 4",
    "ball5": "Ball 5",
}

COLUMN_MAPS: dict[str, dict[str, str]] = {
    "lotto": {
        **_COMMON_COLUMNS,
        "ball6": "Ball 6",
        "bonus_ball": "Bonus Ball",
        "ball_set": "Ball Set",
        "machine": "Machine",
        "raffles": "Raffles",
    },
    "euromillions": {
        **_COMMON_COLUMNS,
        "lucky_star1": "Lucky Star 1",
        "lucky_star2": "Lucky Star 2",
        "raffles": "UK Millionaire Maker",
    },
    "thunderball": {
        **_COMMON_COLUMNS,
        "thunderball": "Thunderball",
        "ball_set": "Ball Set",
        "machine": "Machine",
    },
}

INT_FIELDS = {
    "draw_number", "ball1", "ball2", "ball3", "ball4", "ball5", "ball6",
    "bonus_ball", "lucky_star1", "lucky_star2", "thunderball", "ball_set",
}


def parse_raffles(raw: str) -> tuple[str, ...]:
    """
    Lotto writes raffle codes as 'FIRST;SECOND,THIRD,...', EuroMillions as
    'FIRST,SECOND'. Both come back as one flat tuple.
    """
    raw = (raw or "").strip()
    if not raw:
        return ()
    codes = raw.replace(";", ",").split(",")
    return tuple(code.strip() for code in codes if code.strip())


def parse_row(history: str, row: dict[str, str]) -> DrawRecord:
    """Map one CSV row to a DrawRecord. Raises KeyError/ValueError on bad rows."""
    columns = COLUMN_MAPS[history]
    fields: dict[str, Any] = {}
    for name, column in columns.items():
        raw = row[column]
        if raw is None:
            raise KeyError(column)
        raw = raw.strip()
        if name in INT_FIELDS:
            fields[name] = int(raw)
        elif name == "draw_date":
            fields[name] = parse_draw_date(raw)
        elif name == "raffles":
            fields[name] = parse_raffles(raw)
        else:
            fields[name] = raw
    fields["draw_day"] = fields["draw_date"].strftime("%A")
    return DrawRecord(fields)


def read_draw_history(history: str, path: Path | None = None) -> list[DrawRecord]:
    """Return all parseable draws from the history CSV, file order."""
    if history not in COLUMN_MAPS:
        raise ValueError(f"Unknown draw history: {history}")
    path = Path(path) if path else get_history_path(history)

    records: list[DrawRecord] = []
    skipped = 0
    try:
        with open(path, "r", newline="", encoding="utf-8-sig") as f:
            for line_no, row in enumerate(csv.DictReader(f), start=2):
                try:
                    records.append(parse_row(history, row))
                except (KeyError, ValueError) as exc:
                    skipped += 1
                    log.warning(f"{path.name}:{line_no} skipped: {exc!r}")
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        log.error(f"Cannot read draw history {path}: {exc}")
        return []

    log.info(f"Loaded {len(records)} {history} draws from {path}" +
             (f" ({skipped} skipped)" if skipped else ""))
    return records
