"""
lottery_generator/pipeline/generator.py
Generate candidate lines for a game from its draw history.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from lottery_generator.downloaders.history_reader import read_draw_history
from lottery_generator.models.draw import get_field, parse_draw_date
from lottery_generator.models.errors import EmptyHistoryError
from lottery_generator.models.game_profile import FULL_ITERATION, GameKind, GameProfile, get_game_profile
from lottery_generator.models.statistical.draw_filter import filter_by
from lottery_generator.models.strategies import STRATEGIES, GeneratedLine
from lottery_generator.utils import config
from lottery_generator.utils.logger import get_logger

log = get_logger("pipeline.generator")


@dataclass(frozen=True)
class GenerationResult:
    game: GameKind
    game_name: str
    latest_draw_date: date
    line_balls: dict[str, int]
    strategies: dict[str, list[GeneratedLine]] = field(default_factory=dict)

    @property
    def num_of_methods(self) -> int:
        return len(self.strategies)

    @property
    def has_degenerate_lines(self) -> bool:
        return any(line.is_degenerate for lines in self.strategies.values() for line in lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "game": self.game.value,
            "gameName": self.game_name,
            "latestDrawDate": self.latest_draw_date.isoformat(),
            "numOfMethods": self.num_of_methods,
            "lineBalls": dict(self.line_balls),
            "lines": {
                name: [line.to_dict() for line in lines]
                for name, lines in self.strategies.items()
            },
        }


def latest_draw_date(records: Sequence[Mapping[str, Any]]) -> date:
    if not records:
        raise EmptyHistoryError("cannot determine latest draw date from an empty record set")
    return max(parse_draw_date(get_field(record, "draw_date")) for record in records)


def generate(
    records: Sequence[Mapping[str, Any]],
    profile: GameProfile,
    strict: bool | None = None,
) -> GenerationResult:
    """
    Run every strategy of the profile, in its display order, over `records`.
    Raises EmptyHistoryError when there is nothing to generate from.
    """
    if strict is None:
        strict = config.STRICT_SELECTION
    records = list(records)
    latest = latest_draw_date(records)
    log.info(f"[GENERATE] {profile.name}: {len(records)} draws up to {latest.isoformat()}")

    strategies: dict[str, list[GeneratedLine]] = {}
    for name in profile.strategy_order:
        if name == FULL_ITERATION and not profile.supports_partition_strategy:
            continue
        lines = STRATEGIES[name](records, profile, strict=strict)
        log.debug(f"{profile.name} {name}: {[line.to_dict() for line in lines]}")
        strategies[name] = lines

    result = GenerationResult(
        game=profile.kind,
        game_name=profile.name,
        latest_draw_date=latest,
        line_balls=profile.line_balls,
        strategies=strategies,
    )
    if result.has_degenerate_lines:
        log.warning(f"{profile.name}: some lines repeat or miss values, history is too sparse")
    log.info(f"[GENERATE] {profile.name}: {sum(len(v) for v in strategies.values())} lines "
             f"from {result.num_of_methods} methods")
    return result


def generate_for_game(
    game: str | GameKind,
    path: Path | None = None,
    draw_day: str | None = None,
    strict: bool | None = None,
) -> GenerationResult:
    """Read the game's history CSV, optionally keep one draw day, and generate."""
    profile = get_game_profile(game)
    records = read_draw_history(profile.history, path=path)
    if draw_day:
        records = filter_by(["draw_day"], records, draw_day.capitalize())
        log.info(f"Restricted to {draw_day.capitalize()} draws: {len(records)} left")
    return generate(records, profile, strict=strict)
