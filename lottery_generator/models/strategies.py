"""
lottery_generator/models/strategies.py
The three line-generation strategies, built from BallSelector + DrawFilter.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from lottery_generator.models.game_profile import (
    FULL_ITERATION,
    MOST_FREQ,
    MOST_FREQ_TOGETHER,
    GameProfile,
)
from lottery_generator.models.statistical.ball_selector import select_frequent
from lottery_generator.models.statistical.draw_filter import filter_by
from lottery_generator.models.statistical.frequency_counter import rank_values
from lottery_generator.utils.logger import get_logger

log = get_logger("strategies")

Records = Sequence[Mapping[str, Any]]


class GeneratedLine(Mapping):
    """One candidate line: {pool name: ascending tuple of values}."""

    __slots__ = ("_pools",)

    def __init__(self, pools: Mapping[str, Sequence[Any]]):
        self._pools = MappingProxyType({name: tuple(values) for name, values in pools.items()})

    def __getitem__(self, pool: str) -> tuple[Any, ...]:
        return self._pools[pool]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pools)

    def __len__(self) -> int:
        return len(self._pools)

    def __repr__(self) -> str:
        return f"GeneratedLine({dict(self._pools)!r})"

    @property
    def is_degenerate(self) -> bool:
        """True when a pool could not be filled with distinct values."""
        for values in self._pools.values():
            if None in values or len(set(values)) != len(values):
                return True
        return False

    def to_dict(self) -> dict[str, list[Any]]:
        return {name: list(values) for name, values in self._pools.items()}


def build_line(records: Records, profile: GameProfile, together: bool, strict: bool = False) -> GeneratedLine:
    """Select every pool of the profile from the same record subset."""
    return GeneratedLine({
        pool.name: select_frequent(records, pool.fields, pool.count, together=together, strict=strict)
        for pool in profile.pools
    })


# ── Strategies ────────────────────────────────────────────────────

def generate_most_frequent(records: Records, profile: GameProfile, strict: bool = False) -> list[GeneratedLine]:
    """Balls drawn most often across the whole history."""
    return [build_line(records, profile, together=False, strict=strict)]


def generate_most_frequent_together(records: Records, profile: GameProfile, strict: bool = False) -> list[GeneratedLine]:
    """Balls drawn most often within the same draws as the ones already picked."""
    return [build_line(records, profile, together=True, strict=strict)]


def generate_full_iteration(records: Records, profile: GameProfile, strict: bool = False) -> list[GeneratedLine]:
    """
    One together-mode line per (machine, ball set) combination seen in the
    history. Machines come most-used first, and ball sets most-used first
    within each machine.
    """
    if not profile.supports_partition_strategy:
        raise ValueError(f"{profile.name} draws carry no partition fields")

    primary, secondary = profile.partition_fields
    lines: list[GeneratedLine] = []
    for primary_key in rank_values(records, primary):
        primary_draws = filter_by([primary], records, primary_key)
        for secondary_key in rank_values(primary_draws, secondary):
            partition = filter_by([secondary], primary_draws, secondary_key)
            log.debug(f"{profile.name}: {primary}={primary_key} {secondary}={secondary_key} ({len(partition)} draws)")
            lines.append(build_line(partition, profile, together=True, strict=strict))
    return lines


STRATEGIES: dict[str, Callable[..., list[GeneratedLine]]] = {
    MOST_FREQ: generate_most_frequent,
    MOST_FREQ_TOGETHER: generate_most_frequent_together,
    FULL_ITERATION: generate_full_iteration,
}
