"""
lottery_generator/models/game_profile.py
Per-game parameterisation: pools to pick, partition fields, strategy order.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MOST_FREQ = "most-freq"
MOST_FREQ_TOGETHER = "most-freq-together"
FULL_ITERATION = "full-iteration"

STRATEGY_NAMES = (MOST_FREQ, MOST_FREQ_TOGETHER, FULL_ITERATION)


class GameKind(str, Enum):
    LOTTO = "lotto"
    LOTTO_HOTPICKS = "lotto_hotpicks"
    EUROMILLIONS = "euromillions"
    EUROMILLIONS_HOTPICKS = "euromillions_hotpicks"
    THUNDERBALL = "thunderball"


@dataclass(frozen=True)
class Pool:
    """A named group of value slots, filled from `fields` of each draw."""

    name: str
    fields: tuple[str, ...]
    count: int

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Pool '{self.name}' must pick at least one value, got {self.count}")
        if not self.fields:
            raise ValueError(f"Pool '{self.name}' has no fields")


@dataclass(frozen=True)
class GameProfile:
    kind: GameKind
    name: str
    pools: tuple[Pool, ...]
    strategy_order: tuple[str, ...]
    history: str
    partition_fields: tuple[str, str] | None = None

    def __post_init__(self):
        if not self.pools:
            raise ValueError(f"{self.name}: at least one pool is required")

        names = [pool.name for pool in self.pools]
        if len(set(names)) != len(names):
            raise ValueError(f"{self.name}: duplicate pool names {names}")

        seen: set[str] = set()
        for pool in self.pools:
            overlap = seen.intersection(pool.fields)
            if overlap:
                raise ValueError(f"{self.name}: fields {sorted(overlap)} used by more than one pool")
            seen.update(pool.fields)

        unknown = [s for s in self.strategy_order if s not in STRATEGY_NAMES]
        if unknown:
            raise ValueError(f"{self.name}: unknown strategies {unknown}")
        if FULL_ITERATION in self.strategy_order and self.partition_fields is None:
            raise ValueError(f"{self.name}: '{FULL_ITERATION}' needs partition fields")

    # ── Capabilities ──────────────────────────────────────────────

    @property
    def main_pool(self) -> Pool:
        return self.pools[0]

    @property
    def main_pool_size(self) -> int:
        return self.main_pool.count

    @property
    def secondary_pool(self) -> Pool | None:
        return self.pools[1] if len(self.pools) > 1 else None

    @property
    def has_secondary_pool(self) -> bool:
        return self.secondary_pool is not None

    @property
    def secondary_pool_fields(self) -> tuple[str, ...]:
        pool = self.secondary_pool
        return pool.fields if pool else ()

    @property
    def supports_partition_strategy(self) -> bool:
        return self.partition_fields is not None

    @property
    def line_balls(self) -> dict[str, int]:
        """{pool name: values per line}"""
        return {pool.name: pool.count for pool in self.pools}


def _balls(n: int) -> tuple[str, ...]:
    return tuple(f"ball{b}" for b in range(1, n + 1))


# ── Games ─────────────────────────────────────────────────────────

# Lotto: 6 from 59, the bonus ball is ranked with the main balls
LOTTO = GameProfile(
    kind=GameKind.LOTTO,
    name="Lotto",
    pools=(Pool("main_numbers", _balls(6) + ("bonus_ball",), 6),),
    strategy_order=(FULL_ITERATION, MOST_FREQ_TOGETHER, MOST_FREQ),
    history="lotto",
    partition_fields=("machine", "ball_set"),
)

# Lotto Hotpicks: pick 5, settled against Lotto's six main balls
LOTTO_HOTPICKS = GameProfile(
    kind=GameKind.LOTTO_HOTPICKS,
    name="Lotto Hotpicks",
    pools=(Pool("main_numbers", _balls(6), 5),),
    strategy_order=(MOST_FREQ, MOST_FREQ_TOGETHER, FULL_ITERATION),
    history="lotto",
    partition_fields=("machine", "ball_set"),
)

EUROMILLIONS = GameProfile(
    kind=GameKind.EUROMILLIONS,
    name="EuroMillions",
    pools=(
        Pool("main_numbers", _balls(5), 5),
        Pool("lucky_stars", ("lucky_star1", "lucky_star2"), 2),
    ),
    strategy_order=(MOST_FREQ, MOST_FREQ_TOGETHER),
    history="euromillions",
)

# No Lucky Stars in Hotpicks
EUROMILLIONS_HOTPICKS = GameProfile(
    kind=GameKind.EUROMILLIONS_HOTPICKS,
    name="EuroMillions Hotpicks",
    pools=(Pool("main_numbers", _balls(5), 5),),
    strategy_order=(MOST_FREQ_TOGETHER, MOST_FREQ),
    history="euromillions",
)

THUNDERBALL = GameProfile(
    kind=GameKind.THUNDERBALL,
    name="Thunderball",
    pools=(
        Pool("main_numbers", _balls(5), 5),
        Pool("thunderball", ("thunderball",), 1),
    ),
    strategy_order=(FULL_ITERATION, MOST_FREQ_TOGETHER, MOST_FREQ),
    history="thunderball",
    partition_fields=("machine", "ball_set"),
)

GAME_PROFILES: dict[GameKind, GameProfile] = {
    profile.kind: profile
    for profile in (LOTTO, LOTTO_HOTPICKS, EUROMILLIONS, EUROMILLIONS_HOTPICKS, THUNDERBALL)
}


def get_game_profile(game: str | GameKind) -> GameProfile:
    try:
        return GAME_PROFILES[GameKind(game)]
    except ValueError:
        raise ValueError(f"Unknown game: {game}") from None
