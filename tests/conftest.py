"""tests/conftest.py"""
import os
from datetime import date, timedelta

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")

from lottery_generator.models.draw import DrawRecord  # noqa: E402

MACHINES = ["Arthur", "Guinevere", "Lancelot"]


def _base(i: int) -> dict:
    draw_date = date(2024, 1, 3) + timedelta(days=3 * i)
    return {
        "draw_number": 3000 + i,
        "draw_date": draw_date,
        "draw_day": draw_date.strftime("%A"),
    }


def make_lotto_draws(n: int = 36) -> list[DrawRecord]:
    draws = []
    for i in range(n):
        balls = [(i * 7 + k * 11) % 59 + 1 for k in range(1, 8)]
        draws.append(DrawRecord(
            _base(i),
            **{f"ball{k}": balls[k - 1] for k in range(1, 7)},
            bonus_ball=balls[6],
            machine=MACHINES[i % 3],
            ball_set=i % 4 + 1,
        ))
    return draws


def make_euromillions_draws(n: int = 36) -> list[DrawRecord]:
    draws = []
    for i in range(n):
        draws.append(DrawRecord(
            _base(i),
            **{f"ball{k}": (i * 7 + k * 11) % 50 + 1 for k in range(1, 6)},
            lucky_star1=(i + 5) % 12 + 1,
            lucky_star2=(i + 10) % 12 + 1,
        ))
    return draws


def make_thunderball_draws(n: int = 36) -> list[DrawRecord]:
    draws = []
    for i in range(n):
        draws.append(DrawRecord(
            _base(i),
            **{f"ball{k}": (i * 7 + k * 11) % 39 + 1 for k in range(1, 6)},
            thunderball=(i * 5) % 14 + 1,
            machine=MACHINES[i % 3],
            ball_set=i % 4 + 1,
        ))
    return draws


@pytest.fixture
def lotto_draws():
    return make_lotto_draws()


@pytest.fixture
def euromillions_draws():
    return make_euromillions_draws()


@pytest.fixture
def thunderball_draws():
    return make_thunderball_draws()
