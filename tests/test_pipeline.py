"""tests/test_pipeline.py"""
from datetime import date
from unittest.mock import patch

import pytest
from rich.console import Console

from lottery_generator.models.draw import DrawRecord
from lottery_generator.models.errors import DegenerateSelectionError, EmptyHistoryError, MalformedRecordError
from lottery_generator.models.game_profile import (
    EUROMILLIONS,
    EUROMILLIONS_HOTPICKS,
    FULL_ITERATION,
    LOTTO,
    LOTTO_HOTPICKS,
    THUNDERBALL,
    GameKind,
)
from lottery_generator.models.strategies import GeneratedLine, generate_full_iteration
from lottery_generator.notifications.console_report import format_numbers, render_result
from lottery_generator.pipeline.generator import generate, generate_for_game, latest_draw_date

from conftest import make_euromillions_draws, make_lotto_draws, make_thunderball_draws

CASES = [
    (LOTTO, make_lotto_draws),
    (LOTTO_HOTPICKS, make_lotto_draws),
    (EUROMILLIONS, make_euromillions_draws),
    (EUROMILLIONS_HOTPICKS, make_euromillions_draws),
    (THUNDERBALL, make_thunderball_draws),
]
CASE_IDS = [profile.kind.value for profile, _ in CASES]


@pytest.mark.parametrize("profile,make_draws", CASES, ids=CASE_IDS)
class TestGenerateIsSane:
    def test_header(self, profile, make_draws):
        result = generate(make_draws(), profile)
        assert result.game is profile.kind
        assert result.game_name == profile.name
        assert isinstance(result.latest_draw_date, date)
        assert result.num_of_methods >= 1
        assert result.line_balls == profile.line_balls

    def test_every_method_has_lines(self, profile, make_draws):
        result = generate(make_draws(), profile)
        for method, lines in result.strategies.items():
            assert len(lines) >= 1, f"Method '{method}' has no lines"

    def test_strategy_display_order(self, profile, make_draws):
        result = generate(make_draws(), profile)
        expected = [
            name for name in profile.strategy_order
            if name != FULL_ITERATION or profile.supports_partition_strategy
        ]
        assert list(result.strategies) == expected

    def test_arity(self, profile, make_draws):
        result = generate(make_draws(), profile)
        for lines in result.strategies.values():
            for line in lines:
                assert set(line) == set(result.line_balls)
                for pool, values in line.items():
                    assert len(values) == result.line_balls[pool]

    def test_values_dont_overlap(self, profile, make_draws):
        result = generate(make_draws(), profile)
        for lines in result.strategies.values():
            for line in lines:
                assert not line.is_degenerate
                for values in line.values():
                    assert len(set(values)) == len(values)
                    assert list(values) == sorted(values)

    def test_idempotent(self, profile, make_draws):
        draws = make_draws()
        assert generate(draws, profile) == generate(draws, profile)


class TestGenerate:
    def test_latest_draw_date(self, lotto_draws):
        result = generate(lotto_draws, LOTTO)
        assert result.latest_draw_date == max(d["draw_date"] for d in lotto_draws)
        assert result.latest_draw_date == date(2024, 4, 17)

    def test_empty_history_raises(self):
        with pytest.raises(EmptyHistoryError, match="empty record set"):
            generate([], LOTTO)

    def test_euromillions_has_no_partition_lines(self, euromillions_draws):
        result = generate(euromillions_draws, EUROMILLIONS)
        assert FULL_ITERATION not in result.strategies
        assert result.num_of_methods == 2
        line = result.strategies["most-freq"][0]
        assert set(line) == {"main_numbers", "lucky_stars"}

    def test_partition_completeness(self, thunderball_draws):
        result = generate(thunderball_draws, THUNDERBALL)
        combos = {(d["machine"], d["ball_set"]) for d in thunderball_draws}
        assert len(result.strategies[FULL_ITERATION]) == len(combos) == 12

    def test_missing_partition_field_fails_fast(self):
        draws = [DrawRecord(d, ball_set=1) for d in make_euromillions_draws(3)]
        with pytest.raises(MalformedRecordError):
            generate_full_iteration(draws, LOTTO)

    def test_full_iteration_first_line_is_busiest_partition(self, lotto_draws):
        # One extra Lancelot/set 2 draw makes that machine and set rank first
        extra = DrawRecord(lotto_draws[5], machine="Lancelot", ball_set=2)
        draws = lotto_draws + [extra]
        busiest = [d for d in draws if d["machine"] == "Lancelot" and d["ball_set"] == 2]
        lines = generate_full_iteration(draws, LOTTO)
        expected = generate(busiest, LOTTO).strategies["most-freq-together"][0]
        assert lines[0] == expected

    def test_sparse_history_is_flagged(self):
        draws = [
            DrawRecord(draw_date="01-Jan-2019", machine="Arthur", ball_set=1,
                       **{f"ball{k}": k % 3 + 1 for k in range(1, 7)}, bonus_ball=1),
        ]
        result = generate(draws, LOTTO, strict=False)
        assert result.has_degenerate_lines
        line = result.strategies["most-freq"][0]
        assert line["main_numbers"] == (1, 2, 3, None, None, None)

    def test_sparse_history_strict_raises(self):
        draws = [
            DrawRecord(draw_date="01-Jan-2019", machine="Arthur", ball_set=1,
                       **{f"ball{k}": k % 3 + 1 for k in range(1, 7)}, bonus_ball=1),
        ]
        with pytest.raises(DegenerateSelectionError):
            generate(draws, LOTTO, strict=True)

    def test_to_dict(self, thunderball_draws):
        data = generate(thunderball_draws, THUNDERBALL).to_dict()
        assert data["game"] == "thunderball"
        assert data["latestDrawDate"] == "2024-04-17"
        assert data["lineBalls"] == {"main_numbers": 5, "thunderball": 1}
        assert list(data["lines"]) == ["full-iteration", "most-freq-together", "most-freq"]
        assert len(data["lines"]["most-freq"][0]["main_numbers"]) == 5


class TestLatestDrawDate:
    def test_empty(self):
        with pytest.raises(EmptyHistoryError):
            latest_draw_date([])

    def test_missing_field(self):
        with pytest.raises(MalformedRecordError):
            latest_draw_date([{"invalid": "01-JAN-2019"}])

    def test_string_dates(self):
        draws = [{"draw_date": "01-Jan-2018"}, {"draw_date": "01-Jan-2019"}, {"draw_date": "15-Jun-2018"}]
        assert latest_draw_date(draws) == date(2019, 1, 1)


class TestGenerateForGame:
    @patch("lottery_generator.pipeline.generator.read_draw_history")
    def test_reads_parent_history(self, mock_read):
        mock_read.return_value = make_lotto_draws()
        result = generate_for_game("lotto_hotpicks")
        mock_read.assert_called_once_with("lotto", path=None)
        assert result.game is GameKind.LOTTO_HOTPICKS
        assert result.line_balls == {"main_numbers": 5}

    @patch("lottery_generator.pipeline.generator.read_draw_history")
    def test_draw_day_filter(self, mock_read):
        draws = make_lotto_draws()
        mock_read.return_value = draws
        result = generate_for_game("lotto", draw_day="wednesday")
        wednesdays = [d for d in draws if d["draw_day"] == "Wednesday"]
        assert result.latest_draw_date == max(d["draw_date"] for d in wednesdays)
        assert result.latest_draw_date.strftime("%A") == "Wednesday"

    @patch("lottery_generator.pipeline.generator.read_draw_history")
    def test_unreadable_history_is_empty(self, mock_read):
        mock_read.return_value = []
        with pytest.raises(EmptyHistoryError):
            generate_for_game("thunderball")


class TestConsoleReport:
    def test_format_numbers(self):
        assert format_numbers((3, 11, 27)) == "03 - 11 - 27"
        assert format_numbers((3, None)) == "03 - --"

    def test_render(self, euromillions_draws):
        result = generate(euromillions_draws, EUROMILLIONS)
        console = Console(record=True, width=120)
        render_result(result, console)
        text = console.export_text()
        assert "EuroMillions" in text
        assert "Most frequent together" in text
        assert "Lucky Stars" in text
        assert format_numbers(result.strategies["most-freq"][0]["main_numbers"]) in text

    def test_render_flags_degenerate(self):
        line = GeneratedLine({"main_numbers": (1, None)})
        assert line.is_degenerate
