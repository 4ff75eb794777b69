"""
scripts/02_generate_numbers.py
Generate candidate lines for one game from its local draw history.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console

from lottery_generator.downloaders.history_downloader import HistoryDownloader
from lottery_generator.models.errors import DegenerateSelectionError, DownloadError, EmptyHistoryError
from lottery_generator.models.game_profile import GameKind, get_game_profile
from lottery_generator.notifications.console_report import render_result
from lottery_generator.pipeline.generator import generate_for_game
from lottery_generator.utils.config import get_history_path
from lottery_generator.utils.logger import get_logger

log = get_logger("generate_numbers")

DRAW_DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def main():
    parser = argparse.ArgumentParser(description="Generate lottery numbers from draw history")
    parser.add_argument("--game", choices=[k.value for k in GameKind], default=GameKind.LOTTO.value)
    parser.add_argument("--download", action="store_true", help="Refresh the draw history first")
    parser.add_argument("--draw-day", choices=DRAW_DAYS, default=None, help="Only use draws held on this day")
    parser.add_argument("--data-dir", type=Path, default=None, help="Override LOTTERY_DATA_DIR")
    parser.add_argument("--strict", action="store_true", help="Fail instead of padding sparse lines")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args()

    console = Console()
    profile = get_game_profile(args.game)

    try:
        if args.download:
            HistoryDownloader(profile.history, data_dir=args.data_dir).download()
        path = get_history_path(profile.history, args.data_dir)
        result = generate_for_game(
            profile.kind,
            path=path,
            draw_day=args.draw_day,
            strict=True if args.strict else None,
        )
    except (DownloadError, EmptyHistoryError, DegenerateSelectionError) as exc:
        log.error(f"[GENERATE] {profile.name} failed: {exc}")
        console.print(f"[bold red]✗ {profile.name}: {exc}[/]")
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        render_result(result, console)


if __name__ == "__main__":
    main()
