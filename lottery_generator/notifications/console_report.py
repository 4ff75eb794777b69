"""
lottery_generator/notifications/console_report.py
Colourised terminal rendering of a generation result.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.table import Table

from lottery_generator.pipeline.generator import GenerationResult

METHOD_TITLES: dict[str, str] = {
    "full-iteration": "Full iteration (machine × ball set)",
    "most-freq-together": "Most frequent together",
    "most-freq": "Most frequent",
}


def format_numbers(values: Iterable[Any]) -> str:
    return " - ".join("--" if v is None else f"{v:02d}" if isinstance(v, int) else str(v) for v in values)


def _pool_title(pool: str) -> str:
    return pool.replace("_", " ").title()


def render_result(result: GenerationResult, console: Console | None = None) -> None:
    console = console or Console()
    console.print(
        f"[bold cyan]{result.game_name}[/] numbers "
        f"[dim](history up to {result.latest_draw_date.strftime('%a %d %b %Y')})[/]"
    )

    for method, lines in result.strategies.items():
        table = Table(title=METHOD_TITLES.get(method, method), title_justify="left")
        table.add_column("Line", justify="right", style="dim")
        for pool in result.line_balls:
            table.add_column(_pool_title(pool), style="yellow" if pool != "main_numbers" else "green")

        for idx, line in enumerate(lines, start=1):
            cells = [format_numbers(line[pool]) for pool in result.line_balls]
            if line.is_degenerate:
                table.add_row(f"{idx} ⚠", *cells, style="bold yellow")
            else:
                table.add_row(str(idx), *cells)
        console.print(table)

    if result.has_degenerate_lines:
        console.print("[bold yellow]⚠ Some lines repeat or miss numbers: the draw history is too short.[/]")
