"""
lottery_generator/utils/config.py
Load env vars and per-history download settings.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent

# ── Storage ───────────────────────────────────────────────────────
DATA_DIR: Path = Path(os.getenv("LOTTERY_DATA_DIR", str(ROOT / "data")))

# ── Download ──────────────────────────────────────────────────────
DOWNLOAD_TIMEOUT: int = int(os.getenv("DOWNLOAD_TIMEOUT", "30"))
DOWNLOAD_MAX_RETRIES: int = int(os.getenv("DOWNLOAD_MAX_RETRIES", "3"))

# ── Generation ────────────────────────────────────────────────────
# Raise instead of padding when history is too sparse to fill a pool
STRICT_SELECTION: bool = os.getenv("STRICT_SELECTION", "false").lower() in ("1", "true", "yes")

# ── Draw histories ────────────────────────────────────────────────
HISTORY_URLS: dict[str, str] = {
    "lotto":        "https://www.national-lottery.co.uk/results/lotto/draw-history/csv",
    "euromillions": "https://www.national-lottery.co.uk/results/euromillions/draw-history/csv",
    "thunderball":  "https://www.national-lottery.co.uk/results/thunderball/draw-history/csv",
}

HISTORY_FILENAMES: dict[str, str] = {
    "lotto":        "lotto-draw-history",
    "euromillions": "euromillions-draw-history",
    "thunderball":  "thunderball-draw-history",
}


def get_history_url(history: str) -> str:
    url = HISTORY_URLS.get(history)
    if not url:
        raise ValueError(f"Unknown draw history: {history}")
    return url


def get_history_path(history: str, data_dir: Path | None = None) -> Path:
    """Return the CSV path of a draw history, e.g. data/lotto-draw-history.csv."""
    filename = HISTORY_FILENAMES.get(history)
    if not filename:
        raise ValueError(f"Unknown draw history: {history}")
    return Path(data_dir or DATA_DIR) / f"{filename}.csv"
