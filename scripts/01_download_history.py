"""
scripts/01_download_history.py
Refresh the local draw-history CSVs from the national lottery site.
The previous copy of each file is kept with a timestamp suffix.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lottery_generator.downloaders.history_downloader import HistoryDownloader
from lottery_generator.models.errors import DownloadError
from lottery_generator.utils.config import HISTORY_URLS
from lottery_generator.utils.logger import get_logger

log = get_logger("download_history")


def run_download(history: str, data_dir: Path | None = None) -> dict:
    try:
        path = HistoryDownloader(history, data_dir=data_dir).download()
    except DownloadError as exc:
        log.error(f"[FAILED] {history}: {exc}")
        return {"history": history, "success": False, "error": str(exc)}
    return {"history": history, "success": True, "path": str(path)}


def main():
    parser = argparse.ArgumentParser(description="Download lottery draw histories")
    parser.add_argument("--game", choices=list(HISTORY_URLS.keys()) + ["all"], default="all")
    parser.add_argument("--data-dir", type=Path, default=None, help="Override LOTTERY_DATA_DIR")
    args = parser.parse_args()

    targets = list(HISTORY_URLS.keys()) if args.game == "all" else [args.game]
    results = [run_download(h, data_dir=args.data_dir) for h in targets]

    print("\n" + "=" * 60)
    print("DOWNLOAD SUMMARY")
    print("=" * 60)
    for r in results:
        status = r["path"] if r["success"] else f"FAILED: {r['error']}"
        print(f"  {r['history']:15s} | {status}")
    print("=" * 60)

    if not all(r["success"] for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
