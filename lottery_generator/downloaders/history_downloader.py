"""
lottery_generator/downloaders/history_downloader.py
Fetch a draw-history CSV with retry, replace the local copy atomically and
keep the previous copy as a timestamped backup.
"""
from __future__ import annotations

import os
import random
import tempfile
import time
from datetime import datetime
from pathlib import Path

import requests

from lottery_generator.models.errors import DownloadError
from lottery_generator.utils import config
from lottery_generator.utils.logger import get_logger

log = get_logger("downloader")


class HistoryDownloader:
    """Downloads one of the national lottery draw histories."""

    def __init__(
        self,
        history: str,
        data_dir: Path | None = None,
        max_retries: int | None = None,
        timeout: int | None = None,
    ):
        self.history = history
        self.url = config.get_history_url(history)
        self.data_dir = Path(data_dir or config.DATA_DIR)
        self.max_retries = max_retries or config.DOWNLOAD_MAX_RETRIES
        self.timeout = timeout or config.DOWNLOAD_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                "AppleWebKit/537.36 (KHTML, like Gecko) "
                "Chrome/121.0.0.0 Safari/537.36"
            ),
            "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.8",
        })

    @property
    def file_path(self) -> Path:
        return config.get_history_path(self.history, self.data_dir)

    # ── HTTP helpers ──────────────────────────────────────────────

    def _get(self, url: str) -> requests.Response | None:
        """GET with retry + exponential backoff."""
        for attempt in range(1, self.max_retries + 1):
            try:
                log.debug(f"GET {url} (attempt {attempt})")
                resp = self.session.get(url, timeout=self.timeout)
                resp.raise_for_status()
                return resp
            except requests.RequestException as exc:
                log.warning(f"Request failed (attempt {attempt}/{self.max_retries}): {exc}")
                if attempt < self.max_retries:
                    time.sleep(2 ** attempt + random.uniform(0, 1))
        log.error(f"All {self.max_retries} attempts failed for {url}")
        return None

    # ── Validation ────────────────────────────────────────────────

    @staticmethod
    def validate_csv(content: bytes) -> bool:
        """A draw history starts with a header row naming DrawDate."""
        if not content.strip():
            return False
        header = content.lstrip(b"\xef\xbb\xbf").splitlines()[0]
        return b"DrawDate" in header

    # ── Download ──────────────────────────────────────────────────

    def _backup_path(self) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        return self.file_path.with_name(f"{self.file_path.stem}-{timestamp}.csv")

    def download(self) -> Path:
        """
        Replace the local history with a fresh copy and return its path.
        The current file, if any, is renamed to <name>-<timestamp>.csv first.
        """
        log.info(f"[DOWNLOAD] {self.history}: {self.url}")
        resp = self._get(self.url)
        if resp is None:
            raise DownloadError(f"Download failed for {self.history} ({self.url})")
        if not self.validate_csv(resp.content):
            raise DownloadError(f"Download failed for {self.history}: response is not a draw-history CSV")

        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f"{self.file_path.stem}-", suffix=".tmp", dir=self.data_dir)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(resp.content)
        except OSError as exc:
            os.unlink(tmp_name)
            raise DownloadError(f"Writing of downloaded history file failed: {exc}") from exc

        backup: Path | None = None
        if self.file_path.exists():
            backup = self._backup_path()
            try:
                os.replace(self.file_path, backup)
            except OSError as exc:
                os.unlink(tmp_name)
                raise DownloadError(f"Renaming of old history file failed: {exc}") from exc
            log.info(f"Previous history kept as {backup.name}")

        try:
            os.replace(tmp_name, self.file_path)
        except OSError as exc:
            os.unlink(tmp_name)
            if backup is not None:
                # Put the previous history back so a current file always exists
                os.replace(backup, self.file_path)
                log.warning(f"Restored previous history from {backup.name}")
            raise DownloadError(f"Renaming of newly downloaded history file failed: {exc}") from exc

        log.info(f"[DONE] {self.history}: {len(resp.content):,} bytes → {self.file_path}")
        return self.file_path
