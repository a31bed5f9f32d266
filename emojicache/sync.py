from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

from emojicache.catalog import fetch_catalog
from emojicache.config import MirrorConfig
from emojicache.downloader import download_asset
from emojicache.errors import FetchError
from emojicache.resolver import resolve_targets

_cycle_lock = threading.Lock()
_last_summary = None


@dataclass
class SyncSummary:
    items: int = 0
    targets: int = 0
    downloaded: int = 0
    failed: int = 0

    @property
    def skipped(self) -> int:
        return self.items - self.targets


def last_summary() -> Optional[SyncSummary]:
    return _last_summary


def snapshot_local_files(emoji_dir) -> set[str]:
    return set(os.listdir(emoji_dir))


def run_sync_cycle(config: Optional[MirrorConfig] = None) -> bool:
    """
    One full refresh: fetch catalog, resolve, download everything missing.

    Returns False only when the catalog fetch failed (or a cycle is
    already running); individual download failures are counted, not raised.
    """
    if not _cycle_lock.acquire(blocking=False):
        print("🚫 Sync cycle already running, skipping")
        return False

    try:
        return _run_cycle(config or MirrorConfig.from_settings())
    finally:
        _cycle_lock.release()


def _run_cycle(config: MirrorConfig) -> bool:
    global _last_summary

    try:
        config.emoji_dir.mkdir(parents=True, exist_ok=True)
        local_files = snapshot_local_files(config.emoji_dir)
        catalog, item_index = fetch_catalog(config)
    except (FetchError, OSError) as e:
        print(f"🔴 Unexpected error: {e}")
        return False

    targets = resolve_targets(catalog, item_index, local_files)
    summary = SyncSummary(items=len(item_index), targets=len(targets))

    if targets:
        workers = max(1, min(config.download_workers, len(targets)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(download_asset, target, config) for target in targets
            ]
            # all settled, not all succeeded
            wait(futures)

        for future in futures:
            exc = future.exception()
            if exc is not None:
                print(f"❌ Download task crashed: {exc}")
                summary.failed += 1
            elif future.result():
                summary.downloaded += 1
            else:
                summary.failed += 1

    _last_summary = summary
    print(
        f"🎉 All emojis processed! downloaded={summary.downloaded} "
        f"failed={summary.failed} skipped={summary.skipped}"
    )
    return True
