"""
Polling notification source for new or updated files in a folder.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, Iterator, Tuple

Signature = Tuple[int, int]


class FolderWatcher:
    """
    Reports files matching a pattern that appeared or changed since the last poll.

    Delivery is at least once: a file rewritten between polls is reported
    again, and a file still being written may be reported before it is
    complete and then again once it settles.
    """

    def __init__(self, directory: Path, pattern: str = "*.xml", include_existing: bool = False) -> None:
        self.directory = Path(directory)
        self.pattern = pattern
        self._seen: Dict[Path, Signature] = {}
        if not include_existing:
            self._seen = self._scan()

    def _scan(self) -> Dict[Path, Signature]:
        snapshot: Dict[Path, Signature] = {}
        for path in self.directory.glob(self.pattern):
            try:
                stat = path.stat()
            except FileNotFoundError:
                # Removed between glob and stat
                continue
            if path.is_file():
                snapshot[path] = (stat.st_mtime_ns, stat.st_size)
        return snapshot

    def poll(self) -> list[Path]:
        """Return new or changed paths, sorted by name, and remember the current state."""
        current = self._scan()
        changed = [path for path, signature in current.items() if self._seen.get(path) != signature]
        self._seen = current
        return sorted(changed)

    def watch(self, interval: float = 1.0) -> Iterator[Path]:
        """Yield paths as they appear or change, polling every ``interval`` seconds."""
        while True:
            yield from self.poll()
            time.sleep(interval)
