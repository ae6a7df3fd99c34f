"""
Polling watcher for AI-generated artifacts.

Checks the modification time of every Markdown and shell file under a
directory at a fixed interval and reports files that changed since the
previous check, together with the ``maid clean`` command that would tidy them.
Files seen for the first time are recorded but not reported.
"""

import logging
import shlex
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .scanner import list_candidates

logger = logging.getLogger(__name__)


def suggest_command(path: Path) -> str:
    """Suggested clean invocation for a changed file."""
    return f"maid clean --path {shlex.quote(str(path.parent))} --verbose"


class FileWatcher:
    """Tracks candidate modification times between polls."""

    def __init__(self, root: Path, recursive: bool = True):
        self.root = root
        self.recursive = recursive
        self.last_modified: Dict[Path, float] = {}

    def snapshot(self) -> Dict[Path, float]:
        mtimes: Dict[Path, float] = {}
        for path in list_candidates(self.root, recursive=self.recursive):
            try:
                mtimes[path] = path.stat().st_mtime
            except OSError:
                # Removed between listing and stat
                continue
        return mtimes

    def poll(self) -> List[Path]:
        """Return files modified since the previous poll."""
        current = self.snapshot()
        changed = [
            path
            for path, mtime in current.items()
            if path in self.last_modified and mtime > self.last_modified[path]
        ]
        self.last_modified.update(current)
        for path in changed:
            logger.info(f"[WATCH] Change detected: {path}")
        return changed

    def run(
        self,
        interval: float,
        iterations: Optional[int] = None,
        on_change: Optional[Callable[[Path, str], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Poll until interrupted, or ``iterations`` times.

        Args:
            interval: Seconds between polls
            iterations: Number of polls (None runs forever)
            on_change: Called with (path, suggested command) per change
            sleep: Sleep function, replaceable in tests
        """
        count = 0
        while iterations is None or count < iterations:
            for path in self.poll():
                if on_change is not None:
                    on_change(path, suggest_command(path))
            count += 1
            if iterations is None or count < iterations:
                sleep(interval)
