"""
Lightweight activity logger.

Appends one JSON object per file action (copy, link, move, skip) to a JSONL
file at the root of the processed directory, so a run can be audited or
undone by hand afterwards.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ActivityLog:
    def __init__(self, path: Optional[Path], run_id: Optional[str] = None):
        """
        Args:
            path: JSONL file to append to; None disables logging
            run_id: Identifier shared by every entry of this run
        """
        self.path = path
        self.run_id = run_id or uuid.uuid4().hex[:12]

    @classmethod
    def disabled(cls) -> "ActivityLog":
        return cls(None)

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def log(self, action: str, src: Path, dest: Optional[Path], reason: str = "") -> None:
        if self.path is None:
            return

        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "run_id": self.run_id,
            "action": action,
            "src": str(src),
            "dest": str(dest) if dest is not None else None,
            "reason": reason,
        }
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.warning(f"[ACTIVITY] Failed to append to {self.path}: {e}")
