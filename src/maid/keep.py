"""
Keep/discard flow.

Evaluates the candidate set with the redundancy policies, moves the discarded
files into a holding area, hands the holding area to the expiry collaborator,
and writes a comprehensive rubric for the surviving files at the root of the
processed directory.

There is no rollback: if rubric generation fails after the moves, the moved
files stay in the holding area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .activity_log import ActivityLog
from .holding_area import EphemeralStorage, HoldingArea, NullExpiry
from .io_utils import atomic_write
from .models import RedundancyPartition
from .redundancy import partition
from .rubric import DEFAULT_TOP_KEYWORDS, MIN_KEYWORD_LENGTH, RUBRIC_FILENAME, synthesize_rubric
from .scanner import list_candidates, load_records

logger = logging.getLogger(__name__)


@dataclass
class KeepResult:
    partition: RedundancyPartition
    moved: List[Path] = field(default_factory=list)
    holding_area: Optional[Path] = None
    rubric_path: Optional[Path] = None


class KeepRunner:
    """Prunes redundant artifacts and summarizes the survivors."""

    def __init__(
        self,
        base_dir: Path,
        trash_root: Path,
        recursive: bool = False,
        expiry: Optional[EphemeralStorage] = None,
        activity_log: Optional[ActivityLog] = None,
        rubric_filename: str = RUBRIC_FILENAME,
        keyword_limit: int = DEFAULT_TOP_KEYWORDS,
        min_keyword_length: int = MIN_KEYWORD_LENGTH,
        now: Optional[datetime] = None,
    ):
        self.base_dir = base_dir
        self.recursive = recursive
        self.now = now or datetime.now()
        self.holding_area = HoldingArea(trash_root, created_at=self.now)
        self.expiry = expiry if expiry is not None else NullExpiry()
        self.activity_log = activity_log or ActivityLog.disabled()
        self.rubric_filename = rubric_filename
        self.keyword_limit = keyword_limit
        self.min_keyword_length = min_keyword_length

    def scan(self) -> List[Path]:
        return list_candidates(self.base_dir, recursive=self.recursive)

    def evaluate(self, paths: Optional[List[Path]] = None) -> RedundancyPartition:
        """Load every candidate and partition it into keep and discard."""
        if paths is None:
            paths = self.scan()
        records, unreadable = load_records(paths)
        return partition(records, unreadable, order=paths)

    def write_rubric(self, result: RedundancyPartition) -> Optional[Path]:
        if not result.kept_records:
            logger.warning("[KEEP] No readable kept files, skipping rubric generation")
            return None

        content = synthesize_rubric(
            result.kept_records,
            generated_on=self.now,
            keyword_limit=self.keyword_limit,
            min_keyword_length=self.min_keyword_length,
        )
        rubric_path = self.base_dir / self.rubric_filename
        atomic_write(rubric_path, content)
        self.activity_log.log("rubric", rubric_path, None, f"{len(result.kept_records)} kept file(s)")
        logger.info(f"[KEEP] Created {rubric_path}")
        return rubric_path

    def apply(self, result: RedundancyPartition) -> KeepResult:
        """
        Execute a partition.

        Raises:
            HoldingAreaError: If a discarded file cannot be moved
            OSError: If the rubric cannot be written
        """
        outcome = KeepResult(partition=result)

        if result.discard:
            outcome.moved = self.holding_area.move_all(result.discard, self.activity_log)
            outcome.holding_area = self.holding_area.directory
            self.expiry.schedule_expiry(self.holding_area.directory)

        outcome.rubric_path = self.write_rubric(result)
        return outcome

    def run(self) -> KeepResult:
        """Evaluate and apply without confirmation."""
        return self.apply(self.evaluate())
