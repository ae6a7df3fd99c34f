"""
Rename/restructure flow.

Each candidate is loaded, classified, given a human-readable name and (in
restructure mode) a topical directory, then copied there. Originals are never
modified. Symlinks are recreated as symlinks to the same target instead of
being copied.

Each file is fully handled before the next one starts; a failing file is
counted as skipped and the run carries on.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .activity_log import ActivityLog
from .exceptions import UnreadableFileError
from .models import CleanTally, PlacementDecision
from .placement import plan_placement
from .scanner import list_candidates, load_record

logger = logging.getLogger(__name__)


class CopyOutcome(Enum):
    COPIED = "copied"
    LINKED = "linked"
    SKIPPED_SAME_FILE = "skipped_same_file"
    SKIPPED_EXISTS = "skipped_exists"
    DRY_RUN = "dry_run"


def _is_same_file(source: Path, target: Path) -> bool:
    try:
        return os.path.samefile(source, target)
    except OSError:
        return False


def _link_target(source: Path, target_directory: Path) -> str:
    """Link text for a copy of symlink ``source`` placed in ``target_directory``.

    Relative links are re-expressed relative to the new directory so they keep
    pointing at the same file.
    """
    link = os.readlink(source)
    if os.path.isabs(link):
        return link
    resolved = os.path.normpath(os.path.join(source.parent, link))
    return os.path.relpath(resolved, target_directory)


def execute_decision(
    decision: PlacementDecision, activity_log: Optional[ActivityLog] = None
) -> CopyOutcome:
    """
    Copy (or re-link) one file to its target.

    Returns:
        The outcome; existing targets are skipped, never overwritten

    Raises:
        OSError: If the directory, copy or link operation fails
    """
    source = decision.original_path
    target = decision.target_path

    decision.target_directory.mkdir(parents=True, exist_ok=True)

    if target.exists() and _is_same_file(source, target):
        logger.debug(f"[CLEAN] Skip {source}: source and target are the same file")
        if activity_log is not None:
            activity_log.log("skip", source, target, "same file")
        return CopyOutcome.SKIPPED_SAME_FILE

    if target.exists() or target.is_symlink():
        logger.debug(f"[CLEAN] Skip {source}: target {target} already exists")
        if activity_log is not None:
            activity_log.log("skip", source, target, "target exists")
        return CopyOutcome.SKIPPED_EXISTS

    if source.is_symlink():
        os.symlink(_link_target(source, decision.target_directory), target)
        outcome = CopyOutcome.LINKED
    else:
        shutil.copy2(source, target)
        outcome = CopyOutcome.COPIED

    if activity_log is not None:
        activity_log.log(outcome.value, source, target, decision.document_kind.value)
    return outcome


@dataclass
class CleanResult:
    tally: CleanTally = field(default_factory=CleanTally)
    decisions: List[PlacementDecision] = field(default_factory=list)
    outcomes: List[CopyOutcome] = field(default_factory=list)


class CleanRunner:
    """Renames, and optionally relocates, AI-generated artifacts."""

    def __init__(
        self,
        base_dir: Path,
        recursive: bool = False,
        restructure: bool = False,
        dry_run: bool = False,
        activity_log: Optional[ActivityLog] = None,
    ):
        self.base_dir = base_dir
        self.recursive = recursive
        self.restructure = restructure
        self.dry_run = dry_run
        self.activity_log = activity_log or ActivityLog.disabled()

    def scan(self) -> List[Path]:
        return list_candidates(self.base_dir, recursive=self.recursive, include_hidden=False)

    def process_file(self, path: Path, result: CleanResult) -> None:
        """Handle one candidate, updating ``result`` in place."""
        result.tally.count_type(path)

        try:
            record = load_record(path)
        except UnreadableFileError as e:
            logger.warning(f"[CLEAN] Skipping {path}: {e.reason}")
            result.tally.skipped += 1
            return

        decision = plan_placement(record, self.base_dir, self.restructure, original_path=path)
        result.decisions.append(decision)
        logger.debug(
            f"[CLEAN] {path} -> {decision.target_path} ({record.document_kind.value})"
        )

        if self.dry_run:
            result.outcomes.append(CopyOutcome.DRY_RUN)
            result.tally.processed += 1
            return

        try:
            outcome = execute_decision(decision, self.activity_log)
        except OSError as e:
            logger.error(f"[CLEAN] Failed to process {path}: {e}")
            result.tally.skipped += 1
            return

        result.outcomes.append(outcome)
        result.tally.processed += 1

    def run(
        self,
        paths: Optional[List[Path]] = None,
        on_progress: Optional[Callable[[Path], None]] = None,
    ) -> CleanResult:
        """
        Process every candidate.

        Args:
            paths: Pre-scanned candidates (scanned when None)
            on_progress: Called after each file, e.g. to advance a progress bar

        Returns:
            CleanResult with the tally, decisions and per-file outcomes
        """
        if paths is None:
            paths = self.scan()

        result = CleanResult()
        result.tally.found = len(paths)

        for path in paths:
            self.process_file(path, result)
            if on_progress is not None:
                on_progress(path)

        logger.info(
            f"[CLEAN] Done: {result.tally.processed} processed, {result.tally.skipped} skipped"
        )
        return result
