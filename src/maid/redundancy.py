"""
Redundancy resolution for the keep/discard mode.

Partitions a set of File Records into files worth keeping and redundant files
to discard, one policy per DocumentKind:

- Rubric: keep the most comprehensive (highest word count)
- Report: keep the most recent (created_at; a missing timestamp is oldest)
- Guide: keep all
- Summary: keep the most recent
- Script: keep all except exact content duplicates (first occurrence wins)
- Unknown / unreadable: keep

Ties always resolve to the earliest record in enumeration order. A group with
a single record is always kept whole.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .models import DocumentKind, FileRecord, RedundancyPartition

logger = logging.getLogger(__name__)


def group_by_kind(records: Iterable[FileRecord]) -> Dict[DocumentKind, List[FileRecord]]:
    """Group records by document kind, preserving enumeration order."""
    groups: Dict[DocumentKind, List[FileRecord]] = {kind: [] for kind in DocumentKind}
    for record in records:
        groups[record.document_kind].append(record)
    return groups


def _recency_key(record: FileRecord) -> Tuple[int, float]:
    # Records with a timestamp sort above records without one
    if record.created_at is None:
        return (0, 0.0)
    return (1, record.created_at.timestamp())


def _keep_one(
    partition: RedundancyPartition,
    records: Sequence[FileRecord],
    key: Callable[[FileRecord], object],
    keep_reason: str,
    discard_reason: str,
) -> None:
    if not records:
        return
    # max() returns the first maximal element, so ties go to enumeration order
    best = max(records, key=key)
    partition.mark_keep(best.path, keep_reason, best)
    logger.debug(f"[KEEP] {best.path} ({keep_reason})")
    for record in records:
        if record is best:
            continue
        partition.mark_discard(record.path, discard_reason)
        logger.debug(f"[DISCARD] {record.path} ({discard_reason})")


def _keep_unique_scripts(partition: RedundancyPartition, scripts: Sequence[FileRecord]) -> None:
    # Pairwise comparison against every kept script: O(n^2) in the group size.
    unique: List[FileRecord] = []
    for record in scripts:
        stripped = record.content.strip()
        original = next((kept for kept in unique if kept.content.strip() == stripped), None)
        if original is not None:
            partition.mark_discard(record.path, f"duplicate of {original.path}")
            logger.debug(f"[DISCARD] {record.path} (duplicate of {original.path})")
            continue
        unique.append(record)
        partition.mark_keep(record.path, "unique script", record)
        logger.debug(f"[KEEP] {record.path} (unique script)")


def partition(
    records: Iterable[FileRecord],
    unreadable: Iterable[Path] = (),
    order: Optional[Sequence[Path]] = None,
) -> RedundancyPartition:
    """Split records into keep and discard sets.

    Args:
        records: Loaded File Records in enumeration order
        unreadable: Paths that could not be loaded; always kept
        order: Scan order of every path. Unreadable and Unknown files are
            kept in this order; without it, unreadable paths come first

    Returns:
        RedundancyPartition whose keep and discard lists cover every input
    """
    result = RedundancyPartition()
    groups = group_by_kind(records)

    kept_by_default = [(path, None) for path in unreadable]
    kept_by_default += [(record.path, record) for record in groups[DocumentKind.UNKNOWN]]
    if order is not None:
        position = {path: index for index, path in enumerate(order)}
        kept_by_default.sort(key=lambda item: position.get(item[0], len(position)))

    for path, record in kept_by_default:
        if record is None:
            result.mark_keep(path, "unreadable, kept by default")
        else:
            result.mark_keep(path, "unknown kind, kept by default", record)

    _keep_one(
        result,
        groups[DocumentKind.RUBRIC],
        key=lambda record: record.word_count,
        keep_reason="most comprehensive rubric",
        discard_reason="redundant rubric",
    )
    _keep_one(
        result,
        groups[DocumentKind.REPORT],
        key=_recency_key,
        keep_reason="most recent report",
        discard_reason="older report",
    )

    for record in groups[DocumentKind.GUIDE]:
        result.mark_keep(record.path, "guide", record)

    _keep_one(
        result,
        groups[DocumentKind.SUMMARY],
        key=_recency_key,
        keep_reason="most recent summary",
        discard_reason="older summary",
    )

    _keep_unique_scripts(result, groups[DocumentKind.SCRIPT])

    logger.info(f"[KEEP] Partition: {len(result.keep)} kept, {len(result.discard)} discarded")
    return result
