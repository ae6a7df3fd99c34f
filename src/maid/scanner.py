"""
Candidate enumeration and File Record loading.

The candidate list is materialized in full before any processing starts and
is sorted, so enumeration order (the tie-break for every keep/discard policy)
does not depend on the platform's directory listing order.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .exceptions import UnreadableFileError
from .models import HANDLED_EXTENSIONS, FileRecord

logger = logging.getLogger(__name__)


def is_hidden(path: Path) -> bool:
    """Dotfiles are hidden."""
    return path.name.startswith(".")


def _has_extension(path: Path, extensions: Sequence[str]) -> bool:
    return path.suffix[1:] in extensions


def list_candidates(
    root: Path,
    recursive: bool = False,
    extensions: Sequence[str] = HANDLED_EXTENSIONS,
    include_hidden: bool = True,
) -> List[Path]:
    """
    List files under ``root`` with one of the handled extensions.

    Args:
        root: Directory to scan
        recursive: Descend into subdirectories
        extensions: Extensions without the leading dot
        include_hidden: Include dotfiles

    Returns:
        Sorted list of file paths (symlinks to files included)
    """
    if recursive:
        paths = (
            Path(dirpath) / filename
            for dirpath, _dirnames, filenames in os.walk(root)
            for filename in filenames
        )
    else:
        paths = root.iterdir()

    candidates = []
    for path in paths:
        if not _has_extension(path, extensions):
            continue
        if not include_hidden and is_hidden(path):
            continue
        if not path.is_file():
            continue
        candidates.append(path)

    candidates.sort()
    logger.debug(f"[SCAN] {len(candidates)} candidate(s) under {root} (recursive={recursive})")
    return candidates


def read_created_at(path: Path) -> Optional[datetime]:
    """Return the file's creation time, or None when it cannot be stat'ed.

    Uses st_birthtime where the platform exposes it (macOS, BSD) and st_ctime
    on Windows. Linux os.stat has no birth time, so the modification time
    stands in for it there.
    """
    try:
        stat = path.stat()
    except OSError as e:
        logger.debug(f"[SCAN] No metadata for {path}: {e}")
        return None

    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is None and os.name == "nt":
        # st_ctime is the creation time on Windows
        birthtime = stat.st_ctime
    if birthtime is None:
        birthtime = stat.st_mtime
    return datetime.fromtimestamp(birthtime)


def load_record(path: Path) -> FileRecord:
    """
    Read and classify one file.

    Raises:
        UnreadableFileError: If the file cannot be opened, read or decoded
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(path, str(e)) from e

    return FileRecord.create(path, content, created_at=read_created_at(path))


def load_records(paths: Iterable[Path]) -> Tuple[List[FileRecord], List[Path]]:
    """Load every path, separating readable records from unreadable paths."""
    records: List[FileRecord] = []
    unreadable: List[Path] = []
    for path in paths:
        try:
            records.append(load_record(path))
        except UnreadableFileError as e:
            logger.warning(f"[SCAN] {e}")
            unreadable.append(path)
    return records, unreadable
