"""
I/O utilities for maid.

Atomic writes for generated documents, and collision-free destination names
for files moved into a shared directory.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write(path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write ``content`` to ``path`` through a sibling temp file and a replace.

    Readers see either the previous file or the complete new one.

    Raises:
        OSError: If the temp file cannot be written or moved into place
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")

    try:
        tmp_path.write_text(content, encoding=encoding)
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"[IO] Wrote {path}")


def unique_destination(directory: Path, file_name: str) -> Path:
    """Return ``directory/file_name``, or ``stem-N.ext`` if that name is taken."""
    candidate = directory / file_name
    if not candidate.exists() and not candidate.is_symlink():
        return candidate

    original = Path(file_name)
    stem, suffix = original.stem, original.suffix
    counter = 1
    while True:
        candidate = directory / f"{stem}-{counter}{suffix}"
        if not candidate.exists() and not candidate.is_symlink():
            return candidate
        counter += 1
