"""Target directory resolution for the restructure mode."""

from pathlib import Path
from typing import Optional

from .models import DocumentKind, FileRecord, FileType, PlacementDecision
from .naming import synthesize_filename

DOCUMENT_DIRECTORIES = {
    DocumentKind.RUBRIC: Path("docs") / "rubrics",
    DocumentKind.REPORT: Path("docs") / "reports",
    DocumentKind.GUIDE: Path("docs") / "guides",
    DocumentKind.SUMMARY: Path("docs") / "summaries",
}

# Checked in order against the lower-cased script body; first hit wins
SCRIPT_DIRECTORIES = (
    (("install", "setup"), Path("scripts") / "setup"),
    (("test",), Path("scripts") / "tests"),
    (("build",), Path("scripts") / "build"),
)
GENERIC_SCRIPT_DIRECTORY = Path("scripts")


def resolve_target_directory(record: FileRecord, base_dir: Path) -> Path:
    """Map a record to the subdirectory of ``base_dir`` it belongs in.

    Combinations without a rule stay in ``base_dir`` itself.
    """
    if record.kind is FileType.MARKDOWN and record.document_kind in DOCUMENT_DIRECTORIES:
        return base_dir / DOCUMENT_DIRECTORIES[record.document_kind]

    if record.kind is FileType.SHELL and record.document_kind is DocumentKind.SCRIPT:
        content_lower = record.content.lower()
        for markers, subdir in SCRIPT_DIRECTORIES:
            if any(marker in content_lower for marker in markers):
                return base_dir / subdir
        return base_dir / GENERIC_SCRIPT_DIRECTORY

    return base_dir


def plan_placement(
    record: FileRecord,
    base_dir: Path,
    restructure: bool,
    original_path: Optional[Path] = None,
) -> PlacementDecision:
    """Build the placement decision for one record.

    Without ``restructure`` the file is renamed in place, next to the original.
    ``original_path`` is the path as enumerated (it differs from
    ``record.path`` for symlinks).
    """
    original_path = original_path or record.path
    if restructure:
        target_directory = resolve_target_directory(record, base_dir)
    else:
        target_directory = original_path.parent

    return PlacementDecision(
        original_path=original_path,
        target_directory=target_directory,
        target_filename=synthesize_filename(record),
        document_kind=record.document_kind,
    )
