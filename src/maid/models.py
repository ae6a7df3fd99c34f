"""Data model shared by the classifier, the decision engine and the flows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

MARKDOWN_EXTENSION = "md"
SHELL_EXTENSION = "sh"
HANDLED_EXTENSIONS = (MARKDOWN_EXTENSION, SHELL_EXTENSION)


class FileType(Enum):
    """File types that maid handles, derived from the extension."""

    MARKDOWN = "markdown"
    SHELL = "shell"
    OTHER = "other"

    @classmethod
    def from_path(cls, path: Path) -> "FileType":
        extension = path.suffix[1:]
        if extension == MARKDOWN_EXTENSION:
            return cls.MARKDOWN
        if extension == SHELL_EXTENSION:
            return cls.SHELL
        return cls.OTHER


class DocumentKind(Enum):
    """Semantic category assigned to a text artifact."""

    RUBRIC = "Rubric"
    REPORT = "Report"
    GUIDE = "Guide"
    SUMMARY = "Summary"
    SCRIPT = "Script"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class FileRecord:
    """One candidate artifact, loaded once and never reclassified.

    Build records through ``FileRecord.create`` (or ``scanner.load_record``)
    so that ``kind`` and ``document_kind`` are derived exactly once.
    """

    path: Path
    kind: FileType
    document_kind: DocumentKind
    base_name: str
    content: str
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, path: Path, content: str, created_at: Optional[datetime] = None
    ) -> "FileRecord":
        from .classifier import classify

        return cls(
            path=path,
            kind=FileType.from_path(path),
            document_kind=classify(path.name, content),
            base_name=path.stem or "unknown",
            content=content,
            created_at=created_at,
        )

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def word_count(self) -> int:
        return len(self.content.split())


@dataclass(frozen=True)
class PlacementDecision:
    """Where a single file should be copied to by the clean flow."""

    original_path: Path
    target_directory: Path
    target_filename: str
    document_kind: DocumentKind = DocumentKind.UNKNOWN

    @property
    def target_path(self) -> Path:
        return self.target_directory / self.target_filename


@dataclass
class RedundancyPartition:
    """Keep/discard split of a file set.

    ``keep`` and ``discard`` are disjoint and together cover every input path.
    """

    keep: List[Path] = field(default_factory=list)
    discard: List[Path] = field(default_factory=list)
    reasons: Dict[Path, str] = field(default_factory=dict)
    kept_records: List[FileRecord] = field(default_factory=list)

    def mark_keep(self, path: Path, reason: str, record: Optional[FileRecord] = None) -> None:
        self.keep.append(path)
        self.reasons[path] = reason
        if record is not None:
            self.kept_records.append(record)

    def mark_discard(self, path: Path, reason: str) -> None:
        self.discard.append(path)
        self.reasons[path] = reason

    @property
    def keep_set(self) -> set:
        return set(self.keep)

    @property
    def discard_set(self) -> set:
        return set(self.discard)


@dataclass
class CleanTally:
    """Counters for the clean summary, threaded through the traversal."""

    found: int = 0
    processed: int = 0
    skipped: int = 0
    markdown: int = 0
    shell: int = 0

    def count_type(self, path: Path) -> None:
        kind = FileType.from_path(path)
        if kind is FileType.MARKDOWN:
            self.markdown += 1
        elif kind is FileType.SHELL:
            self.shell += 1
