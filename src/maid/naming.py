"""Human-readable filename synthesis for AI-style artifact names.

AI sessions leave names such as ``SETUP_DEV_ENVIRONMENT.sh`` or
``final-test-results.md``. The stem is normalized, a leading action word is
pulled to the front, words are title-cased and the document kind becomes a
prefix: ``Install Dev Environment.sh``, ``Report - Test Final Results.md``.
"""

import re
from typing import List, Pattern, Tuple

from .models import DocumentKind, FileRecord, FileType, MARKDOWN_EXTENSION, SHELL_EXTENSION

# Applied in order; every match overwrites the working title, so the last
# matching pattern wins.
ACTION_PATTERNS: List[Tuple[str, Pattern]] = [
    ("Install", re.compile(r"(?:setup|install)[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Test", re.compile(r"test[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Launch", re.compile(r"launch[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Verify", re.compile(r"verify[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Cleanup", re.compile(r"cleanup[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Integration", re.compile(r"integration[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Configuration", re.compile(r"config(?:uration)?[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Build", re.compile(r"build[_\-\s]*(.*?)$", re.IGNORECASE)),
    ("Deploy", re.compile(r"deploy[_\-\s]*(.*?)$", re.IGNORECASE)),
]

KIND_PREFIXES = {
    DocumentKind.RUBRIC: "Rubric - ",
    DocumentKind.REPORT: "Report - ",
    DocumentKind.GUIDE: "Guide - ",
    DocumentKind.SUMMARY: "Summary - ",
}


def normalize_name(base_name: str) -> str:
    """Replace underscores and hyphens with spaces and lower-case."""
    return base_name.replace("_", " ").replace("-", " ").lower()


def extract_title(normalized: str) -> str:
    """Run every action pattern in order over the normalized name."""
    title = normalized
    for word, pattern in ACTION_PATTERNS:
        match = pattern.search(normalized)
        if match:
            title = f"{word} {match.group(1).strip()}"
    return title


def title_case(text: str) -> str:
    """Upper-case the first character of each word, leave the rest alone.

    Runs of whitespace collapse to a single space.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def synthesize_filename(record: FileRecord) -> str:
    """Derive the final filename (with extension) for a record.

    Records of FileType.OTHER keep their original file name.
    """
    if record.kind is FileType.OTHER:
        return record.file_name

    title = title_case(extract_title(normalize_name(record.base_name)))
    name = KIND_PREFIXES.get(record.document_kind, "") + title

    extension = MARKDOWN_EXTENSION if record.kind is FileType.MARKDOWN else SHELL_EXTENSION
    return f"{name}.{extension}"
