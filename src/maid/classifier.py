"""
Document classification for AI-generated artifacts.

Infers a DocumentKind from a file name and its text body. Rules are evaluated
in a fixed priority order and the first match wins; there is no scoring.
Both inputs are lower-cased before inspection.
"""

from typing import Tuple

from .models import DocumentKind, SHELL_EXTENSION


# (kind, name markers, content markers), in priority order
CLASSIFICATION_RULES: Tuple[Tuple[DocumentKind, Tuple[str, ...], Tuple[str, ...]], ...] = (
    (
        DocumentKind.RUBRIC,
        ("rubric",),
        (
            "# rubric",
            "rubric for",
            "evaluation rubric",
            "assessment criteria",
            "scoring guide",
        ),
    ),
    (
        DocumentKind.REPORT,
        ("report", "complete", "status", "analysis", "assessment"),
        (
            "# report",
            "# completion",
            "# status",
            "# analysis",
            "task completion",
            "completion report",
            "status update",
        ),
    ),
    (
        DocumentKind.GUIDE,
        ("guide", "how_to", "howto", "manual", "tutorial", "instructions"),
        (
            "# guide",
            "# how to",
            "step by step",
            "# tutorial",
            "# instructions",
            "how to use",
            "usage instructions",
        ),
    ),
    (
        DocumentKind.SUMMARY,
        ("summary", "overview", "recap", "synopsis"),
        (
            "# summary",
            "## summary",
            "# overview",
            "# recap",
            "in conclusion",
            "executive summary",
            "project summary",
        ),
    ),
)


def classify(name: str, content: str) -> DocumentKind:
    """Classify a document from its name and content.

    Name and content rules for Rubric, Report, Guide and Summary run before
    the extension fallback, so ``rubric_check.sh`` is a Rubric, not a Script.

    Args:
        name: File name, including its extension
        content: Full text body

    Returns:
        The first matching DocumentKind, or DocumentKind.UNKNOWN
    """
    name_lower = name.lower()
    content_lower = content.lower()

    for kind, name_markers, content_markers in CLASSIFICATION_RULES:
        if any(marker in name_lower for marker in name_markers) or any(
            marker in content_lower for marker in content_markers
        ):
            return kind

    # Shell files are scripts by definition
    if name_lower.endswith(f".{SHELL_EXTENSION}"):
        return DocumentKind.SCRIPT

    return DocumentKind.UNKNOWN
