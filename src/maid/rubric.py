"""
Comprehensive rubric generation for the keep mode.

Builds COMPREHENSIVE_PROJECT_RUBRIC.md from the files that survived pruning:
a key-terms list from keyword frequency across all kept content, evaluation
tables for the file types present, and a static note with references.

The section headings are the output format other tools read.
"""

import re
from collections import Counter
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from .models import FileRecord, FileType

RUBRIC_FILENAME = "COMPREHENSIVE_PROJECT_RUBRIC.md"
DEFAULT_TOP_KEYWORDS = 15
MIN_KEYWORD_LENGTH = 4

# Letters, digits and underscore form tokens; everything else separates them
TOKEN_SPLIT = re.compile(r"[^\w]+")

HEADER = """# Comprehensive Project Rubric

*Generated by Maid - AI-generated file organizer*

## Overview

This rubric is automatically generated based on the analysis of project documentation and scripts.

"""

DOCUMENTATION_TABLE = """### Documentation Quality

| Criterion | Poor | Satisfactory | Excellent |
|-----------|------|--------------|----------|
| Completeness | Documentation missing key components | Most features documented | Comprehensive documentation of all features |
| Clarity | Confusing or unclear | Generally clear with some issues | Clear, concise, and well-organized |
| Examples | Few or no examples | Some examples provided | Rich examples covering typical use cases |

"""

SCRIPT_TABLE = """### Script Quality

| Criterion | Poor | Satisfactory | Excellent |
|-----------|------|--------------|----------|
| Functionality | Scripts fail to accomplish tasks | Scripts work but have limitations | Scripts work flawlessly for all use cases |
| Readability | Poorly commented and structured | Adequate comments and structure | Well-commented, clear structure |
| Error Handling | Little or no error handling | Basic error handling | Comprehensive error handling with helpful messages |

"""

CLOSING_NOTE = """## Note on Documentation Management

Research has shown that having too many redundant documentation files can lead to confusion and AI hallucinations when used as reference material. This rubric is generated as part of an effort to consolidate and organize project documentation.

### References

- Hallucination in Large Language Models: [https://arxiv.org/abs/2309.01219](https://arxiv.org/abs/2309.01219)
- The Impact of Contradictory Data on AI Training: [https://www.nature.com/articles/s41467-023-42879-y](https://www.nature.com/articles/s41467-023-42879-y)
"""


def tokenize(content: str, min_length: int = MIN_KEYWORD_LENGTH) -> List[str]:
    """Split content into lower-cased tokens of at least ``min_length`` chars."""
    return [
        token.lower()
        for token in TOKEN_SPLIT.split(content)
        if len(token) >= min_length
    ]


def keyword_frequencies(
    records: Iterable[FileRecord], min_length: int = MIN_KEYWORD_LENGTH
) -> Counter:
    """Count tokens across all records combined.

    The Counter keeps first-seen insertion order, which is the tie-break used
    by ``top_keywords``.
    """
    counts: Counter = Counter()
    for record in records:
        counts.update(tokenize(record.content, min_length))
    return counts


def top_keywords(
    records: Iterable[FileRecord],
    limit: int = DEFAULT_TOP_KEYWORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> List[str]:
    """Return the ``limit`` most frequent keywords.

    Equal counts keep first-seen order, so the result is deterministic for a
    given input order.
    """
    counts = keyword_frequencies(records, min_length)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]


def synthesize_rubric(
    kept_records: Sequence[FileRecord],
    generated_on: Optional[datetime] = None,
    keyword_limit: int = DEFAULT_TOP_KEYWORDS,
    min_keyword_length: int = MIN_KEYWORD_LENGTH,
) -> str:
    """Render the rubric document for the kept file set.

    Args:
        kept_records: Records that survived pruning, in keep order
        generated_on: Timestamp printed in the header (defaults to now)
        keyword_limit: Number of key terms to list
        min_keyword_length: Shortest token counted as a keyword

    Returns:
        Markdown text of the rubric
    """
    generated_on = generated_on or datetime.now()

    parts = [HEADER, f"Generated on: {generated_on.strftime('%Y-%m-%d')}\n\n"]

    parts.append("## Key Project Components\n\n")
    parts.append("### Key Terms\n\n")
    for keyword in top_keywords(kept_records, keyword_limit, min_keyword_length):
        parts.append(f"- {keyword}\n")

    parts.append("\n## Evaluation Criteria\n\n")

    kinds = {record.kind for record in kept_records}
    if FileType.MARKDOWN in kinds:
        parts.append(DOCUMENTATION_TABLE)
    if FileType.SHELL in kinds:
        parts.append(SCRIPT_TABLE)

    parts.append(CLOSING_NOTE)
    return "".join(parts)
