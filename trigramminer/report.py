"""
report.py

Plain-text rendering of a :class:`TrigramResult` as a fixed-width table.

    Phrase                                   | Count
    ==================================================
    the cat sat                              | 2
    ==================================================
    Finished Processing => StdIn
"""

from __future__ import annotations

from typing import List

from .ranker import TrigramResult


PHRASE_WIDTH = 40
DELIMITER = "=" * 50
EMPTY_NOTICE = "No three word phrases detected."


def format_row(phrase: str, count: int) -> str:
    # Long phrases are cut so the count column stays aligned.
    return f"{phrase[:PHRASE_WIDTH]:<{PHRASE_WIDTH}} | {count}"


def format_result(result: TrigramResult) -> str:
    """Render the table (or the empty notice) plus the closing status line."""
    lines: List[str] = []
    if result.is_empty:
        lines.extend([DELIMITER, EMPTY_NOTICE, DELIMITER])
    else:
        lines.append(f"{'Phrase':<{PHRASE_WIDTH}} | Count  ")
        lines.append(DELIMITER)
        lines.extend(format_row(phrase, count) for phrase, count in result.entries)
        lines.append(DELIMITER)
    lines.append(f"Finished Processing => {result.source}")
    lines.append("")
    return "\n".join(lines)
