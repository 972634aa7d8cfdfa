"""Aggregate metrics over a note corpus."""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from zkstats.vault import Note

PROOFING_TAG = "#proofing"

_WHITESPACE_RE = re.compile(r"\s+")
# A link only counts when preceded by a space, comma or section mark, so a
# [[link]] at the very start of a note is not counted.
_LINK_RE = re.compile(r"[ ,§]\[\[")
_TIMESTAMP_RE = re.compile(r"\d{12}")


@dataclass(frozen=True)
class ReportAggregates:
    note_count: int
    word_count: int
    link_count: int
    average_word_count: str | int  # "12.34", or 0 for an empty corpus
    average_link_count: str | int
    proofing_count: int
    monthly_counts: dict[str, int] = field(default_factory=dict)


def count_words(text: str) -> int:
    return len([w for w in _WHITESPACE_RE.split(text) if w])


def count_links(text: str) -> int:
    return len(_LINK_RE.findall(text))


def count_tagged_notes(notes: Iterable[Note], tag: str = PROOFING_TAG) -> int:
    """Count notes whose content contains *tag* anywhere.

    Plain substring containment: "#proofingnotes" matches "#proofing".
    """
    return sum(1 for note in notes if tag in note.content)


def count_notes_by_month(notes: Iterable[Note]) -> dict[str, int]:
    """Map "YYYY-MM" to the number of notes created in that month.

    The month comes from the first 12-digit run in the filename, taken
    verbatim (no range check). Notes without one are left out.
    """
    counts: Counter[str] = Counter()
    for note in notes:
        match = _TIMESTAMP_RE.search(note.filename)
        if match is None:
            continue
        digits = match.group(0)
        counts[f"{digits[0:4]}-{digits[4:6]}"] += 1
    return dict(counts)


def _average(total: int, count: int) -> str | int:
    if count == 0:
        return 0
    # exact ties round up, as older stats notes did
    return str(Decimal(total / count).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compute_aggregates(notes: Sequence[Note]) -> ReportAggregates:
    note_count = len(notes)
    word_count = sum(count_words(note.content) for note in notes)
    link_count = sum(count_links(note.content) for note in notes)
    return ReportAggregates(
        note_count=note_count,
        word_count=word_count,
        link_count=link_count,
        average_word_count=_average(word_count, note_count),
        average_link_count=_average(link_count, note_count),
        proofing_count=count_tagged_notes(notes),
        monthly_counts=count_notes_by_month(notes),
    )
