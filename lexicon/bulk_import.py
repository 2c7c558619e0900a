"""
bulk_import.py — Bulk Word Text Format
=======================================
One record per line:

    word,category,frequency,description

Every field but the word is optional.  Missing or blank fields fall back
to the defaults below; a line whose word is blank is skipped and the
rest of the batch still goes in.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from lexicon.entry import EntryData

logger = logging.getLogger(__name__)


BULK_CATEGORY        = "bulk-import"
BULK_FREQUENCY       = 50
BULK_DESCRIPTION     = "Bulk imported: {word}"

SINGLE_CATEGORY      = "custom"
SINGLE_FREQUENCY     = 100
SINGLE_DESCRIPTION   = "Custom entry: {word}"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class BulkRecord:
    word: str
    data: EntryData


def _parse_int(text: Optional[str]) -> Optional[int]:
    """Leading-integer parse: "12abc" → 12, "abc" → None."""
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_bulk_line(line: str) -> Optional[BulkRecord]:
    """One line → BulkRecord, or None when the line has no word."""
    parts = [p.strip() for p in line.split(",")]
    word = parts[0].lower() if parts else ""
    if not word:
        return None

    category    = parts[1] if len(parts) > 1 and parts[1] else BULK_CATEGORY
    frequency   = _parse_int(parts[2]) if len(parts) > 2 else None
    description = parts[3] if len(parts) > 3 and parts[3] else BULK_DESCRIPTION.format(word=word)

    return BulkRecord(
        word=word,
        data=EntryData(
            frequency=frequency or BULK_FREQUENCY,     # 0 also falls back
            category=category,
            description=description,
        ),
    )


def parse_bulk_text(text: str) -> List[BulkRecord]:
    records = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        record = parse_bulk_line(line)
        if record is None:
            logger.warning("skipping bulk line %d: no word in %r", lineno, line)
            continue
        records.append(record)
    return records


def single_entry(
    word: str,
    frequency: int = SINGLE_FREQUENCY,
    category: str = "",
    description: str = "",
) -> Optional[BulkRecord]:
    """The one-word form: blank category / description take the custom defaults."""
    word = word.strip()
    if not word:
        return None
    return BulkRecord(
        word=word.lower(),
        data=EntryData(
            frequency=frequency,
            category=category.strip() or SINGLE_CATEGORY,
            description=description.strip() or SINGLE_DESCRIPTION.format(word=word),
        ),
    )
