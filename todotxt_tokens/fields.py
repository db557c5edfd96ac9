"""Primitive parsers for the fixed-format fields at the front of a line.

Every parser is anchored at the start of its input and returns either
``None`` (no match) or a :class:`ParseResult` whose ``remaining`` begins
exactly where the match ended.
"""

from __future__ import annotations

import re
from datetime import date

from .models import ParseResult

RE_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
RE_PRIORITY = re.compile(r"\(([A-Z])\)")

COMPLETION_MARK = "x "


def parse_date(text: str) -> ParseResult[date] | None:
    """Parse a ``YYYY-MM-DD`` date at the start of ``text``.

    Digits that do not form a real calendar date (``2018-02-30``,
    ``9999-99-99``) are rejected rather than clamped.
    """
    m = RE_DATE.match(text)
    if not m:
        return None
    try:
        value = date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
    return ParseResult(value, text[m.end():])


def parse_completion(text: str) -> ParseResult[bool]:
    """Consume the ``x `` completion marker. Never fails."""
    if text.startswith(COMPLETION_MARK):
        return ParseResult(True, text[len(COMPLETION_MARK):])
    return ParseResult(False, text)


def parse_priority(text: str) -> ParseResult[str] | None:
    """Parse a ``(A)`` priority at the start of ``text``."""
    m = RE_PRIORITY.match(text)
    if not m:
        return None
    return ParseResult(m.group(1), text[m.end():])
