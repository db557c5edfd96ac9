"""Header tokenizer: splits a raw line into its fixed-format fields."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from .fields import parse_completion, parse_date, parse_priority
from .models import HeaderTokens, ParseResult

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " "


def _field(
    parse: Callable[[str], ParseResult | None], text: str
) -> ParseResult | None:
    """Run ``parse`` and require the single trailing space that ends a field."""
    result = parse(text)
    if result is None or not result.remaining.startswith(FIELD_SEPARATOR):
        return None
    return ParseResult(result.value, result.remaining[len(FIELD_SEPARATOR):])


def tokenize(line: str) -> HeaderTokens:
    """Strip completion mark, priority and up to two dates from ``line``.

    Fields are matched strictly left to right, each only at the current
    position. A field missing at its slot is skipped without advancing, so
    the whole line ends up as the description when no header is present.
    """
    mark = parse_completion(line)
    completed, rest = mark.value, mark.remaining

    priority: str | None = None
    result = _field(parse_priority, rest)
    if result is not None:
        priority, rest = result.value, result.remaining

    dates: list[date] = []
    for _ in range(2):
        result = _field(parse_date, rest)
        if result is None:
            break
        dates.append(result.value)
        rest = result.remaining

    tokens = HeaderTokens(
        description=rest,
        completed=completed,
        priority=priority,
        first_date=dates[0] if dates else None,
        second_date=dates[1] if len(dates) > 1 else None,
    )
    logger.debug("Tokenized %r -> %s", line, tokens)
    return tokens
