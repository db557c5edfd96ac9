"""Parser and renderer for the free-form description of a task.

The description is split into an ordered sequence of components: plain
text plus three kinds of inline tag (``+project``, ``@context`` and
``key:value``). Concatenating the rendered components always reproduces
the input exactly.

A tag is recognized at the start of the description or right after
whitespace. Tag-like text glued to a preceding word (``word+Project``,
``mail@example.com``) stays plain text.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable

from .models import Component, Context, KeyValue, ParseResult, Project, Text

# Anchored tag patterns, matched at the start of the remaining input
RE_PROJECT = re.compile(r"\+(\S+)")
RE_CONTEXT = re.compile(r"@(\S+)")
RE_KEY_VALUE = re.compile(r"([^\s:]+):([^\s:]+)")

# Where the next tag begins inside a run of text; must accept exactly the
# positions the anchored patterns above would match at
RE_NEXT_TAG = re.compile(r"(?<=\s)(?:\+\S|@\S|[^\s:]+:[^\s:])")

TAG_PATTERNS = (RE_PROJECT, RE_CONTEXT, RE_KEY_VALUE)


class DescriptionParseError(RuntimeError):
    """No parser could advance over a non-empty description.

    This signals a bug in the parsers themselves, not malformed input: any
    string is a valid description.
    """


def parse_project(text: str) -> ParseResult[Project] | None:
    m = RE_PROJECT.match(text)
    if not m:
        return None
    return ParseResult(Project(m.group(1)), text[m.end():])


def parse_context(text: str) -> ParseResult[Context] | None:
    m = RE_CONTEXT.match(text)
    if not m:
        return None
    return ParseResult(Context(m.group(1)), text[m.end():])


def parse_key_value(text: str) -> ParseResult[KeyValue] | None:
    m = RE_KEY_VALUE.match(text)
    if not m:
        return None
    return ParseResult(KeyValue(m.group(1), m.group(2)), text[m.end():])


def parse_text(text: str) -> ParseResult[Text] | None:
    """Consume plain text up to, but excluding, the next tag.

    Returns ``None`` for empty input or when ``text`` already starts with a
    tag, so adjacent tags never produce an empty text component.
    """
    if not text or any(p.match(text) for p in TAG_PATTERNS):
        return None
    m = RE_NEXT_TAG.search(text, 1)
    end = m.start() if m else len(text)
    return ParseResult(Text(text[:end]), text[end:])


# Tried in order at every position; the first match wins
PARSERS: tuple[Callable[[str], ParseResult | None], ...] = (
    parse_project,
    parse_context,
    parse_key_value,
    parse_text,
)


def parse_description(text: str) -> tuple[Component, ...]:
    """Split a description into its ordered components."""
    components: list[Component] = []
    rest = text
    while rest:
        for parse in PARSERS:
            result = parse(rest)
            if result is not None:
                break
        else:
            raise DescriptionParseError(
                f"No parser matched at offset {len(text) - len(rest)} of {text!r}"
            )
        if len(result.remaining) >= len(rest):
            raise DescriptionParseError(
                f"{parse.__name__} made no progress at offset "
                f"{len(text) - len(rest)} of {text!r}"
            )
        components.append(result.value)
        rest = result.remaining
    return tuple(components)


def render_description(components: Iterable[Component]) -> str:
    """Inverse of :func:`parse_description`."""
    return "".join(c.render() for c in components)


def projects_of(components: Iterable[Component]) -> list[str]:
    return [c.name for c in components if isinstance(c, Project)]


def contexts_of(components: Iterable[Component]) -> list[str]:
    return [c.name for c in components if isinstance(c, Context)]


def key_values_of(components: Iterable[Component]) -> dict[str, str]:
    """Map each key to its value; the last occurrence of a key wins."""
    return {c.key: c.value for c in components if isinstance(c, KeyValue)}
