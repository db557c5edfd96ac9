"""Parser for todo.txt lines and files."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from .description import DescriptionParseError, parse_description
from .models import HeaderTokens, Text
from .task import Task, TodoFile
from .tokens import tokenize

logger = logging.getLogger(__name__)


def parse_task(line: str) -> Task:
    """Parse one line (without its line ending) into a Task.

    A line that cannot be tokenized is kept whole as the description, with
    no header fields set, so no input is ever dropped.
    """
    tokens = tokenize(line)
    try:
        components = parse_description(tokens.description)
    except DescriptionParseError:
        logger.warning("Could not tokenize line, keeping it as text: %r", line, exc_info=True)
        return Task(components=(Text(line),) if line else ())

    completion_date, creation_date = _assign_dates(tokens)
    return Task(
        components=components,
        completed=tokens.completed,
        priority=tokens.priority,
        completion_date=completion_date,
        creation_date=creation_date,
    )


def _assign_dates(tokens: HeaderTokens) -> tuple[date | None, date | None]:
    """Map the positional header dates onto completion and creation dates.

    Two dates are always (completion, creation). A lone date is the
    completion date on a done task and the creation date otherwise.
    """
    if tokens.second_date is not None:
        return tokens.first_date, tokens.second_date
    if tokens.completed:
        return tokens.first_date, None
    return None, tokens.first_date


def split_lines(content: str) -> list[str]:
    r"""Split a document on ``\n`` only, dropping the ``\r`` of CRLF endings.

    Form feeds, ``\u2028`` and the other separators ``str.splitlines`` breaks
    on stay inside the line they appear in.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [l[:-1] if l.endswith("\r") else l for l in lines]


def parse_todo_txt(content: str, source_path: str = "") -> TodoFile:
    """Parse a todo.txt string into a TodoFile model."""
    tasks: list[Task] = []
    for lineno, line in enumerate(split_lines(content), start=1):
        # Blank lines carry no task
        if not line.strip():
            continue
        task = parse_task(line)
        logger.debug("Line %d: %d component(s)", lineno, len(task.components))
        tasks.append(task)
    return TodoFile(tasks=tasks, source_path=source_path)


def parse_todo_file(path: str | Path) -> TodoFile:
    """Parse a todo.txt file from disk."""
    p = Path(path)
    content = p.read_text(encoding="utf-8")
    return parse_todo_txt(content, source_path=str(p))
