"""Serialize tasks back into todo.txt lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from .description import render_description
from .fields import COMPLETION_MARK

if TYPE_CHECKING:
    from .task import Task

logger = logging.getLogger(__name__)


def format_task(task: Task) -> str:
    """Render a task in line format.

    Header fields appear in the order the tokenizer reads them, each
    followed by exactly one space, then the rendered description.
    """
    parts: list[str] = []
    if task.completed:
        parts.append(COMPLETION_MARK)
    if task.priority:
        parts.append(f"({task.priority}) ")
    # A lone date on an open line reads back as the creation date
    if task.completion_date is not None and (
        task.completed or task.creation_date is not None
    ):
        parts.append(f"{task.completion_date.isoformat()} ")
    if task.creation_date is not None:
        parts.append(f"{task.creation_date.isoformat()} ")
    parts.append(render_description(task.components))
    return "".join(parts)


def format_todo_txt(tasks: Iterable[Task]) -> str:
    """Render tasks as a todo.txt document, one line per task."""
    lines = [format_task(t) for t in tasks]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def write_todo_file(path: str | Path, tasks: Iterable[Task]) -> bool:
    """Write tasks to ``path``.

    Returns:
        True if the file was modified, False if its content already matched.
    """
    p = Path(path)
    content = format_todo_txt(tasks)
    if p.is_file() and p.read_text(encoding="utf-8") == content:
        logger.debug("[WRITE] %s already up to date", p)
        return False
    p.write_text(content, encoding="utf-8")
    logger.debug("[WRITE] wrote %d bytes to %s", len(content), p)
    return True
