"""CLI entry point for todotxt-tokens."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import httpx

from .parser import parse_task, parse_todo_txt, split_lines
from .remote import TodoTxtRemote
from .task import Task, TodoFile
from .writer import format_task, write_todo_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="todotxt-tokens",
        description="Parse a todo.txt file and report its tasks and tags.",
    )
    parser.add_argument(
        "source",
        type=str,
        nargs="?",
        default=None,
        help="Path or http(s) URL of the todo.txt file (or set TODO_FILE env var)",
    )
    parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="Bearer token for a remote source (or set TODO_TXT_TOKEN env var)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed tasks as JSON",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify that every line serializes back to itself",
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Rewrite the source in canonical form",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )

    source = args.source or os.environ.get("TODO_FILE")
    if not source:
        logging.error("No todo.txt source given. Pass a path or set TODO_FILE")
        return 1

    # Load
    is_remote = source.startswith(("http://", "https://"))
    token = None
    if is_remote:
        token = args.token or os.environ.get("TODO_TXT_TOKEN")
        try:
            with TodoTxtRemote(source, token=token) as remote:
                content = remote.fetch_text()
        except httpx.HTTPError as exc:
            logging.error("Could not fetch %s: %s", source, exc)
            return 1
    else:
        path = Path(source)
        if not path.is_file():
            logging.error("todo.txt file not found: %s", path)
            return 1
        content = path.read_text(encoding="utf-8")
    todo_file = parse_todo_txt(content, source_path=source)
    logging.info(
        "Found %d tasks (%d pending, %d done)",
        len(todo_file.tasks),
        len(todo_file.pending),
        len(todo_file.done),
    )

    status = 0
    if args.check:
        mismatches = check_round_trip(split_lines(content))
        for lineno, original, rendered in mismatches:
            logging.warning("Line %d does not round-trip: %r -> %r", lineno, original, rendered)
        if mismatches:
            status = 1
        else:
            logging.info("All lines round-trip")

    if args.normalize and is_remote:
        try:
            with TodoTxtRemote(source, token=token) as remote:
                remote.push(todo_file.tasks)
        except httpx.HTTPError as exc:
            logging.error("Could not push to %s: %s", source, exc)
            return 1
        logging.info("Pushed %d task(s) to %s", len(todo_file.tasks), source)
    elif args.normalize:
        if write_todo_file(source, todo_file.tasks):
            logging.info("Rewrote %s in canonical form", source)
        else:
            logging.info("%s is already in canonical form", source)

    if args.json:
        print(json.dumps(todo_file_to_dict(todo_file), indent=2))

    return status


def check_round_trip(lines: list[str]) -> list[tuple[int, str, str]]:
    """Return (line number, original, rendered) for each line that changes."""
    mismatches = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        rendered = format_task(parse_task(line))
        if rendered != line:
            mismatches.append((lineno, line, rendered))
    return mismatches


def task_to_dict(task: Task) -> dict:
    return {
        "completed": task.completed,
        "priority": task.priority,
        "completion_date": task.completion_date.isoformat() if task.completion_date else None,
        "creation_date": task.creation_date.isoformat() if task.creation_date else None,
        "description": task.description,
        "projects": task.projects,
        "contexts": task.contexts,
        "key_values": task.key_values,
    }


def todo_file_to_dict(todo_file: TodoFile) -> dict:
    return {
        "source": todo_file.source_path,
        "tasks": [task_to_dict(t) for t in todo_file.tasks],
    }


if __name__ == "__main__":
    sys.exit(main())
