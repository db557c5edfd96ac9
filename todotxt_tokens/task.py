"""The task entity built from a parsed line, and the file that holds tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .description import (
    contexts_of,
    key_values_of,
    parse_description,
    projects_of,
    render_description,
)
from .models import Component
from .writer import format_task


@dataclass
class Task:
    """A single task parsed from a todo.txt line."""

    components: tuple[Component, ...] = ()
    completed: bool = False
    priority: str | None = None
    completion_date: date | None = None
    creation_date: date | None = None

    @classmethod
    def from_description(cls, text: str) -> Task:
        return cls(components=parse_description(text))

    @property
    def description(self) -> str:
        return render_description(self.components)

    @description.setter
    def description(self, text: str) -> None:
        self.components = parse_description(text)

    @property
    def projects(self) -> list[str]:
        return projects_of(self.components)

    @property
    def contexts(self) -> list[str]:
        return contexts_of(self.components)

    @property
    def key_values(self) -> dict[str, str]:
        return key_values_of(self.components)

    def complete(self, on: date | None = None) -> None:
        """Mark the task done, stamping the completion date.

        A task with a creation date always gets a completion date (today
        unless ``on`` is given); a lone date on a done line reads back as
        the completion date.
        """
        self.completed = True
        if on is None and self.creation_date is not None:
            on = date.today()
        if on is not None:
            self.completion_date = on

    def to_line(self) -> str:
        return format_task(self)


@dataclass
class TodoFile:
    """A complete parsed todo.txt document."""

    tasks: list[Task] = field(default_factory=list)
    source_path: str = ""

    @property
    def by_project(self) -> dict[str, list[Task]]:
        groups: dict[str, list[Task]] = {}
        for task in self.tasks:
            for name in dict.fromkeys(task.projects):
                groups.setdefault(name, []).append(task)
        return groups

    @property
    def by_context(self) -> dict[str, list[Task]]:
        groups: dict[str, list[Task]] = {}
        for task in self.tasks:
            for name in dict.fromkeys(task.contexts):
                groups.setdefault(name, []).append(task)
        return groups

    @property
    def pending(self) -> list[Task]:
        return [t for t in self.tasks if not t.completed]

    @property
    def done(self) -> list[Task]:
        return [t for t in self.tasks if t.completed]
