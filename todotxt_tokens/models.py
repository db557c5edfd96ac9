"""Value types produced by the todo.txt parsers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """A parsed value plus the input left over after the match."""

    value: T
    remaining: str


@dataclass(frozen=True)
class Text:
    """Ordinary description text between tags."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Project:
    """A `+name` tag."""

    name: str

    def render(self) -> str:
        return f"+{self.name}"


@dataclass(frozen=True)
class Context:
    """An `@name` tag."""

    name: str

    def render(self) -> str:
        return f"@{self.name}"


@dataclass(frozen=True)
class KeyValue:
    """A `key:value` tag."""

    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}:{self.value}"


Component = Union[Text, Project, Context, KeyValue]


@dataclass(frozen=True)
class HeaderTokens:
    """Fixed-format fields stripped from the front of a line."""

    description: str
    completed: bool = False
    priority: str | None = None
    first_date: date | None = None
    second_date: date | None = None

