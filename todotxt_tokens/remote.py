"""HTTP client for a todo.txt document stored on a remote server."""

from __future__ import annotations

import logging
from typing import Iterable

import httpx

from .parser import parse_todo_txt
from .task import Task, TodoFile
from .writer import format_todo_txt

logger = logging.getLogger(__name__)


class TodoTxtRemote:
    """Fetch and push a todo.txt file over plain HTTP GET/PUT (e.g. WebDAV)."""

    def __init__(
        self,
        url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        headers = {"Accept": "text/plain"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(headers=headers, timeout=timeout, transport=transport)

    def fetch_text(self) -> str:
        """Download the raw remote document."""
        resp = self._client.get(self.url)
        resp.raise_for_status()
        return resp.text

    def fetch(self) -> TodoFile:
        """Download and parse the remote document."""
        todo_file = parse_todo_txt(self.fetch_text(), source_path=self.url)
        logger.debug("[REMOTE] fetched %d task(s) from %s", len(todo_file.tasks), self.url)
        return todo_file

    def push(self, tasks: Iterable[Task]) -> None:
        """Replace the remote document with ``tasks``."""
        content = format_todo_txt(tasks)
        resp = self._client.put(
            self.url,
            content=content.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )
        resp.raise_for_status()
        logger.debug("[REMOTE] pushed %d bytes to %s", len(content), self.url)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> TodoTxtRemote:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
