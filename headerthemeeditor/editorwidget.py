"""Plain-text template editor with word completion."""

from __future__ import annotations

import contextlib
import os
from typing import Callable, Iterable


class EditorWidget:
    """A text buffer with a cursor and a completion word list."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = 0
        self._completions: list[str] = []
        self.changed_listeners: list[Callable[[], None]] = []

    def _emit_changed(self) -> None:
        for listener in self.changed_listeners:
            listener()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._cursor = 0
        self._emit_changed()

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, position: int) -> None:
        self._cursor = max(0, min(position, len(self._text)))

    def insert_text(self, text) -> None:
        """Insert text at the cursor and move the cursor past it."""
        self._text = self._text[: self._cursor] + text + self._text[self._cursor :]
        self._cursor += len(text)
        self._emit_changed()

    def insert_file(self, filename) -> None:
        """Insert a UTF-8 file at the cursor; unreadable files are ignored."""
        if not filename:
            return
        with contextlib.suppress(OSError):
            with open(os.fspath(filename), "rb") as handle:
                data = handle.read()
            self.insert_text(data.decode("utf-8", errors="replace"))

    def create_completer_list(self, extra_completion: Iterable[str] = ()) -> None:
        self._completions = list(dict.fromkeys(extra_completion))

    @property
    def completer_list(self) -> list[str]:
        return list(self._completions)

    def _word_before_cursor(self) -> str:
        before = self._text[: self._cursor]
        start = len(before)
        while start > 0 and not before[start - 1].isspace():
            start -= 1
        return before[start:]

    def completions(self, prefix=None) -> list[str]:
        """Return completion words starting with prefix or the word at the cursor."""
        if prefix is None:
            prefix = self._word_before_cursor()
        return [word for word in self._completions if word.startswith(prefix)]

    def clear(self) -> None:
        self.text = ""