"""A page of the theme editor holding one template file."""

from __future__ import annotations

import enum
import os
import tempfile
from pathlib import Path
from typing import Callable

from .editorwidget import EditorWidget


class PageType(enum.Enum):
    MAIN_PAGE = 0
    SECOND_PAGE = 1
    EXTRA_PAGE = 2


class EditorPage:
    """One editable template file of a theme."""

    def __init__(self, page_type, editor: EditorWidget | None = None) -> None:
        self.page_type = PageType(page_type)
        self.page_file_name = ""
        self.editor = editor
        self.preview = None
        self.changed_listeners: list[Callable[[], None]] = []
        self.need_update_viewer_listeners: list[Callable[[], None]] = []
        if editor is not None:
            editor.changed_listeners.append(self._emit_changed)

    def _emit_changed(self) -> None:
        for listener in self.changed_listeners:
            listener()

    def request_update_viewer(self) -> None:
        for listener in self.need_update_viewer_listeners:
            listener()

    def _require_editor(self) -> EditorWidget:
        if self.editor is None:
            raise ValueError("this page has no editor")
        return self.editor

    def insert_file(self, filename) -> None:
        if self.editor is not None:
            self.editor.insert_file(filename)

    def load_theme(self, path) -> None:
        """Replace the editor text with the file at path, if it can be read."""
        if self.editor is None:
            return
        self.editor.clear()
        try:
            text = Path(os.fspath(path)).read_text(encoding="utf-8", errors="replace")
        except OSError:
            return
        self.editor.text = text

    def save_theme(self, path) -> None:
        if self.editor is None:
            return
        self.save_as_filename(Path(os.fspath(path)) / self.page_file_name)

    def save_as_filename(self, filename) -> None:
        """Write the editor text to filename; raise OSError if that fails."""
        editor = self._require_editor()
        with open(os.fspath(filename), "w", encoding="utf-8") as handle:
            handle.write(editor.text)

    def create_zip(self, theme_name, archive) -> None:
        """Add the page to an open zipfile.ZipFile under theme_name/."""
        with tempfile.TemporaryDirectory() as tmp:
            tmp_file = Path(tmp) / "page"
            self.save_as_filename(tmp_file)
            archive.write(tmp_file, arcname=f"{theme_name}/{self.page_file_name}")

    def install_theme(self, theme_path) -> None:
        self.save_as_filename(Path(os.fspath(theme_path)) / self.page_file_name)