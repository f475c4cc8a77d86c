"""Preview of a theme, refreshed when the theme or its settings change."""

from __future__ import annotations

from pathlib import Path
from typing import Callable


class PreviewWidget:
    """Base preview: tracks the theme location and the printing mode."""

    def __init__(self) -> None:
        self._printing = False
        self.project_directory = ""
        self.main_filename = ""
        self.extra_headers: list[str] = []
        self.updated_listeners: list[Callable[["PreviewWidget"], None]] = []
        self.need_update_viewer_listeners: list[Callable[[], None]] = []

    @property
    def printing(self) -> bool:
        return self._printing

    @printing.setter
    def printing(self, print_mode: bool) -> None:
        if self._printing != print_mode:
            self._printing = print_mode
            self.update_viewer()

    def update_viewer(self) -> None:
        """Refresh the preview and notify listeners."""
        for listener in self.updated_listeners:
            listener(self)

    def request_update(self) -> None:
        """Ask the owner to save the theme and refresh the preview."""
        for listener in self.need_update_viewer_listeners:
            listener()

    def load_config(self) -> None:
        """Reload preview configuration and refresh the preview."""
        self.update_viewer()

    def _snapshot(self) -> str:
        lines = [
            f"project_directory: {self.project_directory}",
            f"main_filename: {self.main_filename}",
            f"printing: {'yes' if self._printing else 'no'}",
            f"extra_headers: {', '.join(self.extra_headers)}",
        ]
        return "\n".join(lines) + "\n"

    def create_screenshot(self, file_names) -> list[str]:
        """Write a snapshot of the preview state into the first file.

        Returns the list of files written. Raises ValueError when no file
        name is given.
        """
        names = list(file_names)
        if not names:
            raise ValueError("no file name given for the screenshot")
        target = Path(names[0])
        target.write_text(self._snapshot(), encoding="utf-8")
        return [str(target)]

    def set_theme_path(self, project_directory, main_page_filename) -> None:
        self.project_directory = str(project_directory)
        self.main_filename = main_page_filename
        self.update_viewer()

    def main_filename_changed(self, filename) -> None:
        self.main_filename = filename
        self.update_viewer()

    def extra_header_display_changed(self, headers) -> None:
        self.extra_headers = list(headers)
        self.update_viewer()