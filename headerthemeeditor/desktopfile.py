"""The theme's desktop file: name, author, description and version."""

from __future__ import annotations

import enum
import os
import tempfile
from pathlib import Path
from typing import Callable

from .configfile import ConfigFile

DESKTOP_GROUP = "Desktop Entry"


class DesktopFileOption(enum.Flag):
    NONE = 1
    EXTRA_DISPLAY_VARIABLES = 2
    SPECIFY_FILE_NAME = 4


class DesktopFile:
    """Metadata of a theme, stored in its desktop file."""

    def __init__(self, default_filename, options, settings=None) -> None:
        self.options = options
        self.theme_name = ""
        self.description = ""
        self.version = "0.1"
        self.author = settings.author if settings is not None else ""
        self.email = settings.author_email if settings is not None else ""
        self.default_desktop_name = ""
        self._filename: str | None = (
            default_filename if options & DesktopFileOption.SPECIFY_FILE_NAME else None
        )
        self._extra_display_headers: list[str] | None = (
            [] if options & DesktopFileOption.EXTRA_DISPLAY_VARIABLES else None
        )
        self.main_filename_listeners: list[Callable[[str], None]] = []
        self.extra_display_header_listeners: list[Callable[[list[str]], None]] = []
        self.changed_listeners: list[Callable[[], None]] = []

    @property
    def filename(self) -> str:
        return self._filename if self._filename is not None else ""

    @property
    def extra_display_headers(self) -> list[str]:
        return list(self._extra_display_headers or [])

    def _emit_changed(self) -> None:
        for listener in self.changed_listeners:
            listener()

    def set_filename(self, filename) -> None:
        if self._filename is None:
            raise ValueError("this desktop file has no file name field")
        if filename == self._filename:
            return
        self._filename = filename
        for listener in self.main_filename_listeners:
            listener(filename)
        self._emit_changed()

    def set_extra_display_headers(self, headers) -> None:
        if self._extra_display_headers is None:
            raise ValueError("this desktop file has no extra display headers")
        self._extra_display_headers = list(headers)
        for listener in self.extra_display_header_listeners:
            listener(self.extra_display_headers)
        self._emit_changed()

    def _desktop_path(self, directory) -> Path:
        if not self.default_desktop_name:
            raise ValueError("no desktop file name has been set")
        return Path(os.fspath(directory)) / self.default_desktop_name

    def load_theme(self, path) -> None:
        group = ConfigFile(self._desktop_path(path)).group(DESKTOP_GROUP)
        self.theme_name = group.read_entry("Name", "")
        self.description = group.read_entry("Description", "")
        if self._filename is not None:
            self.set_filename(group.read_entry("FileName", ""))
        self.author = group.read_entry("Author", "")
        self.email = group.read_entry("AuthorEmail", "")
        self.version = group.read_entry("ThemeVersion", "")
        if self._extra_display_headers is not None:
            self._extra_display_headers = group.read_list("DisplayExtraVariables", [])

    def save_theme(self, path) -> None:
        self.save_as_filename(self._desktop_path(path))

    def save_as_filename(self, filename) -> None:
        config = ConfigFile(filename)
        group = config.group(DESKTOP_GROUP)
        group.write_entry("Name", self.theme_name)
        group.write_entry("Description", self.description)
        if self._filename is not None:
            group.write_entry("FileName", self._filename)
        if self._extra_display_headers:
            group.write_list("DisplayExtraVariables", self._extra_display_headers)
        group.write_entry("Author", self.author)
        group.write_entry("AuthorEmail", self.email)
        group.write_entry("ThemeVersion", self.version)
        config.sync()

    def install_theme(self, theme_path) -> None:
        self.save_as_filename(self._desktop_path(theme_path))

    def create_zip(self, theme_name, archive) -> None:
        """Add the desktop file to an open zipfile.ZipFile under theme_name/."""
        arcname = f"{theme_name}/{self._desktop_path('').name}"
        with tempfile.TemporaryDirectory() as tmp:
            tmp_file = Path(tmp) / "desktop"
            self.save_as_filename(tmp_file)
            archive.write(tmp_file, arcname=arcname)