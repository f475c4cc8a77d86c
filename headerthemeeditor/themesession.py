"""Theme project session stored in theme.themerc."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .configfile import ConfigFile

_log = logging.getLogger(__name__)

SESSION_FILE_NAME = "theme.themerc"


class SessionError(Exception):
    """The file is not a usable theme session."""


class IncompatibleThemeError(SessionError):
    """The session belongs to another kind of theme."""


class ThemeSession:
    """Project directory, main page and extra pages of a theme."""

    VERSION = 1

    def __init__(self, project_directory, theme_type_name) -> None:
        self.project_directory = str(project_directory or "")
        self.theme_type_name = theme_type_name
        self.main_page_filename = ""
        self.extra_pages: list[str] = []

    def add_extra_page(self, filename) -> None:
        self.extra_pages.append(filename)

    def load_session(self, session) -> None:
        """Load the session file; raise SessionError if it cannot be used."""
        config = ConfigFile(session)
        if not config.has_group("Global"):
            _log.debug('"%s" is not a session file', session)
            raise SessionError(f'"{session}" is not a session file')
        global_group = config.group("Global")
        version = global_group.read_entry("version", 0)
        if version >= self.VERSION:
            if global_group.read_entry("themeTypeName", "") != self.theme_type_name:
                raise IncompatibleThemeError(
                    "You are trying to load a theme which cannot be read by this application"
                )
        self.project_directory = global_group.read_entry("path", "")
        self.main_page_filename = global_group.read_entry("mainPageName", "")
        self.extra_pages = global_group.read_list("extraPagesName", [])

    def write_session(self, directory="") -> Path:
        """Write theme.themerc into directory, or the project directory."""
        theme_directory = os.fspath(directory) if directory else self.project_directory
        path = Path(theme_directory) / SESSION_FILE_NAME
        config = ConfigFile(path)
        global_group = config.group("Global")
        global_group.write_entry("path", theme_directory)
        global_group.write_entry("mainPageName", self.main_page_filename)
        global_group.write_list("extraPagesName", self.extra_pages)
        global_group.write_entry("themeTypeName", self.theme_type_name)
        global_group.write_entry("version", self.VERSION)
        config.sync()
        return path