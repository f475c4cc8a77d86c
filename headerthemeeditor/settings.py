"""Editor-wide settings: author, author e-mail and default theme path."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from .configfile import ConfigFile

SETTINGS_GROUP = "General"


def default_settings_path() -> Path:
    """Return the path of the user's configuration file."""
    return Path(platformdirs.user_config_dir()) / "headerthemeeditorrc"


@dataclass
class EditorSettings:
    """Settings shared by all theme editor dialogs."""

    author: str = ""
    author_email: str = ""
    path: str = ""

    @classmethod
    def load(cls, path=None) -> "EditorSettings":
        group = ConfigFile(path if path is not None else default_settings_path()).group(
            SETTINGS_GROUP
        )
        return cls(
            author=group.read_entry("Author", ""),
            author_email=group.read_entry("AuthorEmail", ""),
            path=group.read_entry("Path", ""),
        )

    def save(self, path=None) -> None:
        config = ConfigFile(path if path is not None else default_settings_path())
        group = config.group(SETTINGS_GROUP)
        group.write_entry("Author", self.author)
        group.write_entry("AuthorEmail", self.author_email)
        group.write_entry("Path", self.path)
        config.sync()

    def update(self, author="", author_email="", path=None) -> None:
        """Apply non-empty values; blank fields leave the stored value alone."""
        author_email = (author_email or "").strip()
        if author_email:
            self.author_email = author_email
        author = (author or "").strip()
        if author:
            self.author = author
        if path is not None:
            new_path = os.fspath(path)
            if new_path.strip():
                self.path = new_path

    def reset(self) -> None:
        self.author = ""
        self.author_email = ""
        self.path = ""