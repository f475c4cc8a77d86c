"""Listing and deleting locally installed themes."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import platformdirs


class ThemeDeletionError(OSError):
    """One or more themes could not be deleted."""

    def __init__(self, failed: list[str], deleted: list[str]) -> None:
        self.failed = failed
        self.deleted = deleted
        super().__init__(
            " ".join(
                f'Theme "{name}" cannot be deleted. Please contact your administrator.'
                for name in failed
            )
        )


class ThemeManager:
    """Themes installed below the user's data directory."""

    def __init__(self, relative_theme_path, data_dir=None) -> None:
        base = Path(os.fspath(data_dir)) if data_dir is not None else Path(
            platformdirs.user_data_dir()
        )
        self.local_directory = base / relative_theme_path

    def themes(self) -> list[str]:
        """Return the names of the theme directories, sorted."""
        if not self.local_directory.is_dir():
            return []
        return sorted(entry.name for entry in self.local_directory.iterdir() if entry.is_dir())

    def confirmation_message(self, names) -> str:
        names = list(names)
        if not names:
            raise ValueError("no theme selected")
        if len(names) == 1:
            return f'Do you want to remove the selected theme "{names[0]}" ?'
        return f"Do you want to remove {len(names)} selected themes?"

    def delete_themes(self, names) -> list[str]:
        """Delete the named themes; return them, or raise ThemeDeletionError."""
        deleted: list[str] = []
        failed: list[str] = []
        for name in names:
            path = self.local_directory / name
            if not os.path.lexists(path):
                deleted.append(name)
                continue
            if not path.is_dir() or path.is_symlink():
                failed.append(name)
                continue
            try:
                shutil.rmtree(path)
            except OSError:
                failed.append(name)
            else:
                deleted.append(name)
        if failed:
            raise ThemeDeletionError(failed, deleted)
        return deleted