"""The data entered when creating a new theme."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NewThemeRequest:
    """Name and directory of a theme to create."""

    theme_name: str = ""
    directory: str = ""

    @classmethod
    def from_settings(cls, settings) -> "NewThemeRequest":
        """Start with the default theme directory from the settings."""
        return cls(directory=settings.path)

    def can_accept(self) -> bool:
        return bool(self.directory.strip()) and bool(self.theme_name.strip())