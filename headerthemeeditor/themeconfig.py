"""Configuration of the header theme editor: settings, sample mail, template."""

from __future__ import annotations

from dataclasses import dataclass, field

from .configfile import ConfigFile
from .settings import EditorSettings, default_settings_path
from .templates import default_mail

GLOBAL_GROUP = "Global"


@dataclass
class ThemeConfiguration:
    """Author settings plus the preview mail and the new-page template."""

    settings: EditorSettings = field(default_factory=EditorSettings)
    default_email: str = field(default_factory=default_mail)
    default_template: str = ""

    @classmethod
    def load(cls, path=None) -> "ThemeConfiguration":
        config_path = path if path is not None else default_settings_path()
        config = ConfigFile(config_path)
        if not config.has_group(GLOBAL_GROUP):
            return cls()
        group = config.group(GLOBAL_GROUP)
        return cls(
            settings=EditorSettings.load(config_path),
            default_email=group.read_entry("defaultEmail", default_mail()),
            default_template=group.read_entry("defaultTemplate", ""),
        )

    def save(self, path=None) -> None:
        """Store the configuration; blank author fields keep their stored values."""
        config_path = path if path is not None else default_settings_path()
        config = ConfigFile(config_path)
        group = config.group(GLOBAL_GROUP)
        group.write_entry("defaultEmail", self.default_email)
        group.write_entry("defaultTemplate", self.default_template)
        config.sync()
        stored = EditorSettings.load(config_path)
        stored.update(self.settings.author, self.settings.author_email, self.settings.path)
        stored.save(config_path)

    def restore_defaults(self) -> None:
        self.settings.reset()
        self.default_email = default_mail()
        self.default_template = ""