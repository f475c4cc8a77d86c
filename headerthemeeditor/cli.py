"""Command-line front end of the header theme editor."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable

import platformdirs

from .configfile import ConfigFile
from .managethemes import ThemeDeletionError, ThemeManager
from .settings import default_settings_path
from .themeconfig import ThemeConfiguration
from .themeeditorpage import HeaderEditorPage, ThemeEditorPage, ThemeExistsError
from .themesession import SESSION_FILE_NAME, SessionError

RELATIVE_THEME_PATH = "messageviewer/themes/"
WINDOW_GROUP = "ThemeEditorMainWindow"
RECENT_KEY = "RecentThemes"
MAX_RECENT_THEMES = 10


class ThemeEditorApp:
    """Holds the theme being edited and the actions that work on it."""

    def __init__(self, data_dir=None, config_path=None) -> None:
        self.data_dir = Path(os.fspath(data_dir)) if data_dir is not None else Path(
            platformdirs.user_data_dir()
        )
        self.config_path = (
            Path(os.fspath(config_path)) if config_path is not None else default_settings_path()
        )
        self.configuration = ThemeConfiguration.load(self.config_path)
        self.theme_editor: ThemeEditorPage | None = None
        self.confirm_save: Callable[[], bool | None] | None = None
        self.recent_themes: list[str] = ConfigFile(self.config_path).group(WINDOW_GROUP).read_list(
            RECENT_KEY, []
        )

    @property
    def local_theme_path(self) -> Path:
        return self.data_dir / RELATIVE_THEME_PATH

    def write_config(self) -> None:
        config = ConfigFile(self.config_path)
        config.group(WINDOW_GROUP).write_list(RECENT_KEY, self.recent_themes)
        config.sync()

    def _add_recent(self, directory: str) -> None:
        if directory in self.recent_themes:
            self.recent_themes.remove(directory)
        self.recent_themes.insert(0, directory)
        del self.recent_themes[MAX_RECENT_THEMES:]

    def _save_current(self) -> bool:
        if self.theme_editor is not None:
            return self.theme_editor.save_theme(self.confirm_save)
        return True

    def _make_editor(self, project_dir, theme_name) -> ThemeEditorPage:
        return ThemeEditorPage(
            project_dir, theme_name, self.configuration, self.configuration.settings
        )

    def new_theme(self, theme_name, directory) -> ThemeEditorPage | None:
        """Save the current theme, then start a new one in directory."""
        if not self._save_current():
            return None
        self.theme_editor = None
        directory = os.fspath(directory) if directory else ""
        if directory:
            self._add_recent(directory)
            self.theme_editor = self._make_editor(directory, theme_name)
        return self.theme_editor

    def _load_theme(self, directory: str) -> ThemeEditorPage:
        filename = Path(directory) / SESSION_FILE_NAME
        if not filename.exists():
            raise FileNotFoundError(
                "Directory does not contain a theme file. We cannot load theme."
            )
        editor = self._make_editor("", "")
        editor.load_theme(filename)
        self.theme_editor = editor
        return editor

    def open_theme(self, directory) -> ThemeEditorPage | None:
        """Save the current theme, then load the theme stored in directory."""
        if not self._save_current():
            return None
        directory = os.fspath(directory) if directory else ""
        if not directory:
            return None
        self.theme_editor = None
        editor = self._load_theme(directory)
        self._add_recent(directory)
        return editor

    def close_theme(self) -> bool:
        """Save and close the current theme; False if the save was cancelled."""
        if not self._save_current():
            return False
        self.theme_editor = None
        return True

    def save_theme(self) -> bool:
        if self.theme_editor is None:
            return False
        return self.theme_editor.save_theme()

    def save_theme_as(self, directory) -> None:
        if directory and self.theme_editor is not None:
            self.theme_editor.save_theme_as(directory)

    def add_extra_page(self, filename) -> HeaderEditorPage | None:
        if self.theme_editor is None:
            return None
        return self.theme_editor.add_extra_page(filename)

    def install_theme(self) -> Path | None:
        """Save the theme and install it into the local theme directory."""
        if not self.save_theme():
            return None
        self.local_theme_path.mkdir(parents=True, exist_ok=True)
        return self.theme_editor.install_theme(self.local_theme_path)

    def set_printing(self, printing: bool) -> None:
        if self.theme_editor is not None:
            self.theme_editor.set_printing(printing)

    def update_view(self) -> None:
        if self.theme_editor is not None:
            self.theme_editor.save_theme()
            self.theme_editor.update_preview()

    def quit(self) -> bool:
        if not self.close_theme():
            return False
        self.write_config()
        return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headerthemeeditor", description="Messageviewer Header Theme Editor"
    )
    parser.add_argument("--data-dir", help="base directory for installed themes")
    parser.add_argument("--config", help="configuration file")
    sub = parser.add_subparsers(dest="command", required=True)

    new = sub.add_parser("new", help="create a new theme")
    new.add_argument("name")
    new.add_argument("directory")

    add = sub.add_parser("add-page", help="add an extra page to a theme")
    add.add_argument("directory")
    add.add_argument("filename")

    save_as = sub.add_parser("save-as", help="save a theme into another directory")
    save_as.add_argument("directory")
    save_as.add_argument("target")

    install = sub.add_parser("install", help="install a theme locally")
    install.add_argument("directory")
    install.add_argument("--overwrite", action="store_true")

    sub.add_parser("list", help="list locally installed themes")

    delete = sub.add_parser("delete", help="delete locally installed themes")
    delete.add_argument("names", nargs="+")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    app = ThemeEditorApp(args.data_dir, args.config)
    try:
        if args.command == "new":
            Path(args.directory).mkdir(parents=True, exist_ok=True)
            app.new_theme(args.name, args.directory)
            app.save_theme_as(args.directory)
        elif args.command == "add-page":
            app.open_theme(args.directory)
            app.add_extra_page(args.filename)
            app.save_theme()
        elif args.command == "save-as":
            app.open_theme(args.directory)
            Path(args.target).mkdir(parents=True, exist_ok=True)
            app.save_theme_as(args.target)
        elif args.command == "install":
            app.open_theme(args.directory)
            if args.overwrite:
                app.local_theme_path.mkdir(parents=True, exist_ok=True)
                path = app.theme_editor.install_theme(app.local_theme_path, overwrite=True)
            else:
                path = app.install_theme()
            print(f'Theme installed in "{path}"')
        elif args.command == "list":
            for name in ThemeManager(RELATIVE_THEME_PATH, app.data_dir).themes():
                print(name)
        elif args.command == "delete":
            ThemeManager(RELATIVE_THEME_PATH, app.data_dir).delete_themes(args.names)
        app.quit()
    except (OSError, SessionError, ValueError) as exc:
        if isinstance(exc, (ThemeExistsError, ThemeDeletionError)):
            print(exc, file=sys.stderr)
        else:
            print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())