"""The header theme project: main page, extra pages and desktop file."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Callable

from .completion import HeaderEditorWidget
from .desktopfile import DesktopFile, DesktopFileOption
from .editorpage import EditorPage, PageType
from .preview import PreviewWidget
from .tabs import ThemeEditorTabs
from .themeconfig import ThemeConfiguration
from .themesession import ThemeSession

THEME_TYPE_NAME = "headerthemeeditor"
DEFAULT_MAIN_FILE = "header.html"
DEFAULT_DESKTOP_FILE = "header.desktop"
_EXTRA_PAGE_SUFFIXES = (".html", ".css", ".js")


class HeaderEditorPage(EditorPage):
    """A template page of a header theme; the main page also has a preview."""

    def __init__(self, page_type, configuration=None) -> None:
        page_type = PageType(page_type)
        text = ""
        if page_type is PageType.MAIN_PAGE and configuration is not None:
            text = configuration.default_template
        super().__init__(page_type, HeaderEditorWidget(text))
        if page_type is PageType.MAIN_PAGE:
            self.preview = PreviewWidget()
            self.preview.main_filename = DEFAULT_MAIN_FILE
            self.preview.need_update_viewer_listeners.append(self.request_update_viewer)

    def insert_template(self, text: str) -> None:
        """Insert a template snippet at the editor's cursor."""
        self._require_editor().insert_text(text)


class ThemeExistsError(FileExistsError):
    """The theme is already installed and overwriting was not allowed."""


class ThemeEditorPage:
    """Everything that makes up one header theme being edited."""

    def __init__(self, project_dir, theme_name, configuration=None, settings=None) -> None:
        self.configuration = configuration if configuration is not None else ThemeConfiguration()
        if settings is None:
            settings = self.configuration.settings
        self.session = ThemeSession(project_dir, THEME_TYPE_NAME)
        self.extra_pages: list[HeaderEditorPage] = []
        self._changed = False
        self.changed_listeners: list[Callable[[bool], None]] = []
        self.can_insert_file_listeners: list[Callable[[bool], None]] = []

        self.tabs = ThemeEditorTabs()
        self.tabs.current_changed_listeners.append(self._current_widget_changed)

        self.editor_page = HeaderEditorPage(PageType.MAIN_PAGE, self.configuration)
        self.editor_page.preview.project_directory = self.session.project_directory
        self.editor_page.need_update_viewer_listeners.append(self._update_viewer)
        self.editor_page.changed_listeners.append(self._on_changed)
        self.tabs.add_tab(self.editor_page, f"Editor ({DEFAULT_MAIN_FILE})")

        options = DesktopFileOption.EXTRA_DISPLAY_VARIABLES | DesktopFileOption.SPECIFY_FILE_NAME
        self.desktop_page = DesktopFile(DEFAULT_MAIN_FILE, options, settings)
        self.desktop_page.default_desktop_name = DEFAULT_DESKTOP_FILE
        self.desktop_page.theme_name = theme_name or ""
        self.tabs.add_tab(self.desktop_page, "Desktop File")

        self.desktop_page.main_filename_listeners.append(self.preview.main_filename_changed)
        self.desktop_page.main_filename_listeners.append(self.tabs.main_filename_changed)
        self.desktop_page.extra_display_header_listeners.append(
            self.extra_header_display_changed
        )
        self.desktop_page.changed_listeners.append(self._on_changed)

    @property
    def preview(self) -> PreviewWidget:
        return self.editor_page.preview

    @property
    def project_directory(self) -> str:
        return self.session.project_directory

    @property
    def theme_was_changed(self) -> bool:
        return self._changed

    def _set_changed(self, changed: bool) -> None:
        if self._changed != changed:
            self._changed = changed
            for listener in self.changed_listeners:
                listener(changed)

    def _on_changed(self) -> None:
        self._set_changed(True)

    def _current_widget_changed(self, index: int) -> None:
        if index < 0:
            return
        can_insert = isinstance(self.tabs.widget(index), EditorPage)
        for listener in self.can_insert_file_listeners:
            listener(can_insert)

    def _update_viewer(self) -> None:
        if self._changed:
            self.save_theme()
        self.preview.update_viewer()

    def _all_pages(self) -> list[HeaderEditorPage]:
        return [self.editor_page, *self.extra_pages]

    def extra_header_display_changed(self, headers) -> None:
        """Offer the extra headers, without '-', as header.* completions."""
        headers = list(headers)
        self.preview.extra_header_display_changed(headers)
        result = ["header." + header.replace("-", "") for header in headers]
        for page in self._all_pages():
            page.editor.create_completer_list(result)

    def close_tab(self, index) -> None:
        if not self.tabs.can_close(index):
            raise ValueError(f"tab {index} cannot be closed")
        self.tabs.remove_tab(index)
        self._set_changed(True)

    def insert_file(self, filename) -> None:
        """Insert a file into the current tab if it is an editor page."""
        page = self.tabs.current_widget
        if isinstance(page, EditorPage) and filename:
            page.insert_file(filename)

    def install_theme(self, theme_path, overwrite=False) -> Path:
        """Write the theme into theme_path/<theme name> and return that directory."""
        theme_dir = Path(os.fspath(theme_path)) / self.desktop_page.theme_name
        if theme_dir.exists():
            if not overwrite:
                raise ThemeExistsError(f'Theme already exists: "{theme_dir}"')
        else:
            theme_dir.mkdir()
        self.editor_page.page_file_name = self.desktop_page.filename
        for page in self._all_pages():
            page.install_theme(theme_dir)
        self.desktop_page.install_theme(theme_dir)
        return theme_dir.absolute()

    def create_zip(self, archive_path) -> Path:
        """Write all theme files into a zip archive below a theme-name folder."""
        path = Path(os.fspath(archive_path))
        theme_name = self.desktop_page.theme_name
        self.editor_page.page_file_name = self.desktop_page.filename
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
            for page in self._all_pages():
                page.create_zip(theme_name, archive)
            self.desktop_page.create_zip(theme_name, archive)
        return path

    def add_extra_page(self, filename) -> HeaderEditorPage | None:
        """Add a page; names without .html, .css or .js get .html appended."""
        if not filename or not filename.strip():
            return None
        if not filename.endswith(_EXTRA_PAGE_SUFFIXES):
            filename += ".html"
        page = self._create_extra_page(filename)
        self.session.add_extra_page(filename)
        self._set_changed(True)
        return page

    def _create_extra_page(self, filename: str) -> HeaderEditorPage:
        page = HeaderEditorPage(PageType.EXTRA_PAGE, self.configuration)
        page.changed_listeners.append(self._on_changed)
        page.page_file_name = filename
        self.tabs.add_tab(page, filename)
        self.tabs.set_current_widget(page)
        self.extra_pages.append(page)
        return page

    def _store_theme(self, directory="") -> None:
        directory = os.fspath(directory) if directory else ""
        theme_directory = directory or self.project_directory
        if not theme_directory:
            raise ValueError("the theme has no project directory")
        self.editor_page.page_file_name = self.desktop_page.filename
        for page in self._all_pages():
            page.save_theme(theme_directory)
        self.desktop_page.save_theme(theme_directory)
        self.session.main_page_filename = self.desktop_page.filename
        self.session.write_session(directory)
        if not directory:
            self._set_changed(False)

    def save_theme(self, confirm=None) -> bool:
        """Save if changed; confirm() answers True (save), False (discard) or None (cancel)."""
        if self._changed:
            if confirm is not None:
                answer = confirm()
                if answer is None:
                    return False
                if answer:
                    self._store_theme()
            else:
                self._store_theme()
        self._set_changed(False)
        return True

    def save_theme_as(self, directory) -> None:
        self._store_theme(directory)

    def load_theme(self, filename) -> None:
        """Load a theme.themerc file; raises SessionError if it cannot be used."""
        self.session.load_session(filename)
        project = Path(self.project_directory)
        self.desktop_page.load_theme(project)
        main_page = self.session.main_page_filename
        self.editor_page.load_theme(project / main_page)
        self.preview.set_theme_path(self.project_directory, main_page)
        for name in self.session.extra_pages:
            page = self._create_extra_page(name)
            page.load_theme(project / name)
        self.tabs.set_current_index(0)
        self._set_changed(False)

    def set_printing(self, printing) -> None:
        self.preview.printing = bool(printing)

    def update_preview(self) -> None:
        self.preview.update_viewer()

    def reload_config(self) -> None:
        self.preview.load_config()