"""The tab set of the theme editor."""

from __future__ import annotations

from typing import Any, Callable

from .editorpage import EditorPage, PageType


class ThemeEditorTabs:
    """Ordered tabs with titles and a current tab."""

    def __init__(self) -> None:
        self._tabs: list[list[Any]] = []
        self.current_index = -1
        self.current_changed_listeners: list[Callable[[int], None]] = []

    def __len__(self) -> int:
        return len(self._tabs)

    @property
    def titles(self) -> list[str]:
        return [title for _, title in self._tabs]

    def tab_text(self, index: int) -> str:
        return self._tabs[index][1]

    def _set_current(self, index: int) -> None:
        if index != self.current_index:
            self.current_index = index
            for listener in self.current_changed_listeners:
                listener(index)

    @property
    def current_widget(self):
        return self.widget(self.current_index)

    def set_current_index(self, index: int) -> None:
        if not 0 <= index < len(self._tabs):
            raise IndexError(index)
        self._set_current(index)

    def set_current_widget(self, page) -> None:
        for index, (tab_page, _) in enumerate(self._tabs):
            if tab_page is page:
                self._set_current(index)
                return
        raise ValueError("page is not in the tabs")

    def add_tab(self, page, title) -> int:
        self._tabs.append([page, title])
        index = len(self._tabs) - 1
        if self.current_index < 0:
            self._set_current(index)
        return index

    def remove_tab(self, index) -> None:
        """Remove a tab; removing the current tab selects the one before it."""
        if not 0 <= index < len(self._tabs):
            return
        del self._tabs[index]
        if not self._tabs:
            self._set_current(-1)
        elif index < self.current_index:
            self.current_index -= 1
        elif index == self.current_index:
            self.current_index = -1
            self._set_current(max(0, index - 1))

    def widget(self, index):
        if 0 <= index < len(self._tabs):
            return self._tabs[index][0]
        return None

    def main_filename_changed(self, filename) -> None:
        if not self._tabs:
            return
        self._tabs[0][1] = f"Editor ({filename})"

    def can_close(self, index) -> bool:
        """Only extra pages may be closed, and never the last tab."""
        if len(self._tabs) <= 1:
            return False
        page = self.widget(index)
        return isinstance(page, EditorPage) and page.page_type is PageType.EXTRA_PAGE