"""Completion words for header theme templates."""

from __future__ import annotations

from typing import Iterable

from .editorwidget import EditorWidget

_DEFAULT_COMPLETION = (
    "<div>",
    'class="fancy header"',
    "header.absoluteThemePath",
    "header.subjecti18n",
    "header.subject",
    "header.replyToi18n",
    "header.replyTo",
    "header.replyToStr",
    "header.toi18n",
    "header.to",
    "header.toStr",
    "header.toExpandable",
    "header.cci18n",
    "header.cc",
    "header.ccStr",
    "header.ccExpandable",
    "header.bcci18n",
    "header.bcc",
    "header.bccStr",
    "header.bccExpandable",
    "header.fromi18n",
    "header.from",
    "header.fromStr",
    "header.spamHTML",
    "header.spamstatusi18n",
    "header.datei18n",
    "header.dateshort",
    "header.date",
    "header.datelong",
    "header.datefancylong",
    "header.datefancyshort",
    "header.datelocalelong",
    "header.useragent",
    "header.xmailer",
    "header.resentFrom",
    "header.resentFromi18n",
    "header.organization",
    "header.vcardname",
    "header.activecolordark",
    "header.fontcolor",
    "header.linkcolor",
    "header.photowidth",
    "header.photoheight",
    "header.applicationDir",
    "header.subjectDir",
    "header.photourl",
    "header.isprinting",
    "header.vcardi18n",
    "header.resentTo",
    "header.resentToi18n",
    "header.trashaction",
    "header.replyaction",
    "header.replyallaction",
    "header.forwardaction",
    "header.newmessageaction",
    "header.printmessageaction",
    "header.printpreviewmessageaction",
    "header.collectionname",
    "header.replyToNameOnly",
    "header.ccNameOnly",
    "header.bccNameOnly",
    "header.toNameOnly",
    "header.senderi18n",
    "header.sender",
    "header.listidi18n",
    "header.listid",
)

_DEFAULT_OPTIONS = ("showlink", "nameonly", "safe", "expandable")


def default_completion() -> list[str]:
    """Return the header variables offered for completion."""
    return list(_DEFAULT_COMPLETION)


def default_options() -> list[str]:
    """Return the filter options offered for completion."""
    return list(_DEFAULT_OPTIONS)


class HeaderEditorWidget(EditorWidget):
    """Editor that always completes the standard header variables."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text)
        self.create_completer_list()

    def create_completer_list(self, extra_completion: Iterable[str] = ()) -> None:
        words = default_completion() + default_options() + list(extra_completion)
        super().create_completer_list(words)