from headerthemeeditor.completion import (
    HeaderEditorWidget,
    default_completion,
    default_options,
)


def test_default_options_match_source():
    assert default_options() == ["showlink", "nameonly", "safe", "expandable"]


def test_default_completion_order_and_content():
    words = default_completion()
    assert words[0] == "<div>"
    assert words[-1] == "header.listid"
    assert "header.subject" in words
    assert len(words) == len(set(words))


def test_default_completion_returns_fresh_list():
    words = default_completion()
    words.append("header.bogus")
    assert "header.bogus" not in default_completion()


def test_widget_starts_with_defaults():
    widget = HeaderEditorWidget()
    assert widget.completer_list == default_completion() + default_options()


def test_extra_completion_appended_and_replaced():
    widget = HeaderEditorWidget()
    widget.create_completer_list(["header.XOriginalTo"])
    assert widget.completer_list[-1] == "header.XOriginalTo"
    widget.create_completer_list(["header.XSpam"])
    assert "header.XOriginalTo" not in widget.completer_list
    assert widget.completer_list[-1] == "header.XSpam"


def test_completions_by_prefix():
    widget = HeaderEditorWidget()
    found = widget.completions("header.subj")
    assert set(found) == {"header.subjecti18n", "header.subject", "header.subjectDir"}


def test_completions_from_cursor_word():
    widget = HeaderEditorWidget()
    widget.insert_text("{{ header.bccN")
    assert widget.completions() == ["header.bccNameOnly"]