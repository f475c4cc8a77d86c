from headerthemeeditor.preview import PreviewWidget


def _tracked():
    preview = PreviewWidget()
    updates = []
    preview.updated_listeners.append(updates.append)
    return preview, updates


def test_printing_defaults_false():
    assert PreviewWidget().printing is False


def test_printing_change_updates_once():
    preview, updates = _tracked()
    preview.printing = True
    preview.printing = True
    assert preview.printing is True
    assert len(updates) == 1


def test_printing_same_value_does_not_update():
    preview, updates = _tracked()
    preview.printing = False
    assert updates == []


def test_set_theme_path():
    preview, updates = _tracked()
    preview.set_theme_path("/themes/a", "header.html")
    assert (preview.project_directory, preview.main_filename) == ("/themes/a", "header.html")
    assert updates == [preview]


def test_main_filename_changed():
    preview, updates = _tracked()
    preview.main_filename_changed("other.html")
    assert preview.main_filename == "other.html"
    assert len(updates) == 1


def test_extra_header_display_changed_copies():
    preview, updates = _tracked()
    headers = ["X-Original-To"]
    preview.extra_header_display_changed(headers)
    headers.append("Y")
    assert preview.extra_headers == ["X-Original-To"]
    assert len(updates) == 1


def test_load_config_updates():
    preview, updates = _tracked()
    preview.load_config()
    assert len(updates) == 1


def test_create_screenshot_writes_nothing(tmp_path):
    target = tmp_path / "shot.png"
    assert PreviewWidget().create_screenshot([str(target)]) == []
    assert not target.exists()


def test_request_update_notifies():
    preview = PreviewWidget()
    calls = []
    preview.need_update_viewer_listeners.append(lambda: calls.append(1))
    preview.request_update()
    assert calls == [1]