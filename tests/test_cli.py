import pytest

from headerthemeeditor.cli import ThemeEditorApp, main
from headerthemeeditor.themeeditorpage import ThemeExistsError


@pytest.fixture
def app(tmp_path):
    return ThemeEditorApp(tmp_path / "data", tmp_path / "config.rc")


def _new_saved_theme(app, directory, name="mytheme"):
    directory.mkdir(parents=True, exist_ok=True)
    app.new_theme(name, directory)
    app.save_theme_as(directory)


def test_new_theme_sets_name_and_directory(app, tmp_path):
    editor = app.new_theme("mytheme", tmp_path / "proj")
    assert editor is app.theme_editor
    assert editor.desktop_page.theme_name == "mytheme"
    assert editor.project_directory == str(tmp_path / "proj")


def test_new_theme_without_directory_leaves_no_editor(app):
    assert app.new_theme("mytheme", "") is None
    assert app.theme_editor is None


def test_open_directory_without_session_fails(app, tmp_path):
    (tmp_path / "empty").mkdir()
    with pytest.raises(FileNotFoundError):
        app.open_theme(tmp_path / "empty")
    assert app.theme_editor is None


def test_save_as_and_reopen_round_trip(app, tmp_path):
    proj = tmp_path / "proj"
    _new_saved_theme(app, proj)
    assert (proj / "theme.themerc").is_file()
    assert app.close_theme() is True
    editor = app.open_theme(proj)
    assert editor.desktop_page.theme_name == "mytheme"
    assert editor.session.main_page_filename == "header.html"


def test_recent_themes_persist(app, tmp_path):
    proj = tmp_path / "proj"
    _new_saved_theme(app, proj)
    app.close_theme()
    app.open_theme(proj)
    assert app.recent_themes[0] == str(proj)
    app.write_config()
    again = ThemeEditorApp(tmp_path / "data", tmp_path / "config.rc")
    assert again.recent_themes == app.recent_themes


def test_extra_page_saved_and_reloaded(app, tmp_path):
    proj = tmp_path / "proj"
    _new_saved_theme(app, proj)
    page = app.add_extra_page("extra")
    assert page.page_file_name == "extra.html"
    assert app.save_theme() is True
    assert (proj / "extra.html").is_file()
    app.close_theme()
    editor = app.open_theme(proj)
    assert [p.page_file_name for p in editor.extra_pages] == ["extra.html"]


def test_save_without_theme_returns_false(app):
    assert app.save_theme() is False


def test_cancelled_save_keeps_theme_open(app, tmp_path):
    proj = tmp_path / "proj"
    _new_saved_theme(app, proj)
    app.add_extra_page("extra.css")
    app.confirm_save = lambda: None
    assert app.close_theme() is False
    assert app.theme_editor is not None


def test_install_theme_and_refuse_overwrite(app, tmp_path):
    proj = tmp_path / "proj"
    _new_saved_theme(app, proj)
    path = app.install_theme()
    assert path == (tmp_path / "data" / "messageviewer" / "themes" / "mytheme").absolute()
    assert (path / "header.desktop").is_file()
    assert (path / "header.html").is_file()
    with pytest.raises(ThemeExistsError):
        app.install_theme()


def test_main_new_install_list(tmp_path, capsys):
    common = ["--data-dir", str(tmp_path / "data"), "--config", str(tmp_path / "c.rc")]
    proj = tmp_path / "proj"
    assert main(common + ["new", "fancy", str(proj)]) == 0
    assert (proj / "theme.themerc").is_file()
    assert main(common + ["install", str(proj)]) == 0
    capsys.readouterr()
    assert main(common + ["list"]) == 0
    assert capsys.readouterr().out.split() == ["fancy"]
    assert main(common + ["install", str(proj)]) == 1


def test_main_open_missing_theme_fails(tmp_path):
    (tmp_path / "nothing").mkdir()
    common = ["--data-dir", str(tmp_path / "data"), "--config", str(tmp_path / "c.rc")]
    assert main(common + ["add-page", str(tmp_path / "nothing"), "x"]) == 1


def test_main_add_page_writes_file(tmp_path):
    common = ["--data-dir", str(tmp_path / "data"), "--config", str(tmp_path / "c.rc")]
    proj = tmp_path / "proj"
    assert main(common + ["new", "fancy", str(proj)]) == 0
    assert main(common + ["add-page", str(proj), "style.css"]) == 0
    assert (proj / "style.css").is_file()