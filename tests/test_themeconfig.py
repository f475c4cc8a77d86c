from headerthemeeditor.configfile import ConfigFile
from headerthemeeditor.settings import EditorSettings
from headerthemeeditor.templates import default_mail
from headerthemeeditor.themeconfig import ThemeConfiguration


def test_load_missing_file_gives_defaults(tmp_path):
    config = ThemeConfiguration.load(tmp_path / "missing.rc")
    assert config.default_email == default_mail()
    assert config.default_template == ""
    assert config.settings == EditorSettings()


def test_round_trip(tmp_path):
    path = tmp_path / "editorrc"
    config = ThemeConfiguration(
        settings=EditorSettings(author="Alice", author_email="alice@example.com", path="/themes"),
        default_email="Subject: hi\n\nbody\n",
        default_template="{{ header.subject }}\n",
    )
    config.save(path)
    loaded = ThemeConfiguration.load(path)
    assert loaded == config


def test_save_writes_global_group(tmp_path):
    path = tmp_path / "editorrc"
    ThemeConfiguration(default_template="tpl").save(path)
    group = ConfigFile(path).group("Global")
    assert group.read_entry("defaultTemplate", "") == "tpl"
    assert group.read_entry("defaultEmail", "") == default_mail()


def test_settings_ignored_without_global_group(tmp_path):
    path = tmp_path / "editorrc"
    EditorSettings(author="Bob").save(path)
    loaded = ThemeConfiguration.load(path)
    assert loaded.settings.author == ""


def test_restore_defaults():
    config = ThemeConfiguration(
        settings=EditorSettings(author="Alice", author_email="alice@example.com", path="/x"),
        default_email="other",
        default_template="tpl",
    )
    config.restore_defaults()
    assert config == ThemeConfiguration()


def test_blank_settings_keep_stored_values(tmp_path):
    path = tmp_path / "editorrc"
    ThemeConfiguration(settings=EditorSettings(author="Alice")).save(path)
    config = ThemeConfiguration.load(path)
    config.restore_defaults()
    config.save(path)
    assert ThemeConfiguration.load(path).settings.author == "Alice"