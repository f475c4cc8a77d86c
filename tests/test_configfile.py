import pytest

from headerthemeeditor.configfile import ConfigFile


@pytest.fixture
def rc(tmp_path):
    return tmp_path / "theme.themerc"


def test_missing_file_has_no_group(rc):
    config = ConfigFile(rc)
    assert config.has_group("Global") is False


def test_entry_round_trip(rc):
    config = ConfigFile(rc)
    config.group("Global").write_entry("mainPageName", "header.html")
    config.sync()
    reloaded = ConfigFile(rc)
    assert reloaded.has_group("Global")
    assert reloaded.group("Global").read_entry("mainPageName", "") == "header.html"


def test_file_format_pinned(rc):
    config = ConfigFile(rc)
    config.group("Global").write_entry("version", 1)
    config.sync()
    assert rc.read_text(encoding="utf-8") == "[Global]\nversion=1\n"


def test_int_entry_converted_by_default_type(rc):
    config = ConfigFile(rc)
    config.group("Global").write_entry("version", 1)
    config.sync()
    assert ConfigFile(rc).group("Global").read_entry("version", 0) == 1


def test_invalid_int_returns_default(rc):
    config = ConfigFile(rc)
    config.group("Global").write_entry("version", "abc")
    assert config.group("Global").read_entry("version", 7) == 7


def test_missing_key_returns_default(rc):
    group = ConfigFile(rc).group("Global")
    assert group.read_entry("path", "fallback") == "fallback"
    assert group.read_list("extraPagesName", ["a"]) == ["a"]


def test_list_with_commas_round_trip(rc):
    config = ConfigFile(rc)
    values = ["a,b", "c\\d", "plain"]
    config.group("Global").write_list("extraPagesName", values)
    config.sync()
    assert ConfigFile(rc).group("Global").read_list("extraPagesName") == values


def test_multiline_and_spaces_round_trip(rc):
    config = ConfigFile(rc)
    text = " first line\nsecond\tline "
    config.group("Desktop Entry").write_entry("Description", text)
    config.sync()
    assert ConfigFile(rc).group("Desktop Entry").read_entry("Description") == text


def test_bool_entry_round_trip(rc):
    config = ConfigFile(rc)
    config.group("Global").write_entry("flag", True)
    config.sync()
    assert ConfigFile(rc).group("Global").read_entry("flag", False) is True


def test_existing_groups_preserved(rc):
    rc.write_text("[Other]\nkey=value\n", encoding="utf-8")
    config = ConfigFile(rc)
    config.group("Global").write_entry("path", "/tmp/x")
    config.sync()
    reloaded = ConfigFile(rc)
    assert reloaded.group("Other").read_entry("key") == "value"
    assert reloaded.group("Global").read_entry("path") == "/tmp/x"