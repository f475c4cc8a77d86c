# headerthemeeditor

A tool for building message header themes. A theme is a directory that
holds a main template page (`header.html` by default), any number of extra
pages (`.html`, `.css` or `.js`), a `header.desktop` file describing the
theme, and a `theme.themerc` session file recording how the project is laid
out.

## Installing

```
pip install .
```

## Command line

```
headerthemeeditor [--data-dir DIR] [--config FILE] COMMAND ...
```

`--data-dir` sets the base directory for installed themes (by default the
user data directory) and `--config` the configuration file (by default
`headerthemeeditorrc` in the user configuration directory).

Commands:

- `new NAME DIRECTORY` creates the directory if needed and saves a new theme
  called NAME into it.
- `add-page DIRECTORY FILENAME` adds an extra page to the theme in
  DIRECTORY. A file name not ending in `.html`, `.css` or `.js` gets `.html`
  appended.
- `save-as DIRECTORY TARGET` saves the theme in DIRECTORY into TARGET.
- `install DIRECTORY [--overwrite]` installs the theme into
  `messageviewer/themes/<theme name>` below the data directory. Without
  `--overwrite` an already installed theme of that name is an error.
- `list` prints the names of the installed themes.
- `delete NAME...` deletes installed themes.

Errors are printed to standard error and the command exits with status 1.

## Using it from Python

The main entry point is `ThemeEditorApp` in `headerthemeeditor.cli`:

```python
from pathlib import Path
from headerthemeeditor.cli import ThemeEditorApp

Path("/tmp/fancy").mkdir(parents=True, exist_ok=True)
app = ThemeEditorApp(data_dir="/tmp/data", config_path="/tmp/headerthemeeditorrc")
app.new_theme("fancy", "/tmp/fancy")
app.add_extra_page("style.css")
app.save_theme()
app.install_theme()
```

`ThemeEditorApp.confirm_save` may be set to a callable that is asked before
a changed theme is saved: it returns `True` to save, `False` to discard or
`None` to cancel.

Other building blocks:

- `headerthemeeditor.themeeditorpage.ThemeEditorPage` is one theme being
  edited: its main page, extra pages, desktop file and session. It can save,
  load, install (raising `ThemeExistsError` when the theme is already
  installed and overwriting is not allowed) and write the theme into a zip
  archive with `create_zip()`.
- `headerthemeeditor.themesession.ThemeSession` reads and writes the
  `theme.themerc` session file. It raises `SessionError` for a file that is
  not a session and `IncompatibleThemeError` when the file belongs to
  another kind of theme.
- `headerthemeeditor.desktopfile.DesktopFile` holds the theme's name,
  author, e-mail, description, main file name, version and extra display
  headers.
- `headerthemeeditor.editorwidget.EditorWidget` is a text buffer with a
  cursor and word completion; `headerthemeeditor.completion.HeaderEditorWidget`
  always offers `default_completion()` and `default_options()`.
- `headerthemeeditor.managethemes.ThemeManager` lists and deletes installed
  themes, raising `ThemeDeletionError` for those it cannot delete.
- `headerthemeeditor.templates.default_templates()` gives the built-in
  snippets, and `default_mail()` the sample message used for previews.
- `headerthemeeditor.settings.EditorSettings` stores the author, author
  e-mail and default theme path; `headerthemeeditor.themeconfig.ThemeConfiguration`
  adds the default preview e-mail and the default template for new themes.
- `headerthemeeditor.configfile.ConfigFile` reads and writes the INI-style
  files used for all of the above.

Extra display headers may contain `-`, which template variables cannot, so
`X-Original-To` is offered for completion as `header.XOriginalTo`.

## What it does not do

There is no graphical editor and no rendered preview. The preview object
only records the theme location, main file, printing mode and extra
headers; its `create_screenshot()` writes that state as text. Themes cannot
be uploaded anywhere.

## Running the tests

```
pip install .[test]
pytest
```