"""Reading and writing of INI-style configuration files with groups."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

_DEFAULT_GROUP = "<default>"

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "t": "\t", "r": "\r", "s": " "}


def _escape(value: str) -> str:
    escaped = "".join(_ESCAPES.get(char, char) for char in value)
    if escaped.startswith(" "):
        escaped = "\\s" + escaped[1:]
    if escaped.endswith(" "):
        escaped = escaped[:-1] + "\\s"
    return escaped


def _unescape(raw: str) -> str:
    out: list[str] = []
    chars = iter(raw)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        following = next(chars, None)
        if following is None:
            out.append("\\")
        elif following in _UNESCAPES:
            out.append(_UNESCAPES[following])
        else:
            out.append("\\" + following)
    return "".join(out)


def _join_list(values: Iterable[str]) -> str:
    return ",".join(
        str(value).replace("\\", "\\\\").replace(",", "\\,") for value in values
    )


def _split_list(value: str) -> list[str]:
    if not value:
        return []
    items: list[str] = []
    current: list[str] = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            following = next(chars, None)
            current.append("\\" if following is None else following)
        elif char == ",":
            items.append("".join(current))
            current = []
        else:
            current.append(char)
    items.append("".join(current))
    return items


class ConfigGroup:
    """A named group of key/value entries inside a ConfigFile."""

    def __init__(self, config: "ConfigFile", name: str) -> None:
        self.config = config
        self.name = name

    def _entries(self) -> dict[str, str]:
        return self.config._groups.get(self.name, {})

    def __contains__(self, key: str) -> bool:
        return key in self._entries()

    def read_entry(self, key, default=""):
        """Return the value for key, converted to the type of default."""
        value = self._entries().get(key)
        if value is None:
            return default
        if isinstance(default, bool):
            return value.strip().lower() in ("true", "1", "yes", "on")
        if isinstance(default, int):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return value

    def read_list(self, key, default=None):
        """Return the comma-separated list stored under key."""
        value = self._entries().get(key)
        if value is None:
            return list(default) if default is not None else []
        return _split_list(value)

    def write_entry(self, key, value) -> None:
        if isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = str(value)
        self.config._groups.setdefault(self.name, {})[key] = text

    def write_list(self, key, values) -> None:
        self.config._groups.setdefault(self.name, {})[key] = _join_list(values)


class ConfigFile:
    """An INI-style file of groups; changes are written by sync()."""

    def __init__(self, path) -> None:
        self.path = Path(os.fspath(path))
        self._groups: dict[str, dict[str, str]] = {}
        if self.path.is_file():
            self._parse(self.path.read_text(encoding="utf-8"))

    def _parse(self, text: str) -> None:
        current = _DEFAULT_GROUP
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("[") and line.endswith("]"):
                current = line[1:-1]
                self._groups.setdefault(current, {})
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            self._groups.setdefault(current, {})[key.strip()] = _unescape(value.strip())

    def has_group(self, name: str) -> bool:
        return bool(self._groups.get(name))

    def group(self, name: str) -> ConfigGroup:
        return ConfigGroup(self, name)

    def sync(self) -> None:
        """Write all groups holding entries to the file."""
        lines: list[str] = []
        default_entries = self._groups.get(_DEFAULT_GROUP)
        if default_entries:
            lines.extend(f"{key}={_escape(value)}" for key, value in default_entries.items())
            lines.append("")
        for name, entries in self._groups.items():
            if name == _DEFAULT_GROUP or not entries:
                continue
            lines.append(f"[{name}]")
            lines.extend(f"{key}={_escape(value)}" for key, value in entries.items())
            lines.append("")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(lines), encoding="utf-8")