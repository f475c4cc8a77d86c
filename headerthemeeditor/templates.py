"""Built-in template snippets and the sample mail used for previews."""

from __future__ import annotations

from dataclasses import dataclass

_SAMPLE_SENDER = "montel@example.com"
_SAMPLE_RECIPIENT = "kde@example.com"

_SAMPLE_HEADERS: tuple[tuple[str, str], ...] = (
    ("From", _SAMPLE_SENDER),
    ("To", _SAMPLE_RECIPIENT),
    ("Sender", _SAMPLE_SENDER),
    ("MIME-Version", "1.0"),
    ("Date", "28 Apr 2013 23:58:21 -0000"),
    ("Subject", "Test message"),
    ("Content-Type", "text/plain"),
    ("X-Length", "0"),
    ("X-UID", "6161"),
)

_SAMPLE_BODY = "Hello this is a test mail"

_TEMPLATE_VARIABLES: tuple[tuple[str, str], ...] = (
    ("Subject", "subject"),
    ("From", "from"),
    ("To", "to"),
    ("Cc", "cc"),
)


@dataclass(frozen=True)
class DefaultTemplate:
    """A named snippet that can be inserted into a theme."""

    name: str
    text: str


def _if_block(variable: str) -> str:
    name = f"header.{variable}"
    opening = "{% if " + name + " %}"
    body = "   {{ " + name + "|safe }}"
    closing = "{% endif %}"
    return "\n".join((opening, body, closing)) + "\n"


def default_templates() -> list[DefaultTemplate]:
    """Return the snippets offered in the template list."""
    return [DefaultTemplate(title, _if_block(var)) for title, var in _TEMPLATE_VARIABLES]


def default_mail() -> str:
    """Return the sample message rendered in the preview."""
    header_block = "".join(f"{key}: {value}\n" for key, value in _SAMPLE_HEADERS)
    return f"{header_block}\n{_SAMPLE_BODY}\n"