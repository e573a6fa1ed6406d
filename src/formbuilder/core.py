"""
Slug and markup helpers shared by the settings store and the renderer.

Nothing here escapes its input. Labels, values and options are written
into the markup exactly as given, which is what lets the ``html`` and
``title`` pseudo-fields carry arbitrary markup.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Literal

Markup = Literal["html", "xhtml"]

_QUOTES = re.compile(r"[\"']")
_NON_WORD = re.compile(r"[\W\s]+")


def slugify(text: str) -> str:
    """
    Turn a human readable label into a name/id safe slug.

        >>> slugify("Contact Name!")
        'contact-name-'
    """
    result = _QUOTES.sub("", str(text))
    result = result.replace("_", "-")
    result = _NON_WORD.sub("-", result)
    return result.lower()


def text(value: Any) -> str:
    """Render a value as attribute/body text. None renders as nothing."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return text(value[-1]) if value else ""
    return str(value)


def is_blank(value: Any) -> bool:
    return value is None or value is False or value == "" or value == [] or value == {}


def attr(name: str, value: Any) -> str:
    """
    Build a leading-space attribute fragment.

    - blank value (None, False, ""): returns empty (attribute omitted)
    - 0 is not blank and is rendered
    - anything else: returns ` name="value"`
    """
    if is_blank(value):
        return ""
    return f' {name}="{text(value)}"'


def flag(name: str, on: Any) -> str:
    """Bare boolean attribute, e.g. ` required`."""
    return f" {name}" if on else ""


def output_class(classes: Any) -> str:
    """
    Build a class attribute from a sequence or a string.

    Sequences keep a space after every entry, including the last one
    (`` class="a b "``). Existing stylesheets and tests match on that.
    """
    if isinstance(classes, str):
        return f' class="{classes}"'
    if isinstance(classes, Sequence) and len(classes) > 0:
        joined = "".join(f"{c} " for c in classes)
        return f' class="{joined}"'
    return ""


def field_close(markup: Markup) -> str:
    """Close a void element for the configured markup flavour."""
    return " />" if markup == "xhtml" else ">"
