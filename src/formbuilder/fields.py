"""
Input field descriptors.

A field is queued as an ``InputField`` built from the defaults below with
the caller's overrides merged on top:

    InputField.create("Email", {"type": "email", "required": True})
    InputField.create("Colour", {"type": "select", "options": {"r": "Red"}})
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core import slugify

# Types that never take the raw request value as their value.
NOT_REPOPULATED = frozenset({"html", "title", "radio", "checkbox", "select", "submit"})

# Types rendered without a <label>.
UNLABELLED = frozenset({"hidden", "submit", "title", "html"})

# Types rendered without the wrap tag and before/after html.
UNWRAPPED = frozenset({"hidden", "html"})

# Types that get min/max/step.
BOUNDED = frozenset({"range", "number"})

Options = dict[str, str]


class FieldKind(StrEnum):
    """How a field is rendered. Every input type maps onto one of these."""

    HTML = "html"
    TITLE = "title"
    TEXTAREA = "textarea"
    SELECT = "select"
    GROUP = "group"
    INPUT = "input"

    @classmethod
    def of(cls, field: InputField) -> FieldKind:
        match field.type:
            case "html":
                return cls.HTML
            case "title":
                return cls.TITLE
            case "textarea":
                return cls.TEXTAREA
            case "select":
                return cls.SELECT
            case "radio" | "checkbox" if field.options:
                return cls.GROUP
            case _:
                return cls.INPUT


class InputField(BaseModel):
    """Everything needed to render one queued field."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    type: str = "text"
    name: str = ""
    id: str = ""
    label: str = ""
    value: Any = ""
    placeholder: str = ""
    classes: list[str] | str = Field(default_factory=list, alias="class")

    # range and number only
    min: str | int | float = ""
    max: str | int | float = ""
    step: str | int | float = ""

    autofocus: bool = False
    checked: bool = False
    selected: Any = False
    required: bool = False
    add_label: bool = True

    # select, radio and checkbox groups: value -> label
    options: Options = Field(default_factory=dict)

    wrap_tag: str = "div"
    wrap_classes: list[str] | str = Field(
        default_factory=lambda: ["form_field_wrap"], alias="wrap_class"
    )
    wrap_id: str = ""
    wrap_style: str = ""
    before_html: str = ""
    after_html: str = ""
    request_populate: bool = True

    @field_validator("options", mode="before")
    @classmethod
    def _normalize_options(cls, value: Any) -> Options:
        """Accept a mapping or a list of [value, label] pairs; anything else means no options."""
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            pairs = {}
            for pair in value:
                if isinstance(pair, (list, tuple)) and len(pair) == 2:
                    pairs[str(pair[0])] = str(pair[1])
            return pairs
        return {}

    @classmethod
    def create(
        cls,
        label: str,
        overrides: Mapping[str, Any] | None = None,
        slug: str = "",
    ) -> InputField:
        """Merge overrides over the defaults for a field called ``label``."""
        slug = slug or slugify(label)
        values = {"name": slug, "id": slug, "label": label}
        values.update(overrides or {})
        return cls.model_validate(values)

    @classmethod
    def honeypot(cls) -> InputField:
        """Spam trap rendered hidden at the top of the form; real users leave it empty."""
        return cls.create(
            "Leave blank to submit",
            {
                "name": "honeypot",
                "id": "form_honeypot",
                "wrap_tag": "div",
                "wrap_class": ["form_field_wrap", "hidden"],
                "wrap_id": "",
                "wrap_style": "display: none",
                "request_populate": False,
            },
            "honeypot",
        )

    @property
    def kind(self) -> FieldKind:
        return FieldKind.of(self)
