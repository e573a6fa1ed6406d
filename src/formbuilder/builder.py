"""
Declarative form builder.

Usage:
    from formbuilder import FormRenderer

    form = FormRenderer("/contact", {"id": "contact", "class": ["stacked"]})
    form.add_input("Your name", {"required": True})
    form.add_input("Topic", {"type": "select", "options": {"a": "Sales", "b": "Support"}})
    form.add_inputs([
        ["Message", {"type": "textarea"}],
        ["Send", {"type": "submit", "value": "Send"}],
    ])

    form.render()                    # first display
    form.render(submitted_values)    # redisplay with the submitted values filled in

Labels, values and option text are written without escaping. The ``html``
field type relies on that to place arbitrary markup in the form, so only
pass trusted content or escape it before queueing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

import click

from .core import attr, field_close, flag, output_class, slugify, text
from .fields import BOUNDED, NOT_REPOPULATED, UNLABELLED, UNWRAPPED, FieldKind, InputField
from .settings import FormSettings

logger = logging.getLogger(__name__)

RequestData = Mapping[str, Any]

DEFAULT_SUBMIT = '<div class="form_field_wrap"><input type="submit" value="Submit" name="submit"></div>'


class FormRenderer:
    """
    Holds the form settings and the input queue, and renders both to HTML.

    One instance per form and per request: nothing is shared between
    instances and rendering never changes the queue.
    """

    def __init__(self, action: str = "", settings: Mapping[str, Any] | None = None):
        self.settings = FormSettings.build(action, dict(settings or {}))
        self._inputs: dict[str, InputField] = {}

    def set(self, key: str, value: Any) -> bool:
        """Change one form setting. Returns False, changing nothing, if it does not validate."""
        return self.settings.set(key, value)

    # --- Input queue ---

    @property
    def inputs(self) -> Mapping[str, InputField]:
        """Read-only view of the queue, in insertion order."""
        return MappingProxyType(self._inputs)

    def add_input(
        self,
        label: str,
        overrides: Mapping[str, Any] | None = None,
        slug: str = "",
    ) -> FormRenderer:
        """
        Queue a field. The slug defaults to ``slugify(label)`` and is used as
        the name and id unless the overrides say otherwise. Queueing a slug
        again replaces the earlier field but keeps its position.
        """
        slug = slug or slugify(label)
        self._inputs[slug] = InputField.create(label, overrides, slug)
        return self

    def add_inputs(self, items: Sequence[Sequence[Any]]) -> bool:
        """
        Queue several ``[label, overrides, slug]`` entries; overrides and slug
        are optional. Malformed entries are skipped, and any sequence returns True.
        """
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            logger.warning(f"add_inputs expects a sequence, got {type(items).__name__}")
            return False

        for item in items:
            if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or not item:
                logger.warning(f"Skipping malformed input entry {item!r}")
                continue

            label = item[0]
            overrides = item[1] if len(item) > 1 else None
            slug = item[2] if len(item) > 2 else ""
            if overrides and not isinstance(overrides, Mapping):
                logger.warning(f"Ignoring overrides {overrides!r} for input {label!r}")
                overrides = None
            self.add_input(label, overrides, slug)

        return True

    def get_input(self, slug: str) -> InputField:
        """Return the queued field stored under ``slug``."""
        field = self._inputs.get(slug)
        if field is None:
            raise ValueError(f"Unknown field: {slug}")
        return field

    # --- Rendering ---

    def render(self, request_data: RequestData | None = None, echo: bool = False) -> str | None:
        """
        Render the form.

        ``request_data`` holds previously submitted values (name -> value or
        list of values) used to refill the fields. With ``echo`` the markup
        is written to stdout instead of being returned.
        """
        data = request_data if request_data is not None else {}
        settings = self.settings
        output = []

        if settings.form_element:
            output.append(self._open_tag())

        fields = list(self._inputs.values())
        if settings.add_honeypot:
            logger.debug("Adding honeypot field")
            fields.insert(0, InputField.honeypot())

        has_submit = False
        for field in fields:
            if field.type == "submit":
                has_submit = True
            output.append(self._render_field(field, data))

        if not has_submit and settings.add_submit:
            output.append(DEFAULT_SUBMIT)

        if settings.form_element:
            output.append("</form>")

        logger.debug(f"Rendered form with {len(fields)} fields")
        result = "".join(output)

        if echo:
            click.echo(result, nl=False)
            return None
        return result

    def __html__(self) -> str:
        return self.render() or ""

    def _open_tag(self) -> str:
        s = self.settings
        return (
            f'<form method="{s.method}"'
            f"{attr('enctype', s.enctype)}"
            f"{attr('action', s.action)}"
            f"{attr('id', s.id)}"
            f"{output_class(s.classes)}"
            f"{flag('novalidate', s.novalidate)}"
            ">"
        )

    def _render_field(self, field: InputField, data: RequestData) -> str:
        """Render one field, including its label and wrap."""
        field = _repopulate(field, data)
        kind = field.kind
        close = field_close(self.settings.markup)

        element, end, heading = "", "", ""
        match kind:
            case FieldKind.HTML:
                end = field.label
            case FieldKind.TITLE:
                end = f"<h3>{field.label}</h3>"
            case FieldKind.TEXTAREA:
                element = "textarea"
                end = f">{text(field.value)}</textarea>"
            case FieldKind.SELECT:
                element = "select"
                end = f">{_select_options(field, data)}</select>"
            case FieldKind.GROUP:
                end = _group_inputs(field, data, close)
                heading = f'<div class="checkbox_header">{field.label}</div>'
            case FieldKind.INPUT:
                element = "input"
                end = (
                    f' type="{field.type}" value="{text(field.value)}"'
                    f"{flag('checked', field.checked)}{close}"
                )

        # 0 is a real bound and is emitted; only unset (empty) bounds are left out
        bounds = ""
        if field.type in BOUNDED:
            bounds = attr("min", field.min) + attr("max", field.max) + attr("step", field.step)

        attrs = (
            attr("placeholder", field.placeholder)
            + flag("autofocus", field.autofocus)
            + flag("checked", field.checked)
            + flag("required", field.required)
        )

        label_html = heading or _label(field)

        if element:
            tag = (
                f"<{element}{attr('id', field.id)} name=\"{field.name}\""
                f"{bounds}{output_class(field.classes)}{attrs}{end}"
            )
            html = tag + label_html if field.type == "checkbox" else label_html + tag
        else:
            html = label_html + end

        if field.type in UNWRAPPED:
            return html
        return _wrap(field, html)


def _requested(field: InputField, data: RequestData) -> tuple[bool, Any]:
    """Submitted value for a field, if it takes part in repopulation."""
    if not field.request_populate or field.name not in data:
        return False, None
    return True, data[field.name]


def _as_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def _repopulate(field: InputField, data: RequestData) -> InputField:
    """Per-render copy of ``field`` with submitted values applied."""
    found, value = _requested(field, data)
    if not found:
        return field

    if field.type not in NOT_REPOPULATED:
        return field.model_copy(update={"value": value})

    # A lone radio or checkbox is checked if its name was submitted at all.
    if field.type in ("radio", "checkbox") and not field.options:
        return field.model_copy(update={"checked": True})

    return field


def _matches(key: str, value: Any) -> bool:
    """Option key equals a scalar value or is a member of a list of values."""
    if value is None or value is False:
        return False
    if isinstance(value, (list, tuple)):
        return key in _as_list(value)
    return key == str(value)


def _select_options(field: InputField, data: RequestData) -> str:
    found, value = _requested(field, data)
    parts = []
    for key, label in field.options.items():
        chosen = (found and _matches(key, value)) or _matches(key, field.selected)
        parts.append(f'<option value="{key}"{flag("selected", chosen)}>{label}</option>')
    return "".join(parts)


def _group_inputs(field: InputField, data: RequestData, close: str) -> str:
    """One input per option, submitted as ``name[]``, each followed by its own label."""
    found, value = _requested(field, data)
    submitted = _as_list(value) if found else []
    parts = []
    for key, label in field.options.items():
        slug = slugify(label)
        parts.append(
            f'<input type="{field.type}" name="{field.name}[]" value="{key}" id="{slug}"'
            f"{flag('checked', key in submitted)}{close}"
            f' <label for="{slug}">{label}</label>'
        )
    return "".join(parts)


def _label(field: InputField) -> str:
    if not field.add_label or field.type in UNLABELLED:
        return ""
    label = field.label
    if field.required:
        label += " <strong>*</strong>"
    return f'<label for="{field.id}">{label}</label>'


def _wrap(field: InputField, html: str) -> str:
    before, after = field.before_html, field.after_html
    if field.wrap_tag:
        before += (
            f"<{field.wrap_tag}{output_class(field.wrap_classes)}"
            f"{attr('style', field.wrap_style)}{attr('id', field.wrap_id)}>"
        )
        after = f"</{field.wrap_tag}>" + after
    return before + html + after
