"""
Tests for input field descriptors.
"""

import pytest
from pydantic import ValidationError

from formbuilder.fields import FieldKind, InputField


class TestCreate:
    def test_defaults(self):
        field = InputField.create("Contact Name!")

        assert field.type == "text"
        assert field.name == "contact-name-"
        assert field.id == "contact-name-"
        assert field.label == "Contact Name!"
        assert field.value == ""
        assert field.classes == []
        assert field.add_label is True
        assert field.options == {}
        assert field.wrap_tag == "div"
        assert field.wrap_classes == ["form_field_wrap"]
        assert field.request_populate is True

    def test_explicit_slug_used_verbatim(self):
        field = InputField.create("Nome", {"request_populate": False}, "contact_name")
        assert field.name == "contact_name"
        assert field.id == "contact_name"
        assert field.request_populate is False

    def test_overrides_win(self):
        field = InputField.create("Email", {"type": "email", "name": "mail", "id": "mail-id"})
        assert field.type == "email"
        assert field.name == "mail"
        assert field.id == "mail-id"

    def test_class_aliases(self):
        field = InputField.create("A", {"class": ["wide"], "wrap_class": "row"})
        assert field.classes == ["wide"]
        assert field.wrap_classes == "row"

        field = InputField.create("B", {"classes": ["x"], "wrap_classes": ["y"]})
        assert field.classes == ["x"]
        assert field.wrap_classes == ["y"]

    def test_unknown_keys_ignored(self):
        field = InputField.create("A", {"data-foo": "bar"})
        assert field.type == "text"

    def test_numbers_become_strings(self):
        field = InputField.create(2024, {"placeholder": 10})
        assert field.label == "2024"
        assert field.placeholder == "10"

    def test_invalid_flag_raises(self):
        with pytest.raises(ValidationError):
            InputField.create("A", {"required": "maybe"})


class TestOptions:
    def test_mapping_keeps_order(self):
        field = InputField.create("Fruit", {"options": {"b": "Banana", "a": "Apple"}})
        assert list(field.options) == ["b", "a"]

    def test_keys_become_strings(self):
        field = InputField.create("Rating", {"options": {1: "One", 2: "Two"}})
        assert field.options == {"1": "One", "2": "Two"}

    def test_pairs(self):
        field = InputField.create("Fruit", {"options": [["a", "Apple"], ["b", "Banana"]]})
        assert field.options == {"a": "Apple", "b": "Banana"}

    def test_malformed_options_mean_none(self):
        assert InputField.create("Fruit", {"options": "apple"}).options == {}
        assert InputField.create("Fruit", {"options": None}).options == {}


class TestKind:
    @pytest.mark.parametrize(
        "overrides, kind",
        [
            ({"type": "html"}, FieldKind.HTML),
            ({"type": "title"}, FieldKind.TITLE),
            ({"type": "textarea"}, FieldKind.TEXTAREA),
            ({"type": "select"}, FieldKind.SELECT),
            ({"type": "radio", "options": {"a": "A"}}, FieldKind.GROUP),
            ({"type": "checkbox", "options": {"a": "A"}}, FieldKind.GROUP),
            ({"type": "radio"}, FieldKind.INPUT),
            ({"type": "checkbox"}, FieldKind.INPUT),
            ({"type": "submit"}, FieldKind.INPUT),
            ({"type": "hidden"}, FieldKind.INPUT),
            ({"type": "color"}, FieldKind.INPUT),
            ({}, FieldKind.INPUT),
        ],
    )
    def test_dispatch(self, overrides, kind):
        assert InputField.create("Field", overrides).kind is kind


class TestHoneypot:
    def test_honeypot(self):
        field = InputField.honeypot()
        assert field.type == "text"
        assert field.label == "Leave blank to submit"
        assert field.name == "honeypot"
        assert field.id == "form_honeypot"
        assert field.wrap_classes == ["form_field_wrap", "hidden"]
        assert field.wrap_style == "display: none"
        assert field.request_populate is False
