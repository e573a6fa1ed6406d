"""
Tests for formbuilder slug and markup helpers.
"""

import pytest

from formbuilder.core import attr, field_close, flag, is_blank, output_class, slugify, text


class TestSlugify:
    def test_contact_name(self):
        assert slugify("Contact Name!") == "contact-name-"

    def test_strips_quotes(self):
        assert slugify("Pablo's \"Form\"") == "pablos-form"

    def test_underscores_become_hyphens(self):
        assert slugify("first_name") == "first-name"

    def test_runs_collapse(self):
        assert slugify("Name & Surname") == "name-surname"
        assert slugify("a -- b") == "a-b"

    def test_lower_cases(self):
        assert slugify("EMAIL") == "email"

    def test_deterministic(self):
        assert slugify("Your Message") == slugify("Your Message") == "your-message"


class TestText:
    def test_none_is_empty(self):
        assert text(None) == ""

    def test_list_uses_last_value(self):
        assert text(["a", "b"]) == "b"
        assert text([]) == ""

    def test_numbers(self):
        assert text(0) == "0"
        assert text(1.5) == "1.5"


class TestAttr:
    def test_attr_with_string(self):
        assert attr("id", "main") == ' id="main"'

    def test_attr_omitted_when_blank(self):
        assert attr("id", "") == ""
        assert attr("id", None) == ""
        assert attr("id", False) == ""

    def test_zero_is_not_blank(self):
        assert attr("min", 0) == ' min="0"'
        assert not is_blank(0)

    def test_attr_does_not_escape(self):
        assert attr("title", 'Say "hi"') == ' title="Say "hi""'

    def test_flag(self):
        assert flag("required", True) == " required"
        assert flag("required", False) == ""


class TestOutputClass:
    def test_sequence_keeps_trailing_space(self):
        assert output_class(["a", "b"]) == ' class="a b "'

    def test_string(self):
        assert output_class("card wide") == ' class="card wide"'

    def test_empty(self):
        assert output_class([]) == ""
        assert output_class(None) == ""


class TestFieldClose:
    @pytest.mark.parametrize(
        "markup, expected",
        [("html", ">"), ("xhtml", " />")],
    )
    def test_close(self, markup, expected):
        assert field_close(markup) == expected
