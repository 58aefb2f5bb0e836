"""Tests for the HTML output sink and language lookups."""

import pytest

from doc_preview_core.declarations import EnumDeclaration, MethodDeclaration, TypeDeclaration, Visibility
from doc_preview_core.options import SupportedLanguage
from doc_preview_core.syntax import HtmlWriter
from doc_preview_core.syntax.lookup import (
    LANGUAGE_NAMES,
    DefaultValueDict,
    element_type,
    element_type_description,
    title_name,
    visibility,
)


class TestHtmlWriter:
    """Test HtmlWriter helpers."""

    def test_text_is_escaped(self):
        out = HtmlWriter()
        out.text("a < b & c")
        assert out.getvalue() == "a &lt; b &amp; c"

    def test_write_is_verbatim(self):
        out = HtmlWriter()
        out.write("<br />")
        assert out.getvalue() == "<br />"

    def test_span_with_before_and_after(self):
        out = HtmlWriter()
        out.span("keyword", "As", before=" ")
        assert out.getvalue() == ' <span class="keyword">As</span> '

    def test_empty_content_writes_nothing(self):
        """Test that empty content suppresses the element and its surroundings."""
        out = HtmlWriter()
        assert out.span("literal", None, before=" = ") is False
        assert out.div("summary", "") is False
        assert out.link("#", None) is False
        assert out.getvalue() == ""

    def test_tag_context_manager_closes_on_error(self):
        out = HtmlWriter()
        with pytest.raises(KeyError):
            with out.tag("div", "outer"):
                raise KeyError("boom")
        assert out.getvalue() == '<div class="outer"></div>'
        assert out.open_tags == ()

    def test_attributes_escaped(self):
        out = HtmlWriter()
        with out.tag("a", href='urn:member:"x"'):
            out.text("x")
        assert out.getvalue() == '<a href="urn:member:&quot;x&quot;">x</a>'

    def test_end_tag_without_open_tag(self):
        with pytest.raises(RuntimeError):
            HtmlWriter().end_tag()

    def test_open_tags_tracks_nesting(self):
        out = HtmlWriter()
        out.begin_tag("div")
        out.begin_tag("span")
        assert out.open_tags == ("div", "span")
        out.end_tag()
        assert out.getvalue() == "<div><span></span>"


class TestLookup:
    """Test language spelling tables."""

    def test_default_value_dict(self):
        table = DefaultValueDict({"a": "A"}, default_value="?")
        assert table["a"] == "A"
        assert table["missing"] == "?"

    def test_visibility_per_language(self):
        assert visibility(SupportedLanguage.CSHARP, Visibility.INTERNAL) == "internal"
        assert visibility(SupportedLanguage.BASIC, Visibility.INTERNAL) == "Friend"
        assert visibility(SupportedLanguage.NONE, Visibility.PUBLIC) == ""

    def test_element_type_for_basic_methods(self):
        assert element_type(SupportedLanguage.BASIC, MethodDeclaration(name="Run")) == "Sub"
        assert element_type(SupportedLanguage.BASIC, MethodDeclaration(name="Get", return_type="int")) == "Function"
        assert element_type(SupportedLanguage.CSHARP, MethodDeclaration(name="Run")) == ""

    def test_element_type_description(self):
        assert element_type_description(EnumDeclaration(name="Color")) == "Enumeration"
        assert element_type_description(TypeDeclaration(kind="struct", name="Point")) == "Structure"

    def test_title_name_of_constructor(self):
        ctor = MethodDeclaration(kind="constructor", name=".ctor", parent_name="Widget")
        assert title_name(ctor) == "Widget"

    def test_language_names(self):
        assert LANGUAGE_NAMES[SupportedLanguage.BASIC] == "Visual Basic"
        assert LANGUAGE_NAMES[SupportedLanguage.NONE] == "Unknown"
