"""Tests for member keys, the render context and the style registry."""

import pytest

from doc_preview_core.declarations import FieldDeclaration, PropertyDeclaration
from doc_preview_core.declarations.model import Parameter
from doc_preview_core.options import SupportedLanguage
from doc_preview_core.transformation import (
    DEFAULT_STYLE,
    MsdnEngine,
    RenderContext,
    SandcastlePrototypeEngine,
    available_styles,
    create_engine,
    get_engine_class,
    get_name,
)
from doc_preview_core.transformation.engine import parse_bool
from doc_preview_core.transformation.member_key import strip_kind


class TestMemberKey:
    """Test display names derived from member keys."""

    @pytest.mark.parametrize(
        ("cref", "expected"),
        [
            ("T:System.String", "String"),
            ("M:Acme.Widget.Resize(System.Int32)", "Resize"),
            ("M:Acme.Widget.#ctor", "Widget"),
            ("M:Acme.Widget.#cctor", "Widget"),
            ("T:System.Collections.Generic.List{T}", "List{T}"),
            ("T:System.Collections.Generic.Dictionary`2", "Dictionary"),
            ("M:Acme.Bag{T}.Add(`0)", "Add"),
            ("M:Acme.Util.Map{System.Collections.Generic.List{T}}", "Map{System.Collections.Generic.List{T}}"),
            ("Widget", "Widget"),
            ("", ""),
        ],
    )
    def test_get_name(self, cref, expected):
        assert get_name(cref) == expected

    def test_strip_kind(self):
        assert strip_kind("P:Acme.Widget.Name") == "Acme.Widget.Name"
        assert strip_kind("Acme.Widget") == "Acme.Widget"


class TestRenderContext:
    def test_member_syntax_built_once(self):
        calls = []

        def build() -> str:
            calls.append(1)
            return "<div>syntax</div>"

        ctx = RenderContext(None, SupportedLanguage.CSHARP)
        assert not ctx.has_member_syntax
        assert ctx.member_syntax(build) == "<div>syntax</div>"
        assert ctx.member_syntax(build) == "<div>syntax</div>"
        assert ctx.has_member_syntax
        assert len(calls) == 1

    def test_parameter_type_of_indexer(self):
        indexer = PropertyDeclaration(name="this", property_type="int", parameters=(Parameter(name="i", param_type="long"),))
        ctx = RenderContext(indexer, SupportedLanguage.CSHARP)
        assert ctx.parameter_type("i") == "long"
        assert ctx.parameter_type("j") is None

    def test_parameter_type_without_parameters(self):
        ctx = RenderContext(FieldDeclaration(name="x", field_type="int"), SupportedLanguage.CSHARP)
        assert ctx.parameter_type("x") is None


class TestRegistry:
    """Test style lookup."""

    def test_available_styles(self):
        assert available_styles() == ["msdn", "sandcastle_prototype"]
        assert DEFAULT_STYLE == "sandcastle_prototype"

    def test_lookup_is_case_insensitive(self):
        assert get_engine_class("MSDN") is MsdnEngine

    def test_unknown_style_falls_back(self):
        assert get_engine_class("fancy") is SandcastlePrototypeEngine
        assert get_engine_class(None) is SandcastlePrototypeEngine

    def test_create_engine_with_generator(self, add_method):
        engine = create_engine("msdn", syntax_generator=lambda declaration, language: "<div>S</div>")
        assert isinstance(engine, MsdnEngine)
        assert "<div>S</div>" in engine.transform("", add_method)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("True ", True), ("false", False), ("yes", False), (None, False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected
