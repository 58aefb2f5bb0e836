"""Tests for the declaration model and YAML/JSON loader."""

import json

import pytest
from pydantic import ValidationError

from doc_preview_core.declarations import (
    EnumDeclaration,
    KeywordConstraint,
    MethodDeclaration,
    NamedTypeConstraint,
    ParameterModifier,
    TypeDeclaration,
    Visibility,
    load_declaration,
    parse_declaration,
)
from doc_preview_core.exceptions import DeclarationLoadError

CLASS_YAML = """\
kind: class
name: Repository
namespace: Acme.Data
is_abstract: true
attributes:
  - name: Serializable
type_parameters:
  - name: T
    constraints:
      - kind: named_type
        type_name: IEntity
      - kind: keyword
        name: class
doc_comment: |
  <summary>Stores entities.</summary>
members:
  - kind: method
    name: Save
    return_type: void
    parameters:
      - name: entity
        param_type: T
        modifier: ref
  - kind: property
    name: Count
    property_type: int
    has_setter: false
"""


class TestParseDeclaration:
    """Test parse_declaration."""

    def test_discriminated_by_kind(self):
        assert isinstance(parse_declaration({"kind": "enum", "name": "Color"}), EnumDeclaration)
        assert isinstance(parse_declaration({"kind": "constructor", "name": "Widget"}), MethodDeclaration)
        assert isinstance(parse_declaration({"kind": "struct", "name": "Point"}), TypeDeclaration)

    def test_defaults(self):
        declaration = parse_declaration({"kind": "class", "name": "Widget"})
        assert declaration.visibility == Visibility.PUBLIC
        assert not declaration.is_static
        assert declaration.attributes == ()
        assert not declaration.is_generic

    def test_unknown_kind_rejected(self):
        with pytest.raises(DeclarationLoadError):
            parse_declaration({"kind": "namespace", "name": "Acme"})

    def test_unknown_field_rejected(self):
        with pytest.raises(DeclarationLoadError):
            parse_declaration({"kind": "class", "name": "Widget", "colour": "blue"})

    def test_declarations_are_frozen(self):
        declaration = parse_declaration({"kind": "class", "name": "Widget"})
        with pytest.raises(ValidationError):
            declaration.name = "Gadget"


class TestLoadDeclaration:
    """Test load_declaration."""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "repository.yaml"
        path.write_text(CLASS_YAML, encoding="utf-8")
        declaration = load_declaration(path)

        assert isinstance(declaration, TypeDeclaration)
        assert declaration.is_abstract
        assert declaration.type_parameters[0].constraints == (
            NamedTypeConstraint(type_name="IEntity"),
            KeywordConstraint(name="class"),
        )
        assert "Stores entities." in declaration.doc_comment
        save, count = declaration.members
        assert isinstance(save, MethodDeclaration)
        assert not save.returns_value
        assert save.parameters[0].modifier == ParameterModifier.REF
        assert count.has_getter and not count.has_setter

    def test_json_file(self, tmp_path):
        path = tmp_path / "method.json"
        path.write_text(json.dumps({"kind": "method", "name": "Add", "return_type": "int"}), encoding="utf-8")
        declaration = load_declaration(path)
        assert declaration.returns_value

    def test_missing_file(self, tmp_path):
        with pytest.raises(DeclarationLoadError, match="Cannot read"):
            load_declaration(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("kind: [class", encoding="utf-8")
        with pytest.raises(DeclarationLoadError, match="not valid"):
            load_declaration(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- kind: class\n", encoding="utf-8")
        with pytest.raises(DeclarationLoadError, match="must contain a mapping"):
            load_declaration(path)
