"""Common test fixtures for documentation preview tests."""

import pytest

from doc_preview_core.declarations import (
    EnumDeclaration,
    EnumMember,
    MethodDeclaration,
    NamedTypeConstraint,
    Parameter,
    ParameterModifier,
    TypeDeclaration,
    TypeParameter,
)
from doc_preview_core.server import ContentSlot
from doc_preview_core.transformation import MsdnEngine, SandcastlePrototypeEngine


@pytest.fixture
def plain_class() -> TypeDeclaration:
    """Public class without attributes, generics or members."""
    return TypeDeclaration(kind="class", name="Widget", namespace="Acme.Controls")


@pytest.fixture
def generic_class() -> TypeDeclaration:
    """Class with two type parameters, only the first one constrained."""
    return TypeDeclaration(
        kind="class",
        name="Repository",
        namespace="Acme.Data",
        type_parameters=(
            TypeParameter(name="T", constraints=(NamedTypeConstraint(type_name="IComparable"),)),
            TypeParameter(name="U"),
        ),
    )


@pytest.fixture
def add_method() -> MethodDeclaration:
    """``public static int Add(int a, ref int b)`` declared on ``Acme.Calculator``."""
    return MethodDeclaration(
        name="Add",
        is_static=True,
        return_type="int",
        namespace="Acme",
        parent_name="Calculator",
        parameters=(
            Parameter(name="a", param_type="int"),
            Parameter(name="b", param_type="int", modifier=ParameterModifier.REF),
        ),
    )


@pytest.fixture
def color_enum() -> EnumDeclaration:
    return EnumDeclaration(
        name="Color",
        underlying_type="byte",
        members=(
            EnumMember(name="Red", doc_comment="<summary>The red.</summary>"),
            EnumMember(name="Green"),
        ),
    )


@pytest.fixture
def sandcastle() -> SandcastlePrototypeEngine:
    return SandcastlePrototypeEngine()


@pytest.fixture
def msdn() -> MsdnEngine:
    return MsdnEngine()


@pytest.fixture
def slot() -> ContentSlot:
    return ContentSlot()
