"""Declaration model consumed by the syntax generator and the style engines.

Declarations are a closed tagged union over ``kind``. They are built by the
source parser (or by ``load_declaration`` from YAML/JSON) and are read-only
for the whole render pass.
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Visibility(StrEnum):
    """Access level of a declaration."""

    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected_internal"
    PRIVATE = "private"


class ParameterModifier(StrEnum):
    """Passing convention of a method or indexer parameter."""

    NONE = "none"
    REF = "ref"
    OUT = "out"
    PARAMS = "params"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NamedTypeConstraint(_FrozenModel):
    """Constraint naming a type, e.g. ``where T : IComparable``.

    Only the raw type name is kept; generic arguments of the constraint type
    are not modelled.
    """

    kind: Literal["named_type"] = "named_type"
    type_name: str

    @property
    def name(self) -> str:
        return self.type_name


class KeywordConstraint(_FrozenModel):
    """Keyword constraint such as ``class``, ``struct`` or ``new()``."""

    kind: Literal["keyword"] = "keyword"
    name: str


TypeParameterConstraint = Annotated[NamedTypeConstraint | KeywordConstraint, Field(discriminator="kind")]


class TypeParameter(_FrozenModel):
    """Generic type parameter with its ordered constraints."""

    name: str
    constraints: tuple[TypeParameterConstraint, ...] = ()


class Parameter(_FrozenModel):
    """Method or indexer parameter."""

    name: str
    param_type: str
    modifier: ParameterModifier = ParameterModifier.NONE


class AttributeUsage(_FrozenModel):
    """Attribute applied to a declaration. Arguments are kept but never rendered."""

    name: str
    arguments: tuple[str, ...] = ()


class DeclarationBase(_FrozenModel):
    """Fields shared by every declaration kind."""

    name: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False
    is_sealed: bool = False
    is_new: bool = False
    type_parameters: tuple[TypeParameter, ...] = ()
    attributes: tuple[AttributeUsage, ...] = ()
    namespace: str | None = None
    parent_name: str | None = None
    doc_comment: str | None = None

    @property
    def is_generic(self) -> bool:
        return len(self.type_parameters) > 0


class EnumMember(_FrozenModel):
    """Single named value of an enumeration."""

    name: str
    doc_comment: str | None = None


class EnumDeclaration(DeclarationBase):
    """Enumeration with an optional underlying integral type."""

    kind: Literal["enum"] = "enum"
    underlying_type: str | None = None
    members: tuple[EnumMember, ...] = ()


class MethodDeclaration(DeclarationBase):
    """Method or constructor. A ``return_type`` of None or ``void`` means no return value."""

    kind: Literal["method", "constructor"] = "method"
    return_type: str | None = None
    parameters: tuple[Parameter, ...] = ()
    is_virtual: bool = False
    is_override: bool = False

    @property
    def is_constructor(self) -> bool:
        return self.kind == "constructor"

    @property
    def returns_value(self) -> bool:
        return bool(self.return_type) and self.return_type != "void"


class PropertyDeclaration(DeclarationBase):
    """Property, or indexer when ``parameters`` is not empty."""

    kind: Literal["property"] = "property"
    property_type: str
    parameters: tuple[Parameter, ...] = ()
    has_getter: bool = True
    has_setter: bool = True
    is_virtual: bool = False
    is_override: bool = False

    @property
    def is_indexer(self) -> bool:
        return len(self.parameters) > 0


class FieldDeclaration(DeclarationBase):
    """Field or constant."""

    kind: Literal["field"] = "field"
    field_type: str
    is_const: bool = False
    is_readonly: bool = False
    value: str | None = None


class EventDeclaration(DeclarationBase):
    """Event with its delegate type."""

    kind: Literal["event"] = "event"
    event_type: str


class TypeDeclaration(DeclarationBase):
    """Class, structure or interface with its member declarations."""

    kind: Literal["class", "struct", "interface"] = "class"
    members: tuple["Declaration", ...] = ()


Declaration = Annotated[
    TypeDeclaration | EnumDeclaration | MethodDeclaration | PropertyDeclaration | FieldDeclaration | EventDeclaration,
    Field(discriminator="kind"),
]

TypeDeclaration.model_rebuild()

__all__ = [
    "AttributeUsage",
    "Declaration",
    "DeclarationBase",
    "EnumDeclaration",
    "EnumMember",
    "EventDeclaration",
    "FieldDeclaration",
    "KeywordConstraint",
    "MethodDeclaration",
    "NamedTypeConstraint",
    "Parameter",
    "ParameterModifier",
    "PropertyDeclaration",
    "TypeDeclaration",
    "TypeParameter",
    "TypeParameterConstraint",
    "Visibility",
]
