"""Declaration model and loaders."""

from .loader import load_declaration, parse_declaration
from .model import (
    AttributeUsage,
    Declaration,
    DeclarationBase,
    EnumDeclaration,
    EnumMember,
    EventDeclaration,
    FieldDeclaration,
    KeywordConstraint,
    MethodDeclaration,
    NamedTypeConstraint,
    Parameter,
    ParameterModifier,
    PropertyDeclaration,
    TypeDeclaration,
    TypeParameter,
    TypeParameterConstraint,
    Visibility,
)

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
    "load_declaration",
    "parse_declaration",
]
