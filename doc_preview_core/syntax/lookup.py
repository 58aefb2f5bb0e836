"""Language-specific spellings used when rendering syntax and page banners."""

from doc_preview_core.declarations import (
    Declaration,
    EnumDeclaration,
    EventDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    TypeDeclaration,
    Visibility,
)
from doc_preview_core.options import SupportedLanguage

from .css import PreviewCss


class DefaultValueDict(dict[str, str]):
    """String dictionary that returns ``default_value`` for missing keys."""

    def __init__(self, *args, default_value: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.default_value = default_value

    def __missing__(self, key: str) -> str:
        return self.default_value


LANGUAGE_NOT_SUPPORTED = "Syntax preview is not available for this language."

LANGUAGE_NAMES = DefaultValueDict(
    {SupportedLanguage.CSHARP: "C#", SupportedLanguage.BASIC: "Visual Basic"},
    default_value="Unknown",
)

# Value of the language selector option in the page banner
LANGUAGE_FILTER_OPTIONS = DefaultValueDict(
    {SupportedLanguage.CSHARP: "CSharp cs", SupportedLanguage.BASIC: "VisualBasic vb"},
    default_value="x",
)

LANGUAGE_CSS = DefaultValueDict(
    {SupportedLanguage.CSHARP: PreviewCss.LANGUAGE_CSHARP, SupportedLanguage.BASIC: PreviewCss.LANGUAGE_BASIC}
)

_VISIBILITY: dict[SupportedLanguage, DefaultValueDict] = {
    SupportedLanguage.CSHARP: DefaultValueDict({
        Visibility.PUBLIC: "public",
        Visibility.PROTECTED: "protected",
        Visibility.INTERNAL: "internal",
        Visibility.PROTECTED_INTERNAL: "protected internal",
        Visibility.PRIVATE: "private",
    }),
    SupportedLanguage.BASIC: DefaultValueDict({
        Visibility.PUBLIC: "Public",
        Visibility.PROTECTED: "Protected",
        Visibility.INTERNAL: "Friend",
        Visibility.PROTECTED_INTERNAL: "Protected Friend",
        Visibility.PRIVATE: "Private",
    }),
}

_ELEMENT_TYPE: dict[SupportedLanguage, DefaultValueDict] = {
    SupportedLanguage.CSHARP: DefaultValueDict({
        "class": "class",
        "struct": "struct",
        "interface": "interface",
        "enum": "enum",
        "event": "event",
    }),
    SupportedLanguage.BASIC: DefaultValueDict({
        "class": "Class",
        "struct": "Structure",
        "interface": "Interface",
        "enum": "Enum",
        "event": "Event",
        "property": "Property",
        "constructor": "Sub",
    }),
}

_ELEMENT_TYPE_DESCRIPTION = DefaultValueDict(
    {
        "class": "Class",
        "struct": "Structure",
        "interface": "Interface",
        "enum": "Enumeration",
        "method": "Method",
        "constructor": "Constructor",
        "property": "Property",
        "field": "Field",
        "event": "Event",
    },
    default_value="Member",
)


def visibility(language: SupportedLanguage, value: Visibility) -> str:
    """Visibility keyword(s) for the language; empty for unsupported languages."""
    table = _VISIBILITY.get(language)
    return table[value] if table is not None else ""


def element_type(language: SupportedLanguage, declaration: Declaration) -> str:
    """Keyword naming the kind of declaration, e.g. ``class`` or ``Structure``.

    Empty when the language spells the kind implicitly (C# methods, fields).
    """
    table = _ELEMENT_TYPE.get(language)
    if table is None:
        return ""
    if language == SupportedLanguage.BASIC and isinstance(declaration, MethodDeclaration) and not declaration.is_constructor:
        return "Function" if declaration.returns_value else "Sub"
    return table[declaration.kind]


def element_type_description(declaration: Declaration) -> str:
    """Human-readable kind used in page titles, e.g. ``Enumeration``."""
    return _ELEMENT_TYPE_DESCRIPTION[declaration.kind]


def method_name(method: MethodDeclaration) -> str:
    """Title name of a method; constructors are titled after their type."""
    if method.is_constructor:
        return method.parent_name or method.name
    return method.name


def title_name(declaration: Declaration) -> str:
    """Name shown in page titles."""
    match declaration:
        case MethodDeclaration():
            return method_name(declaration)
        case TypeDeclaration() | EnumDeclaration() | PropertyDeclaration() | FieldDeclaration() | EventDeclaration():
            return declaration.name


__all__ = [
    "DefaultValueDict",
    "LANGUAGE_CSS",
    "LANGUAGE_FILTER_OPTIONS",
    "LANGUAGE_NAMES",
    "LANGUAGE_NOT_SUPPORTED",
    "element_type",
    "element_type_description",
    "method_name",
    "title_name",
    "visibility",
]
