"""Declaration syntax preview: language lookups, HTML writer and generator."""

from .css import PreviewCss
from .generator import SyntaxGenerator, generate_syntax
from .lookup import (
    LANGUAGE_NAMES,
    LANGUAGE_NOT_SUPPORTED,
    DefaultValueDict,
    element_type,
    element_type_description,
    method_name,
    title_name,
    visibility,
)
from .writer import HtmlWriter

__all__ = [
    "DefaultValueDict",
    "HtmlWriter",
    "LANGUAGE_NAMES",
    "LANGUAGE_NOT_SUPPORTED",
    "PreviewCss",
    "SyntaxGenerator",
    "element_type",
    "element_type_description",
    "generate_syntax",
    "method_name",
    "title_name",
    "visibility",
]
