"""Doc Preview Core - reference-manual style previews of source documentation comments.

Given a declaration (class, enum, method, property, field, event) and its
XML documentation comment, the library renders an HTML page resembling a
reference-manual entry: a signature block spelled in C# or Visual Basic and
the comment's tags transformed into the sections of the chosen skin.

Core Capabilities:
    - **Syntax Preview**: Declaration signatures in C# or Visual Basic spelling
    - **Tag Transformation**: Handler-per-tag engines for the Sandcastle
      Prototype and MSDN skins, with a fixed page section order
    - **Comment Parsing**: Immutable comment trees with ``<include>`` expansion
    - **Preview Server**: FastAPI/uvicorn server returning the last rendered page

Quick Start:
    >>> from doc_preview_core import Previewer, SupportedLanguage, parse_declaration
    >>>
    >>> declaration = parse_declaration({
    ...     "kind": "class",
    ...     "name": "Repository",
    ...     "is_abstract": True,
    ...     "doc_comment": "<summary>Stores entities.</summary>",
    ... })
    >>> page = Previewer(language=SupportedLanguage.BASIC).render(declaration)

Environment Variables:
    - DOC_PREVIEW_PREVIEW_STYLE: Output skin (sandcastle_prototype, msdn)
    - DOC_PREVIEW_LANGUAGE: Syntax language (csharp, basic)
    - DOC_PREVIEW_SERVER_PORT: Content server port
    - DOC_PREVIEW_LOG_LEVEL: Library log level
"""

from .comments import ElementNode, TextNode, parse_comment, process_includes
from .declarations import (
    Declaration,
    EnumDeclaration,
    EventDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    TypeDeclaration,
    load_declaration,
    parse_declaration,
)
from .exceptions import (
    CommentParseError,
    DeclarationLoadError,
    DocPreviewError,
    PageTemplateError,
    PreviewArgumentError,
    RenderError,
    RenderInProgressError,
    ServerError,
)
from .logging import get_preview_logger, setup_logging
from .options import (
    IncludeProcessing,
    OptionSet,
    SupportedLanguage,
    TagCompatibilityLevel,
    UnrecognizedTagHandling,
)
from .preview import Previewer
from .server import ContentSlot, PreviewServer
from .settings import Settings, settings
from .syntax import HtmlWriter, SyntaxGenerator, generate_syntax
from .transformation import (
    MsdnEngine,
    RenderContext,
    SandcastlePrototypeEngine,
    TransformEngine,
    create_engine,
)

__version__ = "0.1.0"

__all__ = [
    "CommentParseError",
    "ContentSlot",
    "Declaration",
    "DeclarationLoadError",
    "DocPreviewError",
    "ElementNode",
    "EnumDeclaration",
    "EventDeclaration",
    "FieldDeclaration",
    "HtmlWriter",
    "IncludeProcessing",
    "MethodDeclaration",
    "MsdnEngine",
    "OptionSet",
    "PageTemplateError",
    "PreviewArgumentError",
    "PreviewServer",
    "Previewer",
    "PropertyDeclaration",
    "RenderContext",
    "RenderError",
    "RenderInProgressError",
    "SandcastlePrototypeEngine",
    "ServerError",
    "Settings",
    "SupportedLanguage",
    "SyntaxGenerator",
    "TagCompatibilityLevel",
    "TextNode",
    "TransformEngine",
    "TypeDeclaration",
    "UnrecognizedTagHandling",
    "create_engine",
    "generate_syntax",
    "get_preview_logger",
    "load_declaration",
    "parse_comment",
    "parse_declaration",
    "process_includes",
    "settings",
    "setup_logging",
]
