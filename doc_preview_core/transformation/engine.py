"""Tag handler registry, dispatcher and page assembly shared by all style engines.

A style engine turns a documentation comment tree into an HTML fragment.
Each engine registers a fixed map from tag name to handler at construction;
``apply_templates`` walks the tree and dispatches every element to its
handler, falling back to an HTML pass-through for tags it does not know.

Handlers share one signature::

    def handler(element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None

The root ``member`` handler assembles the page sections in a fixed order.
That order is part of the rendered document's contract: engines change how
a section looks, never where it appears.
"""

import html
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from enum import StrEnum
from functools import cache
from types import MappingProxyType
from typing import ClassVar

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from doc_preview_core.comments import ERROR_TAG, ROOT_TAG, ElementNode, Node, TextNode, error_nodes, parse_comment
from doc_preview_core.declarations import Declaration, EnumDeclaration, TypeDeclaration
from doc_preview_core.exceptions import DocPreviewError, PageTemplateError, RenderError, RenderInProgressError
from doc_preview_core.logging import get_preview_logger
from doc_preview_core.options import OptionSet, SupportedLanguage, UnrecognizedTagHandling
from doc_preview_core.syntax import HtmlWriter, element_type_description, generate_syntax, title_name

from . import member_key
from .context import RenderContext

logger = get_preview_logger(__name__)

TagHandler = Callable[[ElementNode, RenderContext, HtmlWriter], None]
SyntaxBuilder = Callable[[Declaration, SupportedLanguage], str]

DEFAULT_HANDLER_KEY = "*"

# Tags every engine renders regardless of the compatibility level.
ALWAYS_RECOGNIZED = frozenset({ROOT_TAG, ERROR_TAG})


class RenderState(StrEnum):
    IDLE = "idle"
    RENDERING = "rendering"


@cache
def _page_environment() -> Environment:
    return Environment(
        loader=PackageLoader("doc_preview_core.transformation", "templates"),
        autoescape=select_autoescape(["html", "jinja2"]),
        keep_trailing_newline=True,
    )


def parse_bool(value: str | None) -> bool:
    """Lenient boolean attribute parsing; anything but "true" is False."""
    return value is not None and value.strip().lower() == "true"


class TransformEngine(ABC):
    """Base class for documentation style engines.

    Subclasses provide the handler map (``build_handlers``), the section
    markup hooks (``open_section``, ``banner``, table rows) and the page shell
    template name. Everything else, including the root section order, lives
    here.
    """

    style_name: ClassVar[str] = ""
    page_template: ClassVar[str] = ""
    section_titles: ClassVar[Mapping[str, str]] = MappingProxyType({})

    def __init__(self, syntax_generator: SyntaxBuilder = generate_syntax):
        self._syntax_generator = syntax_generator
        handlers = self.build_handlers()
        handlers.setdefault(DEFAULT_HANDLER_KEY, self.pass_through)
        self._handlers: Mapping[str, TagHandler] = MappingProxyType(handlers)
        self._state = RenderState.IDLE

    # -- registry ----------------------------------------------------------

    @property
    def handlers(self) -> Mapping[str, TagHandler]:
        return self._handlers

    @property
    def state(self) -> RenderState:
        return self._state

    def handler_for(self, tag_name: str) -> TagHandler:
        return self._handlers.get(tag_name, self._handlers[DEFAULT_HANDLER_KEY])

    # -- dispatch ----------------------------------------------------------

    def apply_templates(self, nodes: Node | Iterable[Node], ctx: RenderContext, out: HtmlWriter) -> None:
        """Render a node or a sequence of nodes in document order."""
        if isinstance(nodes, TextNode):
            out.text(nodes.text)
            return
        if isinstance(nodes, ElementNode):
            self._dispatch(nodes, ctx, out)
            return
        for node in nodes:
            self.apply_templates(node, ctx, out)

    def apply_children(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        self.apply_templates(element.children, ctx, out)

    def apply_named(self, element: ElementNode, tag_name: str, ctx: RenderContext, out: HtmlWriter) -> None:
        """Render the direct children of ``element`` named ``tag_name``."""
        self.apply_templates(element.elements(tag_name), ctx, out)

    def _dispatch(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        handler = self._handlers.get(element.name)
        if handler is None:
            self._handlers[DEFAULT_HANDLER_KEY](element, ctx, out)
            return
        if element.name in ALWAYS_RECOGNIZED or ctx.options.recognizes(element.name):
            handler(element, ctx, out)
            return

        match ctx.options.unrecognized_tag_handling:
            case UnrecognizedTagHandling.HIDE_TAG_AND_CONTENTS:
                pass
            case UnrecognizedTagHandling.STRIP_TAG_SHOW_CONTENTS:
                self.apply_children(element, ctx, out)
            case UnrecognizedTagHandling.HIGHLIGHT_TAG_AND_CONTENTS:
                with out.tag("span", "unrecognized"):
                    out.text(element.to_xml())
            case UnrecognizedTagHandling.RENDER_CONTENTS:
                handler(element, ctx, out)

    # -- handlers shared by every engine -----------------------------------

    def pass_through(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Re-emit an unknown tag with its attributes, e.g. inline HTML such as ``<b>``."""
        attrs = "".join(f' {key}="{html.escape(value, quote=True)}"' for key, value in element.attributes)
        if element.is_empty:
            out.write(f"<{element.name}{attrs}/>")
            return
        out.write(f"<{element.name}{attrs}>")
        self.apply_children(element, ctx, out)
        out.write(f"</{element.name}>")

    def ignore(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Render nothing for the element or its contents."""

    def include_placeholder(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Stand-in for an ``include`` that was not expanded before rendering."""
        out.write("<p><i><b>[Insert documentation here: file = ")
        out.text(element.get("file", ""))
        out.write(", path = ")
        out.text(element.get("path", ""))
        out.write("]</b></i></p>")

    def parse_error(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Error marker left by the comment parser for malformed XML."""
        with out.tag("div", "parseError"):
            out.write("<b>Unable to parse the documentation comment:</b> ")
            out.text(element.get("message", ""))
            if source := element.inner_text:
                with out.tag("pre"):
                    out.text(source)

    def titled_section(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Section titled after the tag (``remarks``, ``returns``, ``value``)."""
        with self.section(self.section_titles[element.name], out):
            self.apply_children(element, ctx, out)

    # -- markup hooks ------------------------------------------------------

    @abstractmethod
    def build_handlers(self) -> dict[str, TagHandler]:
        """Return the tag name to handler map for this engine."""

    @abstractmethod
    def banner(self, ctx: RenderContext, out: HtmlWriter) -> None:
        """Page header naming the rendered declaration."""

    @abstractmethod
    def open_section(self, title: str, out: HtmlWriter) -> None: ...

    @abstractmethod
    def close_section(self, out: HtmlWriter) -> None: ...

    @abstractmethod
    def open_reference_table(self, tag_name: str, out: HtmlWriter) -> None:
        """Open the table listing ``exception`` or ``permission`` rows."""

    def close_reference_table(self, out: HtmlWriter) -> None:
        out.write("</table>")

    @abstractmethod
    def open_members_table(self, declaration: TypeDeclaration | EnumDeclaration, out: HtmlWriter) -> None: ...

    def close_members_table(self, out: HtmlWriter) -> None:
        out.write("</table>")

    @abstractmethod
    def member_row(self, member: Declaration, ctx: RenderContext, out: HtmlWriter) -> None: ...

    @abstractmethod
    def enum_member_row(self, name: str, doc_comment: str | None, ctx: RenderContext, out: HtmlWriter) -> None: ...

    def begin_main(self, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write('<div id="main">')

    def end_main(self, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write("</div>")

    @contextmanager
    def section(self, title: str, out: HtmlWriter) -> Iterator[None]:
        """Titled page section; the block body renders the section content."""
        self.open_section(title, out)
        yield
        self.close_section(out)

    @contextmanager
    def reference_table(self, tag_name: str, out: HtmlWriter) -> Iterator[None]:
        self.open_reference_table(tag_name, out)
        yield
        self.close_reference_table(out)

    @contextmanager
    def members_table(self, declaration: TypeDeclaration | EnumDeclaration, out: HtmlWriter) -> Iterator[None]:
        self.open_members_table(declaration, out)
        yield
        self.close_members_table(out)

    # -- page assembly -----------------------------------------------------

    def has_section(self, element: ElementNode, tag_name: str, ctx: RenderContext) -> bool:
        """A gated section renders only when its tag is recognized and used somewhere in the comment."""
        return ctx.options.recognizes(tag_name) and element.count_descendants(tag_name) > 0

    def member(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """Root handler: assemble the page sections in their fixed order."""
        self.banner(ctx, out)
        self.begin_main(ctx, out)

        self.apply_templates(error_nodes(element), ctx, out)
        self.apply_named(element, "preliminary", ctx, out)
        self.apply_named(element, "summary", ctx, out)
        self.syntax_section(ctx, out)

        for tag_name in ("typeparam", "param"):
            if self.has_section(element, tag_name, ctx):
                with self.section(self.section_titles[tag_name], out), out.tag("dl"):
                    self.apply_named(element, tag_name, ctx, out)

        self.apply_named(element, "value", ctx, out)
        self.apply_named(element, "returns", ctx, out)
        self.members_section(ctx, out)
        self.apply_named(element, "remarks", ctx, out)
        self.apply_named(element, "threadsafety", ctx, out)

        if self.has_section(element, "example", ctx):
            with self.section(self.section_titles["example"], out):
                self.apply_named(element, "example", ctx, out)

        for tag_name in ("permission", "exception"):
            if self.has_section(element, tag_name, ctx):
                with self.section(self.section_titles[tag_name], out), self.reference_table(tag_name, out):
                    self.apply_named(element, tag_name, ctx, out)

        if self.has_section(element, "seealso", ctx):
            with self.section(self.section_titles["seealso"], out):
                self.apply_named(element, "seealso", ctx, out)

        self.end_main(ctx, out)

    def member_syntax(self, ctx: RenderContext) -> str | None:
        """Syntax block for the rendered declaration, generated at most once per render."""
        declaration = ctx.declaration
        if declaration is None:
            return None
        return ctx.member_syntax(lambda: self._syntax_generator(declaration, ctx.language))

    def syntax_section(self, ctx: RenderContext, out: HtmlWriter) -> None:
        if (syntax := self.member_syntax(ctx)) is None:
            return
        with self.section(self.section_titles["syntax"], out):
            out.write(syntax)

    def members_section(self, ctx: RenderContext, out: HtmlWriter) -> None:
        """Members listing for types and enums that declare any members."""
        declaration = ctx.declaration
        if not isinstance(declaration, TypeDeclaration | EnumDeclaration) or not declaration.members:
            return
        with self.section(self.section_titles["members"], out), self.members_table(declaration, out):
            if isinstance(declaration, EnumDeclaration):
                for enum_member in declaration.members:
                    self.enum_member_row(enum_member.name, enum_member.doc_comment, ctx, out)
            else:
                for member in declaration.members:
                    self.member_row(member, ctx, out)

    def member_summary(self, doc_comment: str | None, ctx: RenderContext, out: HtmlWriter) -> None:
        """Render the ``summary`` of a nested member's own comment, if any."""
        if not doc_comment:
            return
        summary = parse_comment(doc_comment).first("summary")
        if summary is not None:
            self.apply_children(summary, ctx, out)

    # -- shared helpers ----------------------------------------------------

    def page_title(self, declaration: Declaration | None) -> str:
        if declaration is None:
            return ""
        return f"{title_name(declaration)} {element_type_description(declaration)}"

    def cref_link(self, cref: str, out: HtmlWriter, text: str | None = None, generics: Callable[[str], str] | None = None) -> None:
        """Link to ``urn:member:<cref>`` labelled with ``text`` or the key's short name."""
        out.write(f'<a href="urn:member:{html.escape(cref, quote=True)}">')
        if text:
            out.text(text)
        else:
            label = html.escape(member_key.get_name(cref), quote=False)
            out.write(generics(label) if generics else label)
        out.write("</a>")

    # -- entry points ------------------------------------------------------

    def transform(
        self,
        comment: ElementNode | str,
        declaration: Declaration | None,
        language: SupportedLanguage = SupportedLanguage.CSHARP,
        options: OptionSet | None = None,
    ) -> str:
        """Render a documentation comment for ``declaration`` into an HTML fragment.

        Raises:
            RenderInProgressError: A render is already running on this engine.
            RenderError: A handler or the syntax generator failed.
        """
        if self._state is RenderState.RENDERING:
            raise RenderInProgressError(f"{type(self).__name__} is already rendering")
        root = parse_comment(comment) if isinstance(comment, str) else comment
        ctx = RenderContext(declaration, SupportedLanguage(language), options or OptionSet())
        out = HtmlWriter()

        self._state = RenderState.RENDERING
        logger.debug("Rendering %s with %s", self.page_title(declaration) or "<no declaration>", self.style_name)
        try:
            self.apply_templates(root, ctx, out)
        except DocPreviewError:
            raise
        except Exception as e:
            raise RenderError(f"Rendering failed in {type(self).__name__}: {e}") from e
        finally:
            self._state = RenderState.IDLE
        return out.getvalue()

    def render_page(self, body: str, declaration: Declaration | None = None, language: SupportedLanguage = SupportedLanguage.CSHARP) -> str:
        """Embed a rendered fragment in this engine's page shell."""
        try:
            template = _page_environment().get_template(self.page_template)
            return template.render(
                title=self.page_title(declaration),
                language=SupportedLanguage(language).value,
                body=body,
            )
        except TemplateError as e:
            raise PageTemplateError(f"Failed to render page shell '{self.page_template}': {e}") from e


__all__ = [
    "ALWAYS_RECOGNIZED",
    "DEFAULT_HANDLER_KEY",
    "RenderState",
    "TagHandler",
    "TransformEngine",
    "parse_bool",
]
