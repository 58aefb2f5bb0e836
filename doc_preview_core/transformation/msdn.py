"""Classic MSDN / NDoc documentation style.

Unlike the Sandcastle prototype this layout has no client-side language
filter: language keywords are spelled out in prose ("null reference
(Nothing in Visual Basic)") and generic brackets in link text follow the
language being rendered.
"""

from collections.abc import Callable
from types import MappingProxyType

from doc_preview_core.comments import ElementNode
from doc_preview_core.declarations import Declaration, EnumDeclaration, TypeDeclaration
from doc_preview_core.options import SupportedLanguage
from doc_preview_core.syntax import HtmlWriter, title_name

from .context import RenderContext
from .engine import TagHandler, TransformEngine, parse_bool

LANGWORDS = MappingProxyType({
    "null": "<b>null</b> reference (<b>Nothing</b> in Visual Basic)",
    "Nothing": "<b>null</b> reference (<b>Nothing</b> in Visual Basic)",
    "nullptr": "<b>null</b> reference (<b>Nothing</b> in Visual Basic)",
    "static": "<b>static</b> (<b>Shared</b> in Visual Basic)",
    "Shared": "<b>static</b> (<b>Shared</b> in Visual Basic)",
    "virtual": "<b>virtual</b> (<b>Overridable</b> in Visual Basic)",
    "Overridable": "<b>virtual</b> (<b>Overridable</b> in Visual Basic)",
    "true": "<b>true</b>",
    "True": "<b>true</b>",
    "false": "<b>false</b>",
    "False": "<b>false</b>",
    "abstract": "<b>abstract</b> (<b>MustInherit</b> in Visual Basic)",
    "MustInherit": "<b>abstract</b> (<b>MustInherit</b> in Visual Basic)",
})

_TABLE_OPEN = '<div class="tablediv"><table class="dtTABLE" cellspacing="0">'
_TABLE_CLOSE = "</table></div>"


def _header_row(*columns: str) -> str:
    cells = "".join(f'<th width="50%">{column}</th>' for column in columns)
    return f'<tr valign="top">{cells}</tr>'


_REFERENCE_HEADERS = MappingProxyType({
    "exception": _header_row("Exception Type", "Condition"),
    "permission": _header_row("Permission", "Description"),
})


class MsdnEngine(TransformEngine):
    """Renders documentation in the MSDN (NDoc) style."""

    style_name = "msdn"
    page_template = "msdn.html.jinja2"
    section_titles = MappingProxyType({
        "syntax": "Syntax",
        "typeparam": "Type Parameters",
        "param": "Parameters",
        "value": "Property Value",
        "returns": "Return Value",
        "members": "Members",
        "remarks": "Remarks",
        "threadsafety": "Thread Safety",
        "example": "Example",
        "permission": ".NET Framework Security",
        "exception": "Exceptions",
        "seealso": "See Also",
    })

    def build_handlers(self) -> dict[str, TagHandler]:
        return {
            "c": self.c,
            "code": self.code,
            "error": self.parse_error,
            "example": self.apply_children,
            "exclude": self.ignore,
            "exception": self.reference_row,
            "include": self.include_placeholder,
            "list": self.list_block,
            "member": self.member,
            "note": self.note,
            "overloads": self.ignore,
            "para": self.para,
            "param": self.param,
            "paramref": self.emphasized_name,
            "permission": self.reference_row,
            "preliminary": self.preliminary,
            "remarks": self.titled_section,
            "returns": self.titled_section,
            "see": self.see,
            "seealso": self.seealso,
            "summary": self.para,
            "threadsafety": self.threadsafety,
            "typeparam": self.param,
            "typeparamref": self.emphasized_name,
            "value": self.titled_section,
        }

    def generic_brackets(self, language: SupportedLanguage) -> Callable[[str], str]:
        """Spell ``{``/``}`` from member keys as the language's generic brackets."""
        if language == SupportedLanguage.BASIC:
            return lambda name: name.replace("{", "(Of ").replace("}", ")")
        return lambda name: name.replace("{", "&lt;").replace("}", "&gt;")

    # -- tags --------------------------------------------------------------

    def c(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("code"):
            self.apply_children(element, ctx, out)

    def code(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("pre", "code"):
            out.text(element.inner_text)

    def list_block(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        match element.get("type"):
            case "table":
                out.write(_TABLE_OPEN)
                for header in element.elements("listheader"):
                    with out.tag("tr", valign="top"):
                        for column in header.elements():
                            with out.tag("th"):
                                self.apply_children(column, ctx, out)
                for item in element.elements("item"):
                    with out.tag("tr", valign="top"):
                        for column in item.elements():
                            with out.tag("td"):
                                self.apply_children(column, ctx, out)
                                out.write("<br/>")
                out.write(_TABLE_CLOSE)
            case "bullet" | "number":
                with out.tag("ul" if element.get("type") == "bullet" else "ol", "dtList"):
                    for item in element.elements("item"):
                        with out.tag("li"):
                            self.apply_children(item, ctx, out)
            case _:
                out.text(element.inner_text)

    def note(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("blockquote", "dtBlock"):
            out.write("<b>Note</b>&nbsp;&nbsp;&nbsp;")
            self.apply_children(element, ctx, out)

    def para(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("p"):
            self.apply_children(element, ctx, out)

    def param(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """``param`` and ``typeparam`` definition entries."""
        name = element.get("name", "")
        with out.tag("dt"), out.tag("i"):
            out.text(name)
        with out.tag("dd"):
            if element.name == "param" and (param_type := ctx.parameter_type(name)):
                out.write("Type: ")
                out.link("#", param_type)
                out.write("<br />")
            self.apply_children(element, ctx, out)

    def emphasized_name(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("i"):
            out.text(element.get("name"))

    def preliminary(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("p"), out.tag("b"):
            if text := element.inner_text.strip():
                out.text(text)
            else:
                out.write("[This is preliminary documentation and subject to change.]")

    def reference_row(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("tr", valign="top"):
            with out.tag("td", width="50%"):
                self.cref_link(element.get("cref", ""), out, generics=self.generic_brackets(ctx.language))
            with out.tag("td", width="50%"):
                self.apply_children(element, ctx, out)

    def see(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        if langword := element.get("langword"):
            if spelled := LANGWORDS.get(langword):
                out.write(spelled)
            else:
                with out.tag("b"):
                    out.text(langword)
        elif element.has("cref"):
            self.cref_link(element.get("cref", ""), out, element.inner_text, generics=self.generic_brackets(ctx.language))
        else:
            out.text(element.inner_text)

    def seealso(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        if element.has("cref"):
            self.cref_link(element.get("cref", ""), out, element.inner_text, generics=self.generic_brackets(ctx.language))
        else:
            out.text(element.inner_text)
        out.write("<br />")

    def threadsafety(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        static_safe = parse_bool(element.get("static"))
        instance_safe = parse_bool(element.get("instance"))
        with self.section(self.section_titles["threadsafety"], out), out.tag("p"):
            out.write(
                "Public static (<b>Shared</b> in Visual Basic) members of this type are "
                f"{'safe' if static_safe else '<b>not</b> guaranteed to be safe'} for multithreaded operations. "
            )
            out.write(f"Instance members are {'' if instance_safe else '<b>not</b> '}guaranteed to be thread-safe.")

    # -- page structure ----------------------------------------------------

    def banner(self, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("div", id="nsbanner"):
            with out.tag("div", id="bannerrow1"):
                out.write('<span class="bannertitle">Reference Library</span>')
            with out.tag("div", id="TitleRow"), out.tag("h1", "dtH1"):
                if ctx.declaration is None:
                    out.write("&nbsp;")
                else:
                    out.text(self.page_title(ctx.declaration))

    def begin_main(self, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write('<div id="nstext">')

    def open_section(self, title: str, out: HtmlWriter) -> None:
        with out.tag("h4", "dtH4"):
            out.text(title)

    def close_section(self, out: HtmlWriter) -> None:
        pass

    def open_reference_table(self, tag_name: str, out: HtmlWriter) -> None:
        out.write(_TABLE_OPEN)
        out.write(_REFERENCE_HEADERS[tag_name])

    def close_reference_table(self, out: HtmlWriter) -> None:
        out.write(_TABLE_CLOSE)

    def open_members_table(self, declaration: TypeDeclaration | EnumDeclaration, out: HtmlWriter) -> None:
        out.write(_TABLE_OPEN)
        out.write(_header_row("Member Name", "Description"))

    def close_members_table(self, out: HtmlWriter) -> None:
        out.write(_TABLE_CLOSE)

    def member_row(self, member: Declaration, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("tr", valign="top"):
            with out.tag("td", width="50%"):
                out.link("#", title_name(member))
            with out.tag("td", width="50%"):
                self.member_summary(member.doc_comment, ctx, out)

    def enum_member_row(self, name: str, doc_comment: str | None, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("tr", valign="top"):
            with out.tag("td", width="50%"), out.tag("b"):
                out.text(name)
            with out.tag("td", width="50%"):
                self.member_summary(doc_comment, ctx, out)


__all__ = ["LANGWORDS", "MsdnEngine"]
