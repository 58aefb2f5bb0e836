"""Sandcastle "Prototype" documentation style.

Language-specific fragments (keywords from ``<see langword>``, generic
brackets in derived link text) are emitted once per language as sibling
``cs`` / ``vb`` / ``cpp`` spans; the page's language selector hides all
but one.
"""

from types import MappingProxyType

from doc_preview_core.comments import ElementNode
from doc_preview_core.declarations import Declaration, EnumDeclaration, TypeDeclaration
from doc_preview_core.syntax import HtmlWriter, title_name
from doc_preview_core.syntax.lookup import LANGUAGE_FILTER_OPTIONS, LANGUAGE_NAMES

from .context import RenderContext
from .engine import TagHandler, TransformEngine, parse_bool


def _language_spans(csharp: str, basic: str, cpp: str) -> str:
    return f'<span class="cs">{csharp}</span><span class="vb">{basic}</span><span class="cpp">{cpp}</span>'


_NULL = _language_spans("null", "Nothing", "nullptr")
_STATIC = _language_spans("static", "Shared", "static")
_VIRTUAL = _language_spans("virtual", "Overridable", "virtual")
_TRUE = _language_spans("true", "True", "true")
_FALSE = _language_spans("false", "False", "false")
_ABSTRACT = _language_spans("abstract", "MustInherit", "abstract")

LANGWORDS = MappingProxyType({
    "null": _NULL,
    "Nothing": _NULL,
    "nullptr": _NULL,
    "static": _STATIC,
    "Shared": _STATIC,
    "virtual": _VIRTUAL,
    "Overridable": _VIRTUAL,
    "true": _TRUE,
    "True": _TRUE,
    "false": _FALSE,
    "False": _FALSE,
    "abstract": _ABSTRACT,
    "MustInherit": _ABSTRACT,
})

_GENERIC_OPEN = _language_spans("&lt;", "(Of ", "&lt;")
_GENERIC_CLOSE = _language_spans("&gt;", ")", "&gt;")

_MEMBER_FILTER = (
    '<table class="filter"><tr class="tabs" id="memberTabs">'
    '<td class="tab" value="all">All Members</td><td class="tab" value="constructor">Constructors</td>'
    '<td class="tab" value="method">Methods</td><td class="tab" value="property">Properties</td>'
    '<td class="tab" value="field">Fields</td><td class="tab" value="event">Events</td>'
    "</tr><tr>"
    '<td class="line" colspan="2"><label for="public"><input id="public" type="checkbox" checked="true" disabled="true" />Public</label><br />'
    '<label for="protected"><input id="protected" type="checkbox" checked="true" disabled="true" />Protected</label></td>'
    '<td class="line" colspan="2"><label for="instance"><input id="instance" type="checkbox" checked="true" disabled="true" />Instance</label><br />'
    '<label for="static"><input id="static" type="checkbox" checked="true" disabled="true" />Static</label></td>'
    '<td class="line" colspan="2"><label for="declared"><input id="declared" type="checkbox" checked="true" disabled="true" />Declared</label><br />'
    '<label for="inherited"><input id="inherited" type="checkbox" checked="true" disabled="true" />Inherited</label></td>'
    "</tr></table>"
)

_REFERENCE_TABLES = MappingProxyType({
    "exception": (
        '<table class="exceptions"><tr><th class="exceptionNameColumn">Exception</th>'
        '<th class="exceptionConditionColumn">Condition</th></tr>'
    ),
    "permission": (
        '<table class="permissions"><tr><th class="permissionNameColumn">Permission</th>'
        '<th class="permissionDescriptionColumn">Description</th></tr>'
    ),
})


def generic_spans(name: str) -> str:
    """Replace ``{``/``}`` in an escaped member name with per-language generic brackets."""
    return name.replace("{", _GENERIC_OPEN).replace("}", _GENERIC_CLOSE)


class SandcastlePrototypeEngine(TransformEngine):
    """Renders documentation in the Sandcastle "Prototype" style."""

    style_name = "sandcastle_prototype"
    page_template = "sandcastle_prototype.html.jinja2"
    section_titles = MappingProxyType({
        "syntax": "Declaration Syntax",
        "typeparam": "Generic Template Parameters",
        "param": "Parameters",
        "value": "Value",
        "returns": "Return Value",
        "members": "Members",
        "remarks": "Remarks",
        "threadsafety": "Thread Safety",
        "example": "Examples",
        "permission": "Permissions",
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
            "paramref": self.paramref,
            "permission": self.reference_row,
            "preliminary": self.preliminary,
            "remarks": self.titled_section,
            "returns": self.titled_section,
            "see": self.see,
            "seealso": self.seealso,
            "summary": self.summary,
            "threadsafety": self.threadsafety,
            "typeparam": self.typeparam,
            "typeparamref": self.typeparamref,
            "value": self.titled_section,
        }

    # -- tags --------------------------------------------------------------

    def c(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("span", "code"):
            self.apply_children(element, ctx, out)

    def code(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        # No lang or escaped attributes, no tab expansion.
        with out.tag("div", "code"), out.tag("pre"):
            out.text(element.inner_text)

    def list_block(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        match element.get("type"):
            case "table":
                with out.tag("table", "authoredTable"):
                    for header in element.elements("listheader"):
                        with out.tag("tr"):
                            for column in header.elements():
                                with out.tag("th"):
                                    self.apply_children(column, ctx, out)
                    for item in element.elements("item"):
                        with out.tag("tr"):
                            for column in item.elements():
                                with out.tag("td"):
                                    self.apply_children(column, ctx, out)
                                    out.write("<br/>")
            case "bullet":
                self._list_items(element, "ul", ctx, out)
            case "number":
                self._list_items(element, "ol", ctx, out)
            case _:
                out.text(element.inner_text)

    def _list_items(self, element: ElementNode, list_tag: str, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag(list_tag):
            for item in element.elements("item"):
                with out.tag("li"):
                    for child in item.children:
                        self.apply_templates(child, ctx, out)

    def note(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        # All note types render the same way.
        with out.tag("div", "alert"):
            out.write(" <b>Note:</b>")
            self.apply_children(element, ctx, out)

    def para(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("p"):
            self.apply_children(element, ctx, out)

    def param(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        name = element.get("name", "")
        with out.tag("dt"), out.tag("span", "parameter"):
            out.text(name)
            if param_type := ctx.parameter_type(name):
                out.write(" (")
                out.link("#", param_type)
                out.write(")")
        with out.tag("dd"):
            self.apply_children(element, ctx, out)

    def paramref(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("span", "parameter"):
            out.text(element.get("name"))

    def preliminary(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        # The element's own text is not shown.
        out.write('<div class="preliminary">This API is preliminary and subject to change.</div>')

    def reference_row(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        """One ``exception`` or ``permission`` table row."""
        with out.tag("tr"):
            with out.tag("td"):
                self.cref_link(element.get("cref", ""), out)
            with out.tag("td"):
                self.apply_children(element, ctx, out)

    def see(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        if langword := element.get("langword"):
            with out.tag("span", "keyword"):
                if spans := LANGWORDS.get(langword):
                    out.write(spans)
                else:
                    out.text(langword)
        elif element.has("cref"):
            self.cref_link(element.get("cref", ""), out, element.inner_text, generics=generic_spans)
        else:
            out.text(element.inner_text)

    def seealso(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        if element.has("cref"):
            self.cref_link(element.get("cref", ""), out, element.inner_text, generics=generic_spans)
        else:
            with out.tag("span", "nolink"):
                out.text(element.inner_text)
        out.write("<br />")

    def summary(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("div", "summary"):
            self.apply_children(element, ctx, out)

    def threadsafety(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        static_safe = parse_bool(element.get("static"))
        instance_safe = parse_bool(element.get("instance"))
        with self.section(self.section_titles["threadsafety"], out):
            out.write(f"Static members of this type are {'' if static_safe else 'not '}safe for multi-threaded operations. ")
            out.write(f"Instance members of this type are {'' if instance_safe else 'not '}safe for multi-threaded operations. ")

    def typeparam(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("dt"), out.tag("span", "parameter"):
            out.text(element.get("name"))
        with out.tag("dd"):
            self.apply_children(element, ctx, out)

    def typeparamref(self, element: ElementNode, ctx: RenderContext, out: HtmlWriter) -> None:
        with out.tag("span", "typeparameter"):
            out.text(element.get("name"))

    # -- page structure ----------------------------------------------------

    def banner(self, ctx: RenderContext, out: HtmlWriter) -> None:
        declaration = ctx.declaration
        out.write(
            '<script type="text/javascript">'
            "registerEventHandler(window, 'load', function() { var ss = new SplitScreen('control', 'main'); });"
            "</script>"
        )
        with out.tag("div", id="control"):
            out.write('<span class="productTitle">Reference Library</span><br />')
            with out.tag("span", "topicTitle"):
                if declaration is None:
                    out.write("&nbsp;")
                else:
                    out.text(self.page_title(declaration))
            out.write("<br />")
            with out.tag("div", id="toolbar"):
                with out.tag("span", id="chickenFeet"):
                    if declaration is None:
                        out.write("&nbsp;")
                    else:
                        self._breadcrumbs(declaration, out)
                with out.tag("span", id="languageFilter"), out.tag("select", id="languageSelector"):
                    if declaration is None:
                        out.write('<option value="x">--</option>')
                    else:
                        with out.tag("option", value=LANGUAGE_FILTER_OPTIONS[ctx.language]):
                            out.text(LANGUAGE_NAMES[ctx.language])

    def _breadcrumbs(self, declaration: Declaration, out: HtmlWriter) -> None:
        out.link("#", "Namespaces")
        if declaration.namespace:
            out.write(" &#x25ba; ")
            out.link("#", declaration.namespace)
            out.write(" ")
        out.write("&#x25ba; ")
        if declaration.parent_name and not isinstance(declaration, TypeDeclaration | EnumDeclaration):
            out.link("#", declaration.parent_name)
            out.write(" &#x25ba; ")
        with out.tag("span", "nolink"):
            out.text(declaration.name)

    def begin_main(self, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write('<div id="main"><div id="header">This is experimental documentation.</div>')

    def open_section(self, title: str, out: HtmlWriter) -> None:
        out.write('<div class="section"><div class="sectionTitle">')
        out.text(title)
        out.write('</div><div class="sectionContent">')

    def close_section(self, out: HtmlWriter) -> None:
        out.write("</div></div>")

    def open_reference_table(self, tag_name: str, out: HtmlWriter) -> None:
        out.write(_REFERENCE_TABLES[tag_name])

    def open_members_table(self, declaration: TypeDeclaration | EnumDeclaration, out: HtmlWriter) -> None:
        if isinstance(declaration, TypeDeclaration):
            out.write(_MEMBER_FILTER)
            out.write('<table class="members" id="memberList"><tr><th class="iconColumn">Icon</th>')
        else:
            out.write('<table class="members" id="memberList"><tr>')
        out.write('<th class="nameColumn">Member</th><th class="descriptionColumn">Description</th></tr>')

    def member_row(self, member: Declaration, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write("<tr><td>&nbsp;</td><td>")
        out.link("#", title_name(member))
        out.write("</td><td>")
        self.member_summary(member.doc_comment, ctx, out)
        out.write("</td></tr>")

    def enum_member_row(self, name: str, doc_comment: str | None, ctx: RenderContext, out: HtmlWriter) -> None:
        out.write("<tr><td><b>")
        with out.tag("span", "selflink"):
            out.text(name)
        out.write("</b></td><td>")
        self.member_summary(doc_comment, ctx, out)
        out.write("<br /></td></tr>")


__all__ = ["LANGWORDS", "SandcastlePrototypeEngine", "generic_spans"]
