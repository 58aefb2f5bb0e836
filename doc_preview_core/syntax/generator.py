"""Syntax preview generator.

Converts a declaration into an HTML snippet showing its signature spelled in
the target language, e.g. for a C# generic class::

    <div class="code cs">
      <div class="attributes"><div class="attribute">[<a href="#">Serializable</a>]</div></div>
      <div class="member">
        <span class="keyword">public</span> <span class="keyword">abstract</span>
        <span class="keyword">class</span> <span class="identifier">Repository</span>
        <div class="typeparameters">&lt;<span class="typeparameter">T</span>&gt;</div>
        <div class="constraints"><div class="constraint"><span class="keyword">where</span>
          <span class="typeparameter">T</span> : <a href="#">IEntity</a></div></div>
      </div>
    </div>

Whitespace above is for readability only. Attribute arguments are never
rendered, and named-type constraints show only the bare type name.
"""

from doc_preview_core.declarations import (
    Declaration,
    EnumDeclaration,
    EventDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    NamedTypeConstraint,
    Parameter,
    ParameterModifier,
    PropertyDeclaration,
    TypeDeclaration,
    TypeParameter,
    TypeParameterConstraint,
)
from doc_preview_core.exceptions import PreviewArgumentError
from doc_preview_core.options import SupportedLanguage

from .css import PreviewCss
from .lookup import LANGUAGE_CSS, LANGUAGE_NOT_SUPPORTED, element_type, visibility
from .writer import HtmlWriter

_BASIC_PARAMETER_MODIFIERS = {
    ParameterModifier.NONE: "ByVal",
    ParameterModifier.REF: "ByRef",
    ParameterModifier.OUT: "ByRef",
    ParameterModifier.PARAMS: "ParamArray",
}


class SyntaxGenerator:
    """Renders the signature block for one declaration in one language."""

    def __init__(self, declaration: Declaration | None, language: SupportedLanguage):
        if declaration is None:
            raise PreviewArgumentError("A declaration is required to generate a syntax preview")
        self.declaration = declaration
        self.language = SupportedLanguage(language)

    @property
    def is_basic(self) -> bool:
        return self.language == SupportedLanguage.BASIC

    @property
    def show_constraints_inline(self) -> bool:
        """VB spells constraints inside the type parameter list; C# after the signature."""
        return self.is_basic

    def generate(self) -> str:
        out = HtmlWriter()
        css_class = PreviewCss.CODE
        if suffix := LANGUAGE_CSS[self.language]:
            css_class = f"{css_class} {suffix}"
        with out.tag("div", css_class):
            if self.language == SupportedLanguage.NONE:
                out.text(LANGUAGE_NOT_SUPPORTED)
            else:
                self._attributes(out)
                with out.tag("div", PreviewCss.MEMBER):
                    self._member(out)
        return out.getvalue()

    def _member(self, out: HtmlWriter) -> None:
        match self.declaration:
            case EnumDeclaration() as enum:
                self._enumeration(out, enum)
            case TypeDeclaration() as type_decl:
                self._type(out, type_decl)
            case MethodDeclaration() as method:
                self._method(out, method)
            case PropertyDeclaration() as prop:
                self._property(out, prop)
            case FieldDeclaration() as field:
                self._field(out, field)
            case EventDeclaration() as event:
                self._event(out, event)

    # -- shared pieces -----------------------------------------------------

    def _keyword(self, out: HtmlWriter, csharp: str, basic: str) -> None:
        out.span(PreviewCss.KEYWORD, basic if self.is_basic else csharp)

    def _visibility(self, out: HtmlWriter, declaration: Declaration) -> None:
        out.span(PreviewCss.KEYWORD, visibility(self.language, declaration.visibility))

    def _identifier(self, out: HtmlWriter, name: str) -> None:
        out.span(PreviewCss.IDENTIFIER, name, after="")

    def _type_reference(self, out: HtmlWriter, type_name: str | None, after: str = " ") -> None:
        if not type_name:
            return
        with out.tag("span", PreviewCss.KEYWORD):
            out.link("#", type_name)
        out.write(after)

    def _basic_as_type(self, out: HtmlWriter, type_name: str | None) -> None:
        if type_name:
            out.span(PreviewCss.KEYWORD, "As", before=" ")
            self._type_reference(out, type_name, after="")

    def _attributes(self, out: HtmlWriter) -> None:
        attributes = self.declaration.attributes
        if not attributes:
            return
        with out.tag("div", PreviewCss.ATTRIBUTES):
            for attribute in attributes:
                with out.tag("div", PreviewCss.ATTRIBUTE):
                    out.write("&lt;" if self.is_basic else "[")
                    out.link("#", attribute.name)
                    out.write("&gt; _" if self.is_basic else "]")

    def _member_modifiers(self, out: HtmlWriter, declaration: MethodDeclaration | PropertyDeclaration) -> None:
        """Exclusive static / abstract / override / virtual modifiers of a type member."""
        if declaration.is_static:
            self._keyword(out, "static", "Shared")
        elif declaration.is_abstract:
            self._keyword(out, "abstract", "MustOverride")
        elif declaration.is_override:
            if declaration.is_sealed:
                self._keyword(out, "sealed", "NotOverridable")
            self._keyword(out, "override", "Overrides")
        elif declaration.is_virtual:
            self._keyword(out, "virtual", "Overridable")

    def _new_modifier_csharp(self, out: HtmlWriter, declaration: Declaration) -> None:
        if not self.is_basic and declaration.is_new:
            out.span(PreviewCss.KEYWORD, "new")

    def _shadows_modifier_basic(self, out: HtmlWriter, declaration: Declaration) -> None:
        if self.is_basic and declaration.is_new:
            out.span(PreviewCss.KEYWORD, "Shadows")

    # -- declaration kinds -------------------------------------------------

    def _enumeration(self, out: HtmlWriter, enum: EnumDeclaration) -> None:
        self._visibility(out, enum)
        out.span(PreviewCss.KEYWORD, element_type(self.language, enum))
        self._identifier(out, enum.name)
        if enum.underlying_type:
            if self.is_basic:
                out.span(PreviewCss.KEYWORD, "As", before=" ", after=" ")
            else:
                out.write(" : ")
            out.span(PreviewCss.KEYWORD, enum.underlying_type, after="")

    def _type(self, out: HtmlWriter, type_decl: TypeDeclaration) -> None:
        self._new_modifier_csharp(out, type_decl)
        self._visibility(out, type_decl)
        self._shadows_modifier_basic(out, type_decl)
        if type_decl.is_static:
            # VB has no static classes; modules are a separate construct.
            if not self.is_basic:
                out.span(PreviewCss.KEYWORD, "static")
        elif type_decl.is_abstract:
            self._keyword(out, "abstract", "MustInherit")
        elif type_decl.is_sealed:
            self._keyword(out, "sealed", "NotInheritable")
        out.span(PreviewCss.KEYWORD, element_type(self.language, type_decl))
        self._identifier(out, type_decl.name)
        self._type_parameters(out, type_decl.type_parameters)
        self._constraints_post_signature(out, type_decl.type_parameters)

    def _method(self, out: HtmlWriter, method: MethodDeclaration) -> None:
        self._new_modifier_csharp(out, method)
        self._visibility(out, method)
        self._shadows_modifier_basic(out, method)
        self._member_modifiers(out, method)
        if self.is_basic:
            out.span(PreviewCss.KEYWORD, element_type(self.language, method))
            self._identifier(out, "New" if method.is_constructor else method.name)
        elif method.is_constructor:
            self._identifier(out, method.parent_name or method.name)
        else:
            self._type_reference(out, method.return_type or "void")
            self._identifier(out, method.name)
        if not method.is_constructor:
            self._type_parameters(out, method.type_parameters)
        self._parameters(out, method.parameters)
        if self.is_basic and method.returns_value:
            self._basic_as_type(out, method.return_type)
        if not method.is_constructor:
            self._constraints_post_signature(out, method.type_parameters)

    def _property(self, out: HtmlWriter, prop: PropertyDeclaration) -> None:
        self._new_modifier_csharp(out, prop)
        self._visibility(out, prop)
        self._shadows_modifier_basic(out, prop)
        self._member_modifiers(out, prop)
        if self.is_basic:
            if prop.is_indexer:
                out.span(PreviewCss.KEYWORD, "Default")
            if prop.has_getter and not prop.has_setter:
                out.span(PreviewCss.KEYWORD, "ReadOnly")
            elif prop.has_setter and not prop.has_getter:
                out.span(PreviewCss.KEYWORD, "WriteOnly")
            out.span(PreviewCss.KEYWORD, element_type(self.language, prop))
            self._identifier(out, "Item" if prop.is_indexer and prop.name == "this" else prop.name)
            if prop.is_indexer:
                self._parameters(out, prop.parameters)
            self._basic_as_type(out, prop.property_type)
            return

        self._type_reference(out, prop.property_type)
        if prop.is_indexer:
            out.span(PreviewCss.KEYWORD, "this", after="")
            self._parameters(out, prop.parameters, opening="[", closing="]")
        else:
            self._identifier(out, prop.name)
        out.write(" {")
        for accessor, present in (("get", prop.has_getter), ("set", prop.has_setter)):
            if present:
                out.span(PreviewCss.KEYWORD, accessor, before=" ", after=";")
        out.write(" }")

    def _field(self, out: HtmlWriter, field: FieldDeclaration) -> None:
        self._new_modifier_csharp(out, field)
        self._visibility(out, field)
        self._shadows_modifier_basic(out, field)
        if field.is_const:
            self._keyword(out, "const", "Const")
        elif field.is_static:
            self._keyword(out, "static", "Shared")
        if field.is_readonly and not field.is_const:
            self._keyword(out, "readonly", "ReadOnly")
        if self.is_basic:
            self._identifier(out, field.name)
            self._basic_as_type(out, field.field_type)
        else:
            self._type_reference(out, field.field_type)
            self._identifier(out, field.name)
        out.span(PreviewCss.LITERAL, field.value, before=" = ", after="")

    def _event(self, out: HtmlWriter, event: EventDeclaration) -> None:
        self._new_modifier_csharp(out, event)
        self._visibility(out, event)
        self._shadows_modifier_basic(out, event)
        if event.is_static:
            self._keyword(out, "static", "Shared")
        out.span(PreviewCss.KEYWORD, element_type(self.language, event))
        if self.is_basic:
            self._identifier(out, event.name)
            self._basic_as_type(out, event.event_type)
        else:
            self._type_reference(out, event.event_type)
            self._identifier(out, event.name)

    # -- parameters and generics -------------------------------------------

    def _parameters(self, out: HtmlWriter, parameters: tuple[Parameter, ...], opening: str = "(", closing: str = ")") -> None:
        line_break = " _<br />" if self.is_basic else "<br />"
        with out.tag("div", PreviewCss.PARAMETERS):
            out.write(opening)
            if parameters:
                out.write(line_break)
                for index, parameter in enumerate(parameters):
                    self._parameter(out, parameter)
                    if index + 1 < len(parameters):
                        out.write(",")
                    out.write(line_break)
            out.write(closing)

    def _parameter(self, out: HtmlWriter, parameter: Parameter) -> None:
        if self.is_basic:
            out.span(PreviewCss.KEYWORD, _BASIC_PARAMETER_MODIFIERS[parameter.modifier])
            out.span(PreviewCss.PARAMETER, parameter.name, after="")
            self._basic_as_type(out, parameter.param_type)
            return
        if parameter.modifier != ParameterModifier.NONE:
            out.span(PreviewCss.KEYWORD, parameter.modifier.value)
        self._type_reference(out, parameter.param_type)
        out.span(PreviewCss.PARAMETER, parameter.name, after="")

    def _type_parameters(self, out: HtmlWriter, type_parameters: tuple[TypeParameter, ...]) -> None:
        if not type_parameters:
            return
        with out.tag("div", PreviewCss.TYPE_PARAMETERS):
            if self.is_basic:
                out.write("(")
                out.span(PreviewCss.KEYWORD, "Of")
            else:
                out.write("&lt;")
            for index, parameter in enumerate(type_parameters):
                out.span(PreviewCss.TYPE_PARAMETER, parameter.name, after="")
                if parameter.constraints:
                    self._constraints_inline(out, parameter)
                if index + 1 < len(type_parameters):
                    out.write(", ")
            out.write(")" if self.is_basic else "&gt;")

    def _constraints_inline(self, out: HtmlWriter, parameter: TypeParameter) -> None:
        if not self.show_constraints_inline or not parameter.constraints:
            return
        constraints = parameter.constraints
        with out.tag("div", PreviewCss.CONSTRAINTS):
            out.span(PreviewCss.KEYWORD, "As", before=" ", after=" ")
            if len(constraints) > 1:
                out.write("{")
            with out.tag("div", PreviewCss.CONSTRAINT):
                self._constraint_list(out, constraints)
            if len(constraints) > 1:
                out.write("}")

    def _constraints_post_signature(self, out: HtmlWriter, type_parameters: tuple[TypeParameter, ...]) -> None:
        if self.show_constraints_inline:
            return
        constrained = [p for p in type_parameters if p.constraints]
        if not constrained:
            return
        with out.tag("div", PreviewCss.CONSTRAINTS):
            for parameter in constrained:
                with out.tag("div", PreviewCss.CONSTRAINT):
                    out.span(PreviewCss.KEYWORD, "where")
                    out.span(PreviewCss.TYPE_PARAMETER, parameter.name)
                    out.write(": ")
                    self._constraint_list(out, parameter.constraints)

    def _constraint_list(self, out: HtmlWriter, constraints: tuple[TypeParameterConstraint, ...]) -> None:
        for index, constraint in enumerate(constraints):
            self._constraint_value(out, constraint)
            if index + 1 < len(constraints):
                out.write(", ")

    def _constraint_value(self, out: HtmlWriter, constraint: TypeParameterConstraint) -> None:
        if isinstance(constraint, NamedTypeConstraint):
            # TODO: render generic arguments of the constraint type (IList<T> shows as IList)
            out.link("#", constraint.type_name)
        else:
            out.span(PreviewCss.KEYWORD, constraint.name, after="")


def generate_syntax(declaration: Declaration | None, language: SupportedLanguage) -> str:
    """Generate the syntax preview HTML for a declaration."""
    return SyntaxGenerator(declaration, language).generate()


__all__ = ["SyntaxGenerator", "generate_syntax"]
