"""Per-render state handed to every tag handler."""

from collections.abc import Callable
from dataclasses import dataclass, field

from doc_preview_core.declarations import Declaration, MethodDeclaration, PropertyDeclaration
from doc_preview_core.options import OptionSet, SupportedLanguage


@dataclass
class RenderContext:
    """State of one top-level render.

    Created fresh for every ``transform`` call and discarded afterwards, so
    the memoized syntax block can never leak from one declaration to the
    next.
    """

    declaration: Declaration | None
    language: SupportedLanguage
    options: OptionSet = field(default_factory=OptionSet)
    _member_syntax: str | None = field(default=None, init=False, repr=False)

    @property
    def has_member_syntax(self) -> bool:
        return self._member_syntax is not None

    def member_syntax(self, build: Callable[[], str]) -> str:
        """Return the syntax block, calling ``build`` only on first use."""
        if self._member_syntax is None:
            self._member_syntax = build()
        return self._member_syntax

    def parameter_type(self, name: str | None) -> str | None:
        """Declared type of a parameter of the rendered member, if it has one by that name."""
        if not name or not isinstance(self.declaration, MethodDeclaration | PropertyDeclaration):
            return None
        for parameter in self.declaration.parameters:
            if parameter.name == name:
                return parameter.param_type
        return None


__all__ = ["RenderContext"]
