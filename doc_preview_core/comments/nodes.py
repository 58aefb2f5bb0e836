"""Immutable documentation comment tree.

Element nodes keep their attributes and mixed content in document order;
text nodes carry raw (unescaped) text.
"""

import html
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextNode:
    """Character data between elements."""

    text: str


@dataclass(frozen=True, slots=True)
class ElementNode:
    """Documentation tag with ordered attributes and children."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple["Node", ...] = ()

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return an attribute value, or ``default`` when absent."""
        for attr_name, value in self.attributes:
            if attr_name == key:
                return value
        return default

    def has(self, key: str) -> bool:
        return any(attr_name == key for attr_name, _ in self.attributes)

    @property
    def is_empty(self) -> bool:
        """True when the element has no inner content at all."""
        return not self.children

    @property
    def inner_text(self) -> str:
        """Concatenated text of all descendant text nodes."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            else:
                parts.append(child.inner_text)
        return "".join(parts)

    def elements(self, name: str | None = None) -> list["ElementNode"]:
        """Direct child elements, optionally filtered by tag name."""
        return [c for c in self.children if isinstance(c, ElementNode) and (name is None or c.name == name)]

    def first(self, name: str) -> "ElementNode | None":
        for child in self.elements(name):
            return child
        return None

    def iter_descendants(self, name: str | None = None) -> Iterator["ElementNode"]:
        """Depth-first walk over descendant elements (not including self)."""
        for child in self.children:
            if isinstance(child, ElementNode):
                if name is None or child.name == name:
                    yield child
                yield from child.iter_descendants(name)

    def count_descendants(self, name: str) -> int:
        return sum(1 for _ in self.iter_descendants(name))

    def to_xml(self) -> str:
        """Serialize back to XML text."""
        attrs = "".join(f' {key}="{html.escape(value, quote=True)}"' for key, value in self.attributes)
        if self.is_empty:
            return f"<{self.name}{attrs}/>"
        inner = "".join(html.escape(c.text, quote=False) if isinstance(c, TextNode) else c.to_xml() for c in self.children)
        return f"<{self.name}{attrs}>{inner}</{self.name}>"


Node = ElementNode | TextNode


__all__ = ["ElementNode", "Node", "TextNode"]
