"""Parse raw documentation comment XML into an immutable node tree.

The comment body is wrapped in a ``member`` root, matching the layout of
compiler-generated documentation files. Malformed XML yields a root holding
a single ``error`` marker so the page can still show what went wrong;
``strict=True`` raises instead.
"""

import xml.etree.ElementTree as ET

from doc_preview_core.exceptions import CommentParseError
from doc_preview_core.logging import get_preview_logger

from .nodes import ElementNode, Node, TextNode

logger = get_preview_logger(__name__)

ROOT_TAG = "member"
ERROR_TAG = "error"


def from_etree(element: ET.Element) -> ElementNode:
    """Convert an ElementTree element (text/tail layout) into an ElementNode."""
    children: list[Node] = []
    if element.text:
        children.append(TextNode(element.text))
    for child in element:
        children.append(from_etree(child))
        if child.tail:
            children.append(TextNode(child.tail))
    return ElementNode(str(element.tag), tuple(element.attrib.items()), tuple(children))


def parse_comment(text: str, *, member_name: str | None = None, strict: bool = False) -> ElementNode:
    """Parse documentation comment XML into a ``member`` rooted tree.

    Args:
        text: Comment body, e.g. ``<summary>Adds.</summary><param name="a">A.</param>``.
              A body that already has a single ``member`` root is used as is.
        member_name: Optional value for the root's ``name`` attribute.
        strict: Raise CommentParseError on malformed XML instead of
                returning an error marker.
    """
    try:
        wrapper = from_etree(ET.fromstring(f"<{ROOT_TAG}>{text}</{ROOT_TAG}>"))
    except ET.ParseError as e:
        if strict:
            raise CommentParseError(f"Malformed documentation comment: {e}") from e
        logger.warning("Malformed documentation comment: %s", e)
        error = ElementNode(ERROR_TAG, (("message", str(e)),), (TextNode(text),) if text else ())
        return _with_name(ElementNode(ROOT_TAG, (), (error,)), member_name)

    root = _unwrap_member(wrapper)
    return _with_name(root, member_name)


def _unwrap_member(wrapper: ElementNode) -> ElementNode:
    """Return the inner ``member`` element when the body already had one."""
    inner = wrapper.elements()
    stray_text = any(isinstance(c, TextNode) and c.text.strip() for c in wrapper.children)
    if len(inner) == 1 and inner[0].name == ROOT_TAG and not stray_text:
        return inner[0]
    return wrapper


def _with_name(root: ElementNode, member_name: str | None) -> ElementNode:
    if member_name is None:
        return root
    attributes = tuple((k, v) for k, v in root.attributes if k != "name") + (("name", member_name),)
    return ElementNode(root.name, attributes, root.children)


def error_nodes(root: ElementNode) -> list[ElementNode]:
    """Top-level error markers left by the parser."""
    return root.elements(ERROR_TAG)


__all__ = ["ERROR_TAG", "ROOT_TAG", "error_nodes", "from_etree", "parse_comment"]
