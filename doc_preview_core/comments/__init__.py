"""Documentation comment tree, parser and include expansion."""

from .includes import INCLUDE_TAG, process_includes
from .nodes import ElementNode, Node, TextNode
from .parser import ERROR_TAG, ROOT_TAG, error_nodes, from_etree, parse_comment

__all__ = [
    "ERROR_TAG",
    "ElementNode",
    "INCLUDE_TAG",
    "Node",
    "ROOT_TAG",
    "TextNode",
    "error_nodes",
    "from_etree",
    "parse_comment",
    "process_includes",
]
