"""Expand ``<include file="..." path="..."/>`` tags before rendering.

``path`` is an XPath expression over the included file, e.g.
``doc/members/member[@name='T:Foo']/*``. Only the ElementTree XPath subset
is supported. Includes that cannot be resolved stay in the tree so the
engine renders its placeholder for them.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from doc_preview_core.logging import get_preview_logger
from doc_preview_core.options import IncludeProcessing

from .nodes import ElementNode, Node
from .parser import from_etree

logger = get_preview_logger(__name__)

INCLUDE_TAG = "include"


def process_includes(root: ElementNode, mode: IncludeProcessing, base_dir: Path | None = None) -> ElementNode:
    """Return a copy of ``root`` with resolvable include tags replaced by the selected nodes.

    Args:
        root: Parsed comment tree.
        mode: NONE leaves the tree untouched, ABSOLUTE only follows absolute
              file paths, RELATIVE also resolves relative paths against ``base_dir``.
        base_dir: Directory for relative paths; defaults to the current directory.
    """
    if mode == IncludeProcessing.NONE:
        return root
    resolver = _IncludeResolver(mode, base_dir or Path.cwd())
    return resolver.expand(root)


class _IncludeResolver:
    def __init__(self, mode: IncludeProcessing, base_dir: Path):
        self._mode = mode
        self._base_dir = base_dir
        self._documents: dict[Path, ET.Element] = {}
        self._expanding: set[tuple[Path, str]] = set()

    def expand(self, element: ElementNode) -> ElementNode:
        return ElementNode(element.name, element.attributes, tuple(self._expand_nodes(element.children)))

    def _expand_nodes(self, nodes: Iterable[Node]) -> list[Node]:
        expanded: list[Node] = []
        for node in nodes:
            if isinstance(node, ElementNode) and node.name == INCLUDE_TAG:
                replacement = self._resolve(node)
                expanded.extend([node] if replacement is None else replacement)
            elif isinstance(node, ElementNode):
                expanded.append(self.expand(node))
            else:
                expanded.append(node)
        return expanded

    def _resolve(self, include: ElementNode) -> list[Node] | None:
        file_attr = include.get("file")
        path_attr = include.get("path")
        if not file_attr or not path_attr:
            return None
        file_path = self._file_path(file_attr)
        if file_path is None:
            logger.debug("Include file %s skipped: relative paths are not processed", file_attr)
            return None
        document = self._load(file_path)
        if document is None:
            return None
        try:
            selected = _select(document, path_attr)
        except SyntaxError as e:
            logger.warning("Invalid include path %r: %s", path_attr, e)
            return None
        key = (file_path.resolve(), path_attr)
        if key in self._expanding:
            logger.warning("Include of %s (%s) includes itself; left unexpanded", file_path, path_attr)
            return None
        self._expanding.add(key)
        try:
            return self._expand_nodes(from_etree(node) for node in selected)
        finally:
            self._expanding.discard(key)

    def _file_path(self, file_attr: str) -> Path | None:
        path = Path(file_attr)
        if path.is_absolute():
            return path
        if self._mode == IncludeProcessing.RELATIVE:
            return self._base_dir / path
        return None

    def _load(self, file_path: Path) -> ET.Element | None:
        if file_path not in self._documents:
            try:
                self._documents[file_path] = ET.parse(file_path).getroot()
            except (OSError, ET.ParseError) as e:
                logger.warning("Cannot load include file %s: %s", file_path, e)
                return None
        return self._documents[file_path]


def _select(document: ET.Element, path: str) -> list[ET.Element]:
    """Evaluate an include path from the document node: the first step names the root element."""
    root_step, _, rest = path.strip().lstrip("/").partition("/")
    if root_step not in (document.tag, "*"):
        return []
    if not rest:
        return [document]
    return document.findall(rest)


__all__ = ["INCLUDE_TAG", "process_includes"]
