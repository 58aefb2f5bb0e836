"""Short display names for documentation member keys (``cref`` values).

A member key looks like ``M:Acme.Collections.Bag{T}.Add(`0,System.Int32)``:
an optional one-letter kind prefix, a dotted path, an optional parameter
list. The display name is the last path segment without its parameters.
Generic arguments in braces are kept so callers can render them per
language; arity suffixes such as ```2`` are dropped.
"""

import re

_KIND_PREFIX = re.compile(r"^[A-Z!]:")
_ARITY = re.compile(r"``?\d+")

CONSTRUCTOR_SEGMENTS = frozenset({"#ctor", "#cctor"})


def _split_path(path: str) -> list[str]:
    """Split on dots that are not inside generic braces."""
    segments: list[str] = []
    depth = 0
    current: list[str] = []
    for char in path:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(depth - 1, 0)
        elif char == "." and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)
    segments.append("".join(current))
    return [s for s in segments if s]


def strip_kind(cref: str) -> str:
    """``T:System.String`` -> ``System.String``."""
    return _KIND_PREFIX.sub("", cref.strip(), count=1)


def get_name(cref: str | None) -> str:
    """Display name for a member key.

    >>> get_name("M:Acme.Widget.Resize(System.Int32)")
    'Resize'
    >>> get_name("M:Acme.Widget.#ctor")
    'Widget'
    >>> get_name("T:System.Collections.Generic.List{T}")
    'List{T}'
    """
    if not cref:
        return ""
    path = strip_kind(cref)
    if (paren := path.find("(")) >= 0:
        path = path[:paren]
    path = _ARITY.sub("", path)
    segments = _split_path(path)
    if not segments:
        return ""
    name = segments[-1]
    if name in CONSTRUCTOR_SEGMENTS and len(segments) > 1:
        name = segments[-2]
    return name


__all__ = ["get_name", "strip_kind"]
