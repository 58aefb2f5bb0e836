"""Append-only HTML output sink shared by the syntax generator and the style engines.

Raw markup goes through ``write``; anything that came from a declaration or a
comment goes through ``text`` or the wrapping helpers, which escape it. The
wrapping helpers write nothing at all for empty content.
"""

import html
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


def _start_tag(name: str, css_class: str | None, attrs: Mapping[str, str]) -> str:
    rendered = f' class="{html.escape(css_class, quote=True)}"' if css_class else ""
    rendered += "".join(f' {key}="{html.escape(value, quote=True)}"' for key, value in attrs.items())
    return f"<{name}{rendered}>"


class HtmlWriter:
    """Collects HTML fragments and tracks open tags.

    Every ``begin_tag`` must be matched by one ``end_tag``; the ``tag``
    context manager pairs them on every exit path.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._open: list[str] = []

    @property
    def open_tags(self) -> tuple[str, ...]:
        return tuple(self._open)

    def write(self, markup: str) -> None:
        """Append markup verbatim. Callers are responsible for its safety."""
        if markup:
            self._parts.append(markup)

    def text(self, value: str | None) -> None:
        """Append HTML-escaped text."""
        if value:
            self._parts.append(html.escape(value, quote=False))

    def begin_tag(self, name: str, css_class: str | None = None, **attrs: str) -> None:
        self._parts.append(_start_tag(name, css_class, attrs))
        self._open.append(name)

    def end_tag(self) -> None:
        if not self._open:
            raise RuntimeError("end_tag() called with no open tag")
        self._parts.append(f"</{self._open.pop()}>")

    @contextmanager
    def tag(self, name: str, css_class: str | None = None, **attrs: str) -> Iterator[None]:
        """Open a tag for the duration of the block."""
        self.begin_tag(name, css_class, **attrs)
        try:
            yield
        finally:
            self.end_tag()

    def element(
        self,
        name: str,
        css_class: str | None,
        content: str | None,
        before: str = "",
        after: str = " ",
    ) -> bool:
        """Write ``before<name class=css_class>content</name>after``.

        Nothing is written when ``content`` is empty. ``before`` and
        ``after`` are raw markup. Returns whether anything was written.
        """
        if not content:
            return False
        self.write(before)
        with self.tag(name, css_class):
            self.text(content)
        self.write(after)
        return True

    def span(self, css_class: str, content: str | None, before: str = "", after: str = " ") -> bool:
        return self.element("span", css_class, content, before, after)

    def div(self, css_class: str, content: str | None, before: str = "", after: str = "") -> bool:
        return self.element("div", css_class, content, before, after)

    def link(self, href: str, content: str | None) -> bool:
        """Write an anchor around escaped ``content``; no-op for empty content."""
        if not content:
            return False
        with self.tag("a", href=href):
            self.text(content)
        return True

    def getvalue(self) -> str:
        return "".join(self._parts)


__all__ = ["HtmlWriter"]
