"""Single-slot holder for the most recently rendered preview page."""

import threading

EMPTY_CONTENT = "&nbsp;"


class ContentSlot:
    """Thread-safe reference to the last complete page.

    The renderer replaces the page in one step; request handlers on other
    threads always read either the previous page or the new one.
    """

    def __init__(self, content: str | None = None):
        self._lock = threading.Lock()
        self._content = content

    def get(self) -> str | None:
        with self._lock:
            return self._content

    def set(self, content: str | None) -> None:
        with self._lock:
            self._content = content

    def clear(self) -> None:
        self.set(None)

    def body(self) -> str:
        """Content to serve: the last page, or a non-breaking space placeholder."""
        return self.get() or EMPTY_CONTENT


__all__ = ["EMPTY_CONTENT", "ContentSlot"]
