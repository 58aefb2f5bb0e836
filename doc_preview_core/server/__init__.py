"""Preview content holder and HTTP server."""

from .content import EMPTY_CONTENT, ContentSlot
from .web_server import PreviewServer, create_app

__all__ = ["EMPTY_CONTENT", "ContentSlot", "PreviewServer", "create_app"]
