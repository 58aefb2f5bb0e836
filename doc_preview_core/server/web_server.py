"""Minimal HTTP server that serves the last rendered preview page.

Every request, whatever its method or path, gets the same response: the
current content of the ``ContentSlot`` as UTF-8 HTML. There is no routing.
"""

import threading
import time
from collections.abc import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response

from doc_preview_core.exceptions import ServerError
from doc_preview_core.logging import get_preview_logger

from .content import ContentSlot

logger = get_preview_logger(__name__)

_STARTUP_TIMEOUT = 5.0


def create_app(slot: ContentSlot) -> FastAPI:
    """FastAPI app answering every request with the slot's content."""
    app = FastAPI(
        title="Doc Preview",
        description="Serves the most recently rendered documentation preview",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Runs ahead of routing: every method and path gets the page.
    @app.middleware("http")
    async def serve_preview(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        payload = slot.body().encode("utf-8")
        logger.debug("Sending %d bytes of content for %s %s", len(payload), request.method, request.url.path)
        return Response(content=payload, media_type="text/html; charset=utf-8")

    return app


class PreviewServer:
    """Runs the preview app with uvicorn on a background thread."""

    def __init__(self, slot: ContentSlot | None = None, host: str = "127.0.0.1", port: int = 11235):
        self.slot = slot or ContentSlot()
        self.host = host
        self.port = port
        self.app = create_app(self.slot)
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @property
    def is_listening(self) -> bool:
        return self._server is not None and self._server.started and not self._server.should_exit

    @property
    def content(self) -> str | None:
        return self.slot.get()

    @content.setter
    def content(self, value: str | None) -> None:
        self.slot.set(value)

    def start(self) -> None:
        """Start serving; a no-op when already listening."""
        if self._thread is not None and self._thread.is_alive():
            return
        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_config=None, access_log=False)
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name="doc-preview-server", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + _STARTUP_TIMEOUT
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                self._server.should_exit = True
                raise ServerError(f"Preview server failed to start on {self.host}:{self.port}")
            time.sleep(0.05)
        if self.port == 0:
            self.port = self._server.servers[0].sockets[0].getsockname()[1]
        logger.info("Preview server listening for requests on %s", self.url)

    def stop(self, timeout: float = 5.0) -> None:
        """Stop serving; a no-op when not running."""
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        self._server = None
        self._thread = None
        logger.info("Preview server stopped")

    def serve_forever(self) -> None:
        """Run in the calling thread until interrupted."""
        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_config=None, access_log=False)
        self._server = uvicorn.Server(config)
        logger.info("Preview server listening for requests on %s", self.url)
        try:
            self._server.run()
        finally:
            self._server = None

    def __enter__(self) -> "PreviewServer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["PreviewServer", "create_app"]
