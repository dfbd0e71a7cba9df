"""Local preview server for the agent selection page.

Serves one pre-rendered HTML document on ``127.0.0.1``. ``/`` and
``/index.html`` return the page; every other path is a 404. The page is
rendered once before the server starts and never changes while it runs.
"""

from __future__ import annotations

import logging
import socket
import webbrowser
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from agent_composer.exceptions import ServerError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3456
MAX_PORT_ATTEMPTS = 10

_INDEX_PATHS = frozenset({"/", "/index.html"})


def is_port_available(port: int, host: str = DEFAULT_HOST) -> bool:
    """Return True if ``port`` can be bound on ``host`` right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def find_available_port(
    preferred: int,
    max_attempts: int = MAX_PORT_ATTEMPTS,
    host: str = DEFAULT_HOST,
) -> int:
    """Find a free port, starting at ``preferred`` and counting upwards.

    Raises:
        ServerError: If none of the ``max_attempts`` ports is free.
    """
    for port in range(preferred, preferred + max_attempts):
        if is_port_available(port, host):
            return port
    raise ServerError(
        f"Could not find available port after {max_attempts} attempts "
        f"starting from {preferred}"
    )


def _make_handler(page: bytes) -> type[BaseHTTPRequestHandler]:
    class PageHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            path = self.path.split("?", 1)[0]
            if path in _INDEX_PATHS:
                self._send(HTTPStatus.OK, page, "text/html; charset=utf-8")
            else:
                self._send(HTTPStatus.NOT_FOUND, b"Not Found", "text/plain")

        def _send(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: object) -> None:
            logger.debug("%s - %s", self.address_string(), format % args)

    return PageHandler


class PreviewServer:
    """Serve a rendered page until interrupted.

    Usage::

        server = PreviewServer(html, port=3456)
        print(server.url)
        server.serve_forever()

    Attributes:
        port: The port actually bound (may differ from the requested one).
        url: ``http://localhost:<port>``.
    """

    def __init__(self, html: str, port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> None:
        self.requested_port = port
        self.port = find_available_port(port, host=host)
        try:
            self._httpd = ThreadingHTTPServer(
                (host, self.port), _make_handler(html.encode("utf-8")),
            )
        except OSError as exc:
            raise ServerError(f"Could not start server on port {self.port}: {exc}") from exc

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}"

    def serve_forever(self) -> None:
        try:
            self._httpd.serve_forever()
        finally:
            self._httpd.server_close()

    def shutdown(self) -> None:
        self._httpd.shutdown()


def open_browser(url: str) -> bool:
    """Open ``url`` in the default browser, returning False on failure."""
    try:
        return webbrowser.open(url)
    except webbrowser.Error as exc:
        logger.warning("Could not open browser: %s", exc)
        return False
