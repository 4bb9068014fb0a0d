"""HTTP front end: serve a random knock-knock quote page and static assets."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
import threading
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional

from .errors import KnockKnockError
from .quote import Quote, read_quotes
from .store import QuoteStore, get_db_uri, open_store
from .templates import IndexTemplate

logger = logging.getLogger("kk2")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path("assets/static")

_HTML_TYPE = "text/html; charset=utf-8"
_STATIC_FILES = {
    "/knock.css": ("knock.css", "text/css; charset=utf-8"),
    "/favicon.ico": ("favicon.ico", "image/vnd.microsoft.icon"),
}

_FALLBACK_QUOTE = Quote(
    id="mojo",
    whos_there="Mojo",
    answer_who="Mo' quotes, please.",
    quote_source="Unknown",
)


class QuoteApp:
    """Holds the store and the quote most recently shown."""

    def __init__(self, store: QuoteStore) -> None:
        self.store = store
        self.current_quote = _FALLBACK_QUOTE
        self.static_dir = DEFAULT_STATIC_DIR
        self._lock = threading.Lock()

    def current_page(self) -> str:
        """Pick a fresh random quote and render the index page.

        If the lookup fails, the previously shown quote is kept.
        """
        with self._lock:
            try:
                self.current_quote = self.store.random_quote()
            except (LookupError, sqlite3.Error) as err:
                logger.warning("quote fetch failed: %s", err)
            quote = self.current_quote
        return IndexTemplate(quote).render()


def build_server(app: QuoteApp, host: str, port: int) -> ThreadingHTTPServer:
    """Create (but do not start) an HTTP server bound to ``host:port``."""

    class _Handler(BaseHTTPRequestHandler):
        def _respond(self, send_body: bool) -> None:
            path = self.path.split("?", 1)[0]
            if path == "/":
                body = app.current_page().encode("utf-8")
                self._send(HTTPStatus.OK, _HTML_TYPE, body, send_body)
                return
            static = _STATIC_FILES.get(path)
            if static is not None:
                name, content_type = static
                try:
                    body = (Path(app.static_dir) / name).read_bytes()
                except OSError:
                    self._send(HTTPStatus.NOT_FOUND, "text/plain", b"", send_body)
                    return
                self._send(HTTPStatus.OK, content_type, body, send_body)
                return
            self._send(HTTPStatus.NOT_FOUND, "text/plain", b"", send_body)

        def _send(
            self, status: HTTPStatus, content_type: str, body: bytes, send_body: bool
        ) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if send_body:
                self.wfile.write(body)

        def do_GET(self) -> None:  # noqa: N802
            self._respond(send_body=True)

        def do_HEAD(self) -> None:  # noqa: N802
            self._respond(send_body=False)

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            logger.info("%s %s", self.address_string(), format % args)

    return ThreadingHTTPServer((host, port), _Handler)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="kk2")
    parser.add_argument(
        "-i", "--init-from", dest="init_from", type=Path, default=None,
        help="load quotes from this JSON file into the database and exit",
    )
    parser.add_argument(
        "-d", "--db-uri", dest="db_uri", default=None,
        help="database URI (default: $KK2_DB_URI or sqlite://db/knock-knock.db)",
    )
    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    store = open_store(get_db_uri(args.db_uri))
    with store:
        if args.init_from is not None:
            store.load_quotes(read_quotes(args.init_from))
            return
        logging.basicConfig(level=logging.INFO)
        logger.setLevel(logging.DEBUG)
        app = QuoteApp(store)
        server = build_server(app, DEFAULT_HOST, DEFAULT_PORT)
        print(f"Server running at http://{DEFAULT_HOST}:{DEFAULT_PORT}")
        with server:
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the process exit status."""
    args = parse_args(argv)
    try:
        _run(args)
    except (KnockKnockError, OSError, sqlite3.Error) as err:
        print(f"kk2: error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())