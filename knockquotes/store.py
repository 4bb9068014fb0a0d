"""SQLite storage of quotes and their tags."""

from __future__ import annotations

import os
import sqlite3
import sys
from collections.abc import Iterable
from types import TracebackType
from typing import Optional, Union

from .errors import InvalidDbUriError
from .quote import JsonQuote, Quote

DEFAULT_DB_URI = "sqlite://db/knock-knock.db"
DB_URI_ENV = "KK2_DB_URI"

_MEMORY = ":memory:"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS quotes (
    id TEXT PRIMARY KEY NOT NULL,
    whos_there TEXT NOT NULL,
    answer_who TEXT NOT NULL,
    quote_source TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS tags (
    quote_id TEXT NOT NULL REFERENCES quotes(id),
    tag TEXT NOT NULL
);
"""


def get_db_uri(db_uri: Optional[str] = None) -> str:
    """Pick the database URI: the argument, else the environment, else the default."""
    if db_uri is not None:
        return db_uri
    return os.environ.get(DB_URI_ENV, DEFAULT_DB_URI)


def extract_db_dir(db_uri: str) -> str:
    """Return the directory part of a ``sqlite://<path>.db`` URI ('' if none)."""
    if not (db_uri.startswith("sqlite://") and db_uri.endswith(".db")):
        raise InvalidDbUriError(db_uri)
    path = db_uri[len("sqlite://"):]
    directory, sep, _ = path.rpartition("/")
    return directory if sep else ""


def db_path(db_uri: str) -> str:
    """Turn a ``sqlite:`` URI into the filename to open."""
    if db_uri.startswith("sqlite://"):
        path = db_uri[len("sqlite://"):]
    elif db_uri.startswith("sqlite:"):
        path = db_uri[len("sqlite:"):]
    else:
        raise InvalidDbUriError(db_uri)
    path = path.split("?", 1)[0]
    if not path:
        raise InvalidDbUriError(db_uri)
    return path


class QuoteStore:
    """A connection to the quote database."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._conn = sqlite3.connect(
            os.fspath(path), isolation_level=None, check_same_thread=False
        )
        self._conn.execute("PRAGMA foreign_keys = ON")

    def migrate(self) -> None:
        """Create the tables if they are not there yet."""
        self._conn.executescript(_SCHEMA)

    def random_quote(self) -> Quote:
        """Return one quote chosen at random.

        Raises LookupError if the database holds no quotes.
        """
        row = self._conn.execute(
            "SELECT id, whos_there, answer_who, quote_source "
            "FROM quotes ORDER BY RANDOM() LIMIT 1;"
        ).fetchone()
        if row is None:
            raise LookupError("no quotes in database")
        return Quote(*row)

    def load_quotes(self, quotes: Iterable[JsonQuote]) -> int:
        """Insert quotes with their tags, one transaction per quote.

        A quote whose insert fails is reported on stderr and skipped.
        Returns the number of quotes committed.
        """
        committed = 0
        for json_quote in quotes:
            quote, tags = json_quote.to_quote()
            self._conn.execute("BEGIN")
            try:
                self._conn.execute(
                    "INSERT INTO quotes (id, whos_there, answer_who, quote_source) "
                    "VALUES (?, ?, ?, ?);",
                    (quote.id, quote.whos_there, quote.answer_who, quote.quote_source),
                )
            except sqlite3.Error as err:
                print(f"error: quote insert: {quote.id}: {err}", file=sys.stderr)
                self._conn.execute("ROLLBACK")
                continue
            if self._insert_tags(quote.id, tags):
                self._conn.execute("COMMIT")
                committed += 1
            else:
                self._conn.execute("ROLLBACK")
        return committed

    def _insert_tags(self, quote_id: str, tags: Iterable[str]) -> bool:
        for tag in tags:
            try:
                self._conn.execute(
                    "INSERT INTO tags (quote_id, tag) VALUES (?, ?);", (quote_id, tag)
                )
            except sqlite3.Error as err:
                print(f"error: tag insert: {quote_id} {tag}: {err}", file=sys.stderr)
                return False
        return True

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()

    def __enter__(self) -> "QuoteStore":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def open_store(db_uri: str) -> QuoteStore:
    """Open the database named by ``db_uri``, creating it and its tables if needed."""
    path = db_path(db_uri)
    if path != _MEMORY and not os.path.exists(path):
        directory = extract_db_dir(db_uri)
        if directory:
            os.makedirs(directory, exist_ok=True)
    store = QuoteStore(path)
    store.migrate()
    return store