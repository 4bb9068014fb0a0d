"""Quote records and reading them from a JSON file."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

from .errors import QuoteMisformatError, QuotesNotFoundError

_TEXT_FIELDS = ("id", "whos_there", "answer_who", "source")


@dataclass(frozen=True)
class Quote:
    """A knock-knock quote as stored in the database."""

    id: str
    whos_there: str
    answer_who: str
    quote_source: str


@dataclass(frozen=True)
class JsonQuote:
    """A quote as it appears in the JSON input file, with its tags."""

    id: str
    whos_there: str
    answer_who: str
    tags: frozenset[str]
    source: str

    def to_quote(self) -> tuple[Quote, Iterator[str]]:
        """Split into the stored quote and an iterator over its tags."""
        quote = Quote(
            id=self.id,
            whos_there=self.whos_there,
            answer_who=self.answer_who,
            quote_source=self.source,
        )
        return quote, iter(sorted(self.tags))


def _parse_quote(index: int, item: Any) -> JsonQuote:
    if not isinstance(item, dict):
        raise QuoteMisformatError(f"entry {index}: expected an object")
    fields: dict[str, str] = {}
    for name in _TEXT_FIELDS:
        if name not in item:
            raise QuoteMisformatError(f"entry {index}: missing field `{name}`")
        value = item[name]
        if not isinstance(value, str):
            raise QuoteMisformatError(f"entry {index}: field `{name}` must be a string")
        fields[name] = value
    if "tags" not in item:
        raise QuoteMisformatError(f"entry {index}: missing field `tags`")
    tags = item["tags"]
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise QuoteMisformatError(f"entry {index}: field `tags` must be a list of strings")
    return JsonQuote(tags=frozenset(tags), **fields)


def read_quotes(quotes_path: Union[str, os.PathLike]) -> list[JsonQuote]:
    """Read a JSON array of quotes from ``quotes_path``.

    Raises QuotesNotFoundError if the file cannot be read and
    QuoteMisformatError if its contents are not a valid quote list.
    """
    try:
        with open(quotes_path, "rb") as f:
            raw = f.read()
    except OSError as err:
        raise QuotesNotFoundError(err) from err
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as err:
        raise QuoteMisformatError(err) from err
    if not isinstance(data, list):
        raise QuoteMisformatError("expected a JSON array of quotes")
    return [_parse_quote(index, item) for index, item in enumerate(data)]