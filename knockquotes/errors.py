"""Exceptions raised while loading quotes and opening the quote database."""

from __future__ import annotations


class KnockKnockError(Exception):
    """Base class for every error this package raises on purpose."""


class QuotesNotFoundError(KnockKnockError):
    """The quote file could not be opened or read from disk."""

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"could not find quote file: {reason}")


class QuoteMisformatError(KnockKnockError):
    """The quote file was read but does not hold a valid list of quotes."""

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"could not read quote file: {reason}")


class InvalidDbUriError(KnockKnockError, ValueError):
    """A database URI is not of the form ``sqlite://<path>.db``."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"invalid database uri: {uri}")