import pytest

from knockquotes.errors import (
    InvalidDbUriError,
    KnockKnockError,
    QuoteMisformatError,
    QuotesNotFoundError,
)


def test_quotes_not_found_message():
    err = QuotesNotFoundError("no such file")
    assert str(err) == "could not find quote file: no such file"
    assert err.reason == "no such file"


def test_quote_misformat_message():
    err = QuoteMisformatError("bad json")
    assert str(err) == "could not read quote file: bad json"
    assert err.reason == "bad json"


def test_invalid_db_uri_message():
    err = InvalidDbUriError("postgres://x")
    assert str(err) == "invalid database uri: postgres://x"
    assert err.uri == "postgres://x"


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (QuotesNotFoundError("a"), "could not find quote file: a"),
        (QuoteMisformatError("b"), "could not read quote file: b"),
        (InvalidDbUriError("c"), "invalid database uri: c"),
    ],
)
def test_all_errors_share_base(err, expected):
    with pytest.raises(KnockKnockError) as excinfo:
        raise err
    assert excinfo.value is err
    assert str(excinfo.value) == expected


def test_invalid_db_uri_is_value_error():
    err = InvalidDbUriError("nope")
    assert isinstance(err, ValueError)
    assert isinstance(err, KnockKnockError)
    assert str(err) == "invalid database uri: nope"
    assert err.uri == "nope"