import json

import pytest

from knockquotes.errors import QuoteMisformatError, QuotesNotFoundError
from knockquotes.quote import JsonQuote, Quote, read_quotes

SAMPLE = [
    {
        "id": "mojo",
        "whos_there": "Mojo",
        "answer_who": "Mo' quotes, please.",
        "tags": ["pun", "short", "pun"],
        "source": "Unknown",
    },
    {
        "id": "boo",
        "whos_there": "Boo",
        "answer_who": "Don't cry, it's only a joke.",
        "tags": [],
        "source": "folk",
        "extra": 1,
    },
]


def _write(tmp_path, content):
    path = tmp_path / "quotes.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_read_quotes_parses_entries(tmp_path):
    path = _write(tmp_path, json.dumps(SAMPLE))
    quotes = read_quotes(path)
    assert [q.id for q in quotes] == ["mojo", "boo"]
    assert quotes[0].tags == frozenset({"pun", "short"})
    assert quotes[1].source == "folk"


def test_read_quotes_accepts_str_path(tmp_path):
    path = _write(tmp_path, json.dumps(SAMPLE))
    assert read_quotes(str(path)) == read_quotes(path)


def test_to_quote_copies_fields_and_yields_tags():
    jq = JsonQuote(
        id="mojo",
        whos_there="Mojo",
        answer_who="Mo' quotes, please.",
        tags=frozenset({"b", "a"}),
        source="Unknown",
    )
    quote, tags = jq.to_quote()
    assert quote == Quote("mojo", "Mojo", "Mo' quotes, please.", "Unknown")
    assert sorted(tags) == ["a", "b"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(QuotesNotFoundError):
        read_quotes(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path):
    path = _write(tmp_path, "[{not json")
    with pytest.raises(QuoteMisformatError):
        read_quotes(path)


def test_top_level_object_raises(tmp_path):
    path = _write(tmp_path, json.dumps(SAMPLE[0]))
    with pytest.raises(QuoteMisformatError):
        read_quotes(path)


@pytest.mark.parametrize("field", ["id", "whos_there", "answer_who", "tags", "source"])
def test_missing_field_raises(tmp_path, field):
    entry = dict(SAMPLE[0])
    del entry[field]
    path = _write(tmp_path, json.dumps([entry]))
    with pytest.raises(QuoteMisformatError, match=field):
        read_quotes(path)


def test_non_string_tag_raises(tmp_path):
    entry = dict(SAMPLE[0], tags=["ok", 3])
    path = _write(tmp_path, json.dumps([entry]))
    with pytest.raises(QuoteMisformatError):
        read_quotes(path)


def test_non_string_field_raises(tmp_path):
    entry = dict(SAMPLE[0], answer_who=42)
    path = _write(tmp_path, json.dumps([entry]))
    with pytest.raises(QuoteMisformatError):
        read_quotes(path)