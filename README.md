# knockquotes

A small web server that shows a random knock-knock quote on each page load.
Quotes are kept in a SQLite database. Each request for the page picks a new
random quote. If that lookup fails, for example because the database holds
no quotes yet, the page shows the last quote it found. Before any quote has
been found, that is a built-in "Mojo" quote.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Loading quotes

Quotes are read from a JSON file that holds a list of objects. Each object
needs the string fields `id`, `whos_there`, `answer_who` and `source`, and a
list of strings named `tags`:

    [
      {
        "id": "boo",
        "whos_there": "Boo",
        "answer_who": "Don't cry, it's only a quote.",
        "tags": ["classic", "short"],
        "source": "Unknown"
      }
    ]

Load them into the database:

    knockquotes --init-from quotes.json

Each quote is inserted together with its tags in one transaction. If a quote
or one of its tags cannot be inserted, the error is reported on standard
error and that quote is skipped. One cause is an `id` that is already in the
database. Loading then goes on with the next quote. The command exits once
loading is done.

## Serving

    knockquotes

The server listens on `http://127.0.0.1:3000` and answers `GET` and `HEAD`
requests for:

- `/`: a page with a random quote
- `/knock.css`: the stylesheet, read from `assets/static/knock.css`
- `/favicon.ico`: the icon, read from `assets/static/favicon.ico`

The static files are looked up relative to the current working directory.
If a file is missing, or any other path is requested, the server answers
404. Stop the server with Ctrl-C. Each request is logged through the `kk2`
logger.

## Choosing the database

The database location is taken from the first of these that is set:

1. the `-d` / `--db-uri` option, e.g. `knockquotes --db-uri sqlite://data/quotes.db`
2. the `KK2_DB_URI` environment variable
3. the default, `sqlite://db/knock-knock.db`

If the database file does not exist yet, the URI must have the form
`sqlite://<path>.db`. The directory is then created and the database with
it. The tables `quotes` and `tags` are created at start if they are missing.

If something goes wrong, the command prints `kk2: error: <message>` on
standard error and exits with status 1. This covers an unreadable quote file,
a bad database URI and database errors.

## Using it from Python

    from knockquotes.quote import read_quotes
    from knockquotes.store import open_store
    from knockquotes.templates import IndexTemplate

    with open_store("sqlite://db/knock-knock.db") as store:
        loaded = store.load_quotes(read_quotes("quotes.json"))  # number committed
        quote = store.random_quote()   # LookupError if there are no quotes
        html = IndexTemplate(quote).render()

- `knockquotes.quote`: the `Quote` and `JsonQuote` records and `read_quotes(path)`.
  `JsonQuote.to_quote()` returns the `Quote` and an iterator over its tags in
  sorted order.
- `knockquotes.store`: `QuoteStore` (`migrate`, `random_quote`, `load_quotes`,
  `close`; usable as a context manager), `open_store(db_uri)`,
  `get_db_uri(db_uri=None)`, `extract_db_dir(db_uri)` and `db_path(db_uri)`.
- `knockquotes.templates`: `IndexTemplate(quote, stylesheet="/knock.css")`, whose
  `render()` (or `str()`) gives the page HTML with the quote text escaped.
- `knockquotes.server`: `QuoteApp(store)` with `current_page()`,
  `build_server(app, host, port)`, which returns an unstarted
  `ThreadingHTTPServer`, `parse_args(argv)` and `main(argv=None)`.

Errors raised on purpose derive from `knockquotes.errors.KnockKnockError`:

- `QuotesNotFoundError`: the quote file could not be opened
- `QuoteMisformatError`: the quote file is not valid quote JSON
- `InvalidDbUriError`: the database URI is not usable (also a `ValueError`)

## What it does not do

The command has no options for the host, the port or the static directory.
It always listens on 127.0.0.1:3000 and serves from `assets/static`. No
stylesheet or icon ships with the package. Quotes can only be added by
loading a JSON file. There is no way to edit, delete or search quotes, and
tags are stored but never shown or queried.