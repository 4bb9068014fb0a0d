"""HTML rendering of the quote page."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from .quote import Quote

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Knock Knock</title>
<link rel="stylesheet" type="text/css" href="{stylesheet}">
</head>
<body>
<div class="quote">
<p class="knock">Knock, knock.</p>
<p class="reply">Who's there?</p>
<p class="whos-there">{whos_there}.</p>
<p class="reply">{whos_there} who?</p>
<p class="answer">{answer_who}</p>
</div>
<div class="source">Source: {source}</div>
</body>
</html>
"""


@dataclass(frozen=True)
class IndexTemplate:
    """The index page showing one quote."""

    quote: Quote
    stylesheet: str = "/knock.css"

    def render(self) -> str:
        """Return the page as HTML, with all quote text escaped."""
        return _PAGE.format(
            stylesheet=escape(self.stylesheet),
            whos_there=escape(self.quote.whos_there),
            answer_who=escape(self.quote.answer_who),
            source=escape(self.quote.quote_source),
        )

    def __str__(self) -> str:
        return self.render()