from knockquotes.quote import Quote
from knockquotes.templates import IndexTemplate

MOJO = Quote("mojo", "Mojo", "Mo' quotes, please.", "Unknown")


def test_default_stylesheet():
    assert IndexTemplate(MOJO).stylesheet == "/knock.css"


def test_render_links_stylesheet():
    page = IndexTemplate(MOJO).render()
    assert 'href="/knock.css"' in page


def test_render_contains_quote_text():
    page = IndexTemplate(MOJO).render()
    assert "Mojo" in page
    assert "Mo&#x27; quotes, please." in page
    assert "Unknown" in page


def test_render_escapes_markup():
    quote = Quote("x", "<b>Tag</b>", "A & B", "<script>")
    page = IndexTemplate(quote).render()
    assert "<b>" not in page
    assert "<script>" not in page
    assert "&lt;b&gt;Tag&lt;/b&gt;" in page
    assert "A &amp; B" in page


def test_str_matches_render():
    template = IndexTemplate(MOJO)
    assert str(template) == template.render()