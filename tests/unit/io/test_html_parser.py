"""Unit tests for the default HTML parser."""

from bs4 import BeautifulSoup

from laakhay.ffetch.io import SoupHTMLParser


class TestSoupHTMLParser:
    """Test SoupHTMLParser."""

    def test_parses_bytes(self):
        document = SoupHTMLParser().parse(b"<html><head><title>Hi</title></head><body></body></html>")
        assert isinstance(document, BeautifulSoup)
        assert document.title.string == "Hi"

    def test_queries_work(self):
        html = b'<main><a href="/one">1</a><a href="/two">2</a></main>'
        document = SoupHTMLParser().parse(html)
        assert [a["href"] for a in document.select("main a")] == ["/one", "/two"]

    def test_tolerates_broken_markup(self):
        document = SoupHTMLParser().parse(b"<div><p>unclosed")
        assert document.p.get_text() == "unclosed"

    def test_features(self):
        assert SoupHTMLParser().features == "html.parser"
