"""HTML parsing collaborator."""

from __future__ import annotations

from typing import Any, Protocol

from bs4 import BeautifulSoup

from ..core.exceptions import DecodingError


class HTMLParser(Protocol):
    """Turns fetched bytes into a document.

    ``parse`` may return the document directly or an awaitable resolving to it.
    """

    def parse(self, html: bytes) -> Any: ...


class SoupHTMLParser:
    """Default parser producing ``BeautifulSoup`` documents."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse(self, html: bytes) -> BeautifulSoup:
        try:
            return BeautifulSoup(html, self.features)
        except Exception as e:
            raise DecodingError(f"Decoding error: {e}") from e
