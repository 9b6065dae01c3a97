"""I/O collaborators: HTTP transport and HTML parser."""

from .html import HTMLParser, SoupHTMLParser
from .http_client import HTTPClient, cache_headers
from .transport import HTTPResponse, HTTPTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "HTTPTransport",
    "HTMLParser",
    "SoupHTMLParser",
    "cache_headers",
]
