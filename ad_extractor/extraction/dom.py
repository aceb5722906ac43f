"""
DOM evaluation over rendered HTML.

Extractors never touch a live browser page. They hand a query function and an
HTML string to DomEvaluator.evaluate(), which parses the markup the way a
browser would parse `tempContainer.innerHTML = html` and runs the query over the
resulting tree. Queries must be read-only and return plain values.
"""

from typing import Any, Callable, Optional, TypeVar

from bs4 import BeautifulSoup, Tag

from ad_extractor.config import HTML_PARSER
from ad_extractor.errors import AdExtractorError, EvaluationError

T = TypeVar("T")


class DomEvaluator:
    """BeautifulSoup backed structural query runner."""

    def __init__(self, parser: str = HTML_PARSER):
        self.parser = parser

    def document(self, html: str) -> BeautifulSoup:
        """Parse a full page snapshot."""
        return BeautifulSoup(html or "", self.parser)

    def fragment(self, html: str) -> Tag:
        """Parse an HTML fragment and return the element that holds its nodes."""
        soup = BeautifulSoup(html or "", self.parser)
        # lxml wraps fragments in <html><body>, html.parser does not
        return soup.body if soup.body is not None else soup

    def evaluate(self, html: str, query: Callable[..., T], *args: Any) -> T:
        """Run query(root, *args) over the parsed fragment."""
        try:
            root = self.fragment(html)
            return query(root, *args)
        except AdExtractorError:
            raise
        except Exception as e:
            raise EvaluationError(getattr(query, "__name__", repr(query)), e) from e

    def evaluate_document(self, html: str, query: Callable[..., T], *args: Any) -> T:
        """Run query(soup, *args) over a full page snapshot."""
        try:
            return query(self.document(html), *args)
        except AdExtractorError:
            raise
        except Exception as e:
            raise EvaluationError(getattr(query, "__name__", repr(query)), e) from e


def inner_html(element: Tag) -> str:
    """Serialized children of element, the equivalent of innerHTML."""
    return element.decode_contents()


def outer_html(element: Tag) -> str:
    return str(element)


def first_element_child(element: Optional[Tag]) -> Optional[Tag]:
    """First child that is a tag, skipping text and comments."""
    if element is None:
        return None
    return element.find(True, recursive=False)


def next_element_sibling(element: Optional[Tag]) -> Optional[Tag]:
    if element is None:
        return None
    return element.find_next_sibling(True)


def child_divs(element: Tag) -> list[Tag]:
    return element.find_all("div", recursive=False)


def text_content(element: Tag) -> str:
    """Concatenated text of all descendants, like DOM textContent."""
    return element.get_text()
