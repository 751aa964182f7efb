"""
Leaderboard page parser.

Pulls completion times out of a daily leaderboard page. Each entry carries a
span like::

    <span class="leaderboard-time">Dec 01  00:01:23</span>

Entries are listed fastest first, so the first N time spans in document order
are the top N finishers.
"""

from typing import Iterator, List
from bs4 import BeautifulSoup, NavigableString, Tag

from ..utils.constants import TIME_SPAN_TAG, TIME_SPAN_CLASS
from ..utils.errors import ParseError


def parse_leaderboard_html(html_content: str) -> BeautifulSoup:
    """
    Parse raw leaderboard markup into a document tree.

    Args:
        html_content: Raw HTML string

    Returns:
        BeautifulSoup document

    Raises:
        ParseError: If the content is not a non-empty string
    """
    if html_content is None or html_content == "":
        raise ParseError("Empty HTML content")
    if not isinstance(html_content, str):
        raise ParseError(f"Expected string, got {type(html_content).__name__}")

    return BeautifulSoup(html_content, 'html.parser')


def is_time_span(node) -> bool:
    """Check whether a node is a leaderboard time span."""
    if not isinstance(node, Tag) or node.name != TIME_SPAN_TAG:
        return False

    classes = node.get('class')
    if classes is None:
        return False
    # bs4 splits class into a list; the whole attribute value must match
    if isinstance(classes, list):
        classes = ' '.join(classes)
    return classes == TIME_SPAN_CLASS


def iter_time_spans(soup: BeautifulSoup) -> Iterator[Tag]:
    """Lazily yield time spans in document (pre-order) order."""
    for node in soup.descendants:
        if is_time_span(node):
            yield node


def parse_time_span(span: Tag) -> str:
    """
    Extract the time of day from a time span.

    The span's first child holds "<month> <day>  <time>"; only the time is kept.

    Raises:
        ParseError: If the span is empty or does not hold exactly three tokens
    """
    if not span.contents:
        raise ParseError("Leaderboard time span has no content")

    first_child = span.contents[0]
    if isinstance(first_child, NavigableString):
        text = str(first_child)
    else:
        text = first_child.get_text()

    tokens = text.split()
    if len(tokens) != 3:
        raise ParseError(f"Unexpected leaderboard time text: {text.strip()!r}")

    return tokens[2]


def extract_leaderboard_times(soup: BeautifulSoup, top: int) -> List[str]:
    """
    Collect up to `top` completion times in leaderboard order.

    Stops walking the tree as soon as `top` times are found. A page with fewer
    entries (or none, before the puzzle unlocks) yields a shorter list.

    Args:
        soup: Parsed leaderboard page
        top: Maximum number of times to collect

    Returns:
        List of HH:MM:SS strings
    """
    if top < 1:
        raise ValueError(f"top must be positive, got {top}")

    times = []
    for span in iter_time_spans(soup):
        times.append(parse_time_span(span))
        if len(times) >= top:
            break

    return times
