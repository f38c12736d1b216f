"""
Match highlighting for rendered search results.

Splits display text into plain and matched segments so the caller can emphasize
matches without building markup from raw user input. The query is regex-escaped
before a pattern is compiled, so any input is safe.
"""

import re
from dataclasses import dataclass
from typing import Callable, List

from jinja2 import Environment

from stagehand.contexts.search.query import NormalizedQuery

_HTML_ENV = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
_HTML_TEMPLATE = _HTML_ENV.from_string(
    "{% for segment in segments %}"
    "{% if segment.matched %}<mark>{{ segment.text }}</mark>{% else %}{{ segment.text }}{% endif %}"
    "{% endfor %}"
)


@dataclass(frozen=True)
class Segment:
    text: str
    matched: bool = False


def highlight(text: str, query: str) -> List[Segment]:
    """
    Split text into alternating plain and matched segments.

    Matching is case-insensitive; matched segments keep the casing of the source
    text, not of the query. Concatenating the segment texts gives back the input.

    Args:
        text: Display text (title, subtitle, tag)
        query: Query to highlight; empty means no highlighting

    Returns:
        List of segments (a single plain segment when nothing matches)

    Example:
        >>> highlight("Birthday Surprise", "SURPRISE")
        [Segment(text='Birthday ', matched=False), Segment(text='Surprise', matched=True)]
    """
    text = text or ""
    if not query or not text:
        return [Segment(text)]

    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    parts = pattern.split(text)
    if len(parts) == 1:
        return [Segment(text)]

    # With one capture group, odd indices are the matched substrings
    return [Segment(part, matched=index % 2 == 1) for index, part in enumerate(parts) if part]


def make_highlighter(query: NormalizedQuery) -> Callable[[str], List[Segment]]:
    """
    Build a renderHighlighted-style function closed over the current query.

    Tag-mode queries never highlight.
    """
    highlight_text = query.highlight_text

    def render_highlighted(text: str) -> List[Segment]:
        return highlight(text, highlight_text)

    return render_highlighted


def tag_matches_query(tag: str, query: NormalizedQuery) -> bool:
    """True if a tag chip should be emphasized for a free-text query."""
    highlight_text = query.highlight_text
    return bool(highlight_text) and highlight_text.lower() in (tag or "").lower()


def render_html(segments: List[Segment]) -> str:
    """
    Render segments as escaped HTML with <mark> around matches.

    Example:
        >>> render_html(highlight("<b>a(b)c</b>", "a(b)c"))
        '&lt;b&gt;<mark>a(b)c</mark>&lt;/b&gt;'
    """
    return str(_HTML_TEMPLATE.render(segments=segments))
