"""
Query normalization for the Search context.

Typed text and tag selection are mutually exclusive inputs. SearchInput holds
the caller's current input and exposes pure transitions; normalize_query
derives the single effective query the engine evaluates.
"""

from dataclasses import dataclass, replace
from typing import Optional

from stagehand.contexts.search.search_data_structure import QueryMode, SearchScope


@dataclass(frozen=True)
class NormalizedQuery:
    """Effective query text (trimmed) and the mode it came from."""

    text: str
    mode: QueryMode

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def highlight_text(self) -> str:
        """Text to highlight in rendered results; tag mode never highlights."""
        return self.text if self.mode is QueryMode.TEXT else ""


def normalize_query(search_term: Optional[str], selected_tag: Optional[str] = None) -> NormalizedQuery:
    """
    Derive the effective query from raw input.

    A selected tag wins over typed text. An empty or missing tag falls back to
    the typed text.

    Args:
        search_term: Raw text from the search box
        selected_tag: Tag chosen from the tag-browsing view, if any

    Returns:
        NormalizedQuery (text may be empty, in which case there is nothing to search)
    """
    if selected_tag:
        return NormalizedQuery(text=selected_tag.strip(), mode=QueryMode.TAG)
    return NormalizedQuery(text=(search_term or "").strip(), mode=QueryMode.TEXT)


@dataclass(frozen=True)
class SearchInput:
    """
    Everything the caller controls for one evaluation.

    Transitions return new instances; typing clears the tag and picking a tag
    clears the typed text.
    """

    search_term: str = ""
    selected_tag: Optional[str] = None
    scope: SearchScope = SearchScope.ALL

    def with_search_term(self, text: str) -> "SearchInput":
        return replace(self, search_term=text, selected_tag=None)

    def toggle_tag(self, tag: str) -> "SearchInput":
        """Select tag (clearing typed text), or deselect it if already selected."""
        new_tag = None if self.selected_tag == tag else tag
        return replace(self, search_term="", selected_tag=new_tag)

    def with_scope(self, scope: SearchScope) -> "SearchInput":
        return replace(self, scope=SearchScope(scope))

    @property
    def query(self) -> NormalizedQuery:
        return normalize_query(self.search_term, self.selected_tag)
