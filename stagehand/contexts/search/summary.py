"""
Browsing view and summary text for the global search screen.

When there is no query the caller shows every tag in the corpus instead of a
result list; these helpers build that view and the status/heading lines.
"""

from dataclasses import dataclass
from typing import List

from stagehand.contexts.corpus import Corpus
from stagehand.contexts.search.query import NormalizedQuery
from stagehand.contexts.search.search_data_structure import QueryMode, SearchScope


@dataclass(frozen=True)
class CorpusCounts:
    shows: int
    tasks: int
    ideas: int

    @property
    def total(self) -> int:
        return self.shows + self.tasks + self.ideas


def all_tags(corpus: Corpus) -> List[str]:
    """
    Distinct tags across shows, tasks, and ideas.

    Tags keep their original casing (differently-cased tags are distinct) and
    are sorted alphabetically, ignoring case, with the raw value as tie-break.
    """
    tags = set()
    for show in corpus.shows:
        tags.update(show.tags)
        for task in show.tasks:
            tags.update(task.tags)
    for idea in corpus.ideas:
        tags.update(idea.tags)
    return sorted(tags, key=lambda tag: (tag.casefold(), tag))


def corpus_counts(corpus: Corpus) -> CorpusCounts:
    return CorpusCounts(
        shows=len(corpus.shows),
        tasks=sum(len(show.tasks) for show in corpus.shows),
        ideas=len(corpus.ideas),
    )


def status_text(counts: CorpusCounts, scope: SearchScope, query: NormalizedQuery) -> str:
    """
    One-line status shown under the search box.

    Args:
        counts: Corpus size
        scope: Active scope
        query: Active normalized query

    Returns:
        Status string describing what is being searched
    """
    scope = SearchScope(scope)
    if scope.disabled:
        return f"{scope.label} search is coming soon."

    if query.is_empty:
        return f"Search across {counts.shows} shows, {counts.tasks} tasks, and {counts.ideas} ideas."

    scopes_shown = "Shows + Tasks + Ideas" if scope is SearchScope.ALL else scope.label
    return f"Searching across {counts.total} items… Showing results from {scopes_shown}."


def results_heading(query: NormalizedQuery) -> str:
    if query.mode is QueryMode.TAG:
        return f'Items tagged with "{query.text}"'
    return f'Search Results for "{query.text}"'
