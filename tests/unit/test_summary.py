"""Unit tests for the tag-browsing view and status text."""

import pytest

from stagehand.contexts.corpus import Corpus, Idea, Show, Task
from stagehand.contexts.search import (
    SCOPE_ORDER,
    CorpusCounts,
    SearchScope,
    all_tags,
    corpus_counts,
    normalize_query,
    results_heading,
    status_text,
)


@pytest.mark.unit
class TestAllTags:
    def test_collects_from_every_entity_type(self, gala_corpus):
        assert all_tags(gala_corpus) == ["comedy", "comedy-club", "corporate", "Kids", "logistics"]

    def test_distinct_and_case_preserving(self):
        corpus = Corpus(
            shows=(Show(id="s1", title="A", tags=("magic", "Magic"), tasks=(Task(id="t", title="T", tags=("magic",)),)),),
            ideas=(Idea(id="i", title="I", tags=("Magic",)),),
        )
        assert all_tags(corpus) == ["Magic", "magic"]

    def test_empty_corpus(self):
        assert all_tags(Corpus()) == []


@pytest.mark.unit
class TestCounts:
    def test_counts_nested_tasks(self, gala_corpus):
        counts = corpus_counts(gala_corpus)
        assert counts == CorpusCounts(shows=2, tasks=2, ideas=2)
        assert counts.total == 6


@pytest.mark.unit
class TestStatusText:
    counts = CorpusCounts(shows=2, tasks=5, ideas=3)

    def test_no_query(self):
        text = status_text(self.counts, SearchScope.ALL, normalize_query(""))
        assert text == "Search across 2 shows, 5 tasks, and 3 ideas."

    def test_all_scope(self):
        text = status_text(self.counts, SearchScope.ALL, normalize_query("gala"))
        assert text == "Searching across 10 items… Showing results from Shows + Tasks + Ideas."

    def test_single_scope(self):
        text = status_text(self.counts, SearchScope.TASKS, normalize_query("gala"))
        assert text.endswith("Showing results from Tasks.")

    @pytest.mark.parametrize("scope, label", [(SearchScope.CLIENTS, "Clients"), (SearchScope.FILES, "Files")])
    def test_placeholder_scopes(self, scope, label):
        assert status_text(self.counts, scope, normalize_query("gala")) == f"{label} search is coming soon."


@pytest.mark.unit
class TestHeadingAndScopes:
    def test_text_heading(self):
        assert results_heading(normalize_query("gala")) == 'Search Results for "gala"'

    def test_tag_heading(self):
        assert results_heading(normalize_query("", selected_tag="comedy")) == 'Items tagged with "comedy"'

    def test_scope_order_and_placeholders(self):
        assert [scope.value for scope in SCOPE_ORDER] == ["all", "shows", "clients", "ideas", "tasks", "files"]
        assert [scope.label for scope in SCOPE_ORDER if scope.disabled] == ["Clients", "Files"]
