"""Unit tests for result aggregation, scope filtering, and ordering."""

from datetime import timedelta

import pytest

from stagehand.contexts.corpus import Corpus, Idea, Show, Task
from stagehand.contexts.search import (
    Badge,
    HitType,
    NavigationTarget,
    ScoringWeights,
    SearchInput,
    SearchScope,
    evaluate,
    normalize_query,
    search,
)


@pytest.mark.unit
class TestEvaluate:
    def test_empty_query_returns_none(self, gala_corpus, now):
        assert evaluate(gala_corpus, normalize_query("   "), now=now) is None

    def test_buckets_by_type(self, gala_corpus, now):
        results = evaluate(gala_corpus, normalize_query("birthday"), now=now)

        assert [hit.key for hit in results.shows] == ["show:s1"]
        assert [hit.key for hit in results.tasks] == ["task:s1:t1"]
        assert [hit.key for hit in results.ideas] == ["idea:i1"]
        assert results.clients == ()

    def test_show_hit_fields(self, gala_corpus, now):
        hit = evaluate(gala_corpus, normalize_query("birthday"), now=now).shows[0]

        assert hit.type is HitType.SHOW
        assert hit.title == "Birthday Surprise Gala"
        assert hit.subtitle == "Evening show for a corporate client"
        assert hit.tags == ("comedy", "Kids")
        assert hit.score == 80
        assert hit.badges == (Badge.RELATED,)
        assert hit.target == NavigationTarget("show-planner", "s1")

    def test_task_hit_fields(self, gala_corpus, now):
        hit = evaluate(gala_corpus, normalize_query("birthday"), now=now).tasks[0]

        assert hit.type is HitType.TASK
        assert hit.subtitle == "In Show: Birthday Surprise Gala"
        assert hit.target == NavigationTarget("show-planner", "s1", "t1")

    def test_idea_hit_target(self, gala_corpus, now):
        hit = evaluate(gala_corpus, normalize_query("birthday"), now=now).ideas[0]
        assert hit.target == NavigationTarget("saved-ideas", "i1")

    def test_task_keys_include_show(self, now):
        corpus = Corpus(
            shows=(
                Show(id="a", title="Show A", tasks=(Task(id="t1", title="Load van"),)),
                Show(id="b", title="Show B", tasks=(Task(id="t1", title="Load van"),)),
            )
        )
        results = evaluate(corpus, normalize_query("load"), now=now)

        keys = [hit.key for hit in results.tasks]
        assert sorted(keys) == ["task:a:t1", "task:b:t1"]
        assert len(set(keys)) == len(keys)

    def test_sort_by_score_then_title(self, now):
        corpus = Corpus(
            ideas=(
                Idea(id="1", title="Zebra gala"),
                Idea(id="2", title="Gala"),
                Idea(id="3", title="Apple gala"),
            )
        )
        results = evaluate(corpus, normalize_query("gala"), now=now)
        assert [hit.title for hit in results.ideas] == ["Gala", "Apple gala", "Zebra gala"]

    def test_cross_field_match_without_score_is_dropped(self, now):
        corpus = Corpus(
            shows=(Show(id="s1", title="Harbor", tasks=(Task(id="t1", title="Reset tables", notes="after"),)),)
        )
        results = evaluate(corpus, normalize_query("tables after"), now=now)
        assert results.tasks == ()
        assert not results.has_any_results

    def test_recent_cross_field_match_is_kept(self, now):
        task = Task(id="t1", title="Reset tables", notes="after", timestamp=now - timedelta(days=1))
        corpus = Corpus(shows=(Show(id="s1", title="Harbor", tasks=(task,)),))
        hit = evaluate(corpus, normalize_query("tables after"), now=now).tasks[0]
        assert hit.score == 10
        assert hit.badges == (Badge.RECENT,)

    def test_search_normalizes_input(self, gala_corpus, now):
        search_input = SearchInput().toggle_tag("comedy")
        results = search(gala_corpus, search_input, now=now)

        assert [hit.key for hit in results.shows] == ["show:s1"]
        assert results.ideas == ()

    def test_input_corpus_untouched(self, gala_corpus, now):
        before = gala_corpus
        evaluate(gala_corpus, normalize_query("birthday"), now=now)
        assert gala_corpus == before


@pytest.mark.unit
class TestScope:
    @pytest.mark.parametrize(
        "scope, populated",
        [
            (SearchScope.SHOWS, "shows"),
            (SearchScope.TASKS, "tasks"),
            (SearchScope.IDEAS, "ideas"),
        ],
    )
    def test_single_type_scope(self, gala_corpus, now, scope, populated):
        results = evaluate(gala_corpus, normalize_query("birthday"), scope=scope, now=now)

        for bucket in ("shows", "tasks", "ideas"):
            hits = getattr(results, bucket)
            if bucket == populated:
                assert hits
            else:
                assert hits == ()
        assert all(hit in getattr(results, populated) for hit in results.top_matches)

    @pytest.mark.parametrize("scope", [SearchScope.CLIENTS, SearchScope.FILES])
    def test_placeholder_scopes_are_empty(self, gala_corpus, now, scope):
        results = evaluate(gala_corpus, normalize_query("birthday"), scope=scope, now=now)

        assert results is not None
        assert results.top_matches == ()
        assert results.shows == results.tasks == results.ideas == results.clients == ()
        assert not results.has_any_results

    def test_scope_string_value(self, gala_corpus, now):
        results = evaluate(gala_corpus, normalize_query("birthday"), scope="tasks", now=now)
        assert results.shows == ()
        assert results.tasks


@pytest.mark.unit
class TestTopMatches:
    def test_capped_at_six(self, now):
        corpus = Corpus(ideas=tuple(Idea(id=str(i), title=f"Gala {i}") for i in range(9)))
        results = evaluate(corpus, normalize_query("gala"), now=now)

        assert len(results.ideas) == 9
        assert len(results.top_matches) == 6

    def test_custom_limit(self, now):
        corpus = Corpus(ideas=tuple(Idea(id=str(i), title=f"Gala {i}") for i in range(9)))
        results = evaluate(corpus, normalize_query("gala"), now=now, weights=ScoringWeights(top_matches_limit=2))
        assert [hit.title for hit in results.top_matches] == ["Gala 0", "Gala 1"]

    def test_merges_types_by_score(self, gala_corpus, now):
        results = evaluate(gala_corpus, normalize_query("birthday"), now=now)

        # Show (80) outranks the 30-point task and idea; tie broken by title
        assert [hit.key for hit in results.top_matches] == ["show:s1", "idea:i1", "task:s1:t1"]

    def test_hit_may_appear_in_bucket_and_top_matches(self, gala_corpus, now):
        results = evaluate(gala_corpus, normalize_query("birthday"), now=now)
        assert results.shows[0] in results.top_matches


@pytest.mark.unit
class TestHit:
    def test_display_badges_capped_at_two(self, now):
        corpus = Corpus(
            shows=(
                Show(
                    id="s1",
                    title="Kids comedy hour",
                    tags=("comedy",),
                    timestamp=now - timedelta(days=1),
                ),
            )
        )
        hit = evaluate(corpus, normalize_query("comedy"), now=now).shows[0]

        assert hit.badges == (Badge.RELATED, Badge.EXACT_MATCH, Badge.RECENT)
        assert hit.display_badges == (Badge.RELATED, Badge.EXACT_MATCH)

    def test_navigate_invokes_callback(self, gala_corpus, now):
        calls = []
        hit = evaluate(gala_corpus, normalize_query("birthday"), now=now).tasks[0]
        hit.navigate(lambda view, entity_id, secondary_id: calls.append((view, entity_id, secondary_id)))
        assert calls == [("show-planner", "s1", "t1")]

    def test_hits_are_frozen(self, gala_corpus, now):
        hit = evaluate(gala_corpus, normalize_query("birthday"), now=now).shows[0]
        with pytest.raises(AttributeError):
            hit.score = 0
