"""
Result aggregation for global search.

Runs matching and scoring over every collection in the corpus, applies scope
filtering, and builds the per-type buckets plus the cross-type top-matches view.

Design principle: evaluation is a pure function of (corpus, query, scope, now,
weights). Nothing is cached between calls; the corpus is a frozen snapshot.
"""

import time
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from stagehand.contexts.corpus import Corpus, HasSearchableFields
from stagehand.contexts.search.logger import (
    log_evaluation_result,
    log_evaluation_start,
    log_placeholder_scope,
)
from stagehand.contexts.search.matcher import matches
from stagehand.contexts.search.query import NormalizedQuery, SearchInput
from stagehand.contexts.search.scorer import score
from stagehand.contexts.search.scoring_config import DEFAULT_WEIGHTS, ScoringWeights
from stagehand.contexts.search.search_data_structure import (
    Hit,
    HitType,
    NavigationTarget,
    ScoreResult,
    SearchResults,
    SearchScope,
)
from stagehand.utils.timestamp import now as utc_now

SHOW_PLANNER_VIEW = "show-planner"
SAVED_IDEAS_VIEW = "saved-ideas"


def hit_sort_key(hit: Hit) -> Tuple[int, str]:
    """Score descending, then title ascending."""
    return (-hit.score, hit.title)


def sort_hits(hits: Iterable[Hit]) -> Tuple[Hit, ...]:
    return tuple(sorted(hits, key=hit_sort_key))


def _qualify(
    entity: HasSearchableFields, query: NormalizedQuery, now: datetime, weights: ScoringWeights
) -> Optional[ScoreResult]:
    """
    Match and score one entity.

    Returns None for entities that fail matching, and for entities that only
    match across a field boundary of the combined text and so earn no score.
    """
    if not matches(entity, query.text, query.mode):
        return None
    result = score(entity, query.text, query.mode, now, weights)
    if result.score <= 0:
        return None
    return result


def _show_hits(corpus: Corpus, query: NormalizedQuery, now: datetime, weights: ScoringWeights) -> List[Hit]:
    hits = []
    for show in corpus.shows:
        result = _qualify(show, query, now, weights)
        if result is None:
            continue
        hits.append(
            Hit(
                key=f"show:{show.id}",
                type=HitType.SHOW,
                title=show.title,
                subtitle=show.description,
                tags=show.tags,
                score=result.score,
                badges=result.badges,
                target=NavigationTarget(SHOW_PLANNER_VIEW, show.id),
            )
        )
    return hits


def _task_hits(corpus: Corpus, query: NormalizedQuery, now: datetime, weights: ScoringWeights) -> List[Hit]:
    hits = []
    for show, task in corpus.iter_tasks():
        result = _qualify(task, query, now, weights)
        if result is None:
            continue
        hits.append(
            Hit(
                # Task ids are only unique within their show
                key=f"task:{show.id}:{task.id}",
                type=HitType.TASK,
                title=task.title,
                subtitle=f"In Show: {show.title}",
                tags=task.tags,
                score=result.score,
                badges=result.badges,
                target=NavigationTarget(SHOW_PLANNER_VIEW, show.id, task.id),
            )
        )
    return hits


def _idea_hits(corpus: Corpus, query: NormalizedQuery, now: datetime, weights: ScoringWeights) -> List[Hit]:
    hits = []
    for idea in corpus.ideas:
        result = _qualify(idea, query, now, weights)
        if result is None:
            continue
        hits.append(
            Hit(
                key=f"idea:{idea.id}",
                type=HitType.IDEA,
                title=idea.title,
                subtitle=idea.description,
                tags=idea.tags,
                score=result.score,
                badges=result.badges,
                target=NavigationTarget(SAVED_IDEAS_VIEW, idea.id),
            )
        )
    return hits


_COLLECTORS = (
    (HitType.SHOW, _show_hits),
    (HitType.TASK, _task_hits),
    (HitType.IDEA, _idea_hits),
)


def evaluate(
    corpus: Corpus,
    query: NormalizedQuery,
    scope: SearchScope = SearchScope.ALL,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
) -> Optional[SearchResults]:
    """
    Evaluate a normalized query against a corpus snapshot.

    Args:
        corpus: Frozen corpus snapshot
        query: Normalized query (see normalize_query)
        scope: Entity types to include; clients and files always come back empty
        now: Reference time for recency (defaults to the current UTC time)
        weights: Scoring weights (defaults to DEFAULT_WEIGHTS)

    Returns:
        None when the query is empty (caller shows the tag-browsing view),
        otherwise SearchResults with sorted buckets and top matches
    """
    if query.is_empty:
        return None

    scope = SearchScope(scope)
    weights = weights or DEFAULT_WEIGHTS
    now = now or utc_now()
    start_time = time.time()
    log_evaluation_start(query, scope, len(corpus.shows), len(corpus.ideas))

    if scope.disabled:
        log_placeholder_scope(scope)

    buckets = {}
    for hit_type, collect in _COLLECTORS:
        if scope.includes(hit_type):
            buckets[hit_type] = sort_hits(collect(corpus, query, now, weights))
        else:
            buckets[hit_type] = ()

    combined = buckets[HitType.SHOW] + buckets[HitType.TASK] + buckets[HitType.IDEA]
    top_matches = sort_hits(combined)[: weights.top_matches_limit]

    results = SearchResults(
        top_matches=top_matches,
        shows=buckets[HitType.SHOW],
        tasks=buckets[HitType.TASK],
        ideas=buckets[HitType.IDEA],
    )
    log_evaluation_result(results, time.time() - start_time)
    return results


def search(
    corpus: Corpus,
    search_input: SearchInput,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
) -> Optional[SearchResults]:
    """Normalize a SearchInput and evaluate it."""
    return evaluate(corpus, search_input.query, search_input.scope, now=now, weights=weights)
