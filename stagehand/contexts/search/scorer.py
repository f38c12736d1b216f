"""
Relevance scoring and badge classification.

Scores accumulate additively from independent signals (title, tags, body,
recency). Badges record which kinds of signal fired; each badge appears at
most once, in the order it was first earned.
"""

from datetime import datetime
from typing import List

from stagehand.contexts.corpus import HasSearchableFields
from stagehand.contexts.search.matcher import body_texts, lowered_tags
from stagehand.contexts.search.scoring_config import DEFAULT_WEIGHTS, ScoringWeights
from stagehand.contexts.search.search_data_structure import Badge, QueryMode, ScoreResult
from stagehand.utils.timestamp import age_in_days


def _add_badge(badges: List[Badge], badge: Badge) -> None:
    if badge not in badges:
        badges.append(badge)


def _score_tag_mode(tags, query_lower: str, weights: ScoringWeights, badges: List[Badge]) -> int:
    if query_lower in tags:
        _add_badge(badges, Badge.EXACT_MATCH)
        return weights.tag_mode_exact
    if any(query_lower in tag for tag in tags):
        _add_badge(badges, Badge.RELATED)
        return weights.tag_mode_partial
    return 0


def _score_text_mode(
    entity: HasSearchableFields,
    tags,
    query_lower: str,
    weights: ScoringWeights,
    badges: List[Badge],
) -> int:
    score = 0
    title = (entity.title or "").lower()

    if title == query_lower:
        _add_badge(badges, Badge.EXACT_MATCH)
        score += weights.title_exact
    elif title.startswith(query_lower):
        _add_badge(badges, Badge.RELATED)
        score += weights.title_prefix
    elif query_lower in title:
        _add_badge(badges, Badge.RELATED)
        score += weights.title_contains

    if query_lower in tags:
        _add_badge(badges, Badge.EXACT_MATCH)
        score += weights.tag_exact
    elif any(query_lower in tag for tag in tags):
        _add_badge(badges, Badge.RELATED)
        score += weights.tag_partial

    in_body = any(query_lower in text.lower() for text in body_texts(entity))
    if in_body and not badges:
        _add_badge(badges, Badge.SUGGESTED)
        score += weights.body_only
    elif in_body:
        score += weights.body_bonus

    return score


def score(
    entity: HasSearchableFields,
    query: str,
    mode: QueryMode,
    now: datetime,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ScoreResult:
    """
    Compute relevance score and badges for an entity that passed matching.

    Args:
        entity: Searchable entity
        query: Normalized (trimmed) query text
        mode: Tag selection or free text
        now: Reference time for the recency signal
        weights: Score contributions

    Returns:
        ScoreResult with the accumulated score and ordered badges

    Example:
        >>> show = Show(id="s1", title="Birthday Surprise Gala", tags=("comedy",))
        >>> score(show, "birthday", QueryMode.TEXT, now)
        ScoreResult(score=80, badges=(<Badge.RELATED: 'Related'>,))
    """
    badges: List[Badge] = []
    query_lower = (query or "").lower()
    tags = lowered_tags(entity)

    total = 0
    if query_lower:
        if mode is QueryMode.TAG:
            total += _score_tag_mode(tags, query_lower, weights, badges)
        else:
            total += _score_text_mode(entity, tags, query_lower, weights, badges)

    timestamp = entity.timestamp
    if timestamp is not None and age_in_days(timestamp, now) <= weights.recent_window_days:
        _add_badge(badges, Badge.RECENT)
        total += weights.recent

    # Keep positive scores explainable
    if total > 0 and not badges:
        badges.append(Badge.SUGGESTED)

    return ScoreResult(score=total, badges=tuple(badges))
