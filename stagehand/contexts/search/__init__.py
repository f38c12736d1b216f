"""
Search Context

Responsibilities:
- Normalizes raw search input (typed text vs selected tag) into one query
- Decides which shows, tasks, and ideas qualify for a query
- Scores relevance and classifies matches with badges
- Buckets results by entity type and builds the top-matches view
- Splits display text into highlighted segments

Owns: Matching rules, scoring weights, ranking order, highlighting
Never: Loads or mutates corpus data, performs navigation
"""

from stagehand.contexts.search.aggregator import evaluate, hit_sort_key, search, sort_hits
from stagehand.contexts.search.exceptions import ScoringConfigError
from stagehand.contexts.search.highlighter import (
    Segment,
    highlight,
    make_highlighter,
    render_html,
    tag_matches_query,
)
from stagehand.contexts.search.matcher import matches
from stagehand.contexts.search.query import NormalizedQuery, SearchInput, normalize_query
from stagehand.contexts.search.report import format_results_report, format_tags_report
from stagehand.contexts.search.scorer import score
from stagehand.contexts.search.scoring_config import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    load_scoring_weights,
)
from stagehand.contexts.search.search_data_structure import (
    MAX_DISPLAY_BADGES,
    SCOPE_ORDER,
    Badge,
    Hit,
    HitType,
    NavigationTarget,
    QueryMode,
    ScoreResult,
    SearchResults,
    SearchScope,
)
from stagehand.contexts.search.summary import (
    CorpusCounts,
    all_tags,
    corpus_counts,
    results_heading,
    status_text,
)

__all__ = [
    # Orchestration
    "evaluate",
    "search",
    "sort_hits",
    "hit_sort_key",
    # Query normalization
    "normalize_query",
    "NormalizedQuery",
    "SearchInput",
    # Matching and scoring
    "matches",
    "score",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "load_scoring_weights",
    "ScoringConfigError",
    # Highlighting
    "highlight",
    "make_highlighter",
    "render_html",
    "tag_matches_query",
    "Segment",
    # Reports
    "format_results_report",
    "format_tags_report",
    # Browsing and summary
    "all_tags",
    "corpus_counts",
    "status_text",
    "results_heading",
    "CorpusCounts",
    # Data structure classes
    "Badge",
    "Hit",
    "HitType",
    "NavigationTarget",
    "QueryMode",
    "ScoreResult",
    "SearchResults",
    "SearchScope",
    "SCOPE_ORDER",
    "MAX_DISPLAY_BADGES",
]
