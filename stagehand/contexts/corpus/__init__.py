"""
Corpus Context

Responsibilities:
- Immutable representation of shows, nested tasks, and saved ideas
- Common searchable-field capability across the three entity shapes
- Recency timestamp resolution from heterogeneous storage records
- Loading exported corpus snapshots from YAML/JSON

Owns: Entity data structures, timestamp precedence, snapshot loading
Never: Scores, ranks, or filters entities
"""

from stagehand.contexts.corpus.corpus_data_structure import (
    TIMESTAMP_KEYS,
    Corpus,
    HasSearchableFields,
    Idea,
    Show,
    Task,
    resolve_timestamp,
)
from stagehand.contexts.corpus.exceptions import CorpusLoadError
from stagehand.contexts.corpus.loader import load_corpus

__all__ = [
    # Data structure classes
    "Corpus",
    "Show",
    "Task",
    "Idea",
    "HasSearchableFields",
    # Timestamp resolution
    "TIMESTAMP_KEYS",
    "resolve_timestamp",
    # Loading
    "load_corpus",
    "CorpusLoadError",
]
