"""
Candidate matching: does an entity qualify for a query at all?

Matching gates entry into scoring. It is deliberately coarser than scoring:
in text mode any field may contain the query, in tag mode only an exact
(case-insensitive) tag qualifies.
"""

from typing import List, Tuple

from stagehand.contexts.corpus import HasSearchableFields
from stagehand.contexts.search.search_data_structure import QueryMode


def lowered_tags(entity: HasSearchableFields) -> Tuple[str, ...]:
    return tuple(tag.lower() for tag in entity.tags or ())


def body_texts(entity: HasSearchableFields) -> List[str]:
    """Description, notes, and content, limited to the fields the entity carries."""
    return [text for text in (entity.description, entity.notes, entity.content) if text]


def haystack(entity: HasSearchableFields) -> str:
    """Lower-cased concatenation of every searchable field, joined by single spaces."""
    parts = [entity.title or "", *body_texts(entity), *(entity.tags or ())]
    return " ".join(parts).lower()


def matches(entity: HasSearchableFields, query: str, mode: QueryMode) -> bool:
    """
    Decide whether an entity qualifies for a query.

    Args:
        entity: Any searchable entity
        query: Normalized (trimmed) query text
        mode: Tag selection or free text

    Returns:
        False for an empty query; exact tag membership in tag mode;
        substring of the combined searchable text in text mode
    """
    query_lower = (query or "").lower()
    if not query_lower:
        return False

    if mode is QueryMode.TAG:
        return query_lower in lowered_tags(entity)

    return query_lower in haystack(entity)
