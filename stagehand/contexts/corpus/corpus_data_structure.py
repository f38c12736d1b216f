"""
Corpus data structures for the Corpus context.

Provides immutable snapshots of shows (with nested tasks) and saved ideas as
they arrive from storage. Search reads these through the HasSearchableFields
protocol and never mutates them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Optional, Protocol, Tuple, runtime_checkable

from stagehand.utils.timestamp import parse_timestamp

# Precedence order for the recency signal; first non-null value wins
TIMESTAMP_KEYS = (
    "updated_at",
    "updatedAt",
    "last_modified",
    "lastModified",
    "created_at",
    "createdAt",
)


@runtime_checkable
class HasSearchableFields(Protocol):
    """
    Capability shared by every searchable entity.

    Fields an entity type does not carry are exposed as None (text) or an
    empty tuple (tags).
    """

    title: str
    tags: Tuple[str, ...]

    @property
    def description(self) -> Optional[str]: ...

    @property
    def notes(self) -> Optional[str]: ...

    @property
    def content(self) -> Optional[str]: ...

    @property
    def timestamp(self) -> Optional[datetime]: ...


def resolve_timestamp(record: Any) -> Optional[datetime]:
    """
    Resolve the recency timestamp of a raw record.

    Looks through TIMESTAMP_KEYS in order and parses the first non-null value.
    Works on mappings and on plain objects with matching attributes.

    Args:
        record: Raw record (dict-like or object)

    Returns:
        Aware UTC datetime, or None when no usable timestamp exists
    """
    for key in TIMESTAMP_KEYS:
        if isinstance(record, Mapping):
            value = record.get(key)
        else:
            value = getattr(record, key, None)
        if value is not None:
            return parse_timestamp(value)
    return None


def _optional_text(value: Any) -> Optional[str]:
    # Non-string payloads (e.g. structured idea content) are not searchable text
    return value if isinstance(value, str) else None


def _coerce_tags(raw: Any) -> Tuple[str, ...]:
    if not raw:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    return tuple(str(tag) for tag in raw if tag is not None and str(tag) != "")


@dataclass(frozen=True)
class Task:
    """A task belonging to exactly one show."""

    id: str
    title: str
    notes: Optional[str] = None
    tags: Tuple[str, ...] = ()
    timestamp: Optional[datetime] = None

    @property
    def description(self) -> Optional[str]:
        return None

    @property
    def content(self) -> Optional[str]:
        return None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Task":
        """Build a Task from a raw storage record."""
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            notes=_optional_text(data.get("notes")),
            tags=_coerce_tags(data.get("tags")),
            timestamp=resolve_timestamp(data),
        )


@dataclass(frozen=True)
class Show:
    """A show and the tasks planned for it."""

    id: str
    title: str
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    tasks: Tuple[Task, ...] = ()
    timestamp: Optional[datetime] = None

    @property
    def notes(self) -> Optional[str]:
        return None

    @property
    def content(self) -> Optional[str]:
        return None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Show":
        """Build a Show (and its nested tasks) from a raw storage record."""
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=_optional_text(data.get("description")),
            tags=_coerce_tags(data.get("tags")),
            tasks=tuple(Task.from_dict(task) for task in data.get("tasks") or ()),
            timestamp=resolve_timestamp(data),
        )


@dataclass(frozen=True)
class Idea:
    """A saved idea (patter, routine sketch, image prompt, ...)."""

    id: str
    title: str = ""
    description: Optional[str] = None
    content: Optional[str] = None
    tags: Tuple[str, ...] = ()
    timestamp: Optional[datetime] = None

    @property
    def notes(self) -> Optional[str]:
        return None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Idea":
        """Build an Idea from a raw storage record."""
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=_optional_text(data.get("description")),
            content=_optional_text(data.get("content")),
            tags=_coerce_tags(data.get("tags")),
            timestamp=resolve_timestamp(data),
        )


@dataclass(frozen=True)
class Corpus:
    """
    Immutable snapshot of everything global search can see.

    Factory methods:
        from_dict(data) - Build from plain dicts with "shows" and "ideas" lists
    """

    shows: Tuple[Show, ...] = field(default_factory=tuple)
    ideas: Tuple[Idea, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Corpus":
        """
        Build a corpus snapshot from raw records.

        Args:
            data: Mapping with optional "shows" and "ideas" lists of records

        Returns:
            Corpus with every record converted to its frozen entity type
        """
        return cls(
            shows=tuple(Show.from_dict(show) for show in data.get("shows") or ()),
            ideas=tuple(Idea.from_dict(idea) for idea in data.get("ideas") or ()),
        )

    def iter_tasks(self) -> Iterator[Tuple[Show, Task]]:
        """Yield (owning show, task) pairs in show order."""
        for show in self.shows:
            for task in show.tasks:
                yield show, task
