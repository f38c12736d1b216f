"""
Search result data structures for the Search context.

Hits are query-specific projections of corpus entities. They are frozen and
rebuilt from scratch on every evaluation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

# Number of badges a result row shows; all badges are still computed
MAX_DISPLAY_BADGES = 2


class Badge(str, Enum):
    """Short classification label explaining how a hit matched."""

    EXACT_MATCH = "Exact Match"
    RELATED = "Related"
    SUGGESTED = "Suggested"
    RECENT = "Recent"


class HitType(str, Enum):
    SHOW = "show"
    TASK = "task"
    IDEA = "idea"


class QueryMode(str, Enum):
    """Whether the active query came from a selected tag or from typed text."""

    TAG = "tag"
    TEXT = "text"


class SearchScope(str, Enum):
    """Entity types participating in an evaluation."""

    ALL = "all"
    SHOWS = "shows"
    TASKS = "tasks"
    IDEAS = "ideas"
    CLIENTS = "clients"
    FILES = "files"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def disabled(self) -> bool:
        """Placeholder scopes that are accepted but never return results."""
        return self in (SearchScope.CLIENTS, SearchScope.FILES)

    def includes(self, hit_type: HitType) -> bool:
        """True if hits of this type survive scope filtering."""
        if self is SearchScope.ALL:
            return True
        return self.value == f"{hit_type.value}s"


# Tab order of the scope selector
SCOPE_ORDER = (
    SearchScope.ALL,
    SearchScope.SHOWS,
    SearchScope.CLIENTS,
    SearchScope.IDEAS,
    SearchScope.TASKS,
    SearchScope.FILES,
)


@dataclass(frozen=True)
class NavigationTarget:
    """Where selecting a hit should take the user."""

    view: str
    entity_id: str
    secondary_id: Optional[str] = None


@dataclass(frozen=True)
class ScoreResult:
    score: int
    badges: Tuple[Badge, ...]


@dataclass(frozen=True)
class Hit:
    """
    Scored projection of one corpus entity for one query.

    Attributes:
        key: Unique key within an evaluation ("show:<id>", "task:<showId>:<taskId>", "idea:<id>")
        type: Entity type of the source
        title: Display title
        subtitle: Secondary line (description, or owning show for tasks)
        tags: Source tags in original casing and order
        score: Relevance score (always > 0)
        badges: Ordered badges (never empty)
        target: Navigation target handed to the caller on selection
    """

    key: str
    type: HitType
    title: str
    score: int
    badges: Tuple[Badge, ...]
    target: NavigationTarget
    subtitle: Optional[str] = None
    tags: Tuple[str, ...] = ()

    @property
    def display_badges(self) -> Tuple[Badge, ...]:
        return self.badges[:MAX_DISPLAY_BADGES]

    def navigate(self, on_navigate: Callable[[str, str, Optional[str]], None]) -> None:
        """Invoke the caller's navigation callback with this hit's target."""
        on_navigate(self.target.view, self.target.entity_id, self.target.secondary_id)


@dataclass(frozen=True)
class SearchResults:
    """
    Outcome of one evaluation.

    top_matches is a view over the scoped buckets, so a hit can appear both
    there and in its own type bucket. clients is always empty.
    """

    top_matches: Tuple[Hit, ...] = ()
    shows: Tuple[Hit, ...] = ()
    tasks: Tuple[Hit, ...] = ()
    ideas: Tuple[Hit, ...] = ()
    clients: Tuple[Hit, ...] = ()

    @property
    def has_any_results(self) -> bool:
        return bool(self.top_matches or self.shows or self.tasks or self.ideas)

    @property
    def total_hits(self) -> int:
        """Number of distinct hits across the type buckets."""
        return len(self.shows) + len(self.tasks) + len(self.ideas)

    def buckets(self) -> Tuple[Tuple[str, Tuple[Hit, ...]], ...]:
        """Type buckets in display order as (heading, hits) pairs."""
        return (
            ("Shows", self.shows),
            ("Clients", self.clients),
            ("Tasks", self.tasks),
            ("Ideas", self.ideas),
        )
