"""Shared fixtures for search tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from stagehand.contexts.corpus import Corpus, Idea, Show, Task

FIXTURES_PATH = Path(__file__).parent / "fixtures"
NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fixtures_path():
    return FIXTURES_PATH


@pytest.fixture
def gala_corpus():
    """Small corpus with one of each entity type and no recency signals."""
    return Corpus(
        shows=(
            Show(
                id="s1",
                title="Birthday Surprise Gala",
                description="Evening show for a corporate client",
                tags=("comedy", "Kids"),
                tasks=(
                    Task(id="t1", title="Reset tables", notes="after the birthday cake"),
                    Task(id="t2", title="Pack props", tags=("logistics",)),
                ),
            ),
            Show(id="s2", title="Corporate Close-up", tags=("corporate",)),
        ),
        ideas=(
            Idea(id="i1", title="Closer trick", content="A birthday card rises from the deck"),
            Idea(id="i2", title="Comedy patter", tags=("comedy-club",)),
        ),
    )


@pytest.fixture
def recent_task_corpus():
    """Corpus with a task created one day before NOW."""
    return Corpus(
        shows=(
            Show(
                id="s9",
                title="Harbor Show",
                tasks=(Task(id="t1", title="Reset tables", timestamp=NOW - timedelta(days=1)),),
            ),
        ),
    )
