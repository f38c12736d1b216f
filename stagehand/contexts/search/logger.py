"""
Search context logger.

Provides logging interface for search context with automatic [search] prefix.
All search modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from stagehand.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[search]"


def setup_search_logger(log_dir: Path, corpus_path: Path = None, console_level: str = "WARNING") -> Path:
    """
    Setup logger for search context.

    Args:
        log_dir: Directory for this search session
        corpus_path: Corpus file being searched, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="search",
        log_dir=log_dir,
        extra_provenance={"Corpus": corpus_path} if corpus_path else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [search] prefix


def _log_info(message: str) -> None:
    """Log info message with [search] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [search] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [search] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level search-specific logging helpers


def log_evaluation_start(query, scope, shows: int, ideas: int) -> None:
    """Log start of an evaluation with the snapshot size."""
    _log_debug(
        f"Evaluating {query.mode.value} query {query.text!r} (scope={scope.value}) "
        f"over {shows} shows and {ideas} ideas"
    )


def log_evaluation_result(results, elapsed_time: float) -> None:
    """
    Log bucket sizes of a finished evaluation.

    Args:
        results: SearchResults from evaluate()
        elapsed_time: Time taken in seconds
    """
    if not results.has_any_results:
        _log_debug(f"No results ({elapsed_time * 1000:.1f}ms)")
        return

    _log_debug(
        f"{len(results.shows)} shows, {len(results.tasks)} tasks, {len(results.ideas)} ideas; "
        f"top matches: {len(results.top_matches)} ({elapsed_time * 1000:.1f}ms)"
    )
    if results.top_matches:
        best = results.top_matches[0]
        _log_debug(f"  Best: {best.key} score={best.score} badges={[b.value for b in best.badges]}")


def log_placeholder_scope(scope) -> None:
    """Log evaluation against a scope that never yields results."""
    _log_debug(f"Scope {scope.value!r} is a placeholder; returning empty buckets")
