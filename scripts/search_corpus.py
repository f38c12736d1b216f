#!/usr/bin/env python3
"""
Global Search CLI

Runs the cross-entity search engine over an exported corpus snapshot (YAML or
JSON with top-level "shows" and "ideas" lists).

Commands:
    search - Rank shows, tasks, and ideas for a query or a tag
    tags   - Show the tag-browsing view (every distinct tag in the corpus)

Examples:\n

    search_corpus.py search data/corpus.yaml birthday                 # Free-text query

    search_corpus.py search data/corpus.yaml --tag comedy             # Tag query

    search_corpus.py search data/corpus.yaml gala --scope tasks       # Restrict to tasks

    search_corpus.py search data/corpus.yaml gala --html              # Highlight as HTML

    search_corpus.py tags data/corpus.yaml
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from stagehand.contexts.corpus import CorpusLoadError, load_corpus
from stagehand.contexts.search import (
    ScoringConfigError,
    SearchInput,
    SearchScope,
    all_tags,
    corpus_counts,
    format_results_report,
    format_tags_report,
    highlight,
    load_scoring_weights,
    render_html,
    results_heading,
    search,
    status_text,
)
from stagehand.contexts.search.logger import setup_search_logger
from stagehand.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Search shows, tasks, and ideas in an exported corpus snapshot",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_or_exit(corpus_path: Path):
    try:
        return load_corpus(corpus_path)
    except CorpusLoadError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _terminal_mark(text: str) -> str:
    return typer.style(text, bold=True, fg=typer.colors.MAGENTA)


@app.command("search")
def search_command(
    corpus_path: Annotated[Path, typer.Argument(help="Corpus snapshot (YAML or JSON)")],
    query: Annotated[Optional[str], typer.Argument(help="Free-text query")] = None,
    tag: Annotated[
        Optional[str], typer.Option("--tag", "-t", help="Search by tag instead of text")
    ] = None,
    scope: Annotated[
        SearchScope, typer.Option("--scope", "-s", help="Entity types to include")
    ] = SearchScope.ALL,
    weights_path: Annotated[
        Optional[Path],
        typer.Option("--weights", "-w", help="YAML file overriding scoring weights"),
    ] = None,
    html: Annotated[
        bool, typer.Option("--html", help="Print top-match titles as highlighted HTML")
    ] = False,
):
    """
    Rank corpus items against a query or a tag.

    With no query and no tag, prints the tag-browsing view instead.
    """
    setup_search_logger(LOGS_PATH / f"search_{now():%Y%m%d_%H%M%S}", corpus_path=corpus_path)
    corpus = _load_or_exit(corpus_path)

    try:
        weights = load_scoring_weights(weights_path)
    except ScoringConfigError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    search_input = SearchInput(scope=scope).with_search_term(query or "")
    if tag:
        search_input = search_input.toggle_tag(tag)

    counts = corpus_counts(corpus)
    status = status_text(counts, search_input.scope, search_input.query)
    results = search(corpus, search_input, weights=weights)

    if results is None:
        typer.echo(format_tags_report(all_tags(corpus), status))
        return

    if html:
        for hit in results.top_matches:
            typer.echo(render_html(highlight(hit.title, search_input.query.highlight_text)))
        return

    typer.echo(
        format_results_report(
            results,
            search_input.query,
            heading=results_heading(search_input.query),
            status=status,
            scope=search_input.scope,
            mark=_terminal_mark,
        )
    )


@app.command("tags")
def tags_command(
    corpus_path: Annotated[Path, typer.Argument(help="Corpus snapshot (YAML or JSON)")],
):
    """List every distinct tag in the corpus, alphabetically."""
    corpus = _load_or_exit(corpus_path)
    status = status_text(corpus_counts(corpus), SearchScope.ALL, SearchInput().query)
    typer.echo(format_tags_report(all_tags(corpus), status))


if __name__ == "__main__":
    app()
