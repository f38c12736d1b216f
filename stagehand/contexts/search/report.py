"""
Plain-text rendering of search results and the tag-browsing view.

Used by the command-line interface. Matched substrings are passed through a
caller-supplied marker so the same report can be styled for a terminal or
left as plain text.
"""

from typing import Callable, List, Optional

from stagehand.contexts.search.highlighter import make_highlighter, tag_matches_query
from stagehand.contexts.search.query import NormalizedQuery
from stagehand.contexts.search.search_data_structure import Hit, SearchResults, SearchScope
from stagehand.utils.report_formatter import Column, TableFormatter

REPORT_WIDTH = 80

RESULT_COLUMNS = [
    Column("Score", 5, ">"),
    Column("Badges", 24),
    Column("Title", 49),
]


def _plain(text: str) -> str:
    return text


def _join_segments(segments, mark: Callable[[str], str]) -> str:
    return "".join(mark(s.text) if s.matched else s.text for s in segments)


def _format_hit(hit: Hit, query: NormalizedQuery, mark: Callable[[str], str]) -> List[str]:
    render_highlighted = make_highlighter(query)
    badges = ", ".join(badge.value for badge in hit.display_badges)
    # Title goes last so markers never disturb column alignment
    header = " ".join(
        [
            RESULT_COLUMNS[0].format_value(hit.score),
            RESULT_COLUMNS[1].format_value(badges),
            _join_segments(render_highlighted(hit.title), mark),
        ]
    )
    lines = [header.rstrip()]

    indent = " " * (RESULT_COLUMNS[0].width + RESULT_COLUMNS[1].width + 2)
    if hit.subtitle:
        lines.append(indent + _join_segments(render_highlighted(hit.subtitle), mark))
    if hit.tags:
        chips = [mark(f"#{tag}") if tag_matches_query(tag, query) else f"#{tag}" for tag in hit.tags]
        lines.append(indent + " ".join(chips))
    return lines


def format_results_report(
    results: SearchResults,
    query: NormalizedQuery,
    heading: str,
    status: str,
    scope: SearchScope = SearchScope.ALL,
    mark: Optional[Callable[[str], str]] = None,
) -> str:
    """
    Render a results report: status line, heading, top matches, then type buckets.

    Args:
        results: Evaluation output
        query: Query used for the evaluation (drives highlighting)
        heading: Results heading (see results_heading)
        status: Status line (see status_text)
        scope: Active scope; the clients placeholder is listed for all/clients
        mark: Styler for matched substrings (defaults to no styling)

    Returns:
        Multi-line report string
    """
    mark = mark or _plain
    scope = SearchScope(scope)
    report = TableFormatter(RESULT_COLUMNS, total_width=REPORT_WIDTH)
    report.add_text(status).add_blank_line().add_section_header(heading)

    if not results.has_any_results:
        report.add_text("No results found. Try a different keyword or choose a tag.")
        return report.render()

    show_clients_placeholder = scope in (SearchScope.ALL, SearchScope.CLIENTS)
    sections = [("Top Matches", results.top_matches)] + [
        (f"{name} ({len(hits)})", hits) for name, hits in results.buckets()
    ]
    for title, hits in sections:
        if title.startswith("Clients"):
            if show_clients_placeholder:
                report.add_blank_line().add_text("Clients").add_separator()
                report.add_text("Clients search is coming soon.")
            continue
        if not hits:
            continue
        report.add_blank_line().add_text(title).add_separator()
        report.add_table_header().add_separator()
        for hit in hits:
            for line in _format_hit(hit, query, mark):
                report.add_text(line)

    return report.render()


def format_tags_report(tags: List[str], status: str) -> str:
    """Render the tag-browsing view shown when there is no query."""
    report = TableFormatter([Column("Tag", REPORT_WIDTH)], total_width=REPORT_WIDTH)
    report.add_text(status).add_blank_line().add_section_header("All Tags")
    if not tags:
        report.add_text(
            "No tags found. Add tags to your shows, tasks, and ideas to organize them here."
        )
        return report.render()

    for tag in tags:
        report.add_row([tag])
    return report.render()
