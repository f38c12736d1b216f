"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for search result listings.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment, clipping text that overflows the column."""
        text = str(value)
        if len(text) > self.width:
            text = text[: max(self.width - 1, 0)] + "…"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        """Add horizontal separator line."""
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Args:
            values: List of values (one per column)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_blank_line(self) -> "TableFormatter":
        """Add blank line."""
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        """Add arbitrary text line."""
        self.lines.append(text)
        return self

    def render(self) -> str:
        """
        Render accumulated lines to string.

        Returns:
            Formatted report string
        """
        return "\n".join(self.lines)
