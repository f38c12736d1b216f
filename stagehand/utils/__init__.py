"""
Shared utilities for STAGEHAND.

Common functionality used across contexts:
- Logger setup
- Timestamp parsing
- Text report formatting
"""

from stagehand.utils.timestamp import now, parse_timestamp

__all__ = ["now", "parse_timestamp"]
