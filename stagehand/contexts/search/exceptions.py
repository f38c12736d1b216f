"""Custom exceptions for the search context."""

from pathlib import Path
from typing import Optional


class ScoringConfigError(ValueError):
    """
    Exception raised when scoring weight overrides cannot be applied.

    Attributes:
        message: Error description
        config_path: Weights file that was being loaded, if any
        field_name: Offending weight, if the problem is a single value
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        field_name: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.field_name = field_name

        parts = [message]
        if field_name:
            parts.append(f"Field: {field_name}")
        if config_path:
            parts.append(f"Weights file: {config_path}")

        super().__init__("\n".join(parts))
