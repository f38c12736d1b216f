"""Custom exceptions for the corpus context."""

from pathlib import Path
from typing import Optional


class CorpusLoadError(Exception):
    """
    Exception raised when a corpus file cannot be turned into a snapshot.

    Attributes:
        message: Error description
        path: Corpus file that failed to load
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        if path is not None:
            super().__init__(f"{message}\nCorpus file: {path}")
        else:
            super().__init__(message)
