"""
autoindex - Exceptions

Failure conditions raised by the index pipeline. None of them are recovered
inside the pipeline; each aborts the current render pass.
"""

from typing import Optional


class AutoIndexError(Exception):
    """Base exception for autoindex operations."""


class LookupNotFound(AutoIndexError):
    """No page in the tree has the requested path."""

    def __init__(self, path: str):
        super().__init__(f"No page found for path '{path}'")
        self.path = path


class TransportFailure(AutoIndexError):
    """The wiki API request failed or returned an unusable response."""


class RecursionAborted(TransportFailure):
    """A transport failure occurred while expanding a descendant level."""

    def __init__(self, page_id: int, level: int, cause: Optional[Exception] = None):
        super().__init__(
            f"Tree fetch aborted at page {page_id} (level {level}): {cause}"
        )
        self.page_id = page_id
        self.level = level
