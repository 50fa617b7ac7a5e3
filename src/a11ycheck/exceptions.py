"""
Exception hierarchy for the boundary of a11ycheck.

The rule engine itself never raises; these errors belong to loading
documents from disk or over the network.
"""

from __future__ import annotations


class A11yCheckError(Exception):
    """Base class for all a11ycheck errors."""


class SourceError(A11yCheckError):
    """A document could not be obtained."""


class TargetNotFoundError(SourceError):
    """The audit target is neither a URL nor an existing path."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Target not found: {target}")
        self.target = target


class FetchError(SourceError):
    """Fetching a remote document failed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to load URL {url}: {reason}")
        self.url = url
        self.reason = reason
