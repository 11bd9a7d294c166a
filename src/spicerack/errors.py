"""Exception hierarchy for spicerack validation failures.

All of these are recoverable from a caller's point of view. The concrete classes
also inherit from the matching builtin so callers that only know about
``ValueError``/``LookupError`` keep working.
"""

from __future__ import annotations


class SpicerackError(Exception):
    """Base class for spicerack errors."""


class InvalidNameError(SpicerackError, ValueError):
    """Raised when a spice name is empty or has no alphabetical bucket."""

    def __init__(self, name: str, reason: str = "name is empty after normalization"):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid spice name {name!r}: {reason}")


class NotFoundError(SpicerackError, LookupError):
    """Raised when an inventory entry, snapshot or submission does not exist."""


class ConfigurationError(SpicerackError, TypeError):
    """Raised for out-of-contract configuration such as a non-integer shelf count."""


__all__ = ["SpicerackError", "InvalidNameError", "NotFoundError", "ConfigurationError"]
