"""Exceptions raised while reconstructing release history.

Every error derives from ReleaseCadenceError. Input problems also derive
from ValueError so callers can treat them as invalid input.
"""

from typing import Optional


class ReleaseCadenceError(Exception):
    """Base class for all release-cadence errors."""


class InvalidVersionError(ReleaseCadenceError, ValueError):
    """A version identifier is malformed."""


class TagParseError(ReleaseCadenceError, ValueError):
    """A tag matched the expected shape but one of its fields is invalid."""

    def __init__(self, message: str, tag: str, detail: Optional[str] = None):
        self.tag = tag
        self.detail = detail
        if detail:
            message = f"{message} in: {tag}: {detail}"
        else:
            message = f"{message} in: {tag}"
        super().__init__(message)


class MalformedTimestampError(TagParseError):
    """The tag's timestamp does not match the expected date format."""

    def __init__(self, tag: str, detail: Optional[str] = None):
        super().__init__("could not parse date", tag, detail)


class MalformedSequenceError(TagParseError):
    """The tag's release number is not an unsigned integer."""

    def __init__(self, tag: str, detail: Optional[str] = None):
        super().__init__("could not parse release number", tag, detail)


class OutOfOrderError(ReleaseCadenceError, ValueError):
    """A release arrived before one it should follow (strict mode only)."""
