"""
Query parser exception hierarchy.

All exceptions inherit from ``QueryParserError`` and provide
``to_dict()`` for API-friendly error responses. Every error carries the
offending raw text so a failed request can be traced back to its input.
"""

from __future__ import annotations

from typing import Any


class QueryParserError(Exception):
    """Base exception for all query parsing errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidJsonError(QueryParserError, ValueError):
    """The raw filter seed is not a valid JSON object."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid JSON string: {raw}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_JSON",
            "message": str(self),
            "raw": self.raw,
        }


class InvalidCastError(QueryParserError, ValueError):
    """A named caster failed to convert a value."""

    def __init__(self, raw: str, caster: str | None = None) -> None:
        self.raw = raw
        self.caster = caster
        if caster:
            message = f"Caster '{caster}' failed to convert [{raw}]"
        else:
            message = f"Failed to convert [{raw}]"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_CAST",
            "message": str(self),
            "raw": self.raw,
            "caster": self.caster,
        }


class MissingReferenceError(QueryParserError, LookupError):
    """A ``${name}`` placeholder has no value in the supplied context."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(
            f"No predefined query found for the provided reference [{reference}]"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_REFERENCE",
            "message": str(self),
            "reference": self.reference,
        }


class InvalidPredefinedQueryError(QueryParserError, ValueError):
    """A placeholder key resolved to something that cannot be used as a key."""

    def __init__(self, key: str, resolved: Any = None) -> None:
        self.key = key
        self.resolved = resolved
        super().__init__(f"Invalid query string at {key}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PREDEFINED_QUERY",
            "message": str(self),
            "key": self.key,
        }
