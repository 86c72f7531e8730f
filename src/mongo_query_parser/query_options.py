"""
Result shapes produced by ``QueryParser.parse``.

``QueryOptions`` maps directly onto a Mongoose/MongoDB query: ``filter``
is always present, every other key only when its parameter was supplied.
"""

from __future__ import annotations

from typing import Any, TypedDict

from typing_extensions import NotRequired


class PopulateDescriptor(TypedDict):
    """One dotted relation path; ``populate`` holds the next segment."""

    path: str
    select: NotRequired[str]
    match: NotRequired[dict[str, Any]]
    populate: NotRequired[PopulateDescriptor]


class QueryOptions(TypedDict):
    """
    Parsed query options.

    Attributes:
        filter: MongoDB filter document.
        sort: Field ordering, e.g. ``{"field": 1, "field2": -1}``.
        limit: Maximum number of documents.
        skip: Number of documents to skip.
        select: Projection, e.g. ``{"field": 0, "field2": 0}``.
        populate: Relation paths to expand.
    """

    filter: dict[str, Any]
    sort: NotRequired[dict[str, Any]]
    limit: NotRequired[int | float | None]
    skip: NotRequired[int | float | None]
    select: NotRequired[dict[str, Any]]
    populate: NotRequired[list[PopulateDescriptor]]
