"""Populate builder — dotted relation paths to nested expansion descriptors.

``populate=field1.p1,field2`` becomes::

    [{"path": "field1", "populate": {"path": "p1"}}, {"path": "field2"}]

The last segment of a path may carry a selection and a match clause,
``field:a:b$status~active``::

    {
        "path": "field",
        "select": "a b",
        "match": {"status": {"$regex": "active", "$options": "i"}},
    }

``~`` matches case-insensitively by regex, ``-`` matches a literal value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .query_options import PopulateDescriptor


def _match_clause(text: str) -> dict[str, Any] | None:
    if "~" in text:
        parts = text.split("~")
        return {parts[0]: {"$regex": parts[1], "$options": "i"}}
    if "-" in text:
        parts = text.split("-")
        return {parts[0]: parts[1]}
    return None


def _terminal(segment: str) -> PopulateDescriptor:
    if ":" not in segment:
        return {"path": segment}

    elements = segment.split(":")
    last = elements[-1]
    marker = last.find("$")
    match = None
    if marker != -1:
        match = _match_clause(last[marker + 1 :])
        elements[-1] = last[:marker]

    descriptor: PopulateDescriptor = {
        "path": elements[0],
        "select": " ".join(elements[1:]),
    }
    if match is not None:
        descriptor["match"] = match
    return descriptor


def _descriptor(segments: list[str], index: int = 0) -> PopulateDescriptor:
    nxt = index + 1
    if nxt < len(segments) and segments[nxt]:
        return {"path": segments[index], "populate": _descriptor(segments, nxt)}
    return _terminal(segments[index])


def cast_populate(
    raw: str | Iterable[Any],
) -> list[PopulateDescriptor]:
    """Parse a comma-separated list of dotted paths into populate descriptors.

    Already-built descriptors (a list of mappings) are copied through.
    """
    if isinstance(raw, str):
        return [_descriptor(path.split(".")) for path in raw.split(",")]
    result: list[PopulateDescriptor] = []
    for item in raw:
        if isinstance(item, Mapping):
            result.append(dict(item))  # type: ignore[arg-type]
        else:
            result.extend(cast_populate(str(item)))
    return result
