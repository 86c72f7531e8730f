"""Unary lists (``+a,-b,c``) for sort and select."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_UNARY_RE = re.compile(r"^(\+|-)?(.*)")


def parse_unaries(
    unaries: str | Iterable[str],
    plus: int = 1,
    minus: int = -1,
) -> dict[str, int]:
    """Map ``'+a,-b,c'`` (or ``['+a', '-b', 'c']``) to ``{a: plus, b: minus, c: plus}``.

    Names are stripped so a ``+`` decoded to a space by form decoding
    still reads as ascending.
    """
    items = unaries.split(",") if isinstance(unaries, str) else unaries
    result: dict[str, int] = {}
    for item in items:
        sign, name = _UNARY_RE.match(item).groups()  # type: ignore[union-attr]
        name = name.strip()
        if not name:
            continue
        result[name] = minus if sign == "-" else plus
    return result


def cast_sort(raw: str | Iterable[str] | Mapping[str, Any]) -> dict[str, Any]:
    """``sort=-a,b`` -> ``{a: -1, b: 1}``."""
    if isinstance(raw, Mapping):
        return dict(raw)
    return parse_unaries(raw)


def cast_select(raw: str | Iterable[str] | Mapping[str, Any]) -> dict[str, Any]:
    """``select=a,b`` -> ``{a: 1, b: 1}``; ``select=-a,-b`` -> ``{a: 0, b: 0}``.

    MongoDB: "A projection cannot contain both include and exclude
    specifications, except for the exclusion of the _id field." On a mix
    the inclusions are dropped and the projection keeps its exclusions.
    """
    if isinstance(raw, Mapping):
        fields = dict(raw)
    else:
        fields = parse_unaries(raw, plus=1, minus=0)

    polarities = {value for key, value in fields.items() if key != "_id"}
    if len(polarities) > 1:
        fields = {
            key: value
            for key, value in fields.items()
            if key == "_id" or value != 1
        }
    return fields
