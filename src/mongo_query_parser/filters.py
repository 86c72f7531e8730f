"""Filter builder — flat ``key=value`` tokens to a MongoDB filter document.

Each query parameter is rebuilt as a single token (``key`` when its value
is blank, ``key=value`` otherwise) and split into::

    [!]field[operator]value

===========  ===========
operator     clause
===========  ===========
``=``        ``$eq`` (stored as the plain value)
``!=``       ``$ne`` (``$nin`` for lists, ``$not`` for regex/date/objects)
``>``        ``$gt``
``>=``       ``$gte``
``<``        ``$lt``
``<=``       ``$lte``
(none)       ``$exists`` (``!field`` for "does not exist")
===========  ===========

List values become ``$in`` (or ``$nin`` with ``!=``) whatever the operator.
Tokens for the same field merge into one clause in input order.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from collections.abc import Collection, Mapping
from datetime import date
from typing import Any, NamedTuple

from .exceptions import InvalidJsonError
from .values import ValueTyper

_logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(!?)([^><!=]+)([><]=?|!?=|)(.*)")

_OPERATORS: dict[str, str] = {
    "=": "$eq",
    "!=": "$ne",
    ">": "$gt",
    ">=": "$gte",
    "<": "$lt",
    "<=": "$lte",
    "": "$exists",
}


class FilterToken(NamedTuple):
    negated: bool
    field: str
    operator: str
    raw_value: str


def parse_operator(operator: str) -> str:
    """Map comparison text (``>=``, ``!=``, ...) to its MongoDB operator."""
    return _OPERATORS[operator]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(_stringify(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, default=str)
    return str(value)


def tokenize(key: str, value: Any = None) -> FilterToken | None:
    """Split one query parameter into prefix, field, operator and value text.

    Returns ``None`` when nothing in the token looks like a field name.
    """
    token = key if value is None or value == "" else f"{key}={_stringify(value)}"
    match = _TOKEN_RE.search(token)
    if match is None:
        return None
    prefix, field, operator, raw_value = match.groups()
    return FilterToken(
        negated=prefix == "!",
        field=field,
        operator=parse_operator(operator),
        raw_value=raw_value,
    )


def parse_filter_seed(raw: Any) -> dict[str, Any]:
    """Decode the raw ``filter`` parameter (JSON text or mapping)."""
    if isinstance(raw, Mapping):
        return copy.deepcopy(dict(raw))
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidJsonError(str(raw)) from exc
    if not isinstance(data, dict):
        raise InvalidJsonError(str(raw))
    return data


def _is_object(value: Any) -> bool:
    return isinstance(value, re.Pattern | date | Mapping)


def apply_token(
    result: dict[str, Any],
    token: FilterToken,
    value: Any,
) -> dict[str, Any]:
    """Merge one typed token into ``result`` in place."""
    field, op = token.field, token.operator

    if op == "$eq" and not isinstance(value, list):
        result[field] = value
        return result

    clause = result.get(field)
    if not isinstance(clause, dict):
        # A plain equality value is dropped when another operator follows it.
        clause = result[field] = {}

    if isinstance(value, list):
        clause["$nin" if op == "$ne" else "$in"] = value
    elif op == "$exists":
        clause[op] = not token.negated
    elif op == "$ne" and _is_object(value):
        clause["$not"] = value
    else:
        clause[op] = value
    return result


def cast_filter(
    raw_filter: Any,
    params: Mapping[str, Any],
    *,
    typer: ValueTyper,
    blacklist: Collection[str] = (),
) -> dict[str, Any]:
    """Fold every non-blacklisted parameter into one filter document.

    ``raw_filter`` (JSON text or a mapping) seeds the result; parameters
    are applied on top of it in their input order.
    """
    result = parse_filter_seed(raw_filter) if raw_filter else {}
    for key, value in params.items():
        token = tokenize(key, value)
        if token is None:
            _logger.debug("Skipping unparseable filter parameter %r", key)
            continue
        value = typer.parse(token.raw_value, token.field)
        if token.field in blacklist:
            continue
        apply_token(result, token, value)
    return result
