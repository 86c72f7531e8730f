"""Predefined queries — ``${name}`` placeholders resolved from a context.

A placeholder may appear in three positions of the parsed tree:

1. As a key: ``{"${qry}": {"$exists": true}}`` merges the referenced
   object into the parent; ``{"${qry}": "x"}`` renames the key to the
   referenced string.
2. As a value: ``{"prop": "${qry}"}`` -> ``{"prop": <qry>}``.
3. As a list item: ``["${qry}", ...]`` -> ``[<qry>, ...]``.

Regexes, dates and other scalars are leaves and are never descended into.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from .exceptions import InvalidPredefinedQueryError, MissingReferenceError

_logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"^\$\{([a-zA-Z_$][0-9a-zA-Z_$.]*)\}$")

_MISSING = object()

T = TypeVar("T")


def _lookup(context: Any, reference: str) -> Any:
    """Dotted property lookup: mapping keys, sequence indexes, then attributes."""
    node = context
    for part in reference.split("."):
        if isinstance(node, Mapping):
            node = node.get(part, _MISSING)
        elif (
            isinstance(node, Sequence)
            and not isinstance(node, str)
            and part.isdigit()
        ):
            index = int(part)
            node = node[index] if index < len(node) else _MISSING
        else:
            node = getattr(node, part, _MISSING)
        if node is _MISSING:
            return _MISSING
    return node


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping):
            base = dict(existing) if isinstance(existing, Mapping) else {}
            target[key] = _deep_merge(base, value)
        else:
            target[key] = value
    return target


class PredefinedQueryResolver:
    """Substitutes placeholders in a parsed tree against one context object."""

    def __init__(self, context: Any) -> None:
        self._context = context

    def resolve(self, node: Any) -> Any:
        match node:
            case Mapping():
                return self._resolve_mapping(node)
            case list() | tuple():
                return self._resolve_sequence(node)
            case _:
                return node

    def _reference(self, text: Any) -> tuple[bool, Any]:
        """Return ``(is_placeholder, resolved_value)`` for ``text``."""
        if not isinstance(text, str):
            return False, None
        match = _PLACEHOLDER_RE.match(text)
        if match is None:
            return False, None
        reference = match.group(1)
        value = _lookup(self._context, reference)
        if value is _MISSING:
            raise MissingReferenceError(reference)
        _logger.debug("Resolved predefined query %r", reference)
        return True, value

    def _resolve_value(self, value: Any) -> Any:
        is_placeholder, resolved = self._reference(value)
        if is_placeholder:
            return resolved
        return self.resolve(value)

    def _resolve_mapping(self, node: Mapping[Any, Any]) -> dict[Any, Any]:
        result: dict[Any, Any] = {}
        for key, value in node.items():
            is_placeholder, resolved = self._reference(key)
            if is_placeholder:
                if (
                    isinstance(value, Mapping)
                    and "$exists" in value
                    and isinstance(resolved, Mapping)
                ):
                    _deep_merge(result, resolved)
                    continue
                if not isinstance(resolved, str):
                    raise InvalidPredefinedQueryError(key, resolved)
                key = resolved
            result[key] = self._resolve_value(value)
        return result

    def _resolve_sequence(self, node: Sequence[Any]) -> list[Any]:
        return [self._resolve_value(item) for item in node]


def resolve_predefined(tree: T, context: Any = None) -> T:
    """Resolve every ``${name}`` placeholder in ``tree`` against ``context``.

    Without a context the tree is returned untouched.
    """
    if context is None:
        return tree
    return PredefinedQueryResolver(context).resolve(tree)
