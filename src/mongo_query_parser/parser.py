"""QueryParser — query string/params -> MongoDB-friendly QueryOptions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .casters import build_casters
from .config import OPERATORS, ParserOptions
from .filters import cast_filter
from .pagination import cast_limit, cast_skip
from .populate import cast_populate
from .predefined import resolve_predefined
from .query_options import QueryOptions
from .query_string import decode_query_string
from .unaries import cast_select, cast_sort
from .values import ValueTyper

_logger = logging.getLogger(__name__)


class QueryParser:
    """Parse API query params into filter, sort, projection, pagination and populate.

    Example:
        ```python
        parser = QueryParser(blacklist=["token"])
        parser.parse("status=active&age>18&sort=-created&limit=10")
        # {"filter": {"status": "active", "age": {"$gt": 18}},
        #  "sort": {"created": -1}, "limit": 10}
        ```
    """

    def __init__(self, options: ParserOptions | None = None, **overrides: Any) -> None:
        """
        Initialize QueryParser.

        Args:
            options: Parser configuration.
            **overrides: ``ParserOptions`` fields (or their camelCase
                aliases), validated on top of ``options``.
        """
        if options is None:
            options = ParserOptions.model_validate(overrides)
        elif overrides:
            options = ParserOptions.model_validate(
                {**options.model_dump(), **overrides}
            )
        self._options = options
        self._keys = options.operator_keys
        self._blacklist = frozenset((*options.blacklist, *self._keys.values()))
        self._casters = build_casters(
            options.casters, date_formats=options.date_format
        )
        self._typer = ValueTyper(
            self._casters,
            cast_params=options.cast_params,
            date_formats=options.date_format,
        )
        self._builders: dict[str, Callable[[Any, Mapping[str, Any]], Any]] = {
            "select": lambda value, _: cast_select(value),
            "populate": lambda value, _: cast_populate(value),
            "sort": lambda value, _: cast_sort(value),
            "skip": lambda value, _: cast_skip(value),
            "limit": lambda value, _: cast_limit(value),
            "filter": self._cast_filter,
        }

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def blacklist(self) -> frozenset[str]:
        """Caller blacklist plus every operator key."""
        return self._blacklist

    def parse(
        self,
        query: str | Mapping[str, Any],
        context: Any = None,
    ) -> QueryOptions:
        """Parse a query string (or decoded params) into ``QueryOptions``.

        Args:
            query: Raw query string or an already-decoded mapping.
            context: Object that ``${name}`` placeholders resolve against.
        """
        params = decode_query_string(query) if isinstance(query, str) else query
        result: dict[str, Any] = {}
        for operator in OPERATORS:
            value = params.get(self._keys[operator])
            if value or operator == "filter":
                result[operator] = self._builders[operator](value, params)
        _logger.debug("Parsed query options: %s", sorted(result))
        return resolve_predefined(result, context)  # type: ignore[return-value]

    def parse_value(self, value: str, key: str | None = None) -> Any:
        """Type a single raw value (see ``ValueTyper``)."""
        return self._typer.parse(value, key)

    def _cast_filter(self, value: Any, params: Mapping[str, Any]) -> dict[str, Any]:
        return cast_filter(value, params, typer=self._typer, blacklist=self._blacklist)
