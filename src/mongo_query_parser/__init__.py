"""Query string -> MongoDB query options: filter, sort, select, pagination, populate."""

from __future__ import annotations

from .casters import DateCaster, ICaster, build_casters, cast_string
from .config import ParserOptions
from .dates import DateParseResult, parse_date
from .exceptions import (
    InvalidCastError,
    InvalidJsonError,
    InvalidPredefinedQueryError,
    MissingReferenceError,
    QueryParserError,
)
from .filters import FilterToken, cast_filter, parse_operator, tokenize
from .pagination import cast_limit, cast_skip
from .parser import QueryParser
from .populate import cast_populate
from .predefined import PredefinedQueryResolver, resolve_predefined
from .query_options import PopulateDescriptor, QueryOptions
from .query_string import decode_query_string
from .unaries import cast_select, cast_sort, parse_unaries
from .values import ValueTyper, to_number

__all__ = [
    "DateCaster",
    "DateParseResult",
    "FilterToken",
    "ICaster",
    "InvalidCastError",
    "InvalidJsonError",
    "InvalidPredefinedQueryError",
    "MissingReferenceError",
    "ParserOptions",
    "PopulateDescriptor",
    "PredefinedQueryResolver",
    "QueryOptions",
    "QueryParser",
    "QueryParserError",
    "ValueTyper",
    "build_casters",
    "cast_filter",
    "cast_limit",
    "cast_populate",
    "cast_select",
    "cast_skip",
    "cast_sort",
    "cast_string",
    "decode_query_string",
    "parse_date",
    "parse_operator",
    "parse_unaries",
    "resolve_predefined",
    "to_number",
]
