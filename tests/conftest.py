"""Shared fixtures for query parser tests."""

from __future__ import annotations

import pytest

from mongo_query_parser import QueryParser, ValueTyper, build_casters


@pytest.fixture
def parser() -> QueryParser:
    """Parser with default options."""
    return QueryParser()


@pytest.fixture
def typer() -> ValueTyper:
    """Value typer with only the built-in casters."""
    return ValueTyper(build_casters())
