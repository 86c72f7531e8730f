"""Named casters: ``string(...)``, ``date(...)`` and caller-supplied ones."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from types import MappingProxyType
from typing import Any, Protocol

from .dates import parse_date


class ICaster(Protocol):
    """Convert a raw query string into a typed value."""

    def __call__(self, raw: str) -> Any: ...


def cast_string(raw: str) -> str:
    return str(raw)


class DateCaster:
    """Strict date caster; raises instead of falling back to the raw text."""

    def __init__(self, formats: Sequence[str] = ()) -> None:
        self._formats = tuple(formats)

    def __call__(self, raw: str) -> datetime:
        result = parse_date(raw, self._formats)
        if not result.valid or result.value is None:
            raise ValueError(f"Invalid date string: [{raw}]")
        return result.value


def build_casters(
    custom: Mapping[str, Callable[[str], Any]] | None = None,
    *,
    date_formats: Sequence[str] = (),
) -> Mapping[str, ICaster]:
    """Return a read-only registry of built-in casters overridden by ``custom``."""
    casters: dict[str, ICaster] = {
        "string": cast_string,
        "date": DateCaster(date_formats),
    }
    if custom:
        casters.update(custom)
    return MappingProxyType(casters)
