"""Skip/limit coercion from query params."""

from __future__ import annotations

import logging
from typing import Any

from .values import to_number

_logger = logging.getLogger(__name__)


def _number_param(name: str, raw: Any) -> int | float | None:
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int | float):
        return raw
    number = to_number(str(raw))
    if number is None:
        _logger.debug("Non-numeric %s value %r", name, raw)
    return number


def cast_skip(raw: Any) -> int | float | None:
    """``skip=100`` -> ``100``."""
    return _number_param("skip", raw)


def cast_limit(raw: Any) -> int | float | None:
    """``limit=10`` -> ``10``."""
    return _number_param("limit", raw)
