"""Date detection for raw query values."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime
from typing import NamedTuple

from dateutil.parser import isoparse

_logger = logging.getLogger(__name__)

# YYYY-MM at least; bare years and compact forms are left to the number check.
_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}")


class DateParseResult(NamedTuple):
    valid: bool
    value: datetime | None


_INVALID = DateParseResult(valid=False, value=None)


def parse_date(value: str, formats: Sequence[str] = ()) -> DateParseResult:
    """Parse ``value`` against ``formats`` (``strptime`` patterns) in order.

    With no formats configured, only strict ISO-8601 text is accepted.
    """
    if not value or not value.strip():
        return _INVALID
    if not formats:
        if not _ISO_DATE_RE.match(value):
            return _INVALID
        try:
            return DateParseResult(valid=True, value=isoparse(value))
        except (ValueError, OverflowError):
            return _INVALID
    for fmt in formats:
        try:
            return DateParseResult(valid=True, value=datetime.strptime(value, fmt))
        except ValueError:
            continue
    _logger.debug("No date format matched %r", value)
    return _INVALID
