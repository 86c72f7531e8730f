"""ValueTyper — raw query strings to typed values."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from .casters import ICaster
from .dates import parse_date
from .exceptions import InvalidCastError

_logger = logging.getLogger(__name__)

# string(true), _caster(123), $('test')
_CASTING_RE = re.compile(r"^([a-zA-Z_$][0-9a-zA-Z_$]*)\((.*)\)\Z")
# /foo_\d+/i
_REGEX_RE = re.compile(r"^/(.*)/(i?)\Z")
_ZERO_PADDED_RE = re.compile(r"^0[0-9]+")

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(
    r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
)
_RADIX_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")


def to_number(text: str) -> int | float | None:
    """Numeric coercion with JavaScript ``Number()`` rules.

    Returns ``None`` where ``Number()`` would produce ``NaN``. Blank text is
    not treated as zero.
    """
    stripped = text.strip()
    if not stripped:
        return None
    if _INTEGER_RE.match(stripped):
        return int(stripped)
    if _RADIX_RE.match(stripped):
        return int(stripped, 0)
    if _DECIMAL_RE.match(stripped):
        return float(stripped)
    infinity = _INFINITY_RE.match(stripped)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return None


class ValueTyper:
    """Infer booleans, numbers, dates, regexes, lists and custom types.

    Resolution order, first match wins:

    1. ``caster(payload)`` call syntax for a registered caster name.
    2. The caster bound to the field through ``cast_params``.
    3. Comma-separated lists, each element typed recursively.
    4. ``/pattern/`` or ``/pattern/i`` regex literals.
    5. ``true`` / ``false`` / ``null``.
    6. Numbers, except zero-padded text such as ``007``.
    7. Dates matching the configured formats.
    8. The raw string.
    """

    def __init__(
        self,
        casters: Mapping[str, ICaster],
        cast_params: Mapping[str, str] | None = None,
        date_formats: Sequence[str] = (),
    ) -> None:
        self._casters = casters
        self._cast_params = cast_params or {}
        self._date_formats = tuple(date_formats)

    def parse(self, value: str, key: str | None = None) -> Any:
        """Return the typed form of ``value``; ``key`` selects per-field casters."""
        casting = _CASTING_RE.match(value)
        if casting and casting.group(1) in self._casters:
            return self._cast(casting.group(1), casting.group(2))

        if key:
            caster_name = self._cast_params.get(key)
            if caster_name and caster_name in self._casters:
                return self._cast(caster_name, value)

        if "," in value:
            return [self.parse(item, key) for item in value.split(",")]

        regex = _REGEX_RE.match(value)
        if regex:
            flags = re.IGNORECASE if regex.group(2) else 0
            try:
                return re.compile(regex.group(1), flags)
            except re.error as exc:
                raise InvalidCastError(value, "regex") from exc

        if value == "true":
            return True
        if value == "false":
            return False
        if value == "null":
            return None

        if not _ZERO_PADDED_RE.match(value):
            number = to_number(value)
            if number is not None:
                return number

        date = parse_date(value, self._date_formats)
        if date.valid:
            return date.value

        return value

    def _cast(self, name: str, raw: str) -> Any:
        _logger.debug("Applying caster %r to %r", name, raw)
        try:
            return self._casters[name](raw)
        except InvalidCastError:
            raise
        except Exception as exc:
            raise InvalidCastError(raw, name) from exc
