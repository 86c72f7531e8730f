"""ParserOptions — immutable configuration for ``QueryParser``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

OPERATORS: tuple[str, ...] = ("select", "populate", "sort", "skip", "limit", "filter")


class ParserOptions(BaseModel):
    """Parser configuration.

    Accepts snake_case names or their camelCase aliases
    (``dateFormat``, ``castParams``, ``selectKey``, ...).

    Attributes:
        date_format: ``strptime`` patterns tried in order when detecting
            dates. Empty means ISO-8601 only.
        blacklist: Fields that never become filter clauses.
        casters: Named casters, merged over the built-in ``string`` and
            ``date`` casters.
        cast_params: Field name -> caster name applied before type inference.
        select_key, populate_key, sort_key, skip_key, limit_key, filter_key:
            Query parameter names for each operator.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date_format: tuple[str, ...] = Field(default=(), alias="dateFormat")
    blacklist: tuple[str, ...] = ()
    casters: dict[str, Callable[[str], Any]] = Field(default_factory=dict)
    cast_params: dict[str, str] = Field(default_factory=dict, alias="castParams")
    select_key: str = Field(default="select", alias="selectKey")
    populate_key: str = Field(default="populate", alias="populateKey")
    sort_key: str = Field(default="sort", alias="sortKey")
    skip_key: str = Field(default="skip", alias="skipKey")
    limit_key: str = Field(default="limit", alias="limitKey")
    filter_key: str = Field(default="filter", alias="filterKey")

    @field_validator("date_format", "blacklist", mode="before")
    @classmethod
    def _coerce_sequence(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("casters", "cast_params", mode="before")
    @classmethod
    def _coerce_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    def operator_key(self, operator: str) -> str:
        """Query parameter name bound to ``operator``."""
        return getattr(self, f"{operator}_key")

    @property
    def operator_keys(self) -> dict[str, str]:
        return {operator: self.operator_key(operator) for operator in OPERATORS}
