"""Decode a raw URL query string into an ordered parameter mapping."""

from __future__ import annotations

from urllib.parse import parse_qsl


def decode_query_string(raw: str) -> dict[str, str | list[str]]:
    """``a=1&b&a=2`` -> ``{"a": ["1", "2"], "b": ""}``.

    Keys keep the order of their first appearance; a repeated key
    collects its values into a list.
    """
    if raw.startswith("?"):
        raw = raw[1:]
    params: dict[str, str | list[str]] = {}
    for key, value in parse_qsl(raw, keep_blank_values=True):
        existing = params.get(key)
        if existing is None:
            params[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            params[key] = [existing, value]
    return params
