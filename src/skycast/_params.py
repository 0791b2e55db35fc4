"""Query parameter builder for provider requests."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are dropped. Sequences (other than strings) become a
    single comma-joined value, which is how Open-Meteo expects field lists.

    Args:
        **kwargs: Keyword arguments where keys are parameter names.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, str):
            params.append((key, ",".join(_format_value(v) for v in value)))
        else:
            params.append((key, _format_value(value)))
    return params
