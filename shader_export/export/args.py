"""Filtering of raw node fields down to JSON-safe export arguments."""

from collections.abc import Mapping
from typing import Any

from ..core.types import UNSET, JsonValue

_SCALAR_TYPES = (str, int, float, bool)


def to_json_safe(value: Any) -> tuple[bool, JsonValue]:
    """Check a value against the JSON-safe domain.

    Only the top level is inspected; nested containers are assumed to be
    well formed. Tuples are emitted as lists and mappings as dicts.

    Returns:
        ``(accepted, value)``
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return True, value
    if isinstance(value, list):
        return True, value
    if isinstance(value, tuple):
        return True, list(value)
    if isinstance(value, Mapping):
        return True, dict(value)
    return False, None


def collect_args(raw: Mapping[str, Any]) -> dict[str, JsonValue] | None:
    """Keep the defined, JSON-safe entries of ``raw``.

    Entries set to ``UNSET`` are treated as not provided.

    Returns:
        The filtered mapping, or None when nothing qualifies so the caller
        can omit ``args`` entirely
    """
    args: dict[str, JsonValue] = {}
    for key, value in raw.items():
        if value is UNSET:
            continue
        accepted, safe_value = to_json_safe(value)
        if accepted:
            args[key] = safe_value
    return args or None
