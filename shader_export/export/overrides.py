"""Caller-supplied customisation of node extraction."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..core.exceptions import InvalidOverrideError
from ..core.types import NodeExport

OverrideFunction = Callable[[Any], Union[NodeExport, Mapping[str, Any], None]]


@dataclass(frozen=True)
class Static:
    """Fixed record returned for every node of a type.

    Each resolution returns a fresh copy, so callers may modify results.
    """

    record: NodeExport

    def resolve(self, node: Any) -> NodeExport:  # noqa: ARG002
        return self.record.copy()


@dataclass(frozen=True)
class Dynamic:
    """Function computing the record for a node.

    A None result defers to the built-in extraction rule.
    """

    func: OverrideFunction

    def resolve(self, node: Any) -> NodeExport | None:
        result = self.func(node)
        if result is None or isinstance(result, NodeExport):
            return result
        if isinstance(result, Mapping):
            return NodeExport.from_mapping(result)
        raise InvalidOverrideError(
            f"Override {self.func!r} returned {type(result).__name__}, "
            "expected NodeExport, mapping or None"
        )


Override = Union[Static, Dynamic]


def to_override(key: str, value: Any) -> Override:
    """Normalise one override table entry."""
    if isinstance(value, (Static, Dynamic)):
        return value
    if isinstance(value, NodeExport):
        return Static(value)
    if isinstance(value, Mapping):
        try:
            return Static(NodeExport.from_mapping(value))
        except ValueError as e:
            raise InvalidOverrideError(f"Invalid override for '{key}': {e}") from e
    if callable(value):
        return Dynamic(value)
    raise InvalidOverrideError(
        f"Override for '{key}' must be a record or a callable, "
        f"got {type(value).__name__}"
    )


class OverrideTable:
    """Overrides keyed by op code (type name or shared node name)."""

    def __init__(self, overrides: Mapping[str, Override] | None = None):
        self._overrides: dict[str, Override] = dict(overrides or {})

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "OverrideTable":
        """Build a table from records, callables or tagged overrides."""
        if isinstance(mapping, OverrideTable):
            return mapping
        entries = {key: to_override(key, value) for key, value in (mapping or {}).items()}
        return cls(entries)

    def resolve(self, key: str, node: Any) -> NodeExport | None:
        """Apply the override for ``key`` to ``node``.

        Returns:
            The override's record, or None when there is no override or a
            dynamic override deferred
        """
        override = self._overrides.get(key)
        if override is None:
            return None
        return override.resolve(node)

    def __contains__(self, key: str) -> bool:
        return key in self._overrides

    def __len__(self) -> int:
        return len(self._overrides)
