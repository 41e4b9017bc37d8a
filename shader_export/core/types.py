"""Type definitions for shader-export."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import msgspec

# Marker for "not provided" field values, distinct from an explicit None
UNSET = msgspec.UNSET

JsonValue = Union[
    None, str, int, float, bool, list["JsonValue"], dict[str, "JsonValue"]
]


class NodeKind(Enum):
    """Extraction category of a node type."""

    CONSTANT = "constant"  # ConstNode, UniformNode
    ATTRIBUTE = "attribute"  # AttributeNode
    OPERATOR = "operator"  # MathNode, OperatorNode
    GENERIC = "generic"  # Anything else


@dataclass(frozen=True)
class LinkRef:
    """Reference from an exported node to one of its raw child nodes."""

    node: Any

    def to_dict(self) -> dict[str, Any]:
        return {"node": self.node}


# LinkRef | list[LinkRef | None] | dict[str, LinkRef]
LinkShape = Union[LinkRef, list[Union[LinkRef, None]], dict[str, LinkRef]]


@dataclass(frozen=True)
class ChildDescriptor:
    """One declared child of a node.

    ``index`` is None for a single reference, an int for a position in an
    ordered sequence, or any other value for a named slot.
    """

    property: str
    child_node: Any
    index: int | str | None = None

    @classmethod
    def coerce(cls, value: Any) -> "ChildDescriptor":
        """Build a descriptor from a descriptor, mapping or tuple.

        Mappings use the keys ``property``, ``index`` and ``childNode``
        (``child_node`` is accepted too). Tuples are ``(property, child)`` or
        ``(property, index, child)``.
        """
        if isinstance(value, ChildDescriptor):
            return value
        if isinstance(value, Mapping):
            child = value.get("childNode", value.get("child_node"))
            return cls(value["property"], child, value.get("index"))
        if isinstance(value, tuple):
            if len(value) == 2:
                return cls(value[0], value[1])
            if len(value) == 3:
                return cls(value[0], value[2], value[1])
        raise TypeError(f"Cannot interpret child descriptor: {value!r}")


def _copy_link(shape: Any) -> Any:
    if isinstance(shape, list):
        return list(shape)
    if isinstance(shape, dict):
        return dict(shape)
    return shape


def _render_link(shape: Any) -> Any:
    if isinstance(shape, LinkRef):
        return shape.to_dict()
    if isinstance(shape, list):
        return [_render_link(item) if item is not None else None for item in shape]
    if isinstance(shape, dict):
        return {key: _render_link(item) for key, item in shape.items()}
    return shape


@dataclass
class NodeExport:
    """Portable export record for a single node.

    ``args`` is either None or a non-empty mapping of JSON-safe values.
    ``links`` maps property names to link shapes holding raw child nodes;
    expanding those children is up to the caller.
    """

    op: str
    args: dict[str, JsonValue] | None = None
    links: dict[str, LinkShape] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the record as plain builtins, omitting absent fields."""
        result: dict[str, Any] = {"op": self.op}
        if self.args:
            result["args"] = self.args
        if self.links:
            result["links"] = {
                name: _render_link(shape) for name, shape in self.links.items()
            }
        return result

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NodeExport":
        """Create a record from a ``{"op", "args"?, "links"?}`` mapping."""
        op = data.get("op")
        if not isinstance(op, str) or not op:
            raise ValueError(f"Export record requires a non-empty 'op' string: {data!r}")
        args = data.get("args")
        links = data.get("links")
        return cls(
            op=op,
            args=dict(args) if args else None,
            links=dict(links) if links else None,
        )

    def copy(self) -> "NodeExport":
        """Return an independent copy.

        Arguments are copied deeply and link containers are copied; the raw
        child nodes they reference are shared.
        """
        links = None
        if self.links:
            links = {name: _copy_link(shape) for name, shape in self.links.items()}
        return NodeExport(
            op=self.op,
            args=copy.deepcopy(self.args) if self.args else None,
            links=links,
        )
