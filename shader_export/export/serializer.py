"""Single-node export serializer."""

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from ..core.types import NodeExport
from ..serialization import Serializer, SerializerRegistry
from .overrides import OverrideTable
from .registry import SharedNodeRegistry, default_registry
from .rules import apply_rule

logger = logging.getLogger(__name__)

# Values of these types are data, never nodes
PLAIN_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def resolve_type(node: Any) -> str | None:
    """Derive the op code of a non-shared node.

    Uses the node's explicit ``type`` string (instance or class level) and
    falls back to the class name. An explicit empty string, plain values,
    classes and functions have no type.
    """
    if isinstance(node, PLAIN_TYPES) or inspect.isclass(node) or inspect.isroutine(node):
        return None
    explicit = getattr(node, "type", None)
    if isinstance(explicit, str):
        # An empty tag is a declared but anonymous type
        return explicit or None
    return type(node).__name__ or None


class NodeSerializer:
    """Converts one node into a ``NodeExport`` record.

    Resolution order: shared node name, then the override for the op code,
    then the built-in rule for the node's kind. Each call produces exactly
    one level of the graph; child nodes are left in ``links`` as-is.

    Exceptions raised by override functions propagate to the caller.
    """

    def __init__(
        self,
        overrides: Mapping[str, Any] | OverrideTable | None = None,
        *,
        registry: SharedNodeRegistry | None = None,
    ):
        """Initialize the serializer.

        Args:
            overrides: Per-op-code overrides: records, callables, or
                ``Static``/``Dynamic`` values
            registry: Shared node registry (defaults to the bundled library)
        """
        self.overrides = OverrideTable.from_mapping(overrides)
        self.registry = registry if registry is not None else default_registry()

    def __call__(self, node: Any) -> NodeExport | None:
        return self.serialize(node)

    def serialize(self, node: Any) -> NodeExport | None:
        """Export ``node``.

        Returns:
            The export record, or None if no op code can be resolved
        """
        shared_name = self.registry.lookup(node)
        if shared_name is not None:
            result = self.overrides.resolve(shared_name, node)
            if result is not None:
                return result
            return NodeExport(op=shared_name)

        op = resolve_type(node)
        if op is None:
            logger.debug("No op code for %s value; skipping", type(node).__name__)
            return None

        result = self.overrides.resolve(op, node)
        if result is not None:
            logger.debug("Override applied for %s", op)
            return result

        return apply_rule(node, op)

    def encode(
        self,
        node: Any,
        format: str = "json",
        *,
        serializer: str | Serializer | None = None,
    ) -> bytes | str | None:
        """Export ``node`` and encode the record.

        Args:
            node: The node to export
            format: Encoding format
            serializer: Registered encoder name or encoder instance; by
                default the registered encoder supporting ``format``

        Returns:
            The encoded record, or None if the node has no export
        """
        record = self.serialize(node)
        if record is None:
            return None
        if serializer is None:
            encoder = SerializerRegistry.for_format(format)
        elif isinstance(serializer, str):
            encoder = SerializerRegistry.get(serializer)
        else:
            encoder = serializer
        return encoder.serialize(record, format=format)


def create_default_node_serializer(
    overrides: Mapping[str, Any] | None = None,
    *,
    registry: SharedNodeRegistry | None = None,
) -> Callable[[Any], NodeExport | None]:
    """Create a node serializer function."""
    return NodeSerializer(overrides, registry=registry)


def serialize_node(
    node: Any,
    overrides: Mapping[str, Any] | None = None,
    *,
    registry: SharedNodeRegistry | None = None,
) -> NodeExport | None:
    """Export a single node with a one-off serializer."""
    return NodeSerializer(overrides, registry=registry).serialize(node)
