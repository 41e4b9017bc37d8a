"""Node export: one node in, one portable record out."""

from .args import collect_args
from .fields import iter_children, read_fields
from .links import LinkAssembler
from .overrides import Dynamic, OverrideTable, Static
from .registry import SharedNodeRegistry, default_registry
from .rules import BUILTIN_KINDS, apply_rule, resolve_kind
from .serializer import (
    NodeSerializer,
    create_default_node_serializer,
    resolve_type,
    serialize_node,
)

__all__ = [
    "NodeSerializer",
    "create_default_node_serializer",
    "serialize_node",
    "resolve_type",
    "SharedNodeRegistry",
    "default_registry",
    "OverrideTable",
    "Static",
    "Dynamic",
    "LinkAssembler",
    "collect_args",
    "read_fields",
    "iter_children",
    "BUILTIN_KINDS",
    "apply_rule",
    "resolve_kind",
]
