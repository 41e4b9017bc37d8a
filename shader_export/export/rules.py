"""Built-in extraction rules, selected by node kind."""

from typing import Any

from ..core.types import UNSET, NodeExport, NodeKind
from .args import collect_args
from .fields import INPUT_NODES_FIELD, SCRATCH_FIELD, iter_children, read_fields
from .links import LinkAssembler

# Kinds of node types that do not pin one through a ``kind`` attribute
BUILTIN_KINDS: dict[str, NodeKind] = {
    "ConstNode": NodeKind.CONSTANT,
    "UniformNode": NodeKind.CONSTANT,
    "AttributeNode": NodeKind.ATTRIBUTE,
    "MathNode": NodeKind.OPERATOR,
    "OperatorNode": NodeKind.OPERATOR,
}


def resolve_kind(node: Any, op: str) -> NodeKind:
    """Determine the extraction category of ``node``.

    A built-in op code decides first, so an explicit type tag such as
    ``"MathNode"`` always selects its rule. Other op codes use the kind
    pinned on the node's class, defaulting to GENERIC.
    """
    if op in BUILTIN_KINDS:
        return BUILTIN_KINDS[op]
    kind = getattr(type(node), "kind", None)
    if isinstance(kind, NodeKind):
        return kind
    return NodeKind.GENERIC


def _pick(fields: dict[str, Any] | None, *names: str) -> dict[str, Any]:
    fields = fields or {}
    return {name: fields.get(name, UNSET) for name in names}


def _links(node: Any) -> dict[str, Any] | None:
    return LinkAssembler().add_all(iter_children(node)).build()


def extract_constant(node: Any, op: str) -> NodeExport:
    fields = read_fields(node)
    args = collect_args(_pick(fields, "value", "valueType", "nodeType", "precision"))
    return NodeExport(op=op, args=args)


def extract_attribute(node: Any, op: str) -> NodeExport:
    fields = read_fields(node) or {}
    attribute_name = fields.get("_attributeName")
    if attribute_name is None:
        attribute_name = fields.get("attributeName", UNSET)
    args = collect_args(
        {"attributeName": attribute_name, "nodeType": fields.get("nodeType", UNSET)}
    )
    return NodeExport(op=op, args=args)


def extract_operator(node: Any, op: str) -> NodeExport:
    fields = read_fields(node)
    args = collect_args(_pick(fields, "method", "op"))
    return NodeExport(op=op, args=args, links=_links(node))


def extract_generic(node: Any, op: str) -> NodeExport:
    """Export every portable field plus the declared children."""
    fields = read_fields(node) or {}
    args = collect_args(
        {
            key: value
            for key, value in fields.items()
            if key not in (SCRATCH_FIELD, INPUT_NODES_FIELD)
        }
    )
    return NodeExport(op=op, args=args, links=_links(node))


RULES = {
    NodeKind.CONSTANT: extract_constant,
    NodeKind.ATTRIBUTE: extract_attribute,
    NodeKind.OPERATOR: extract_operator,
    NodeKind.GENERIC: extract_generic,
}


def apply_rule(node: Any, op: str) -> NodeExport:
    """Run the built-in rule for ``node``'s kind."""
    return RULES[resolve_kind(node, op)](node, op)
