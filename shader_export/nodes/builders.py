"""Helper functions for building shader expressions."""

from typing import Any

from .core import (
    AttributeNode,
    ConstNode,
    JoinNode,
    MathNode,
    OperatorNode,
    SplitNode,
    StructNode,
    UniformNode,
)


def const(value: Any, node_type: str | None = None) -> ConstNode:
    """Create a constant node."""
    return ConstNode(value, node_type)


def uniform(
    value: Any, node_type: str | None = None, name: str | None = None
) -> UniformNode:
    """Create a uniform node."""
    return UniformNode(value, node_type, name=name)


def attribute(name: str, node_type: str | None = None) -> AttributeNode:
    """Create a geometry attribute reference."""
    return AttributeNode(name, node_type)


def add(a: Any, b: Any) -> OperatorNode:
    return OperatorNode("+", a, b)


def sub(a: Any, b: Any) -> OperatorNode:
    return OperatorNode("-", a, b)


def mul(a: Any, b: Any) -> OperatorNode:
    return OperatorNode("*", a, b)


def div(a: Any, b: Any) -> OperatorNode:
    return OperatorNode("/", a, b)


def math(method: str, *operands: Any) -> MathNode:
    """Apply a math function by name to one to three operands."""
    if not 1 <= len(operands) <= 3:
        raise ValueError(
            f"Math method '{method}' takes 1 to 3 operands, got {len(operands)}"
        )
    return MathNode(method, *operands)


def sin(x: Any) -> MathNode:
    return MathNode("sin", x)


def cos(x: Any) -> MathNode:
    return MathNode("cos", x)


def abs_(x: Any) -> MathNode:
    return MathNode("abs", x)


def mix(a: Any, b: Any, t: Any) -> MathNode:
    return MathNode("mix", a, b, t)


def clamp(x: Any, low: Any = 0.0, high: Any = 1.0) -> MathNode:
    return MathNode("clamp", x, low, high)


def join(*nodes: Any, node_type: str | None = None) -> JoinNode:
    """Join scalars or vectors into a wider vector."""
    return JoinNode(nodes, node_type or f"vec{len(nodes)}")


def split(node: Any, components: str) -> SplitNode:
    """Swizzle ``node`` by component letters."""
    return SplitNode(node, components)


def struct(node_type: str | None = None, **members: Any) -> StructNode:
    """Group named member nodes."""
    return StructNode(members, node_type)
