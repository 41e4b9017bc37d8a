"""Shader node library.

The public names of this module form the surface scanned by the default
shared node registry.
"""

from .builders import (
    abs_,
    add,
    attribute,
    clamp,
    const,
    cos,
    div,
    join,
    math,
    mix,
    mul,
    sin,
    split,
    struct,
    sub,
    uniform,
)
from .core import (
    AttributeNode,
    ConstNode,
    InputNode,
    JoinNode,
    MathNode,
    OperatorNode,
    ShaderNode,
    SplitNode,
    StructNode,
    UniformNode,
    node_object,
)
from .shared import PI, TWO_PI, normal_local, position_local, time, uv

__all__ = [
    # Node classes
    "ShaderNode",
    "InputNode",
    "ConstNode",
    "UniformNode",
    "AttributeNode",
    "OperatorNode",
    "MathNode",
    "JoinNode",
    "SplitNode",
    "StructNode",
    "node_object",
    # Builders
    "const",
    "uniform",
    "attribute",
    "add",
    "sub",
    "mul",
    "div",
    "math",
    "sin",
    "cos",
    "abs_",
    "mix",
    "clamp",
    "join",
    "split",
    "struct",
    # Shared nodes
    "position_local",
    "normal_local",
    "uv",
    "time",
    "PI",
    "TWO_PI",
]
