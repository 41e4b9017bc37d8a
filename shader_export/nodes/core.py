"""Shader node classes."""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ..core.types import ChildDescriptor, NodeKind
from .operators import NodeOperators


def infer_node_type(value: Any) -> str | None:
    """Infer the shader value type of a Python constant."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, (list, tuple)) and 2 <= len(value) <= 4:
        return f"vec{len(value)}"
    return None


def node_object(value: Any) -> "ShaderNode":
    """Return ``value`` if it is a node, otherwise wrap it as a ``ConstNode``."""
    if isinstance(value, ShaderNode):
        return value
    return ConstNode(value)


class ShaderNode(NodeOperators):
    """Base class for all shader expression nodes.

    Subclasses describe themselves through ``extract_fields()`` (named,
    mostly JSON-safe values) and ``children()`` (structural references to
    other nodes). Subclasses may set ``kind`` to select the export rule for
    themselves and their subclasses.
    """

    is_node = True

    def __init__(self, node_type: str | None = None):
        self.node_type = node_type

    def extract_fields(self) -> dict[str, Any]:
        """Return the node's named fields."""
        fields: dict[str, Any] = {}
        if self.node_type is not None:
            fields["nodeType"] = self.node_type
        return fields

    def children(self) -> Iterator[ChildDescriptor]:
        """Yield the node's declared children."""
        return iter(())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(node_type={self.node_type!r})"


class InputNode(ShaderNode):
    """Node holding a literal value."""

    kind = NodeKind.CONSTANT

    def __init__(
        self,
        value: Any,
        node_type: str | None = None,
        precision: str | None = None,
    ):
        if isinstance(value, tuple):
            value = list(value)
        super().__init__(node_type or infer_node_type(value))
        self.value = value
        self.precision = precision

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["value"] = self.value
        fields["valueType"] = self.node_type
        fields["precision"] = self.precision
        return fields

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, node_type={self.node_type!r})"


class ConstNode(InputNode):
    """Compile-time constant."""

    pass


class UniformNode(InputNode):
    """Named value that can be updated between frames."""

    def __init__(
        self,
        value: Any,
        node_type: str | None = None,
        name: str | None = None,
        precision: str | None = None,
    ):
        super().__init__(value, node_type, precision)
        self.name = name

    def set(self, value: Any) -> "UniformNode":
        """Update the uniform value."""
        self.value = list(value) if isinstance(value, tuple) else value
        return self

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        if self.name is not None:
            fields["name"] = self.name
        return fields


class AttributeNode(ShaderNode):
    """Reference to a geometry attribute such as ``position`` or ``uv``."""

    kind = NodeKind.ATTRIBUTE

    def __init__(self, attribute_name: str, node_type: str | None = None):
        super().__init__(node_type)
        self.attribute_name = attribute_name

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["attributeName"] = self.attribute_name
        return fields

    def __repr__(self) -> str:
        return f"AttributeNode({self.attribute_name!r}, node_type={self.node_type!r})"


class OperatorNode(ShaderNode):
    """Binary arithmetic, comparison or logical operator."""

    kind = NodeKind.OPERATOR

    def __init__(self, op: str, a: Any, b: Any):
        super().__init__()
        self.op = op
        self.a_node = node_object(a)
        self.b_node = node_object(b)

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["op"] = self.op
        return fields

    def children(self) -> Iterator[ChildDescriptor]:
        yield ChildDescriptor("aNode", self.a_node)
        yield ChildDescriptor("bNode", self.b_node)

    def __repr__(self) -> str:
        return f"OperatorNode({self.op!r}, {self.a_node!r}, {self.b_node!r})"


class MathNode(ShaderNode):
    """Built-in math function applied to one to three operands."""

    kind = NodeKind.OPERATOR

    def __init__(self, method: str, a: Any, b: Any = None, c: Any = None):
        super().__init__()
        self.method = method
        self.a_node = node_object(a)
        self.b_node = node_object(b) if b is not None else None
        self.c_node = node_object(c) if c is not None else None

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["method"] = self.method
        return fields

    def children(self) -> Iterator[ChildDescriptor]:
        yield ChildDescriptor("aNode", self.a_node)
        if self.b_node is not None:
            yield ChildDescriptor("bNode", self.b_node)
        if self.c_node is not None:
            yield ChildDescriptor("cNode", self.c_node)

    def __repr__(self) -> str:
        return f"MathNode({self.method!r}, {self.a_node!r})"


class JoinNode(ShaderNode):
    """Concatenates scalar or vector nodes into a wider vector."""

    def __init__(self, nodes: Sequence[Any], node_type: str | None = None):
        super().__init__(node_type)
        self.nodes = [node_object(node) for node in nodes]

    def children(self) -> Iterator[ChildDescriptor]:
        for index, node in enumerate(self.nodes):
            yield ChildDescriptor("nodes", node, index)


class SplitNode(ShaderNode):
    """Swizzle of a vector node, e.g. ``xy`` or ``zyx``."""

    def __init__(self, node: Any, components: str):
        super().__init__()
        self.node = node_object(node)
        self.components = components

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["components"] = self.components
        return fields

    def children(self) -> Iterator[ChildDescriptor]:
        yield ChildDescriptor("node", self.node)


class StructNode(ShaderNode):
    """Named collection of member nodes."""

    def __init__(self, members: Mapping[str, Any], node_type: str | None = None):
        super().__init__(node_type)
        self.members = {name: node_object(node) for name, node in members.items()}

    def extract_fields(self) -> dict[str, Any]:
        fields = super().extract_fields()
        fields["memberLayout"] = list(self.members)
        return fields

    def children(self) -> Iterator[ChildDescriptor]:
        for name, node in self.members.items():
            yield ChildDescriptor("members", node, name)
