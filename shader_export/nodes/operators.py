"""Node operator overloads functionality."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .core import MathNode, OperatorNode


class NodeOperators:
    """Python operator overloads that build expression nodes.

    Each overload returns a new ``OperatorNode`` (or ``MathNode`` for unary
    negation); operands that are not nodes are wrapped as constants.
    """

    def _operator(self, op: str, a: Any, b: Any) -> "OperatorNode":
        # Import here to avoid circular imports
        from .core import OperatorNode

        return OperatorNode(op, a, b)

    def __add__(self, other: Any) -> "OperatorNode":
        return self._operator("+", self, other)

    def __radd__(self, other: Any) -> "OperatorNode":
        return self._operator("+", other, self)

    def __sub__(self, other: Any) -> "OperatorNode":
        return self._operator("-", self, other)

    def __rsub__(self, other: Any) -> "OperatorNode":
        return self._operator("-", other, self)

    def __mul__(self, other: Any) -> "OperatorNode":
        return self._operator("*", self, other)

    def __rmul__(self, other: Any) -> "OperatorNode":
        return self._operator("*", other, self)

    def __truediv__(self, other: Any) -> "OperatorNode":
        return self._operator("/", self, other)

    def __rtruediv__(self, other: Any) -> "OperatorNode":
        return self._operator("/", other, self)

    def __mod__(self, other: Any) -> "OperatorNode":
        return self._operator("%", self, other)

    def __neg__(self) -> "MathNode":
        from .core import MathNode

        return MathNode("negate", self)
