"""Shared node instances exposed by the node library.

These are singletons: exporters recognise them by identity and emit their
binding name as the op code.
"""

import math as _math

from .core import AttributeNode, ConstNode, UniformNode

position_local = AttributeNode("position", "vec3")
normal_local = AttributeNode("normal", "vec3")
uv = AttributeNode("uv", "vec2")
time = UniformNode(0.0, "float", name="time")
PI = ConstNode(_math.pi, "float")
TWO_PI = ConstNode(2 * _math.pi, "float")

__all__ = ["position_local", "normal_local", "uv", "time", "PI", "TWO_PI"]
