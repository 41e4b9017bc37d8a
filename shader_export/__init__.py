"""shader-export converts shader expression nodes into portable export records.

Copyright (c) 2025 Felix Geilert
"""

__version__ = "0.1.0"

from .core import (
    UNSET,
    ChildDescriptor,
    EncodingError,
    InvalidOverrideError,
    LinkRef,
    NodeExport,
    NodeKind,
    RegistryError,
    ShaderExportError,
)
from .export import (
    Dynamic,
    NodeSerializer,
    SharedNodeRegistry,
    Static,
    create_default_node_serializer,
    serialize_node,
)

__all__ = [
    "__version__",
    "UNSET",
    "ChildDescriptor",
    "LinkRef",
    "NodeExport",
    "NodeKind",
    "NodeSerializer",
    "SharedNodeRegistry",
    "Static",
    "Dynamic",
    "create_default_node_serializer",
    "serialize_node",
    "ShaderExportError",
    "InvalidOverrideError",
    "RegistryError",
    "EncodingError",
]
