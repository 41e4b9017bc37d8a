"""Core components of shader-export."""

from .exceptions import (
    EncodingError,
    InvalidOverrideError,
    RegistryError,
    ShaderExportError,
)
from .types import (
    UNSET,
    ChildDescriptor,
    JsonValue,
    LinkRef,
    LinkShape,
    NodeExport,
    NodeKind,
)

__all__ = [
    "UNSET",
    "ChildDescriptor",
    "JsonValue",
    "LinkRef",
    "LinkShape",
    "NodeExport",
    "NodeKind",
    "ShaderExportError",
    "InvalidOverrideError",
    "RegistryError",
    "EncodingError",
]
