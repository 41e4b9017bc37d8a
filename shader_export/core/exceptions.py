"""Exception hierarchy for shader-export."""


class ShaderExportError(Exception):
    """Base exception for all shader-export errors."""

    pass


class InvalidOverrideError(ShaderExportError):
    """Raised when an override table entry is neither a record nor a callable."""

    pass


class RegistryError(ShaderExportError):
    """Raised when the shared node registry is misused."""

    pass


class EncodingError(ShaderExportError):
    """Raised when an export record cannot be encoded."""

    pass
