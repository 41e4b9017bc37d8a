"""Encoder interface and the registry of named encoders."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Serializer(Protocol):
    """Encoder for export records and preview documents.

    ``formats`` lists the format names accepted by ``serialize``.
    """

    formats: tuple[str, ...]

    def serialize(self, obj: Any, format: str = "json") -> bytes | str:
        """Encode a record or document to the specified format."""
        ...

    def deserialize(
        self, data: bytes | str, target_type: type, format: str = "json"
    ) -> Any:
        """Decode a boundary document of ``target_type``."""
        ...


class SerializerRegistry:
    """Named encoders used by ``NodeSerializer.encode``.

    The first registered encoder becomes the default unless another one is
    registered with ``default=True``.
    """

    _serializers: dict[str, Serializer] = {}
    _default: str | None = None

    @classmethod
    def register(cls, name: str, serializer: Serializer, default: bool = False) -> None:
        """Register an encoder under ``name``."""
        if not isinstance(serializer, Serializer):
            raise TypeError(f"Not a serializer: {serializer!r}")
        cls._serializers[name] = serializer
        if default or cls._default is None:
            cls._default = name

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove an encoder; the default falls back to the first remaining one."""
        cls._serializers.pop(name, None)
        if cls._default == name:
            cls._default = next(iter(cls._serializers), None)

    @classmethod
    def get(cls, name: str | None = None) -> Serializer:
        """Get an encoder by name, or the default one."""
        if name is None:
            name = cls._default
        if name is None:
            raise ValueError("No default serializer configured")
        if name not in cls._serializers:
            raise ValueError(
                f"Unknown serializer: {name} (available: {', '.join(cls._serializers)})"
            )
        return cls._serializers[name]

    @classmethod
    def for_format(cls, format: str) -> Serializer:
        """Get the default encoder if it supports ``format``, else the first that does."""
        candidates = [cls._default] if cls._default is not None else []
        candidates += [name for name in cls._serializers if name != cls._default]
        for name in candidates:
            serializer = cls._serializers[name]
            if format in serializer.formats:
                return serializer
        raise ValueError(f"No serializer supports format: {format}")

    @classmethod
    def list(cls) -> list[str]:
        """List registered encoder names."""
        return list(cls._serializers.keys())
