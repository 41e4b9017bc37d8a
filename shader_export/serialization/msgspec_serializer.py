"""msgspec-based encoder for export records and preview documents."""

from collections.abc import Callable
from typing import Any

import msgspec
import yaml  # type: ignore[import-untyped]

from ..core.exceptions import EncodingError
from ..core.types import NodeExport
from .base import Serializer
from .types import PreviewDocument


class MsgspecSerializer(Serializer):
    """Serializer using msgspec for high performance.

    Export records keep raw child nodes inside their links. Those are
    encoded through ``node_ref``, which maps a node to a JSON-safe
    reference (an id, a path, an already exported record...).
    """

    formats = ("json", "msgpack", "yaml")

    def __init__(self, node_ref: Callable[[Any], Any] | None = None):
        """Initialize the serializer.

        Args:
            node_ref: Hook turning a raw child node into an encodable value
        """
        self.node_ref = node_ref

    def _enc_hook(self, obj: Any) -> Any:
        if self.node_ref is None:
            raise NotImplementedError(
                f"Objects of type {type(obj).__name__} need a node_ref hook"
            )
        return self.node_ref(obj)

    def serialize(self, obj: Any, format: str = "json") -> bytes | str:
        """Encode an export record or preview document."""
        data: Any
        if isinstance(obj, NodeExport):
            data = obj.to_dict()
        elif isinstance(obj, PreviewDocument):
            data = obj
        else:
            raise TypeError(f"Cannot serialize type: {type(obj)}")

        try:
            if format == "json":
                json_encoder = msgspec.json.Encoder(enc_hook=self._enc_hook)
                return json_encoder.encode(data).decode("utf-8")
            elif format == "msgpack":
                msgpack_encoder = msgspec.msgpack.Encoder(enc_hook=self._enc_hook)
                return msgpack_encoder.encode(data)
            elif format == "yaml":
                builtins = msgspec.to_builtins(data, enc_hook=self._enc_hook)
                return yaml.dump(builtins, default_flow_style=False, sort_keys=False)
        except (TypeError, NotImplementedError) as e:
            raise EncodingError(f"Cannot encode {type(obj).__name__}: {e}") from e

        raise ValueError(f"Unknown format: {format}")

    def deserialize(
        self, data: bytes | str, target_type: type, format: str = "json"
    ) -> Any:
        """Decode a preview document.

        Export records are write-only: they reference live nodes that cannot
        be rebuilt from the encoded form.
        """
        if target_type is not PreviewDocument:
            raise TypeError(f"Cannot deserialize to type: {target_type}")

        if format == "json":
            if isinstance(data, str):
                data = data.encode("utf-8")
            raw = msgspec.json.decode(data)
        elif format == "msgpack":
            if isinstance(data, str):
                data = data.encode("utf-8")
            raw = msgspec.msgpack.decode(data)
        elif format == "yaml":
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            raw = yaml.safe_load(data)
        else:
            raise ValueError(f"Unknown format: {format}")

        return msgspec.convert(raw, PreviewDocument)
