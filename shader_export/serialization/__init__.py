"""Encoding of export records and preview documents."""

from .base import Serializer, SerializerRegistry
from .msgspec_serializer import MsgspecSerializer
from .types import PreviewDocument, TextureSource

__all__ = [
    "Serializer",
    "SerializerRegistry",
    "MsgspecSerializer",
    "PreviewDocument",
    "TextureSource",
]

SerializerRegistry.register("msgspec", MsgspecSerializer(), default=True)
