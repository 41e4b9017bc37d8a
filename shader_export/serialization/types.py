"""Boundary document types for the preview host."""

import msgspec

DEFAULT_GEOMETRY = "box"


class TextureSource(msgspec.Struct, kw_only=True):
    """Where the preview host should load one texture from."""

    src: str
    name: str | None = None

    @property
    def has_source(self) -> bool:
        """An empty ``src`` means the host substitutes a fallback texture."""
        return bool(self.src)

    @property
    def is_ktx2(self) -> bool:
        """Check whether the texture is a compressed KTX2 container."""
        if self.name is not None and self.name.lower().endswith(".ktx2"):
            return True
        return ".ktx2" in self.src.lower()


class PreviewDocument(msgspec.Struct, kw_only=True, rename="camel"):
    """Code and textures sent to the preview host.

    Wire names are camelCase (``geometryType``).
    """

    code: str
    textures: dict[str, TextureSource] = msgspec.field(default_factory=dict)
    geometry_type: str = DEFAULT_GEOMETRY

    def compressed_textures(self) -> list[str]:
        """List the ids of textures that need the compressed-texture path."""
        return [tid for tid, source in self.textures.items() if source.is_ktx2]
