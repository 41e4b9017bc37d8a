"""Unit tests for the msgspec record encoder."""

import json

import msgspec
import pytest
import yaml

from shader_export import LinkRef, NodeExport, serialize_node
from shader_export.core.exceptions import EncodingError
from shader_export.nodes import attribute, const
from shader_export.serialization import (
    MsgspecSerializer,
    PreviewDocument,
    TextureSource,
)


def make_ref(*nodes):
    """Build a node_ref hook numbering the given nodes."""
    ids = {id(node): index for index, node in enumerate(nodes)}
    return lambda node: ids[id(node)]


class TestRecordEncoding:
    """Test encoding of export records."""

    def test_record_without_links_needs_no_hook(self):
        """Test that leaf records encode directly."""
        record = serialize_node(attribute("uv", "vec2"))
        encoded = MsgspecSerializer().serialize(record)
        assert json.loads(encoded) == {
            "op": "AttributeNode",
            "args": {"attributeName": "uv", "nodeType": "vec2"},
        }

    def test_links_use_node_ref_hook(self):
        """Test that child nodes are encoded through node_ref."""
        a, b = const(1.0), const(2.0)
        record = serialize_node(a + b)
        serializer = MsgspecSerializer(node_ref=make_ref(a, b))

        assert json.loads(serializer.serialize(record, format="json")) == {
            "op": "OperatorNode",
            "args": {"op": "+"},
            "links": {"aNode": {"node": 0}, "bNode": {"node": 1}},
        }

    def test_holes_encode_as_null(self):
        """Test that holes in ordered links become null."""
        x = const(1.0)
        record = NodeExport(op="JoinNode", links={"nodes": [None, LinkRef(x)]})
        encoded = MsgspecSerializer(node_ref=make_ref(x)).serialize(record)
        assert json.loads(encoded)["links"] == {"nodes": [None, {"node": 0}]}

    def test_links_without_hook_fail(self):
        """Test that raw nodes cannot be encoded without a hook."""
        record = serialize_node(const(1.0) + const(2.0))
        with pytest.raises(EncodingError, match="OperatorNode|NodeExport"):
            MsgspecSerializer().serialize(record)

    def test_msgpack(self):
        """Test msgpack encoding."""
        record = serialize_node(const(2))
        encoded = MsgspecSerializer().serialize(record, format="msgpack")
        assert isinstance(encoded, bytes)
        assert msgspec.msgpack.decode(encoded) == record.to_dict()

    def test_yaml(self):
        """Test YAML encoding."""
        a = const(1.0)
        record = serialize_node(-a)
        encoded = MsgspecSerializer(node_ref=make_ref(a)).serialize(record, format="yaml")
        assert yaml.safe_load(encoded) == {
            "op": "MathNode",
            "args": {"method": "negate"},
            "links": {"aNode": {"node": 0}},
        }

    def test_unknown_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError, match="Unknown format"):
            MsgspecSerializer().serialize(NodeExport(op="A"), format="xml")

    def test_unknown_type(self):
        """Test that only records and documents can be encoded."""
        with pytest.raises(TypeError, match="Cannot serialize type"):
            MsgspecSerializer().serialize({"op": "A"})


class TestPreviewDocument:
    """Test the preview host boundary document."""

    def test_decode_json(self):
        """Test decoding a document with camelCase wire names."""
        data = json.dumps(
            {
                "code": "return createApp",
                "textures": {
                    "albedo": {"src": "/t/albedo.png", "name": "albedo.png"},
                    "normal": {"src": "/t/normal.KTX2"},
                },
                "geometryType": "torus",
            }
        )
        document = MsgspecSerializer().deserialize(data, PreviewDocument)
        assert document.geometry_type == "torus"
        assert document.textures["albedo"] == TextureSource(
            src="/t/albedo.png", name="albedo.png"
        )
        assert document.compressed_textures() == ["normal"]

    def test_defaults(self):
        """Test that textures and geometry are optional."""
        document = MsgspecSerializer().deserialize('{"code": ""}', PreviewDocument)
        assert document.textures == {}
        assert document.geometry_type == "box"

    def test_missing_code(self):
        """Test that code is required."""
        with pytest.raises(msgspec.ValidationError):
            MsgspecSerializer().deserialize("{}", PreviewDocument)

    def test_yaml_and_msgpack_round_trip(self):
        """Test decoding from the other formats."""
        document = PreviewDocument(
            code="x", textures={"t": TextureSource(src="a.png")}, geometry_type="plane"
        )
        serializer = MsgspecSerializer()
        for format in ("yaml", "msgpack"):
            encoded = serializer.serialize(document, format=format)
            assert serializer.deserialize(encoded, PreviewDocument, format=format) == document

    def test_encode_uses_wire_names(self):
        """Test that encoding uses camelCase names."""
        encoded = MsgspecSerializer().serialize(PreviewDocument(code="x"))
        assert json.loads(encoded) == {"code": "x", "textures": {}, "geometryType": "box"}

    def test_ktx2_detection(self):
        """Test compressed texture detection by name or source."""
        assert TextureSource(src="blob:1", name="Rock.ktx2").is_ktx2
        assert TextureSource(src="/a/b.ktx2?v=2").is_ktx2
        assert not TextureSource(src="/a/b.png", name="b.png").is_ktx2
        assert not TextureSource(src="").has_source

    def test_records_cannot_be_decoded(self):
        """Test that export records are write-only."""
        with pytest.raises(TypeError, match="Cannot deserialize"):
            MsgspecSerializer().deserialize('{"op": "A"}', NodeExport)

    def test_unknown_decode_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError, match="Unknown format"):
            MsgspecSerializer().deserialize("{}", PreviewDocument, format="xml")
