"""Example exporting a whole shader expression with the single-node serializer.

The serializer produces one level per call; this script walks the links
itself, numbers each distinct node once and replaces child references with
those numbers through an encoder registered for the purpose.
"""

import json

from shader_export import LinkRef, NodeExport, NodeSerializer
from shader_export.nodes import PI, const, mix, position_local, sin, split, time, uv
from shader_export.serialization import MsgspecSerializer, SerializerRegistry


def build_material():
    """Build a small animated color expression."""
    wave = sin(split(position_local, "y") * 4.0 + time * PI)
    return mix(const((1.0, 0.2, 0.1)), split(uv, "xyx"), wave * 0.5 + 0.5)


def child_nodes(record: NodeExport) -> list:
    """List the raw child nodes referenced by a record."""
    children = []
    for shape in (record.links or {}).values():
        if isinstance(shape, LinkRef):
            refs = [shape]
        elif isinstance(shape, dict):
            refs = list(shape.values())
        else:
            refs = shape
        children.extend(ref.node for ref in refs if isinstance(ref, LinkRef))
    return children


def export_graph(root, overrides=None) -> dict:
    """Export every node reachable from ``root`` into a flat document."""
    serializer = NodeSerializer(overrides)
    ids: dict[int, int] = {}
    records: list[dict] = []

    def visit(node) -> int | None:
        if id(node) in ids:
            return ids[id(node)]
        record = serializer(node)
        if record is None:
            return None
        node_id = ids[id(node)] = len(records)
        records.append({})
        for child in child_nodes(record):
            visit(child)
        records[node_id] = json.loads(serializer.encode(node, serializer="graph-ids"))
        return node_id

    SerializerRegistry.register("graph-ids", MsgspecSerializer(node_ref=visit))
    try:
        root_id = visit(root)
    finally:
        SerializerRegistry.unregister("graph-ids")
    return {"root": root_id, "nodes": records}


if __name__ == "__main__":
    document = export_graph(build_material())
    print(f"Exported {len(document['nodes'])} nodes, root = {document['root']}")
    for index, node in enumerate(document["nodes"]):
        print(index, node)

    # Leaf nodes need no reference hook; the default encoder handles them
    print(NodeSerializer().encode(const(0.5), format="yaml"))

    # Overrides replace the built-in rule for a type
    document = export_graph(
        build_material(),
        overrides={"SplitNode": lambda node: {"op": f"swizzle_{node.components}"}},
    )
    print(document["nodes"][document["root"]])
