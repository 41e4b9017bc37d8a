"""Access to the field and child capabilities of raw nodes."""

from collections.abc import Iterator
from typing import Any

from ..core.types import ChildDescriptor

# Keys written by the fill-in-place protocol that never carry portable data
SCRATCH_FIELD = "meta"
INPUT_NODES_FIELD = "inputNodes"


def new_scratch_context() -> dict[str, Any]:
    """Create the empty context handed to a legacy ``serialize(context)``."""
    return {SCRATCH_FIELD: {"nodes": {}, "textures": {}, "images": {}}}


def read_fields(node: Any) -> dict[str, Any] | None:
    """Return the named fields of ``node``.

    ``extract_fields()`` is preferred. Nodes that only implement
    ``serialize(context)`` are given a fresh scratch context to fill, which
    is returned as-is (scratch key included).

    Returns:
        The fields, or None if the node has neither capability
    """
    extract = getattr(node, "extract_fields", None)
    if callable(extract):
        return dict(extract())

    serialize = getattr(node, "serialize", None)
    if callable(serialize):
        context = new_scratch_context()
        serialize(context)
        return context

    return None


def iter_children(node: Any) -> Iterator[ChildDescriptor]:
    """Yield the declared children of ``node``, if it declares any."""
    children = getattr(node, "children", None)
    if not callable(children):
        return
    for descriptor in children():
        yield ChildDescriptor.coerce(descriptor)
