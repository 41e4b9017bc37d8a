"""Assembly of child references into single, ordered and keyed link shapes."""

import logging
from typing import Any

from ..core.types import LinkRef, LinkShape

logger = logging.getLogger(__name__)

# Upper bound on positions in one ordered link; holes are stored densely
MAX_LINK_POSITIONS = 4096


def is_position(index: Any) -> bool:
    """Check whether ``index`` addresses a position in an ordered sequence."""
    return isinstance(index, int) and not isinstance(index, bool)


class LinkAssembler:
    """Accumulates child references by property name.

    All indices given for one property are expected to share one shape
    family, either all positional (int) or all keyed. Mixing them is a
    caller error: it is logged and never raises, and the result for that
    property is unspecified. Positions outside ``[0, MAX_LINK_POSITIONS)``
    are logged and dropped.
    """

    def __init__(self) -> None:
        self._links: dict[str, LinkShape] = {}

    def add(self, property: str, index: int | str | None, child: Any) -> None:
        """Record ``child`` under ``property`` at ``index``.

        Args:
            property: Link name on the parent node
            index: None for a single reference, an int for a position,
                anything else for a named slot
            child: The raw child node
        """
        ref = LinkRef(child)
        if index is None:
            self._links[property] = ref
            return

        if is_position(index) and not 0 <= index < MAX_LINK_POSITIONS:
            logger.warning(
                "Link '%s' received out-of-range position %r; dropped",
                property,
                index,
            )
            return

        container = self._links.get(property)
        if container is None or isinstance(container, LinkRef):
            if container is not None:
                logger.warning(
                    "Link '%s' holds a single reference and received index %r; "
                    "replacing it",
                    property,
                    index,
                )
            container = [] if is_position(index) else {}
            self._links[property] = container

        if isinstance(container, list):
            if not is_position(index):
                logger.warning(
                    "Ordered link '%s' received non-positional index %r; dropped",
                    property,
                    index,
                )
                return
            if index >= len(container):
                container.extend([None] * (index + 1 - len(container)))
            container[index] = ref
        else:
            if is_position(index):
                logger.warning(
                    "Keyed link '%s' received positional index %r; stored as key",
                    property,
                    index,
                )
            container[str(index)] = ref

    def add_all(self, descriptors: Any) -> "LinkAssembler":
        """Record every ``ChildDescriptor`` in ``descriptors``."""
        for descriptor in descriptors:
            self.add(descriptor.property, descriptor.index, descriptor.child_node)
        return self

    def build(self) -> dict[str, LinkShape] | None:
        """Return the assembled links, or None if no child was recorded."""
        return self._links or None
