"""Identity-keyed registry of shared node instances."""

import importlib
import inspect
import logging
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from ..core.exceptions import RegistryError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "shader_export.nodes"


def is_node_value(value: Any) -> bool:
    """Check whether ``value`` is a node instance (not a node class)."""
    return not inspect.isclass(value) and bool(getattr(value, "is_node", False))


class SharedNodeRegistry:
    """Maps shared node singletons to the names they are exported under.

    Lookup is by identity: a structurally identical but distinct node is
    never confused with a registered singleton. Entries are keyed by
    ``id()`` and the registry holds a reference to every value, so a handle
    cannot be reused by another object while the registry is alive.
    """

    def __init__(self) -> None:
        self._names: dict[int, str] = {}
        self._values: dict[int, Any] = {}
        self._frozen = False

    @classmethod
    def from_namespace(
        cls, namespace: ModuleType | Mapping[str, Any] | str
    ) -> "SharedNodeRegistry":
        """Build a frozen registry from a module, module name or mapping.

        Modules contribute the names in ``__all__`` when defined, otherwise
        every public attribute. Only node instances are recorded; a value
        bound under several names keeps the last name scanned.
        """
        if isinstance(namespace, str):
            namespace = importlib.import_module(namespace)

        if isinstance(namespace, ModuleType):
            exported = getattr(namespace, "__all__", None)
            if exported is None:
                members = [
                    (name, value)
                    for name, value in inspect.getmembers(namespace)
                    if not name.startswith("_")
                ]
            else:
                members = [(name, getattr(namespace, name)) for name in exported]
            source = namespace.__name__
        else:
            members = list(namespace.items())
            source = "<mapping>"

        registry = cls()
        for name, value in members:
            if is_node_value(value):
                registry.register(value, name)
        registry.freeze()

        logger.debug("Registered %d shared nodes from %s", len(registry), source)
        return registry

    def register(self, node: Any, name: str) -> None:
        """Record ``node`` under ``name``."""
        if self._frozen:
            raise RegistryError("Shared node registry is read-only once built")
        if not is_node_value(node):
            raise RegistryError(f"Cannot register non-node value as '{name}'")
        handle = id(node)
        self._names[handle] = name
        self._values[handle] = node

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, node: Any) -> str | None:
        """Return the shared name of ``node``, or None if it is not shared."""
        handle = id(node)
        if handle in self._values and self._values[handle] is node:
            return self._names[handle]
        return None

    def names(self) -> list[str]:
        """List all registered names."""
        return list(self._names.values())

    def __contains__(self, node: Any) -> bool:
        return self.lookup(node) is not None

    def __len__(self) -> int:
        return len(self._names)


_default_registry: SharedNodeRegistry | None = None


def default_registry() -> SharedNodeRegistry:
    """Return the registry for the bundled node library, building it once."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SharedNodeRegistry.from_namespace(DEFAULT_NAMESPACE)
    return _default_registry
