"""
Ordered registry for pipeline plugins (augmenters and specifications).

Design decisions:
- Instance-based (not global state) for testability
- Registration order is execution order: later augmenters observe the
  mutations of earlier ones
- Every registered instance runs, including several of the same class
  (e.g. two FreeSpaceSpecification with different reserves); name lookups
  return the first match
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)


class NamedPlugin(Protocol):
    @property
    def name(self) -> str: ...


P = TypeVar("P", bound=NamedPlugin)


@dataclass
class PluginRegistry(Generic[P]):
    """Insertion-ordered plugin collection with lookup by name.

    Example:
        augmenters = PluginRegistry[LocalEpisodeAugmenter]()
        augmenters.register(AugmentQuality())
        augmenters.register(AugmentEpisodes(parsing_service))

        for augmenter in augmenters:
            augmenter.augment(local_episode, other_files=False)
    """

    _plugins: list[P] = dataclass_field(default_factory=list)

    @classmethod
    def of(cls, plugins: Iterable[P]) -> PluginRegistry[P]:
        registry: PluginRegistry[P] = cls()
        for plugin in plugins:
            registry.register(plugin)
        return registry

    def register(self, plugin: P) -> None:
        """Append a plugin to the end of the chain."""
        self._plugins.append(plugin)
        logger.debug("Registered plugin: %s (position=%d)", plugin.name, len(self._plugins))

    def unregister(self, name: str) -> bool:
        """Remove the first plugin called ``name``; True if one was registered."""
        for index, plugin in enumerate(self._plugins):
            if plugin.name == name:
                del self._plugins[index]
                logger.debug("Unregistered plugin: %s", name)
                return True
        return False

    def get(self, name: str) -> P | None:
        """First plugin called ``name``, or None."""
        for plugin in self._plugins:
            if plugin.name == name:
                return plugin
        return None

    def all(self) -> list[P]:
        """All plugins in registration order."""
        return list(self._plugins)

    def clear(self) -> None:
        self._plugins.clear()

    def __iter__(self) -> Iterator[P]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return any(plugin.name == name for plugin in self._plugins)
