"""Name -> store registry shared between host code and the browse endpoint."""
from __future__ import annotations
import logging
import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional
from .stores.base import Store

log = logging.getLogger(__name__)

class Registry:
    """
    Copy-on-write mapping of store names to stores.

    Writers serialize on a lock and publish a fresh read-only mapping, so a
    lookup never waits on a registration and always sees every registration
    that has returned.
    """
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Mapping[str, Store] = MappingProxyType({})

    def register(self, name: str, store: Store) -> None:
        log.debug("register store %s -> %r", name, store)
        with self._lock:
            items: Dict[str, Store] = dict(self._items)
            items[name] = store
            self._items = MappingProxyType(items)

    def lookup(self, name: str) -> Optional[Store]:
        return self._items.get(name)

    def names(self) -> FrozenSet[str]:
        return frozenset(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
