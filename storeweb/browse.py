"""Resolve a browse path against the registry and produce its response body."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Union
from . import render
from .errors import FetchFailure, IterationFailure, KeyAbsent, MalformedPath, NotRegistered
from .paths import Malformed, NoSegments, OneSegment, TwoSegments, normalize_mount, parse_path
from .registry import Registry
from .stores.base import Store

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class Listing:
    mode: str
    html: str

@dataclass(frozen=True)
class Value:
    data: bytes
    mode: str = "value"

Outcome = Union[Listing, Value]

class Browser:
    """Read-only view over a registry; never mutates it or any store."""
    def __init__(self, registry: Registry, mount: str):
        self.registry = registry
        self.mount = normalize_mount(mount)

    def respond(self, path: str) -> Outcome:
        parsed = parse_path(path, self.mount)
        if isinstance(parsed, NoSegments):
            return self.stores()
        if isinstance(parsed, OneSegment):
            return self.keys(parsed.name)
        if isinstance(parsed, TwoSegments):
            return self.value(parsed.name, parsed.key)
        assert isinstance(parsed, Malformed)
        raise MalformedPath(parsed.path)

    def stores(self) -> Listing:
        # enumeration order is not a contract; sort so pages are stable
        return Listing("stores", render.store_list(self.mount, sorted(self.registry.names())))

    def keys(self, name: str) -> Listing:
        store = self._store(name)
        try:
            keys: List[bytes] = list(store.iter_keys(b""))
        except Exception as e:
            log.warning("Iterating store '%s' failed: %s", name, e)
            raise IterationFailure(name) from e
        return Listing("keys", render.key_list(self.mount, name, keys))

    def value(self, name: str, key: str) -> Value:
        store = self._store(name)
        raw = key.encode("utf-8")
        try:
            present = store.has(raw)
        except Exception as e:
            log.debug("Existence check for '%s' in '%s' failed: %s", key, name, e)
            raise KeyAbsent(name, key) from e
        if not present:
            raise KeyAbsent(name, key)
        # has() and get() are not atomic; the owner may delete in between
        try:
            data = store.get(raw)
        except Exception as e:
            raise FetchFailure(name, key) from e
        if data is None:
            raise FetchFailure(name, key)
        return Value(bytes(data))

    def _store(self, name: str) -> Store:
        store = self.registry.lookup(name)
        if store is None:
            raise NotRegistered(name)
        return store
