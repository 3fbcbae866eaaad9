from __future__ import annotations
import bisect
import threading
from typing import Dict, Iterator, List, Optional
from .base import Store

class InProcStore(Store):
    """In-memory byte store kept in key order, safe for concurrent readers."""
    def __init__(self, items: Optional[Dict[bytes, bytes]] = None):
        self._lock = threading.Lock()
        self._m: Dict[bytes, bytes] = {}
        self._keys: List[bytes] = []
        for k, v in (items or {}).items():
            self.put(k, v)

    def put(self, key: bytes, value: bytes) -> None:
        with self._lock:
            if key not in self._m:
                bisect.insort(self._keys, key)
            self._m[key] = value

    def delete(self, key: bytes) -> None:
        with self._lock:
            if self._m.pop(key, None) is not None:
                self._keys.remove(key)

    def iter_keys(self, prefix: bytes = b"") -> Iterator[bytes]:
        with self._lock:
            keys = list(self._keys)
        start = bisect.bisect_left(keys, prefix)
        for k in keys[start:]:
            if not k.startswith(prefix):
                break
            yield k

    def has(self, key: bytes) -> bool:
        with self._lock:
            return key in self._m

    def get(self, key: bytes) -> Optional[bytes]:
        with self._lock:
            return self._m.get(key)
