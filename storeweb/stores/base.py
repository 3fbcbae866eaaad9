"""Store capability consumed by the browser."""
from __future__ import annotations
from typing import Iterable, Optional, Protocol, runtime_checkable

@runtime_checkable
class Store(Protocol):
    """Ordered byte-string key/value store. The registry never owns it."""
    def iter_keys(self, prefix: bytes = b"") -> Iterable[bytes]: ...
    def has(self, key: bytes) -> bool: ...
    def get(self, key: bytes) -> Optional[bytes]: ...
