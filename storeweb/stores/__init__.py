from __future__ import annotations
from .base import Store
from .inproc import InProcStore

__all__ = ["Store", "InProcStore"]
