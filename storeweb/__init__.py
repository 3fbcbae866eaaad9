"""Browse in-process key/value stores over HTTP."""
from __future__ import annotations
from .app import create_app
from .config import Settings
from .registry import Registry
from .server import BrowseServer, serve
from .stores import InProcStore, Store

__all__ = ["BrowseServer", "InProcStore", "Registry", "Settings", "Store", "create_app", "serve"]
