"""Background uvicorn server hosting the browse app inside the owning process."""
from __future__ import annotations
import logging
import socket
import threading
import time
from typing import Optional
import uvicorn
from .app import create_app
from .config import Settings
from .observability import configure_logging, init_prom, init_tracing
from .registry import Registry

log = logging.getLogger(__name__)

class BrowseServer:
    startup_timeout = 10.0

    def __init__(self, registry: Registry, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.registry = registry
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None
        self._host = "127.0.0.1"
        self._port: Optional[int] = None

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def url(self) -> Optional[str]:
        return f"http://{self._host}:{self._port}" if self._port is not None else None

    def start(self) -> str:
        if self._thread is not None:
            raise RuntimeError("server already started")
        configure_logging(self.settings.debug)
        init_tracing(self.settings)
        init_prom(self.settings.prom_port)

        host, port = self.settings.host_port
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            self._port = sock.getsockname()[1]
            # wildcard binds are reachable over loopback
            self._host = "127.0.0.1" if host in ("", "0.0.0.0") else host

            config = uvicorn.Config(create_app(self.registry, self.settings), log_config=None, access_log=False)
            self._server = uvicorn.Server(config)
            self._thread = threading.Thread(
                target=self._server.run, kwargs={"sockets": [sock]}, name="storeweb", daemon=True,
            )
            self._thread.start()
            deadline = time.monotonic() + self.startup_timeout
            while not self._server.started:
                if not self._thread.is_alive() or time.monotonic() > deadline:
                    raise RuntimeError(f"store web server failed to start on {host}:{self._port}")
                time.sleep(0.01)
        except Exception:
            if self._server is not None:
                self._server.should_exit = True
            sock.close()
            self._reset()
            raise
        log.info("store web server on: %s%s", self.url, self.settings.mount)
        return self.url

    def stop(self, timeout: float = 5.0) -> None:
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        self._reset()

    def _reset(self) -> None:
        self._server = None
        self._thread = None
        self._host = "127.0.0.1"
        self._port = None

def serve(registry: Registry, settings: Optional[Settings] = None) -> BrowseServer:
    """Start browsing ``registry`` over HTTP and return the running server."""
    server = BrowseServer(registry, settings)
    server.start()
    return server
