from __future__ import annotations
import os
from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator
from .paths import normalize_mount

class Settings(BaseModel):
    # Listener, "host:port" or ":port"; port 0 picks a free one
    address: str = "127.0.0.1:0"

    # Browse endpoint and liveness probe
    mount: str = "/store_web"
    health_path: str = "/test_store_web"

    # Logging & observability
    debug: bool = False
    prom_port: int = Field(default=0, ge=0, le=65535)
    otlp_endpoint: Optional[str] = None
    service_name: str = "storeweb"

    @field_validator("address")
    @classmethod
    def _check_address(cls, v: str) -> str:
        host, sep, port = v.rpartition(":")
        if not sep or not port.isdigit() or not 0 <= int(port) <= 65535:
            raise ValueError(f"address must look like 'host:port' or ':port', got '{v}'")
        return v

    @field_validator("mount")
    @classmethod
    def _check_mount(cls, v: str) -> str:
        return normalize_mount(v)

    @field_validator("health_path")
    @classmethod
    def _check_health(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("health_path must start with '/'")
        return v

    @property
    def tracing(self) -> bool:
        return bool(self.otlp_endpoint)

    @property
    def host_port(self) -> Tuple[str, int]:
        host, _, port = self.address.rpartition(":")
        return host or "0.0.0.0", int(port)

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "address": os.getenv("STORE_WEB_ADDRESS"),
            "mount": os.getenv("STORE_WEB_MOUNT"),
            "health_path": os.getenv("STORE_WEB_HEALTH_PATH"),
            "debug": os.getenv("STORE_WEB_DEBUG", "").lower() == "true",
            "prom_port": os.getenv("PROM_PORT") or None,
            "otlp_endpoint": os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT"),
            "service_name": os.getenv("OTEL_SERVICE_NAME"),
        }
        return cls(**{k: v for k, v in raw.items() if v is not None and v != ""})
