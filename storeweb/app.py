"""FastAPI app serving the store browser under a mount prefix."""
from __future__ import annotations
import logging
import time
from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from .browse import Browser, Listing
from .config import Settings
from .errors import BrowseError
from .observability import LAT, REQS, tracer
from .registry import Registry

log = logging.getLogger(__name__)

def _observe(mode: str, t0: float) -> None:
    REQS.labels(mode).inc()
    LAT.labels(mode).observe(time.monotonic() - t0)

def create_app(registry: Registry, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    browser = Browser(registry, settings.mount)

    app = FastAPI(title="storeweb", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.registry = registry
    app.state.settings = settings
    if settings.tracing:
        FastAPIInstrumentor.instrument_app(app)

    @app.get(settings.health_path, response_class=PlainTextResponse)
    def health() -> str:
        return "hello world"

    # plain def: Starlette runs each request in its threadpool
    def browse(request: Request) -> Response:
        path = request.scope["path"]
        t0 = time.monotonic()
        with tracer.start_as_current_span("browse", attributes={"path": path}):
            try:
                out = browser.respond(path)
            except BrowseError as e:
                log.debug("not found: %s (%s)", path, e.kind)
                _observe("not_found", t0)
                raise HTTPException(404) from e
        _observe(out.mode, t0)
        if isinstance(out, Listing):
            return HTMLResponse(out.html)
        return Response(content=out.data)

    app.add_api_route(settings.mount, browse, methods=["GET"], include_in_schema=False)
    app.add_api_route(settings.mount + "/{path:path}", browse, methods=["GET"], include_in_schema=False)
    return app
