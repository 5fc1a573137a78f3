"""
FastAPI application for the WiFi Connector form.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from wificonnector import __version__
from wificonnector.config import DEFAULT_CONFIG_PATH, ConnectorConfig, load_config
from wificonnector.devices import DEVICES
from wificonnector.controller import FormController
from wificonnector.web.routes import get_controller, router, set_controller

logger = logging.getLogger(__name__)

# Paths
WEB_DIR = Path(__file__).parent
STATIC_DIR = WEB_DIR / "static"
TEMPLATES_DIR = WEB_DIR / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Cancel any pending simulated send when the server stops."""
    yield
    await get_controller().close()


# Create FastAPI app
app = FastAPI(
    title="WiFi Connector",
    description="Send WiFi credentials to your Raspberry Pi",
    version=__version__,
    lifespan=lifespan,
)

# Mount static files if directory exists
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Templates
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Include API routes
app.include_router(router, prefix="/api")


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Render the credential form."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "version": __version__,
            "devices": DEVICES,
            "form": get_controller().snapshot(),
        },
    )


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False,
    config: Optional[ConnectorConfig] = None,
) -> None:
    """Run the web server.

    Args:
        host: Host to bind to (default: from config or 0.0.0.0)
        port: Port to listen on (default: from config or 8080)
        reload: Enable auto-reload for development
        config: Loaded configuration (default: read from config file)
    """
    import uvicorn

    if config is None:
        config = load_config(DEFAULT_CONFIG_PATH)
    effective_host = host if host is not None else config.web_host
    effective_port = port if port is not None else config.web_port

    set_controller(FormController.from_config(config))
    logger.info("Starting WiFi Connector on http://%s:%s", effective_host, effective_port)
    uvicorn.run(
        "wificonnector.web.app:app" if reload else app,
        host=effective_host,
        port=effective_port,
        reload=reload,
    )


if __name__ == "__main__":
    run_server()
