"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import FastAPI

from janken import __version__
from janken.config import JankenConfig
from janken.view.render import PageRenderer
from janken.web.routes import game
from janken.web.sessions import ViewRegistry


def create_app(
    config: Optional[JankenConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the janken web app.

    Args:
        config: App configuration, read from JANKEN_* env vars when omitted
        transport: httpx transport for the image API (tests only)
    """
    if config is None:
        config = JankenConfig.from_env()

    app = FastAPI(title="Janken", version=__version__)
    app.state.config = config
    app.state.registry = ViewRegistry(config, transport=transport)
    app.state.renderer = PageRenderer()

    app.include_router(game.router, tags=["game"])

    return app
