"""FastAPI dependencies."""

from __future__ import annotations

from typing import Optional

from fastapi import Cookie, Depends, Request

from janken.config import JankenConfig
from janken.view.component import JankenView
from janken.view.render import PageRenderer
from janken.web.sessions import ViewRegistry


SESSION_COOKIE = "janken_session"


def get_config(request: Request) -> JankenConfig:
    return request.app.state.config


def get_registry(request: Request) -> ViewRegistry:
    return request.app.state.registry


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def get_view(
    janken_session: Optional[str] = Cookie(None),
    registry: ViewRegistry = Depends(get_registry),
) -> Optional[JankenView]:
    """View of the current page session, or None if unknown or expired."""
    return registry.get(janken_session)
