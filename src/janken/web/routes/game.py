"""Janken page routes."""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Path
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from janken.errors import ComfortImageUnavailable
from janken.view.component import JankenView
from janken.view.display_state import ComfortImage
from janken.view.render import PageRenderer
from janken.web.dependencies import SESSION_COOKIE, get_registry, get_renderer, get_view
from janken.web.sessions import ViewRegistry

router = APIRouter()


class StateResponse(BaseModel):
    """Current page state. Hands are 0 when no round has been played."""

    user_hand: int
    cpu_hand: int
    result: Optional[Literal["tie", "loss", "win"]]
    result_text: str
    comfort_image: ComfortImage
    round_no: int


def _page(view: JankenView, renderer: PageRenderer) -> HTMLResponse:
    return HTMLResponse(renderer.render(view.display_state()))


def _restart() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def load_page(
    janken_session: Optional[str] = Cookie(None),
    registry: ViewRegistry = Depends(get_registry),
    renderer: PageRenderer = Depends(get_renderer),
):
    """Load the page. Every load starts a new page session."""
    if janken_session is not None:
        registry.discard(janken_session)
    session_id, view = registry.create()

    response = _page(view, renderer)
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


@router.post("/hands/{hand}", response_class=HTMLResponse)
async def select_hand(
    hand: int = Path(..., ge=1, le=3),
    view: Optional[JankenView] = Depends(get_view),
    renderer: PageRenderer = Depends(get_renderer),
):
    """Play a round with the chosen hand (1: Rock, 2: Scissors, 3: Paper)."""
    if view is None:
        return _restart()
    view.select_hand(hand)
    return _page(view, renderer)


@router.post("/comfort-image", response_class=HTMLResponse)
async def comfort_image(
    view: Optional[JankenView] = Depends(get_view),
    renderer: PageRenderer = Depends(get_renderer),
):
    """Fetch a comfort image for a lost round and show it."""
    if view is None:
        return _restart()
    try:
        task = view.request_comfort_image()
    except ComfortImageUnavailable as e:
        raise HTTPException(status_code=409, detail=str(e))

    await task
    return _page(view, renderer)


@router.get("/api/state", response_model=StateResponse)
async def get_state(view: Optional[JankenView] = Depends(get_view)):
    """Get the current page state as JSON."""
    if view is None:
        raise HTTPException(status_code=404, detail="Page session not found")

    state = view.state
    return StateResponse(
        user_hand=int(state.user_hand or 0),
        cpu_hand=int(state.cpu_hand or 0),
        result=state.result.name.lower() if state.result is not None else None,
        result_text=state.result.text if state.result is not None else "",
        comfort_image=state.comfort_image,
        round_no=state.round_no,
    )
