"""Page view: state, display model and HTML rendering."""

from janken.view.component import JankenView, ViewState
from janken.view.display_state import (
    BgColor,
    ComfortImage,
    DisplayState,
    Player,
    ResultCard,
)
from janken.view.render import PageRenderer

__all__ = [
    "BgColor",
    "ComfortImage",
    "DisplayState",
    "JankenView",
    "PageRenderer",
    "Player",
    "ResultCard",
    "ViewState",
]
