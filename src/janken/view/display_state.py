"""Intermediate representation for page rendering.

DisplayState is a ViewModel derived from the current ViewState:
1. JankenView builds it from its snapshot
2. PageRenderer renders it to HTML
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from janken.engine import Hand, RoundResult


class Player(Enum):
    YOU = "YOU"
    CPU = "CPU"

    @property
    def label(self) -> str:
        return self.value


class BgColor(Enum):
    BLUE = "blue"
    RED = "red"


class ComfortImage(BaseModel):
    """Payload of the random image API.

    message is the image URL; both fields are empty before the first
    successful fetch.
    """

    model_config = ConfigDict(frozen=True)

    message: str = ""
    status: str = ""


@dataclass(frozen=True)
class ResultCard:
    """Per-player block showing the player label and chosen hand."""

    color: BgColor
    player: Player
    hand: Optional[Hand]
    image_url: str  # "" when no hand is chosen


@dataclass(frozen=True)
class DisplayState:
    """Everything the renderer needs for one page."""

    hand_image_urls: tuple[str, ...]
    cards: tuple[ResultCard, ResultCard]
    result: Optional[RoundResult]
    comfort_image: ComfortImage

    @property
    def result_text(self) -> str:
        return self.result.text if self.result is not None else ""

    @property
    def show_comfort(self) -> bool:
        """Comfort block is only offered after a loss."""
        return self.result is RoundResult.LOSS


__all__ = ["BgColor", "ComfortImage", "DisplayState", "Player", "ResultCard"]
