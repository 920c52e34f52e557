"""Page view component: owns the UI state of one page session."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field, replace
from typing import Optional, Union

import httpx

from janken.config import JankenConfig
from janken.engine import Hand, RoundResult, choose_opponent_hand, compute_result
from janken.errors import ComfortImageUnavailable
from janken.view.display_state import (
    BgColor,
    ComfortImage,
    DisplayState,
    Player,
    ResultCard,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot of the page state.

    user_hand and cpu_hand are either both None (no round yet) or both set.
    """

    user_hand: Optional[Hand] = None
    cpu_hand: Optional[Hand] = None
    result: Optional[RoundResult] = None
    comfort_image: ComfortImage = field(default_factory=ComfortImage)
    round_no: int = 0


def _hand_image(hand: Optional[Hand], urls: tuple[str, ...]) -> str:
    if hand is None:
        return ""
    return urls[hand.image_index]


class JankenView:
    """Root view of the janken page.

    State is only replaced by the action handlers below, always with a
    new ViewState, so a render never sees a half-applied action.
    """

    def __init__(
        self,
        config: JankenConfig,
        rng: Optional[random.Random] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.state = ViewState()

        self._transport = transport
        self._fetches: set[asyncio.Task] = set()

    @property
    def pending_fetches(self) -> int:
        """Number of comfort image fetches still in flight."""
        return len(self._fetches)

    def select_hand(self, hand: Union[Hand, int]) -> ViewState:
        """Play a round with the user's hand against a random CPU hand."""
        user_hand = Hand.coerce(hand)
        cpu_hand = choose_opponent_hand(self.rng)
        result = compute_result(user_hand, cpu_hand)

        # New round starts with an empty comfort image
        self.state = ViewState(
            user_hand=user_hand,
            cpu_hand=cpu_hand,
            result=result,
            round_no=self.state.round_no + 1,
        )
        return self.state

    def request_comfort_image(self) -> "asyncio.Task[Optional[ComfortImage]]":
        """Start fetching a comfort image for the current (lost) round.

        Every call starts an independent fetch; the last one to succeed
        wins. Must be called from a running event loop.

        Returns:
            The fetch task, resolving to the stored image or None on failure

        Raises:
            ComfortImageUnavailable: If the current round is not a loss
        """
        if self.state.result is not RoundResult.LOSS:
            raise ComfortImageUnavailable("Comfort images are only available after a loss")

        task = asyncio.create_task(self._fetch_comfort_image(self.state.round_no))
        self._fetches.add(task)
        task.add_done_callback(self._fetches.discard)
        return task

    async def _fetch_comfort_image(self, round_no: int) -> Optional[ComfortImage]:
        try:
            image = await self._get_comfort_image()
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers bad JSON and payload validation errors
            logger.warning(f"Error get image url : {e!r}")
            return None

        logger.info(f"status: {image.status}")

        if self.state.round_no != round_no:
            logger.debug(f"Discarding comfort image from round {round_no}")
            return None

        self.state = replace(self.state, comfort_image=image)
        return image

    async def _get_comfort_image(self) -> ComfortImage:
        async with httpx.AsyncClient(
            transport=self._transport,
            follow_redirects=True,
            timeout=self.config.fetch_timeout,
        ) as client:
            response = await client.get(self.config.image_api_url)
            response.raise_for_status()
            return ComfortImage.model_validate(response.json())

    def display_state(self) -> DisplayState:
        """Derive the render model from the current snapshot."""
        state = self.state
        urls = self.config.hand_image_urls

        cards = (
            ResultCard(
                color=BgColor.BLUE,
                player=Player.YOU,
                hand=state.user_hand,
                image_url=_hand_image(state.user_hand, urls),
            ),
            ResultCard(
                color=BgColor.RED,
                player=Player.CPU,
                hand=state.cpu_hand,
                image_url=_hand_image(state.cpu_hand, urls),
            ),
        )
        return DisplayState(
            hand_image_urls=urls,
            cards=cards,
            result=state.result,
            comfort_image=state.comfort_image,
        )
