"""Round outcome computation and CPU hand selection.

Hands are encoded as integers so the outcome is a single modulus:

    n = (user + 3 - cpu) % 3    ->  0: tie, 1: loss, 2: win
"""

from __future__ import annotations

import logging
import random
from enum import Enum, IntEnum
from typing import Optional, Union

from janken.errors import InvalidHandError

logger = logging.getLogger(__name__)


# Indexed by Hand.image_index: 0 = Rock, 1 = Scissors, 2 = Paper
HAND_IMAGE_URLS = (
    "https://jskm.sakura.ne.jp/js01/kadai/img02/g.png",
    "https://jskm.sakura.ne.jp/js01/kadai/img02/c.png",
    "https://jskm.sakura.ne.jp/js01/kadai/img02/p.png",
)


class Hand(IntEnum):
    """A janken hand."""

    ROCK = 1
    SCISSORS = 2
    PAPER = 3

    @property
    def image_index(self) -> int:
        """Zero-based index into the hand image list."""
        return self.value - 1

    @classmethod
    def coerce(cls, value: Union["Hand", int]) -> "Hand":
        """Convert an int (or Hand) to a Hand, raising InvalidHandError."""
        # bool is an int subclass; True would silently become ROCK
        if isinstance(value, bool):
            raise InvalidHandError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidHandError(value) from None


class RoundResult(Enum):
    """Outcome of a round from the user's point of view."""

    TIE = "あいこ"
    LOSS = "負け・・・"
    WIN = "勝ち！"

    @property
    def text(self) -> str:
        return self.value


_RESULTS_BY_REMAINDER = {
    0: RoundResult.TIE,
    1: RoundResult.LOSS,
    2: RoundResult.WIN,
}


def choose_opponent_hand(rng: Optional[random.Random] = None) -> Hand:
    """Pick the CPU hand uniformly at random."""
    source = rng if rng is not None else random
    return Hand(source.randint(1, 3))


def compute_result(user_hand: Union[Hand, int], cpu_hand: Union[Hand, int]) -> RoundResult:
    """Compute the round result for the user.

    Args:
        user_hand: The user's hand (1-3)
        cpu_hand: The CPU's hand (1-3)

    Returns:
        RoundResult.TIE, LOSS or WIN

    Raises:
        InvalidHandError: If either hand is outside 1-3
    """
    user = Hand.coerce(user_hand)
    cpu = Hand.coerce(cpu_hand)

    n = (user + 3 - cpu) % 3
    result = _RESULTS_BY_REMAINDER.get(n)
    if result is None:
        raise AssertionError(f"unexpected remainder {n} for hands {int(user)}, {int(cpu)}")

    logger.debug(f"{int(user)} {int(cpu)} {result.text}")
    return result


__all__ = [
    "HAND_IMAGE_URLS",
    "Hand",
    "RoundResult",
    "choose_opponent_hand",
    "compute_result",
]
