"""Tests for the round outcome engine."""

import logging
import random

import pytest

from janken.engine import (
    HAND_IMAGE_URLS,
    Hand,
    RoundResult,
    choose_opponent_hand,
    compute_result,
)
from janken.errors import InvalidHandError


ALL_HANDS = [Hand.ROCK, Hand.SCISSORS, Hand.PAPER]


class TestComputeResult:
    """Tests for compute_result."""

    def test_rock_beats_scissors(self):
        assert compute_result(1, 2) == RoundResult.WIN
        assert compute_result(1, 2).text == "勝ち！"

    def test_scissors_loses_to_rock(self):
        assert compute_result(2, 1) == RoundResult.LOSS
        assert compute_result(2, 1).text == "負け・・・"

    def test_paper_ties_paper(self):
        assert compute_result(3, 3) == RoundResult.TIE
        assert compute_result(3, 3).text == "あいこ"

    def test_paper_beats_rock(self):
        assert compute_result(Hand.PAPER, Hand.ROCK) == RoundResult.WIN

    @pytest.mark.parametrize("hand", ALL_HANDS)
    def test_same_hand_is_tie(self, hand):
        assert compute_result(hand, hand) == RoundResult.TIE

    def test_total_over_all_pairs(self):
        """Every pair of valid hands yields tie, loss or win."""
        for user in ALL_HANDS:
            for cpu in ALL_HANDS:
                assert compute_result(user, cpu) in set(RoundResult)

    def test_win_loss_antisymmetry(self):
        """a beats b exactly when b loses to a."""
        for a in ALL_HANDS:
            for b in ALL_HANDS:
                if a == b:
                    continue
                a_wins = compute_result(a, b) == RoundResult.WIN
                b_loses = compute_result(b, a) == RoundResult.LOSS
                assert a_wins == b_loses

    @pytest.mark.parametrize("bad", [0, 4, -1, 99])
    def test_out_of_range_hand_raises(self, bad):
        with pytest.raises(InvalidHandError):
            compute_result(bad, 1)
        with pytest.raises(InvalidHandError):
            compute_result(1, bad)

    def test_invalid_hand_is_value_error(self):
        with pytest.raises(ValueError):
            compute_result(0, 0)

    def test_bool_is_not_a_hand(self):
        with pytest.raises(InvalidHandError):
            compute_result(True, 1)

    def test_logs_round_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="janken.engine"):
            compute_result(1, 2)
        assert "1 2 勝ち！" in caplog.text


class TestChooseOpponentHand:
    """Tests for choose_opponent_hand."""

    def test_always_in_range(self):
        rng = random.Random(1234)
        for _ in range(1000):
            hand = choose_opponent_hand(rng)
            assert 1 <= hand <= 3
            assert isinstance(hand, Hand)

    def test_all_hands_observed(self):
        rng = random.Random(42)
        seen = {choose_opponent_hand(rng) for _ in range(300)}
        assert seen == set(ALL_HANDS)

    def test_without_rng_uses_module_random(self):
        seen = {choose_opponent_hand() for _ in range(300)}
        assert seen <= set(ALL_HANDS)
        assert len(seen) == 3

    def test_seeded_rng_is_reproducible(self):
        rng_a = random.Random(7)
        rng_b = random.Random(7)
        first = [choose_opponent_hand(rng_a) for _ in range(20)]
        second = [choose_opponent_hand(rng_b) for _ in range(20)]
        assert first == second


class TestHand:
    """Tests for Hand helpers."""

    def test_image_index_is_zero_based(self):
        assert Hand.ROCK.image_index == 0
        assert Hand.SCISSORS.image_index == 1
        assert Hand.PAPER.image_index == 2

    def test_image_urls_match_hands(self):
        assert HAND_IMAGE_URLS[Hand.ROCK.image_index].endswith("/g.png")
        assert HAND_IMAGE_URLS[Hand.SCISSORS.image_index].endswith("/c.png")
        assert HAND_IMAGE_URLS[Hand.PAPER.image_index].endswith("/p.png")

    def test_coerce_accepts_hand_and_int(self):
        assert Hand.coerce(Hand.PAPER) is Hand.PAPER
        assert Hand.coerce(2) is Hand.SCISSORS

    def test_coerce_rejects_zero(self):
        with pytest.raises(InvalidHandError) as exc_info:
            Hand.coerce(0)
        assert exc_info.value.value == 0
