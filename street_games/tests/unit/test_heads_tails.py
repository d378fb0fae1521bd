"""
猜硬币单元测试

重点验证结果在选边时一次性确定，旋转动画不影响结果，以及长期胜率约为50%。
"""

import math
import random

import pytest

from street_games.minigames import CoinSide, HeadsTailsGame, HeadsTailsPhase


def _flip_until_result(game, dt=0.5, max_steps=100):
    for _ in range(max_steps):
        if game.update(dt):
            return
    raise AssertionError("硬币没有停下")


class TestHeadsTailsRound:
    """猜硬币对局测试"""

    def test_phase_flow(self, ledger, rng):
        """测试 BETTING → CHOOSING → FLIPPING → RESULT"""
        game = HeadsTailsGame(ledger, rng)
        game.start(10)
        assert game.phase == HeadsTailsPhase.CHOOSING

        game.choose_side(CoinSide.TAILS)
        assert game.phase == HeadsTailsPhase.FLIPPING
        assert 20 <= game.rotation_speed < 30

        _flip_until_result(game)
        assert game.phase == HeadsTailsPhase.RESULT

    def test_outcome_fixed_at_choice(self, ledger, rng):
        """测试结果在选边时确定，之后的旋转不改变结果"""
        game = HeadsTailsGame(ledger, rng)
        game.start(10)
        game.choose_side(CoinSide.HEADS)
        decided = game.winning_side
        assert decided is not None

        _flip_until_result(game, dt=0.1, max_steps=1000)
        assert game.winning_side == decided

    def test_rotation_lands_on_winning_face(self, ledger, rng):
        game = HeadsTailsGame(ledger, rng)
        game.start(10)
        game.choose_side(CoinSide.HEADS)
        _flip_until_result(game)

        expected = 0.0 if game.winning_side == CoinSide.HEADS else math.pi
        assert game.current_rotation == expected

    def test_coin_spins_for_minimum_time(self, ledger, rng):
        """测试硬币至少旋转coin_min_flip_seconds"""
        game = HeadsTailsGame(ledger, rng)
        game.start(10)
        game.choose_side(CoinSide.HEADS)

        elapsed = 0.0
        while not game.update(0.25):
            elapsed += 0.25
        assert elapsed + 0.25 > 2.0

    def test_settle_matches_choice(self, ledger, rng):
        game = HeadsTailsGame(ledger, rng)
        game.start(20)
        game.choose_side(CoinSide.TAILS)
        assert game.settle() == 0

        _flip_until_result(game)
        expected = 20 if game.winning_side == CoinSide.TAILS else -20
        assert game.player_won == (game.winning_side == CoinSide.TAILS)
        assert game.settle() == expected

    def test_choose_side_outside_choosing_is_ignored(self, ledger, rng):
        game = HeadsTailsGame(ledger, rng)
        game.choose_side(CoinSide.HEADS)
        assert game.phase == HeadsTailsPhase.BETTING
        assert game.winning_side is None

    def test_reset_clears_outcome(self, ledger, rng):
        game = HeadsTailsGame(ledger, rng)
        game.start(10)
        game.choose_side(CoinSide.HEADS)
        _flip_until_result(game)

        game.reset()

        assert game.phase == HeadsTailsPhase.BETTING
        assert game.winning_side is None
        assert game.rotation_speed == 0.0


@pytest.mark.slow
class TestHeadsTailsFairness:
    """长期胜率测试"""

    def test_win_rate_close_to_half(self, ledger, fast_timing):
        """测试10000局中固定选正面的胜率在47%-53%之间"""
        game = HeadsTailsGame(ledger, random.Random(12345), fast_timing)
        rounds = 10000
        wins = 0
        for _ in range(rounds):
            game.start(game.min_bet)
            game.choose_side(CoinSide.HEADS)
            _flip_until_result(game)
            if game.player_won:
                wins += 1
            game.reset()

        assert 0.47 <= wins / rounds <= 0.53
