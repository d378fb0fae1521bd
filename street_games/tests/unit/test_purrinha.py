"""
Purrinha单元测试

脚本随机数顺序：构造时每名NPC一个资金抽样，选石子时每名NPC一个石子数。
"""

import random

import pytest

from street_games.minigames import PurrinhaGame, PurrinhaPhase, npc_guess
from street_games.tests.helpers import ScriptedRandom

# NPC资金 40/50/60，NPC石子 2/3/0
SCRIPT = [10, 20, 30, 2, 3, 0]


def _resolve(game, dt=1.0, max_steps=50):
    for _ in range(max_steps):
        if game.update(dt):
            return
    raise AssertionError("揭示阶段没有结束")


class TestNpcGuess:
    """NPC猜测策略测试"""

    def test_centered_estimate(self):
        """测试基准估计：自己的石子 + 其他每人1.5颗"""
        assert npc_guess(2, 4, 0.5, 12, set()) == 7

    def test_negative_jitter(self):
        assert npc_guess(2, 4, 0.0, 12, set()) == 5

    def test_duplicate_guess_steps_up(self):
        """测试与已有猜测重复时向上递增"""
        assert npc_guess(2, 4, 0.5, 12, {7}) == 8
        assert npc_guess(2, 4, 0.0, 12, {5, 6}) == 7

    def test_duplicate_at_ceiling_backs_off(self):
        """测试到顶仍重复时后退2"""
        assert npc_guess(3, 4, 0.99, 8, {8}) == 6

    def test_guess_is_clamped(self):
        assert npc_guess(0, 2, 0.0, 6, set()) == 0
        assert 0 <= npc_guess(3, 5, 0.99, 15, set()) <= 15


class TestPurrinhaSetup:
    """Purrinha初始化测试"""

    def test_npc_count_is_clamped(self, ledger, rng):
        assert len(PurrinhaGame(ledger, rng, npc_count=9).players) == 5
        assert len(PurrinhaGame(ledger, rng, npc_count=0).players) == 2

    def test_npc_money_range(self, ledger):
        game = PurrinhaGame(ledger, random.Random(5), npc_count=4)
        assert all(30 <= npc.money <= 99 for npc in game.players[1:])
        assert game.max_possible_total == 15


class TestPurrinhaRound:
    """Purrinha对局测试"""

    @pytest.fixture
    def game(self, ledger, fast_timing):
        return PurrinhaGame(ledger, ScriptedRandom(SCRIPT), fast_timing, human_money=100)

    def test_pot_and_total(self, game):
        """测试底池为每人同额下注之和，总数为所有石子之和"""
        game.start(10)
        assert game.pot == 40

        game.choose_stones(1)
        assert game.phase == PurrinhaPhase.GUESSING
        assert game.total_stones == 6

    def test_stones_are_clamped(self, game):
        game.start(10)
        game.choose_stones(7)
        assert game.human.stones == 3

    def test_exact_human_guess_wins_pot(self, game):
        """测试人类猜中总数赢走底池"""
        game.start(10)
        game.choose_stones(1)
        game.make_guess(6)
        assert game.phase == PurrinhaPhase.REVEAL

        _resolve(game)

        assert game.winner is game.human
        assert game.settle() == 30
        assert [npc.money for npc in game.players[1:]] == [30, 40, 50]

    def test_npc_guesses_are_unique(self, game):
        game.start(10)
        game.choose_stones(1)
        game.make_guess(6)

        guesses = [p.guess for p in game.players]
        assert len(set(guesses)) == len(guesses)

    def test_npc_winner_collects_pot(self, game):
        """测试NPC获胜时赢走底池，人类输掉下注"""
        game.start(10)
        game.choose_stones(1)
        game.make_guess(12)
        _resolve(game)

        assert not game.winner.is_human
        assert game.settle() == -10
        assert sum(npc.money for npc in game.players[1:]) == 150 - 30 + 40

    def test_npc_stake_never_goes_negative(self, game):
        """测试余额不足的NPC输掉全部余额，不会变成负数"""
        game.players[1].money = 5
        game.start(10)
        game.choose_stones(1)
        game.make_guess(6)
        _resolve(game)

        assert game.winner is game.human
        assert [npc.money for npc in game.players[1:]] == [0, 40, 50]

    def test_tie_goes_to_first_player_found(self, game):
        """测试距离并列时先找到的玩家获胜，不做随机裁决"""
        game.start(10)
        game.choose_stones(1)
        game.make_guess(7)
        for npc, guess in zip(game.players[1:], (5, 9, 10)):
            npc.guess = guess

        _resolve(game)

        assert game.winner is game.human

    def test_guess_is_clamped(self, game):
        game.start(10)
        game.choose_stones(1)
        game.make_guess(99)
        assert game.human.guess == game.max_possible_total

    def test_out_of_phase_actions_are_ignored(self, game):
        game.choose_stones(2)
        game.make_guess(3)
        assert game.phase == PurrinhaPhase.BETTING
        assert game.update(10.0) is False

    def test_reset_with_human_money(self, game):
        game.start(10)
        game.choose_stones(1)
        game.make_guess(6)
        _resolve(game)

        game.reset(human_money=130)

        assert game.phase == PurrinhaPhase.BETTING
        assert game.human.money == 130
        assert game.pot == 0 and game.winner is None
        assert all(p.guess == 0 and not p.has_guessed for p in game.players)


class TestPurrinhaReveal:
    """逐个揭示测试"""

    def test_players_revealed_one_per_interval(self, ledger):
        """测试每隔一个间隔揭示一名玩家，全部揭示并停顿后才结算"""
        game = PurrinhaGame(ledger, ScriptedRandom(SCRIPT))
        game.start(10)
        game.choose_stones(1)
        game.make_guess(6)

        assert game.update(0.5) is False
        assert game.reveal_index == 0
        game.update(1.0)
        assert game.reveal_index == 1
        game.update(1.0)
        game.update(1.0)
        assert game.reveal_index == 3
        # 4名玩家 × 1秒 + 1.5秒停顿
        game.update(2.0)
        assert game.phase == PurrinhaPhase.REVEAL
        assert game.update(0.5) is True
        assert game.phase == PurrinhaPhase.RESULT


class TestPurrinhaRestake:
    """NPC补充资金测试"""

    def test_reset_restakes_against_raised_min_bet(self, ledger, fast_timing):
        """测试财富提高最低下注后，重置按新的最低下注补充NPC资金"""
        game = PurrinhaGame(ledger, ScriptedRandom([10, 20, 30, 5, 6, 7]), fast_timing)
        ledger.balance = 10000

        game.reset()

        assert game.min_bet == 110
        assert [npc.money for npc in game.players[1:]] == [55, 56, 57]
