"""
应用层单元测试

测试ConfigService的命名预设、日志配置，以及DTO的数据校验。
"""

import logging

import pytest
from pydantic import ValidationError

from street_games.application import (
    ConfigService,
    CommandResult,
    ConfigType,
    ErrorCode,
    LoggingConfig,
    MinigameSnapshot,
    ResultStatus,
    RoundSettlement,
    configure_logging,
)
from street_games.core import EconomyConfig, TimingConfig


class TestConfigService:
    """配置服务测试"""

    def setup_method(self):
        """测试前设置"""
        self.service = ConfigService()

    def test_default_economy_config(self):
        result = self.service.get_economy_config()
        assert result.success is True
        assert result.status == ResultStatus.SUCCESS
        assert result.data == EconomyConfig()

    def test_high_roller_profile(self):
        config = self.service.get_economy_config("high_roller").data
        assert config.starting_money == 1000
        assert config.bet_min_base == 50

    def test_fast_timing_profile(self):
        config = self.service.get_timing_config("fast").data
        assert config.dice_roll_seconds == 0.0
        assert config.palitinho_dice_pause == 0.0

    def test_unknown_profile_falls_back_to_default(self, caplog):
        """测试未知配置名回退到默认配置并记录警告"""
        with caplog.at_level(logging.WARNING):
            result = self.service.get_timing_config("nonexistent")

        assert result.data == TimingConfig()
        assert "nonexistent" in caplog.text

    def test_register_profile(self):
        custom = EconomyConfig(starting_money=500)
        result = self.service.register_profile(ConfigType.ECONOMY, "rich", custom)

        assert result.success is True
        assert "rich" in self.service.list_profiles(ConfigType.ECONOMY)
        assert self.service.get_economy_config("rich").data is custom

    def test_register_profile_type_mismatch(self):
        """测试注册类型不匹配的配置被拒绝"""
        result = self.service.register_profile(ConfigType.TIMING, "bad", EconomyConfig())

        assert result.success is False
        assert result.error_code == "CONFIG_TYPE_MISMATCH"
        assert "bad" not in self.service.list_profiles(ConfigType.TIMING)

    def test_logging_profiles(self):
        assert self.service.get_logging_config("debug").data.log_level == 'DEBUG'
        assert set(self.service.list_profiles(ConfigType.LOGGING)) == {'default', 'debug', 'quiet'}


class TestResultTypes:
    """结果对象测试"""

    def test_error_code_decides_status(self):
        """测试错误码决定结果状态"""
        assert CommandResult.rejected(ErrorCode.INSUFFICIENT_BALANCE, "x").status == ResultStatus.BUSINESS_RULE_VIOLATION
        assert CommandResult.rejected(ErrorCode.INVALID_PHASE, "x").status == ResultStatus.VALIDATION_ERROR
        assert CommandResult.rejected(ErrorCode.CONFIG_TYPE_MISMATCH, "x").status == ResultStatus.FAILURE

    def test_error_code_compares_as_string(self):
        assert ErrorCode.NO_GAME_OPEN == "NO_GAME_OPEN"

    def test_ok_result_carries_data(self):
        result = CommandResult.ok("下注 20", bet_amount=20)
        assert result.success is True
        assert result.data == {'bet_amount': 20}
        assert result.settlement is None
        assert CommandResult.ok("已打开").data is None


class TestLoggingConfig:
    """日志配置测试"""

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError):
            LoggingConfig(log_level='LOUD')

    def test_configure_logging_sets_root_level(self):
        root = logging.getLogger()
        original_level = root.level
        original_handlers = root.handlers[:]
        try:
            configure_logging(LoggingConfig(log_level='WARNING', enable_console_logging=False))
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = original_handlers
            root.setLevel(original_level)


class TestTimingConfig:
    """时间节奏配置测试"""

    def test_negative_value_raises(self):
        with pytest.raises(ValueError):
            TimingConfig(dice_roll_seconds=-1.0)

    def test_coin_that_never_stops_raises(self):
        with pytest.raises(ValueError):
            TimingConfig(coin_min_speed=2.0, coin_stop_speed=1.0)


class TestDTOs:
    """数据传输对象测试"""

    def test_snapshot_normalizes_names(self):
        snapshot = MinigameSnapshot(
            game_type=" Blackjack ",
            phase="BETTING",
            bet_amount=10,
            selected_bet=10,
            min_bet=10,
            max_bet=120,
            balance=100,
        )
        assert snapshot.game_type == "blackjack"
        assert snapshot.phase == "betting"
        assert snapshot.is_finished is False

    def test_snapshot_rejects_negative_bet(self):
        with pytest.raises(ValidationError):
            MinigameSnapshot(
                game_type="dice", phase="betting", bet_amount=-10,
                selected_bet=10, min_bet=10, max_bet=120, balance=100,
            )

    def test_settlement_payout_must_match(self):
        """测试退还金额必须等于下注加净输赢"""
        settlement = RoundSettlement(game_type="dice", bet_amount=10, net=40, payout=50, balance_after=140)
        assert settlement.payout == 50

        with pytest.raises((ValueError, ValidationError)):
            RoundSettlement(game_type="dice", bet_amount=10, net=40, payout=30, balance_after=120)

    def test_abandoned_settlement_may_pay_nothing(self):
        settlement = RoundSettlement(game_type="poker", bet_amount=20, net=-20, payout=0,
                                     balance_after=80, abandoned=True)
        assert settlement.abandoned is True
