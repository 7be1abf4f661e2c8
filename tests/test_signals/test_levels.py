"""
Tests for stop-loss and take-profit calculation.
"""
import pytest

from signal_engine.signals.config import InstrumentProfile, BASELINE_CONFIG
from signal_engine.signals.levels import LevelCalculator, price_decimals
from signal_engine.shared.types import Direction


FOREX = BASELINE_CONFIG.resolve_profile("EUR/USD")
JPY = BASELINE_CONFIG.resolve_profile("USD/JPY")


class TestPriceDecimals:

    @pytest.mark.parametrize("point,decimals", [(0.0001, 4), (0.01, 2), (0.1, 1), (1.0, 0), (100.0, 0)])
    def test_decimals(self, point, decimals):
        assert price_decimals(point) == decimals


class TestLevelCalculator:
    """ATR-sized stops, reward/risk take-profits."""

    def test_buy_levels(self):
        levels = LevelCalculator().calculate(Direction.BUY, 1.1000, 0.0020, FOREX)
        assert levels.stop_points == 20
        assert levels.stop_loss == pytest.approx(1.0980)
        assert levels.take_profit == pytest.approx((1.1040, 1.1060, 1.1080))

    def test_sell_levels(self):
        levels = LevelCalculator().calculate(Direction.SELL, 150.00, 0.35, JPY)
        assert levels.stop_points == 35
        assert levels.stop_loss == pytest.approx(150.35)
        assert levels.take_profit == pytest.approx((149.30, 148.95, 148.60))

    def test_minimum_stop(self):
        levels = LevelCalculator().calculate(Direction.BUY, 1.1000, 0.00001, FOREX)
        assert levels.stop_points == FOREX.min_stop_points
        assert levels.stop_loss == pytest.approx(1.0990)

    def test_quantized_to_point_size(self):
        levels = LevelCalculator().calculate(Direction.BUY, 1.123456, 0.00123, FOREX)
        assert levels.stop_points == 12
        assert levels.stop_loss == round(levels.stop_loss, 4)
        assert all(tp == round(tp, 4) for tp in levels.take_profit)

    def test_ordering(self):
        buy = LevelCalculator().calculate(Direction.BUY, 100.0, 1.5, JPY)
        sell = LevelCalculator().calculate(Direction.SELL, 100.0, 1.5, JPY)
        assert buy.stop_loss < 100.0 < buy.take_profit[0] < buy.take_profit[1] < buy.take_profit[2]
        assert sell.stop_loss > 100.0 > sell.take_profit[0] > sell.take_profit[1] > sell.take_profit[2]

    def test_custom_reward_risk_and_level_count(self):
        levels = LevelCalculator(reward_risk=1.5, take_profit_levels=1).calculate(
            Direction.BUY, 100.0, 2.0, InstrumentProfile("unit", 1.0, 0.5, 10.0, min_stop_points=1)
        )
        assert levels.take_profit == (103.0,)

    def test_no_direction_or_atr(self):
        calculator = LevelCalculator()
        assert calculator.calculate(Direction.NONE, 1.1, 0.002, FOREX) is None
        assert calculator.calculate(Direction.BUY, 1.1, None, FOREX) is None

    def test_stop_points_round_half_up(self):
        unit = InstrumentProfile("unit", 1.0, 0.5, 50.0, min_stop_points=1)
        calculator = LevelCalculator()
        assert calculator.stop_points(12.5, unit) == 13
        assert calculator.stop_points(13.5, unit) == 14
        assert calculator.stop_points(12.4, unit) == 12
