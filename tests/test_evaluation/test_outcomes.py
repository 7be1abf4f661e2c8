"""
Tests for resolving signals into realized trade results.
"""
import pytest

from signal_engine.data.candles import Orientation
from signal_engine.evaluation.outcomes import resolve_outcome
from signal_engine.shared.types import Direction, Signal


def _signal(direction, entry=100.0, stop=99.0, targets=(102.0, 103.0, 104.0)):
    return Signal(
        valid=True,
        direction=direction,
        confidence=60,
        entry=entry,
        stop_loss=stop,
        take_profit=targets,
    )


def _candle(t, high, low):
    return {"time": t, "open": (high + low) / 2, "high": high, "low": low, "close": (high + low) / 2}


class TestResolveBuy:
    """BUY: stop below entry, targets above."""

    def test_target_hit(self):
        candles = [_candle(0, 101.0, 99.5), _candle(1, 102.5, 100.5)]
        assert resolve_outcome(_signal(Direction.BUY), candles) == "win"

    def test_stop_hit(self):
        candles = [_candle(0, 101.0, 99.5), _candle(1, 100.0, 98.5)]
        assert resolve_outcome(_signal(Direction.BUY), candles) == "loss"

    def test_still_open(self):
        candles = [_candle(0, 101.0, 99.5), _candle(1, 101.5, 99.2)]
        assert resolve_outcome(_signal(Direction.BUY), candles) is None

    def test_no_candles_is_open(self):
        assert resolve_outcome(_signal(Direction.BUY), []) is None

    def test_both_in_one_candle_counts_as_loss(self):
        assert resolve_outcome(_signal(Direction.BUY), [_candle(0, 103.0, 98.0)]) == "loss"

    def test_newest_first(self):
        candles = [_candle(1, 100.0, 98.5), _candle(0, 102.5, 100.5)]
        assert resolve_outcome(_signal(Direction.BUY), candles, Orientation.NEWEST_FIRST) == "win"


class TestResolveSell:
    """SELL: stop above entry, targets below."""

    def test_target_hit(self):
        signal = _signal(Direction.SELL, stop=101.0, targets=(98.0, 97.0, 96.0))
        assert resolve_outcome(signal, [_candle(0, 100.5, 97.9)]) == "win"

    def test_stop_hit(self):
        signal = _signal(Direction.SELL, stop=101.0, targets=(98.0, 97.0, 96.0))
        assert resolve_outcome(signal, [_candle(0, 101.2, 99.0)]) == "loss"


class TestResolveRejects:
    """Signals without a trade cannot be resolved."""

    def test_no_direction(self):
        with pytest.raises(ValueError):
            resolve_outcome(Signal(valid=True, confidence=50), [_candle(0, 1.0, 1.0)])

    def test_no_levels(self):
        signal = Signal(valid=True, direction=Direction.BUY, confidence=60, entry=100.0)
        with pytest.raises(ValueError):
            resolve_outcome(signal, [_candle(0, 1.0, 1.0)])
