"""
Shared fixtures: candle builders.
"""
import pandas as pd
import pytest


def build_candles(closes, spread=0.1, start="2024-01-01 00:00:00", freq="h"):
    """Oldest-first candle dicts with high/low at close +/- spread."""
    times = pd.date_range(start, periods=len(closes), freq=freq)
    return [
        {
            "time": t.isoformat(),
            "open": float(c),
            "high": float(c) + spread,
            "low": float(c) - spread,
            "close": float(c),
        }
        for t, c in zip(times, closes)
    ]


@pytest.fixture
def candle_factory():
    """Factory building oldest-first candle dicts from a list of closes."""
    return build_candles


@pytest.fixture
def rising_candles():
    """25 one-unit candles rising from 100 to 124, highs/lows +/- 0.1."""
    return build_candles([100 + i for i in range(25)])


@pytest.fixture
def falling_candles():
    """25 one-unit candles falling from 124 to 100, highs/lows +/- 0.1."""
    return build_candles([124 - i for i in range(25)])


@pytest.fixture
def accelerating_candles():
    """40 candles with accelerating closes (MACD histogram positive after warm-up)."""
    return build_candles([100 + 0.02 * i * i for i in range(40)])
