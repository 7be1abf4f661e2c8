"""
Indicator calculation module.

Provides the fixed indicator set used for scoring:
- SMA, EMA, RSI, MACD (line, signal, histogram), ATR
- Trend strength (distance between short and long SMA)

All indicators return the latest value or None (indeterminate) when the
candle series is too short.
"""
from .technical import (
    sma,
    ema,
    ema_series,
    rsi,
    macd,
    atr,
    trend_strength,
    compute_indicator_set,
)

__all__ = [
    'sma',
    'ema',
    'ema_series',
    'rsi',
    'macd',
    'atr',
    'trend_strength',
    'compute_indicator_set',
]
