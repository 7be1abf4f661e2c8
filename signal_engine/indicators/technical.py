"""
Technical indicators for signal scoring.

Provides SMA, EMA, RSI, MACD, ATR and trend strength as plain functions over
an oldest-first candle frame (see data.candles.prepare_candles). Each
function returns the value at the latest candle, or None when the frame is
too short for the requested lookback. No rounding happens here.
"""
import pandas as pd
from typing import Optional

from ..shared.types import IndicatorSet, MacdValues
from ..shared.defaults import (
    SMA_SHORT_PERIOD, SMA_LONG_PERIOD,
    RSI_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    ATR_PERIOD,
)


def _check_period(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")


def sma(candles: pd.DataFrame, length: int) -> Optional[float]:
    """Arithmetic mean of the last `length` closes."""
    _check_period("length", length)
    if len(candles) < length:
        return None
    return float(candles["close"].iloc[-length:].mean())


def ema_series(values: pd.Series, length: int) -> pd.Series:
    """
    Exponential moving average seeded with the simple average of the first `length` values.

    ema_i = (x_i - ema_{i-1}) * k + ema_{i-1}, k = 2 / (length + 1)

    Returns:
        Series indexed from the seed position onward (empty if too few values)
    """
    _check_period("length", length)
    if len(values) < length:
        return pd.Series(dtype=float)
    seed = pd.Series([values.iloc[:length].mean()], index=[values.index[length - 1]])
    seeded = pd.concat([seed, values.iloc[length:]]).astype(float)
    # adjust=False gives exactly the recursive form above with alpha = 2 / (span + 1)
    return seeded.ewm(span=length, adjust=False).mean()


def ema(candles: pd.DataFrame, length: int) -> Optional[float]:
    """EMA of closes at the latest candle."""
    series = ema_series(candles["close"], length)
    if series.empty:
        return None
    return float(series.iloc[-1])


def rsi(candles: pd.DataFrame, period: int = RSI_PERIOD) -> Optional[float]:
    """
    Calculate Relative Strength Index (RSI) over the last `period` close-to-close moves.

    RSI = 100 - (100 / (1 + RS))
    RS = Average Gain / Average Loss (saturates at 100 when there are no losses)
    """
    _check_period("period", period)
    if len(candles) < period + 1:
        return None
    deltas = candles["close"].diff().iloc[-period:]
    avg_gain = deltas.clip(lower=0).sum() / period
    avg_loss = (-deltas).clip(lower=0).sum() / period
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return float(100 - (100 / (1 + rs)))


def macd(
    candles: pd.DataFrame,
    fast: int = MACD_FAST,
    slow: int = MACD_SLOW,
    signal_period: int = MACD_SIGNAL,
) -> Optional[MacdValues]:
    """
    Calculate MACD (Moving Average Convergence Divergence) at the latest candle.

    The signal line is the EMA of the trailing MACD-line series (defined from
    the `slow`-th candle onward); while that series is still shorter than
    `signal_period` it is their plain mean.

    Returns:
        MacdValues(value, signal_line, histogram), or None with fewer than `slow` candles
    """
    _check_period("signal_period", signal_period)
    if fast >= slow:
        raise ValueError(f"MACD fast ({fast}) must be less than slow ({slow})")
    if len(candles) < slow:
        return None

    closes = candles["close"]
    macd_line = (ema_series(closes, fast) - ema_series(closes, slow)).dropna()

    if len(macd_line) >= signal_period:
        signal_line = float(ema_series(macd_line, signal_period).iloc[-1])
    else:
        signal_line = float(macd_line.mean())

    value = float(macd_line.iloc[-1])
    return MacdValues(value=value, signal_line=signal_line, histogram=value - signal_line)


def atr(candles: pd.DataFrame, period: int = ATR_PERIOD) -> Optional[float]:
    """
    Calculate ATR (Average True Range) over the last `period` candles.

    True range uses the close of the immediately preceding candle, so the
    frame needs period + 1 candles.
    """
    _check_period("period", period)
    if len(candles) < period + 1:
        return None
    high, low = candles["high"], candles["low"]
    prev_close = candles["close"].shift(1)
    tr = pd.concat([
        high - low,
        (high - prev_close).abs(),
        (low - prev_close).abs(),
    ], axis=1).max(axis=1)
    return float(tr.iloc[-period:].mean())


def trend_strength(sma_short: Optional[float], sma_long: Optional[float]) -> Optional[float]:
    """Distance between the short and long SMA."""
    if sma_short is None or sma_long is None:
        return None
    return abs(sma_short - sma_long)


def compute_indicator_set(
    candles: pd.DataFrame,
    sma_short_period: int = SMA_SHORT_PERIOD,
    sma_long_period: int = SMA_LONG_PERIOD,
    rsi_period: int = RSI_PERIOD,
    macd_fast: int = MACD_FAST,
    macd_slow: int = MACD_SLOW,
    macd_signal: int = MACD_SIGNAL,
    atr_period: int = ATR_PERIOD,
) -> IndicatorSet:
    """Calculate every indicator at the latest candle of an oldest-first frame."""
    sma_short = sma(candles, sma_short_period)
    sma_long = sma(candles, sma_long_period)
    return IndicatorSet(
        sma_short=sma_short,
        sma_long=sma_long,
        rsi=rsi(candles, rsi_period),
        macd=macd(candles, macd_fast, macd_slow, macd_signal),
        atr=atr(candles, atr_period),
        trend_strength=trend_strength(sma_short, sma_long),
    )
