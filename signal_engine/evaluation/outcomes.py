"""
Resolve emitted signals into realized trade results.

Walks the candles that followed a signal and reports whichever level was
touched first: the stop (loss) or the first take-profit (win).
"""
from __future__ import annotations

from typing import Optional

from ..data.candles import CandleInput, Orientation, prepare_candles
from ..shared.types import Direction, Signal, TradeResult


def resolve_outcome(
    signal: Signal,
    subsequent_candles: CandleInput,
    orientation: Orientation = Orientation.OLDEST_FIRST,
) -> Optional[str]:
    """
    Decide whether a signal's trade won, lost, or is still open.

    When one candle spans both the stop and the take-profit, the intrabar
    order is unknown and the stop is assumed to fill first.

    Args:
        signal: Valid BUY/SELL signal carrying stop_loss and take-profits
        subsequent_candles: Candles after the signal's entry candle
        orientation: Declared order of `subsequent_candles`

    Returns:
        "win", "loss", or None if neither level has been reached

    Raises:
        ValueError: If the signal has no direction or no price levels
        InvalidInput: If the candles are malformed
    """
    if signal.direction == Direction.NONE or not signal.has_levels:
        raise ValueError("Signal has no direction or price levels to resolve against")

    frame = prepare_candles(subsequent_candles, orientation)
    stop = signal.stop_loss
    target = signal.take_profit[0]
    is_buy = signal.direction == Direction.BUY

    for candle in frame.itertuples(index=False):
        if is_buy:
            if candle.low <= stop:
                return TradeResult.LOSS.value
            if candle.high >= target:
                return TradeResult.WIN.value
        else:
            if candle.high >= stop:
                return TradeResult.LOSS.value
            if candle.low <= target:
                return TradeResult.WIN.value
    return None
