"""
Close-above-SMA backtest.

Counts, candle by candle, whether the close finished above the SMA of the
closes that end one candle before it (a "win" for a trend follower) or not.
The first candle evaluated is index period + 1. A quick sanity
figure for a pair before trusting its signals, not a trade simulation.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..data.candles import CandleInput, Orientation, prepare_candles


@dataclass(frozen=True)
class BacktestResult:
    """Win/loss tally of the close-above-SMA rule."""
    wins: int
    losses: int
    total_candles: int

    @property
    def evaluated(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate_pct(self) -> float:
        if self.evaluated == 0:
            return 0.0
        return self.wins / self.evaluated * 100

    def to_dict(self) -> dict:
        return {
            "total": self.total_candles,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate_pct": round(self.win_rate_pct, 2),
        }


def run_sma_backtest(
    candles: CandleInput,
    period: int = 14,
    orientation: Orientation = Orientation.OLDEST_FIRST,
) -> BacktestResult:
    """
    Tally closes above the mean of the `period` closes ending two candles earlier.

    Args:
        candles: Candle series
        period: SMA length (default: 14)
        orientation: Declared order of `candles`

    Returns:
        BacktestResult; zero wins and losses when there are at most `period + 1` candles
    """
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")

    frame = prepare_candles(candles, orientation)
    closes = frame["close"]
    # Compared against the SMA one candle back: the mean of closes i-period-1 .. i-2
    prior_sma = closes.rolling(period).mean().shift(2)

    valid = prior_sma.notna()
    above = closes[valid] > prior_sma[valid]
    wins = int(above.sum())
    return BacktestResult(wins=wins, losses=int(valid.sum()) - wins, total_candles=len(frame))
