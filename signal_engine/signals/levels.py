"""
Calculates stop-loss and take-profit levels for scored signals.

Stops are ATR-sized and quantized to the instrument's point size, with a
per-instrument minimum distance. The first take-profit sits at the
reward/risk multiple of the stop distance; further take-profits step out
one stop distance each.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import InstrumentProfile
from ..shared.types import Direction
from ..shared.defaults import REWARD_RISK_RATIO, TAKE_PROFIT_LEVELS


@dataclass(frozen=True)
class PriceLevels:
    """Stop-loss and take-profit levels for one signal."""
    stop_loss: float
    take_profit: Tuple[float, ...]
    stop_points: int
    stop_distance: float


def price_decimals(point_size: float) -> int:
    """Number of decimals needed to quote prices on a point_size grid (point_size is a power of ten)."""
    return max(0, -int(math.floor(math.log10(point_size))))


class LevelCalculator:
    """Calculates price levels for directional signals."""

    def __init__(
        self,
        reward_risk: float = REWARD_RISK_RATIO,
        take_profit_levels: int = TAKE_PROFIT_LEVELS,
    ):
        """
        Initialize the level calculator.

        Args:
            reward_risk: Distance of the first take-profit in stop distances (default: 2.0 = 2:1)
            take_profit_levels: Number of take-profit levels to emit (default: 3)
        """
        self.reward_risk = reward_risk
        self.take_profit_levels = take_profit_levels

    def stop_points(self, atr_value: float, profile: InstrumentProfile) -> int:
        """ATR expressed in whole points (half up), never below the instrument minimum."""
        return max(profile.min_stop_points, int(math.floor(atr_value / profile.point_size + 0.5)))

    def calculate(
        self,
        direction: Direction,
        entry: float,
        atr_value: Optional[float],
        profile: InstrumentProfile,
    ) -> Optional[PriceLevels]:
        """
        Calculate stop-loss and take-profits for a signal.

        Args:
            direction: BUY or SELL (NONE yields no levels)
            entry: Entry price (latest close)
            atr_value: ATR at entry, or None if indeterminate
            profile: Instrument profile supplying point size and minimum stop

        Returns:
            PriceLevels, or None when there is no direction or no ATR
        """
        if direction == Direction.NONE or atr_value is None:
            return None

        points = self.stop_points(atr_value, profile)
        stop_distance = points * profile.point_size
        sign = 1.0 if direction == Direction.BUY else -1.0
        decimals = price_decimals(profile.point_size)

        stop_loss = round(entry - sign * stop_distance, decimals)
        take_profit = tuple(
            round(entry + sign * (self.reward_risk + i) * stop_distance, decimals)
            for i in range(self.take_profit_levels)
        )
        return PriceLevels(
            stop_loss=stop_loss,
            take_profit=take_profit,
            stop_points=points,
            stop_distance=stop_distance,
        )
