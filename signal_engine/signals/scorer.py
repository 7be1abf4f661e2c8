"""
Signal scorer.

Turns a candle series plus a weight vector into a Signal: an SMA trend gate
picks the direction, RSI and MACD can only confirm it (never start or flip
it), ATR outside the instrument's volatility band costs confidence, and the
result is clamped below the configured ceiling.

Scoring never raises past its boundary for bad input: short series,
malformed candles and unmapped instruments come back as Signal(valid=False)
with a reason tag so a caller scoring many pairs can carry on.
"""
import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Mapping, Optional

import pandas as pd

from .config import ScoringConfig, InstrumentProfile, BASELINE_CONFIG
from .levels import LevelCalculator
from ..data.candles import CandleInput, Orientation, prepare_candles, latest_close
from ..indicators.technical import compute_indicator_set
from ..shared.errors import InsufficientData, InvalidInput, ConfigurationMissing
from ..shared.types import Direction, IndicatorSet, Signal, WeightVector


logger = logging.getLogger(__name__)


class SignalScorer:
    """Scores candle series into directional signals with bounded confidence."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        Initialize the scorer.

        Args:
            config: Scoring configuration (default: BASELINE_CONFIG)
        """
        self.config = config or BASELINE_CONFIG
        self.level_calculator = LevelCalculator(
            reward_risk=self.config.reward_risk,
            take_profit_levels=self.config.take_profit_levels,
        )

    def score(
        self,
        candles: CandleInput,
        weights: Optional[WeightVector] = None,
        symbol: Optional[str] = None,
        orientation: Orientation = Orientation.OLDEST_FIRST,
    ) -> Signal:
        """
        Score one candle series.

        Args:
            candles: Candle sequence or DataFrame (see data.candles.prepare_candles)
            weights: Indicator weights from the weight adapter (default: identity)
            symbol: Instrument symbol, used to pick the instrument profile
            orientation: Declared order of `candles`

        Returns:
            Signal; valid=False with reason "insufficient", "invalid_input"
            or "configuration_missing" when scoring cannot proceed
        """
        weights = weights or WeightVector.identity()
        try:
            frame = prepare_candles(candles, orientation)
            if len(frame) < self.config.min_candles:
                raise InsufficientData(
                    f"{len(frame)} candles available, {self.config.min_candles} required"
                )
            profile = self.config.resolve_profile(symbol)
        except (InsufficientData, InvalidInput, ConfigurationMissing) as e:
            logger.warning(f"Cannot score {symbol or 'series'} ({e.reason}): {e}")
            return Signal.failure(e.reason, symbol=symbol)

        return self._score_frame(frame, weights, profile, symbol)

    def _score_frame(
        self,
        frame: pd.DataFrame,
        weights: WeightVector,
        profile: InstrumentProfile,
        symbol: Optional[str],
    ) -> Signal:
        cfg = self.config
        indicators = compute_indicator_set(
            frame,
            sma_short_period=cfg.sma_short_period,
            sma_long_period=cfg.sma_long_period,
            rsi_period=cfg.rsi_period,
            macd_fast=cfg.macd_fast,
            macd_slow=cfg.macd_slow,
            macd_signal=cfg.macd_signal,
            atr_period=cfg.atr_period,
        )
        entry = latest_close(frame)
        direction = self.trend_direction(indicators)

        score = cfg.base_score
        if direction == Direction.NONE:
            logger.debug(f"{symbol or 'series'}: no trend (SMA short == long or indeterminate)")
            return Signal(
                valid=True,
                direction=direction,
                confidence=self.clamp_confidence(score),
                symbol=symbol,
                entry=entry,
                indicators=indicators,
            )

        score += cfg.trend_bonus * weights.trend_weight
        if self.rsi_confirms(direction, indicators.rsi):
            score += cfg.rsi_bonus * weights.rsi_weight
        if self.macd_confirms(direction, indicators):
            score += cfg.macd_bonus * weights.macd_weight
        score -= self.volatility_penalty(indicators.atr, profile)

        confidence = self.clamp_confidence(score)
        levels = (
            self.level_calculator.calculate(direction, entry, indicators.atr, profile)
            if cfg.produce_levels else None
        )

        logger.debug(
            f"{symbol or 'series'}: {direction.value} raw={score:.2f} confidence={confidence} "
            f"rsi={indicators.rsi} atr={indicators.atr} profile={profile.name}"
        )
        return Signal(
            valid=True,
            direction=direction,
            confidence=confidence,
            symbol=symbol,
            entry=entry,
            stop_loss=levels.stop_loss if levels else None,
            take_profit=levels.take_profit if levels else (),
            indicators=indicators,
        )

    @staticmethod
    def trend_direction(indicators: IndicatorSet) -> Direction:
        """SMA trend gate; equal or indeterminate averages give no direction."""
        if indicators.sma_short is None or indicators.sma_long is None:
            return Direction.NONE
        if indicators.sma_short > indicators.sma_long:
            return Direction.BUY
        if indicators.sma_short < indicators.sma_long:
            return Direction.SELL
        return Direction.NONE

    def rsi_confirms(self, direction: Direction, rsi_value: Optional[float]) -> bool:
        """Oversold confirms a BUY, overbought confirms a SELL."""
        if rsi_value is None:
            return False
        if direction == Direction.BUY:
            return rsi_value < self.config.rsi_oversold
        if direction == Direction.SELL:
            return rsi_value > self.config.rsi_overbought
        return False

    @staticmethod
    def macd_confirms(direction: Direction, indicators: IndicatorSet) -> bool:
        """Histogram sign agrees with the direction."""
        if indicators.macd is None:
            return False
        if direction == Direction.BUY:
            return indicators.macd.histogram > 0
        if direction == Direction.SELL:
            return indicators.macd.histogram < 0
        return False

    def volatility_penalty(self, atr_value: Optional[float], profile: InstrumentProfile) -> float:
        """Penalty for ATR outside the instrument's volatility band (0 when ATR is indeterminate)."""
        if atr_value is None:
            return 0.0
        if atr_value < profile.volatility_floor:
            return self.config.low_volatility_penalty
        if atr_value > profile.volatility_ceiling:
            return self.config.high_volatility_penalty
        return 0.0

    def clamp_confidence(self, score: float) -> int:
        """Round half up and clamp into [0, confidence_ceiling]."""
        rounded = int(math.floor(score + 0.5))
        return max(0, min(self.config.confidence_ceiling, rounded))


def score_signal(
    candles: CandleInput,
    weights: Optional[WeightVector] = None,
    symbol: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
    orientation: Orientation = Orientation.OLDEST_FIRST,
) -> Signal:
    """Score one candle series with a one-off SignalScorer."""
    return SignalScorer(config).score(candles, weights=weights, symbol=symbol, orientation=orientation)


def score_instruments(
    candles_by_symbol: Mapping[str, CandleInput],
    weights: Optional[WeightVector] = None,
    config: Optional[ScoringConfig] = None,
    orientation: Orientation = Orientation.OLDEST_FIRST,
    max_workers: Optional[int] = None,
) -> Dict[str, Signal]:
    """
    Score several instruments with one shared weight vector.

    A failing instrument yields its own valid=False Signal; the others are
    unaffected. Scoring holds no shared mutable state, so instruments are
    scored in parallel via ThreadPoolExecutor when max_workers > 1.

    Args:
        candles_by_symbol: Symbol -> candle series
        weights: Weight vector applied to every instrument (default: identity)
        config: Scoring configuration (default: BASELINE_CONFIG)
        orientation: Declared order of every series
        max_workers: Thread pool size (default: cpu_count); 1 = sequential

    Returns:
        Symbol -> Signal, in input order
    """
    scorer = SignalScorer(config)
    workers = max(1, max_workers) if max_workers is not None else (os.cpu_count() or 1)

    if workers <= 1:
        return {
            symbol: scorer.score(candles, weights=weights, symbol=symbol, orientation=orientation)
            for symbol, candles in candles_by_symbol.items()
        }

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            symbol: executor.submit(scorer.score, candles, weights, symbol, orientation)
            for symbol, candles in candles_by_symbol.items()
        }
        return {symbol: future.result() for symbol, future in futures.items()}
