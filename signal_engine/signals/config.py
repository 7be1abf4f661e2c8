"""
Scoring configuration for trading signals.

Contains instrument profiles (point size, volatility band, minimum stop) and
the ScoringConfig that carries every period, bonus, threshold and ceiling
the scorer and weight adapter use.
Config validation runs at construction time (fail fast with clear errors).
"""
import math
from dataclasses import dataclass, field
from typing import Optional, Dict

from ..shared.errors import ConfigurationMissing
from ..shared.defaults import (
    SMA_SHORT_PERIOD, SMA_LONG_PERIOD,
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    ATR_PERIOD,
    BASE_SCORE, TREND_BONUS, RSI_BONUS, MACD_BONUS,
    LOW_VOLATILITY_PENALTY, HIGH_VOLATILITY_PENALTY,
    CONFIDENCE_CEILING, MIN_CANDLES,
    PRODUCE_LEVELS, REWARD_RISK_RATIO, TAKE_PROFIT_LEVELS,
    MIN_HISTORY_FOR_WEIGHTS,
    TREND_RATIO_THRESHOLD, RSI_RATIO_THRESHOLD, MACD_RATIO_THRESHOLD,
    TREND_WEIGHT_BOOST, RSI_WEIGHT_BOOST, MACD_WEIGHT_BOOST,
    INSTRUMENT_PROFILES, INSTRUMENT_CLASSES, DEFAULT_INSTRUMENT_CLASS,
)


@dataclass(frozen=True)
class InstrumentProfile:
    """Scale-dependent parameters for one instrument class."""
    name: str
    point_size: float
    volatility_floor: float  # ATR below this -> low-volatility penalty
    volatility_ceiling: float  # ATR above this -> high-volatility penalty
    min_stop_points: int = 10

    def __post_init__(self) -> None:
        if self.point_size <= 0:
            raise ValueError(f"point_size must be > 0 for '{self.name}', got {self.point_size}")
        if not math.isclose(self.point_size, 10 ** round(math.log10(self.point_size)), rel_tol=1e-9):
            raise ValueError(f"point_size must be a power of ten for '{self.name}', got {self.point_size}")
        if self.volatility_floor < 0:
            raise ValueError(f"volatility_floor must be >= 0 for '{self.name}', got {self.volatility_floor}")
        if self.volatility_floor >= self.volatility_ceiling:
            raise ValueError(
                f"volatility_floor ({self.volatility_floor}) must be less than "
                f"volatility_ceiling ({self.volatility_ceiling}) for '{self.name}'"
            )
        if self.min_stop_points < 0:
            raise ValueError(f"min_stop_points must be >= 0 for '{self.name}', got {self.min_stop_points}")


def default_profiles() -> Dict[str, InstrumentProfile]:
    """Instrument profiles built from shared.defaults."""
    return {name: InstrumentProfile(name=name, **params) for name, params in INSTRUMENT_PROFILES.items()}


def _validate_config(config: "ScoringConfig") -> None:
    """Validate indicator, scoring and weight parameters. Raises ValueError with clear message on failure."""
    for name in ("sma_short_period", "sma_long_period", "rsi_period",
                 "macd_fast", "macd_slow", "macd_signal", "atr_period"):
        value = getattr(config, name)
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")
    if config.sma_short_period >= config.sma_long_period:
        raise ValueError(
            f"SMA short_period ({config.sma_short_period}) must be less than long_period ({config.sma_long_period})"
        )
    if config.macd_fast >= config.macd_slow:
        raise ValueError(f"MACD fast ({config.macd_fast}) must be less than slow ({config.macd_slow})")
    if config.rsi_oversold >= config.rsi_overbought:
        raise ValueError(
            f"RSI oversold ({config.rsi_oversold}) must be less than overbought ({config.rsi_overbought})"
        )
    if not (0 < config.confidence_ceiling <= 100):
        raise ValueError(f"confidence_ceiling must be in (0, 100], got {config.confidence_ceiling}")
    if not (0 <= config.base_score <= 100):
        raise ValueError(f"base_score must be in [0, 100], got {config.base_score}")
    if config.min_candles < config.sma_long_period:
        raise ValueError(
            f"min_candles ({config.min_candles}) must be >= sma_long_period ({config.sma_long_period})"
        )
    if config.reward_risk <= 0:
        raise ValueError(f"reward_risk must be > 0, got {config.reward_risk}")
    if config.take_profit_levels < 1:
        raise ValueError(f"take_profit_levels must be >= 1, got {config.take_profit_levels}")
    if config.min_history_for_weights < 0:
        raise ValueError(f"min_history_for_weights must be >= 0, got {config.min_history_for_weights}")
    for name in ("trend_weight_boost", "rsi_weight_boost", "macd_weight_boost"):
        value = getattr(config, name)
        if value < 1.0:
            raise ValueError(f"{name} must be >= 1.0 (weights only amplify), got {value}")
    for symbol, profile_name in config.instrument_classes.items():
        if profile_name not in config.instrument_profiles:
            raise ValueError(f"Instrument '{symbol}' maps to unknown profile '{profile_name}'")


@dataclass
class ScoringConfig:
    """Configuration for indicator periods, scoring, price levels and weight adaptation."""

    name: str = "default"
    description: str = ""

    # Indicator periods (from shared.defaults)
    sma_short_period: int = SMA_SHORT_PERIOD
    sma_long_period: int = SMA_LONG_PERIOD
    rsi_period: int = RSI_PERIOD
    rsi_oversold: float = RSI_OVERSOLD
    rsi_overbought: float = RSI_OVERBOUGHT
    macd_fast: int = MACD_FAST
    macd_slow: int = MACD_SLOW
    macd_signal: int = MACD_SIGNAL
    atr_period: int = ATR_PERIOD

    # Scoring
    base_score: float = BASE_SCORE
    trend_bonus: float = TREND_BONUS
    rsi_bonus: float = RSI_BONUS
    macd_bonus: float = MACD_BONUS
    low_volatility_penalty: float = LOW_VOLATILITY_PENALTY
    high_volatility_penalty: float = HIGH_VOLATILITY_PENALTY
    confidence_ceiling: int = CONFIDENCE_CEILING
    min_candles: int = MIN_CANDLES

    # Price levels
    produce_levels: bool = PRODUCE_LEVELS
    reward_risk: float = REWARD_RISK_RATIO
    take_profit_levels: int = TAKE_PROFIT_LEVELS

    # Weight adaptation
    min_history_for_weights: int = MIN_HISTORY_FOR_WEIGHTS
    trend_ratio_threshold: float = TREND_RATIO_THRESHOLD
    rsi_ratio_threshold: float = RSI_RATIO_THRESHOLD
    macd_ratio_threshold: float = MACD_RATIO_THRESHOLD
    trend_weight_boost: float = TREND_WEIGHT_BOOST
    rsi_weight_boost: float = RSI_WEIGHT_BOOST
    macd_weight_boost: float = MACD_WEIGHT_BOOST

    # Instruments
    instrument_profiles: Dict[str, InstrumentProfile] = field(default_factory=default_profiles)
    instrument_classes: Dict[str, str] = field(default_factory=lambda: dict(INSTRUMENT_CLASSES))
    default_instrument_class: Optional[str] = DEFAULT_INSTRUMENT_CLASS  # None = unmapped symbols fail

    def __post_init__(self) -> None:
        _validate_config(self)

    def resolve_profile(self, symbol: Optional[str] = None) -> InstrumentProfile:
        """
        Look up the instrument profile for a symbol.

        Unmapped symbols (and symbol=None) fall back to default_instrument_class.

        Raises:
            ConfigurationMissing: No mapping and no usable default
        """
        profile_name = self.instrument_classes.get(symbol) if symbol is not None else None
        if profile_name is None:
            profile_name = self.default_instrument_class
        if profile_name is None:
            raise ConfigurationMissing(f"No instrument class configured for '{symbol}'")
        profile = self.instrument_profiles.get(profile_name)
        if profile is None:
            raise ConfigurationMissing(f"No instrument profile '{profile_name}' (symbol '{symbol}')")
        return profile


BASELINE_CONFIG = ScoringConfig(
    name="baseline",
    description="SMA 5/20 trend gate with RSI and MACD confirmation, 95% ceiling, 2:1 levels",
)
