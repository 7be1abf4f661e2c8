"""
Shared types, errors and defaults for the signal engine.

This module provides:
- Direction enum, IndicatorSet, WeightVector, TradeOutcome and Signal
- The error taxonomy (InsufficientData, InvalidInput, ConfigurationMissing)
- Centralized default values for all indicator and scoring parameters
"""
from .types import (
    Direction,
    TradeResult,
    MacdValues,
    IndicatorSet,
    WeightVector,
    TradeOutcome,
    Signal,
)
from .errors import (
    SignalEngineError,
    InsufficientData,
    InvalidInput,
    ConfigurationMissing,
    HistoryReadError,
)
from .defaults import (
    SMA_SHORT_PERIOD, SMA_LONG_PERIOD,
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    ATR_PERIOD,
    CONFIDENCE_CEILING, MIN_CANDLES, REWARD_RISK_RATIO,
    MIN_HISTORY_FOR_WEIGHTS,
)

__all__ = [
    'Direction', 'TradeResult', 'MacdValues', 'IndicatorSet',
    'WeightVector', 'TradeOutcome', 'Signal',
    'SignalEngineError', 'InsufficientData', 'InvalidInput',
    'ConfigurationMissing', 'HistoryReadError',
    'SMA_SHORT_PERIOD', 'SMA_LONG_PERIOD',
    'RSI_PERIOD', 'RSI_OVERSOLD', 'RSI_OVERBOUGHT',
    'MACD_FAST', 'MACD_SLOW', 'MACD_SIGNAL',
    'ATR_PERIOD',
    'CONFIDENCE_CEILING', 'MIN_CANDLES', 'REWARD_RISK_RATIO',
    'MIN_HISTORY_FOR_WEIGHTS',
]
