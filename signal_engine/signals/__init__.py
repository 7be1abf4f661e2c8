"""
Signal scoring module.

Combines SMA trend, RSI and MACD confirmation and an ATR volatility band
into a directional call with bounded confidence, plus ATR-sized stop-loss
and take-profit levels.
"""
from .config import ScoringConfig, InstrumentProfile, BASELINE_CONFIG, default_profiles
from .config_loader import load_config_from_yaml, save_config_to_yaml
from .levels import LevelCalculator, PriceLevels
from .scorer import SignalScorer, score_signal, score_instruments

__all__ = [
    'ScoringConfig',
    'InstrumentProfile',
    'BASELINE_CONFIG',
    'default_profiles',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'LevelCalculator',
    'PriceLevels',
    'SignalScorer',
    'score_signal',
    'score_instruments',
]
