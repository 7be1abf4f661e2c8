"""
YAML configuration loader for scoring configs.

Loads scoring configurations from YAML files, so instrument profiles and
thresholds can be tuned per deployment without code changes.
"""
import yaml
from pathlib import Path
from typing import Union

from .config import ScoringConfig, InstrumentProfile, default_profiles
from ..shared.defaults import *


def load_config_from_yaml(yaml_path: Union[str, Path]) -> ScoringConfig:
    """
    Load scoring configuration from YAML file.

    Instrument profiles and symbol classes in the file are merged over the
    built-in ones; every other missing key falls back to shared.defaults.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        ScoringConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or holds invalid values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")

    name = config_dict.get('name', yaml_path.stem)
    description = config_dict.get('description', '')

    # Indicators
    indicators = config_dict.get('indicators', {})
    sma = indicators.get('sma', {})
    rsi = indicators.get('rsi', {})
    macd = indicators.get('macd', {})
    atr = indicators.get('atr', {})

    scoring = config_dict.get('scoring', {})
    levels = config_dict.get('levels', {})

    # Weight adaptation
    learning = config_dict.get('learning', {})
    thresholds = learning.get('ratio_thresholds', {})
    boosts = learning.get('weight_boosts', {})

    # Instruments
    instruments = config_dict.get('instruments', {})
    profiles = default_profiles()
    for profile_name, params in (instruments.get('profiles') or {}).items():
        profiles[profile_name] = InstrumentProfile(name=profile_name, **params)
    classes = dict(INSTRUMENT_CLASSES)
    classes.update(instruments.get('classes') or {})
    default_class = (
        instruments['default_class'] if 'default_class' in instruments else DEFAULT_INSTRUMENT_CLASS
    )

    return ScoringConfig(
        name=name,
        description=description,

        sma_short_period=sma.get('short_period', SMA_SHORT_PERIOD),
        sma_long_period=sma.get('long_period', SMA_LONG_PERIOD),
        rsi_period=rsi.get('period', RSI_PERIOD),
        rsi_oversold=rsi.get('oversold', RSI_OVERSOLD),
        rsi_overbought=rsi.get('overbought', RSI_OVERBOUGHT),
        macd_fast=macd.get('fast', MACD_FAST),
        macd_slow=macd.get('slow', MACD_SLOW),
        macd_signal=macd.get('signal', MACD_SIGNAL),
        atr_period=atr.get('period', ATR_PERIOD),

        base_score=scoring.get('base_score', BASE_SCORE),
        trend_bonus=scoring.get('trend_bonus', TREND_BONUS),
        rsi_bonus=scoring.get('rsi_bonus', RSI_BONUS),
        macd_bonus=scoring.get('macd_bonus', MACD_BONUS),
        low_volatility_penalty=scoring.get('low_volatility_penalty', LOW_VOLATILITY_PENALTY),
        high_volatility_penalty=scoring.get('high_volatility_penalty', HIGH_VOLATILITY_PENALTY),
        confidence_ceiling=scoring.get('confidence_ceiling', CONFIDENCE_CEILING),
        min_candles=scoring.get('min_candles', MIN_CANDLES),

        produce_levels=levels.get('enabled', PRODUCE_LEVELS),
        reward_risk=levels.get('reward_risk', REWARD_RISK_RATIO),
        take_profit_levels=levels.get('take_profit_levels', TAKE_PROFIT_LEVELS),

        min_history_for_weights=learning.get('min_history', MIN_HISTORY_FOR_WEIGHTS),
        trend_ratio_threshold=thresholds.get('trend', TREND_RATIO_THRESHOLD),
        rsi_ratio_threshold=thresholds.get('rsi', RSI_RATIO_THRESHOLD),
        macd_ratio_threshold=thresholds.get('macd', MACD_RATIO_THRESHOLD),
        trend_weight_boost=boosts.get('trend', TREND_WEIGHT_BOOST),
        rsi_weight_boost=boosts.get('rsi', RSI_WEIGHT_BOOST),
        macd_weight_boost=boosts.get('macd', MACD_WEIGHT_BOOST),

        instrument_profiles=profiles,
        instrument_classes=classes,
        default_instrument_class=default_class,
    )


def save_config_to_yaml(config: ScoringConfig, yaml_path: Union[str, Path]):
    """
    Save scoring configuration to YAML file.

    Args:
        config: ScoringConfig object to save
        yaml_path: Path where to save YAML file
    """
    yaml_path = Path(yaml_path)

    config_dict = {
        'name': config.name,
        'description': config.description,

        'indicators': {
            'sma': {
                'short_period': config.sma_short_period,
                'long_period': config.sma_long_period,
            },
            'rsi': {
                'period': config.rsi_period,
                'oversold': config.rsi_oversold,
                'overbought': config.rsi_overbought,
            },
            'macd': {
                'fast': config.macd_fast,
                'slow': config.macd_slow,
                'signal': config.macd_signal,
            },
            'atr': {
                'period': config.atr_period,
            },
        },

        'scoring': {
            'base_score': config.base_score,
            'trend_bonus': config.trend_bonus,
            'rsi_bonus': config.rsi_bonus,
            'macd_bonus': config.macd_bonus,
            'low_volatility_penalty': config.low_volatility_penalty,
            'high_volatility_penalty': config.high_volatility_penalty,
            'confidence_ceiling': config.confidence_ceiling,
            'min_candles': config.min_candles,
        },

        'levels': {
            'enabled': config.produce_levels,
            'reward_risk': config.reward_risk,
            'take_profit_levels': config.take_profit_levels,
        },

        'learning': {
            'min_history': config.min_history_for_weights,
            'ratio_thresholds': {
                'trend': config.trend_ratio_threshold,
                'rsi': config.rsi_ratio_threshold,
                'macd': config.macd_ratio_threshold,
            },
            'weight_boosts': {
                'trend': config.trend_weight_boost,
                'rsi': config.rsi_weight_boost,
                'macd': config.macd_weight_boost,
            },
        },

        'instruments': {
            'default_class': config.default_instrument_class,
            'profiles': {
                name: {
                    'point_size': profile.point_size,
                    'volatility_floor': profile.volatility_floor,
                    'volatility_ceiling': profile.volatility_ceiling,
                    'min_stop_points': profile.min_stop_points,
                }
                for name, profile in config.instrument_profiles.items()
            },
            'classes': dict(config.instrument_classes),
        },
    }

    # Ensure parent directory exists
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    with open(yaml_path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
