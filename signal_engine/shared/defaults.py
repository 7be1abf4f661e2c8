"""
Centralized default values for indicator and scoring parameters.

This is the SINGLE SOURCE OF TRUTH for all parameter defaults.
All modules should import from here to ensure consistency.

Values mirror the live signal backend these pairs were first traded with:
SMA 5/20 trend gate, RSI 14 with 30/70 bands, MACD 12/26/9, ATR 14.
"""

# SMA (Simple Moving Average) defaults
SMA_SHORT_PERIOD = 5
SMA_LONG_PERIOD = 20

# RSI (Relative Strength Index) defaults
RSI_PERIOD = 14
RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70

# MACD (Moving Average Convergence Divergence) defaults
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9

# ATR (Average True Range) defaults
ATR_PERIOD = 14

# Scoring
# Confidence starts at the midpoint of the 0-100 scale and moves with each confirmation
BASE_SCORE = 50.0
TREND_BONUS = 10.0
RSI_BONUS = 12.0
MACD_BONUS = 15.0
LOW_VOLATILITY_PENALTY = 5.0  # ATR below the instrument floor (flat market)
HIGH_VOLATILITY_PENALTY = 10.0  # ATR above the instrument ceiling (whipsaw)
CONFIDENCE_CEILING = 95  # Never report 100% certainty
MIN_CANDLES = 20  # Scorer refuses to run on shorter series

# Price levels
PRODUCE_LEVELS = True
REWARD_RISK_RATIO = 2.0  # tp1 = entry +/- 2 x stop distance
TAKE_PROFIT_LEVELS = 3
MIN_STOP_POINTS = 10

# Weight adaptation (win/loss feedback loop)
MIN_HISTORY_FOR_WEIGHTS = 10  # Fewer resolved trades -> identity weights
TREND_RATIO_THRESHOLD = 1.2
RSI_RATIO_THRESHOLD = 1.0
MACD_RATIO_THRESHOLD = 1.1
TREND_WEIGHT_BOOST = 1.5
RSI_WEIGHT_BOOST = 1.2
MACD_WEIGHT_BOOST = 1.3

# Instrument classes: point size, volatility floor/ceiling (in price units), min stop (points)
# Floors/ceilings differ by orders of magnitude between classes since ATR is quoted in price units
INSTRUMENT_PROFILES = {
    "forex": {"point_size": 0.0001, "volatility_floor": 0.00005, "volatility_ceiling": 0.01, "min_stop_points": 10},
    "jpy": {"point_size": 0.01, "volatility_floor": 0.005, "volatility_ceiling": 1.0, "min_stop_points": 10},
    "metal": {"point_size": 0.01, "volatility_floor": 0.05, "volatility_ceiling": 5.0, "min_stop_points": 50},
    "crypto": {"point_size": 0.01, "volatility_floor": 1.0, "volatility_ceiling": 500.0, "min_stop_points": 100},
}

# Symbol -> instrument class for the traded pair list
INSTRUMENT_CLASSES = {
    "XAU/USD": "metal",
    "EUR/USD": "forex",
    "GBP/USD": "forex",
    "USD/JPY": "jpy",
    "GBP/JPY": "jpy",
    "EUR/JPY": "jpy",
    "EUR/GBP": "forex",
    "GBP/AUD": "forex",
    "BTC/USD": "crypto",
    "ETH/USD": "crypto",
}

# Profile used when scoring without a symbol
DEFAULT_INSTRUMENT_CLASS = "forex"
