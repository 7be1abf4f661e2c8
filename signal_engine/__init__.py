"""
Signal engine.

Provides unified interfaces for:
- Candle series preparation (declared orientation, boundary validation)
- Indicator calculations (SMA, RSI, MACD, ATR, trend strength)
- Signal scoring with confidence and price levels
- Outcome-driven indicator weights
- Outcome resolution and SMA backtest tallies
"""
