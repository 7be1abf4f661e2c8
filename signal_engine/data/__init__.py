"""
Candle series module.

Normalizes candle input (any declared orientation) into the single
oldest-first frame layout shared by every indicator.
"""
from .candles import (
    Orientation,
    PRICE_COLUMNS,
    CANDLE_COLUMNS,
    prepare_candles,
    latest_close,
)

__all__ = [
    'Orientation',
    'PRICE_COLUMNS',
    'CANDLE_COLUMNS',
    'prepare_candles',
    'latest_close',
]
