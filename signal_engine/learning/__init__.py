"""
Outcome feedback loop.

Trade history stores (in-memory and JSON file), the outcome recorder, and
the weight adapter that turns win/loss history into indicator weights.
"""
from .history import (
    TradeHistoryReader,
    TradeHistoryRecorder,
    InMemoryTradeHistory,
    JsonTradeHistory,
    record_outcome,
)
from .weights import derive_weights, load_weights, win_loss_counts

__all__ = [
    'TradeHistoryReader',
    'TradeHistoryRecorder',
    'InMemoryTradeHistory',
    'JsonTradeHistory',
    'record_outcome',
    'derive_weights',
    'load_weights',
    'win_loss_counts',
]
