"""
Evaluation module.

Resolves emitted signals into win/loss outcomes and runs the
close-above-SMA backtest tally.
"""
from .outcomes import resolve_outcome
from .backtest import BacktestResult, run_sma_backtest

__all__ = [
    'resolve_outcome',
    'BacktestResult',
    'run_sma_backtest',
]
