"""
Weight adapter: reweights indicator influence from realized trade outcomes.

A deterministic rule, not a model: once enough trades have resolved, a
win/loss ratio above each indicator's threshold switches that indicator's
weight to its boost. Weights only ever amplify (>= 1.0).
"""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from ..shared.errors import HistoryReadError
from ..shared.types import TradeOutcome, TradeResult, WeightVector
from ..signals.config import ScoringConfig, BASELINE_CONFIG
from .history import TradeHistoryReader


logger = logging.getLogger(__name__)


def _result_of(record: Any) -> Optional[str]:
    if isinstance(record, TradeOutcome):
        return record.result
    if isinstance(record, Mapping):
        return record.get("result")
    return getattr(record, "result", None)


def win_loss_counts(history: Iterable[Any]) -> Tuple[int, int]:
    """
    Count wins and losses over every record.

    Anything that is not a win counts as a loss, including trades still
    open (result None).
    """
    results = [_result_of(r) for r in history]
    wins = sum(1 for r in results if r == TradeResult.WIN.value)
    return wins, len(results) - wins


def derive_weights(
    history: Iterable[Any],
    config: Optional[ScoringConfig] = None,
) -> WeightVector:
    """
    Derive indicator weights from trade outcome history.

    Args:
        history: TradeOutcome records (or mappings with a "result" key) in append order
        config: Thresholds and boosts (default: BASELINE_CONFIG)

    Returns:
        WeightVector; identity while the history holds fewer than min_history_for_weights records
    """
    config = config or BASELINE_CONFIG
    wins, losses = win_loss_counts(list(history))
    if wins + losses < config.min_history_for_weights:
        return WeightVector.identity()

    ratio = wins / max(1, losses)
    return WeightVector(
        trend_weight=config.trend_weight_boost if ratio > config.trend_ratio_threshold else 1.0,
        rsi_weight=config.rsi_weight_boost if ratio > config.rsi_ratio_threshold else 1.0,
        macd_weight=config.macd_weight_boost if ratio > config.macd_ratio_threshold else 1.0,
    )


def load_weights(
    reader: TradeHistoryReader,
    config: Optional[ScoringConfig] = None,
) -> WeightVector:
    """
    Read a history snapshot and derive weights from it.

    An unreadable history degrades to identity weights so scoring stays
    available; the failure is logged, not raised.
    """
    try:
        history = reader.read()
    except HistoryReadError as e:
        logger.warning(f"Trade history unreadable, using identity weights: {e}")
        return WeightVector.identity()

    weights = derive_weights(history, config)
    logger.debug(f"Derived weights from {len(history)} records: {weights}")
    return weights
