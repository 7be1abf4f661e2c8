"""
Candle series preparation and validation.

Every indicator works on one frame layout: a DataFrame with columns
time/open/high/low/close, oldest candle first, last row = latest candle.
Callers declare the orientation of what they pass; newest-first input
(as returned by most market-data APIs) is reversed here, once.

Fail-fast approach: raises InvalidInput before anything reaches the
indicator recurrences.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, Union

import numpy as np
import pandas as pd

from ..shared.errors import InvalidInput


logger = logging.getLogger(__name__)

PRICE_COLUMNS = ("open", "high", "low", "close")
CANDLE_COLUMNS = ("time",) + PRICE_COLUMNS

CandleInput = Union[pd.DataFrame, Iterable[Any]]


class Orientation(Enum):
    """Chronological direction of a candle sequence."""
    OLDEST_FIRST = "oldest_first"
    NEWEST_FIRST = "newest_first"


def _rows_to_frame(candles: Iterable[Any]) -> pd.DataFrame:
    """Build a frame from mappings or objects exposing time/open/high/low/close."""
    rows = []
    for candle in candles:
        if isinstance(candle, Mapping):
            rows.append({str(k).lower(): v for k, v in candle.items()})
        else:
            rows.append({c: getattr(candle, c, None) for c in CANDLE_COLUMNS})
    return pd.DataFrame(rows)


def _check_chronological(times: pd.Series) -> None:
    """Raise when comparable timestamps contradict the oldest-first layout."""
    if times.isna().any():
        return
    if not (pd.api.types.is_numeric_dtype(times) or pd.api.types.is_datetime64_any_dtype(times)):
        parsed = pd.to_datetime(times, errors="coerce")
        if parsed.isna().any():
            # Opaque labels: orientation can only be taken on trust
            return
        times = parsed
    if not (times.is_monotonic_increasing and times.is_unique):
        raise InvalidInput(
            "Candle times are not strictly increasing after applying the declared orientation"
        )


def prepare_candles(
    candles: CandleInput,
    orientation: Orientation = Orientation.OLDEST_FIRST,
) -> pd.DataFrame:
    """
    Normalize a candle sequence into the oldest-first frame used by all indicators.

    Args:
        candles: DataFrame, or iterable of mappings/objects with time, open, high, low, close.
                 Prices may be numeric strings (market-data APIs often quote as text).
        orientation: Declared order of the input sequence

    Returns:
        DataFrame with columns time/open/high/low/close (float prices), oldest first,
        on a fresh RangeIndex

    Raises:
        InvalidInput: Missing price column, non-finite price, high < low, or
                      timestamps that contradict the declared orientation
    """
    if isinstance(candles, pd.DataFrame):
        frame = candles.copy()
        frame.columns = [str(c).lower() for c in frame.columns]
    else:
        frame = _rows_to_frame(candles)

    if len(frame) == 0:
        return pd.DataFrame({c: pd.Series(dtype=float) for c in CANDLE_COLUMNS})

    missing = [c for c in PRICE_COLUMNS if c not in frame.columns]
    if missing:
        raise InvalidInput(f"Candles missing required fields: {', '.join(missing)}")

    prices = frame[list(PRICE_COLUMNS)].apply(pd.to_numeric, errors="coerce").astype(float)
    if not np.isfinite(prices.to_numpy()).all():
        bad_rows = prices.index[~np.isfinite(prices.to_numpy()).all(axis=1)].tolist()
        raise InvalidInput(f"Non-finite or non-numeric price in candle rows {bad_rows[:5]}")
    if (prices["high"] < prices["low"]).any():
        bad_rows = prices.index[prices["high"] < prices["low"]].tolist()
        raise InvalidInput(f"Candle high below low in rows {bad_rows[:5]}")

    times = frame["time"] if "time" in frame.columns else pd.Series([None] * len(frame), index=frame.index)
    out = pd.DataFrame({"time": times}).join(prices)

    if orientation == Orientation.NEWEST_FIRST:
        out = out.iloc[::-1]
    out = out.reset_index(drop=True)

    _check_chronological(out["time"])
    logger.debug(f"Prepared {len(out)} candles ({orientation.value})")
    return out


def latest_close(candles: pd.DataFrame) -> float:
    """Close of the latest candle of an oldest-first frame."""
    return float(candles["close"].iloc[-1])
