"""
Tests for candle preparation: orientation, coercion and boundary validation.
"""
import math
from types import SimpleNamespace

import pandas as pd
import pytest

from signal_engine.data.candles import Orientation, prepare_candles, latest_close, CANDLE_COLUMNS
from signal_engine.shared.errors import InvalidInput


class TestPrepareCandles:
    """Normalization into the oldest-first frame."""

    def test_oldest_first_kept(self, candle_factory):
        frame = prepare_candles(candle_factory([1, 2, 3]))
        assert list(frame.columns) == list(CANDLE_COLUMNS)
        assert frame["close"].tolist() == [1.0, 2.0, 3.0]
        assert latest_close(frame) == 3.0

    def test_newest_first_reversed(self, candle_factory):
        newest_first = list(reversed(candle_factory([1, 2, 3])))
        frame = prepare_candles(newest_first, Orientation.NEWEST_FIRST)
        assert frame["close"].tolist() == [1.0, 2.0, 3.0]
        assert list(frame.index) == [0, 1, 2]

    def test_string_prices_coerced(self):
        """Market-data APIs quote prices as text."""
        rows = [
            {"datetime": "2024-01-01 00:00:00", "open": "1.1", "high": "1.2", "low": "1.0", "close": "1.15"},
            {"datetime": "2024-01-01 01:00:00", "open": "1.15", "high": "1.3", "low": "1.1", "close": "1.25"},
        ]
        frame = prepare_candles(rows)
        assert frame["close"].tolist() == pytest.approx([1.15, 1.25])
        assert frame["time"].isna().all()

    def test_dataframe_with_capitalized_columns(self):
        df = pd.DataFrame({
            "Open": [1.0, 2.0], "High": [1.5, 2.5], "Low": [0.5, 1.5], "Close": [1.2, 2.2],
        })
        frame = prepare_candles(df)
        assert frame["high"].tolist() == [1.5, 2.5]

    def test_objects_with_attributes(self):
        candles = [SimpleNamespace(time=i, open=1.0, high=1.0 + i, low=1.0, close=1.0) for i in range(3)]
        frame = prepare_candles(candles)
        assert frame["high"].tolist() == [1.0, 2.0, 3.0]

    def test_empty_input(self):
        frame = prepare_candles([])
        assert len(frame) == 0
        assert list(frame.columns) == list(CANDLE_COLUMNS)

    def test_ordinal_times(self):
        rows = [{"time": i, "open": 1, "high": 1, "low": 1, "close": 1} for i in range(5)]
        assert len(prepare_candles(rows)) == 5


class TestCandleValidation:
    """Malformed candles are rejected before any indicator runs."""

    def test_missing_field(self):
        with pytest.raises(InvalidInput, match="missing required fields: low"):
            prepare_candles([{"time": 0, "open": 1, "high": 1, "close": 1}])

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "n/a", None])
    def test_non_finite_price(self, candle_factory, bad):
        candles = candle_factory([1, 2, 3])
        candles[1]["close"] = bad
        with pytest.raises(InvalidInput, match="Non-finite"):
            prepare_candles(candles)

    def test_high_below_low(self, candle_factory):
        candles = candle_factory([1, 2, 3])
        candles[2]["high"] = 0.5
        with pytest.raises(InvalidInput, match="high below low"):
            prepare_candles(candles)

    def test_orientation_mismatch(self, candle_factory):
        """Newest-first data declared as oldest-first is caught via its timestamps."""
        newest_first = list(reversed(candle_factory([1, 2, 3])))
        with pytest.raises(InvalidInput, match="not strictly increasing"):
            prepare_candles(newest_first, Orientation.OLDEST_FIRST)

    def test_duplicate_times(self):
        rows = [{"time": 1, "open": 1, "high": 1, "low": 1, "close": 1} for _ in range(3)]
        with pytest.raises(InvalidInput):
            prepare_candles(rows)

    def test_opaque_labels_taken_on_trust(self):
        rows = [{"time": label, "open": 1, "high": 1, "low": 1, "close": 1} for label in ["c", "b", "a"]]
        assert len(prepare_candles(rows)) == 3
