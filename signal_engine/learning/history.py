"""
Trade history stores for the outcome feedback loop.

The scorer and weight adapter never touch storage directly: they get a
TradeHistoryReader injected. Two stores are provided, an in-memory one
(tests, single-process callers) and a JSON file persisted as a list of
records in append order.
"""
import json
import logging
import os
import threading
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Protocol, Union

from ..shared.errors import HistoryReadError
from ..shared.types import Direction, Signal, TradeOutcome


logger = logging.getLogger(__name__)


class TradeHistoryReader(Protocol):
    """Read-only view of the trade history."""

    def read(self) -> List[TradeOutcome]:
        """
        Return a snapshot of all records in append order.

        Raises:
            HistoryReadError: If the underlying store cannot be read
        """
        ...


class TradeHistoryRecorder(Protocol):
    """Append-side of the trade history."""

    def append(self, outcome: TradeOutcome) -> None:
        ...


class InMemoryTradeHistory:
    """Trade history held in a list; snapshot reads, locked writes."""

    def __init__(self, outcomes: Optional[List[TradeOutcome]] = None):
        self._outcomes: List[TradeOutcome] = list(outcomes or [])
        self._lock = threading.Lock()

    def read(self) -> List[TradeOutcome]:
        with self._lock:
            return list(self._outcomes)

    def append(self, outcome: TradeOutcome) -> None:
        with self._lock:
            self._outcomes.append(outcome)

    def set_result(self, index: int, result: str) -> TradeOutcome:
        """Resolve a previously recorded trade."""
        with self._lock:
            outcome = self._outcomes[index]
            resolved = TradeOutcome.from_dict({**outcome.to_dict(), "result": result})
            self._outcomes[index] = resolved
            return resolved

    def __len__(self) -> int:
        return len(self._outcomes)


class JsonTradeHistory:
    """
    Trade history persisted as a JSON list.

    A missing file is an empty history. A file that exists but cannot be
    read or parsed raises HistoryReadError; it is never silently replaced.
    """

    def __init__(self, history_file: Union[str, Path]):
        """
        Initialize the store.

        Args:
            history_file: Path to JSON file holding the trade records
        """
        self.history_file = Path(history_file)
        self._lock = threading.Lock()

    def read(self) -> List[TradeOutcome]:
        if not self.history_file.exists():
            logger.info(f"History file {self.history_file} does not exist, starting fresh")
            return []

        try:
            with open(self.history_file, 'r') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON list, got {type(data).__name__}")
            for position, record in enumerate(data):
                if not isinstance(record, Mapping):
                    raise ValueError(f"record {position} is {type(record).__name__}, expected an object")
            outcomes = [TradeOutcome.from_dict(record) for record in data]
        except (OSError, ValueError, TypeError) as e:
            raise HistoryReadError(f"Failed to read trade history from {self.history_file}: {e}") from e

        logger.debug(f"Loaded {len(outcomes)} trade records from {self.history_file}")
        return outcomes

    def _write(self, outcomes: List[TradeOutcome]) -> None:
        # Ensure parent directory exists
        self.history_file.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.history_file.with_suffix(self.history_file.suffix + ".tmp")
        with open(tmp_path, 'w') as f:
            json.dump([o.to_dict() for o in outcomes], f, indent=2)
        os.replace(tmp_path, self.history_file)

    def append(self, outcome: TradeOutcome) -> None:
        with self._lock:
            outcomes = self.read()
            outcomes.append(outcome)
            self._write(outcomes)
        logger.info(f"Recorded {outcome.direction} {outcome.symbol} (result: {outcome.result or 'open'})")

    def set_result(self, index: int, result: str) -> TradeOutcome:
        """Resolve a previously recorded trade."""
        with self._lock:
            outcomes = self.read()
            resolved = TradeOutcome.from_dict({**outcomes[index].to_dict(), "result": result})
            outcomes[index] = resolved
            self._write(outcomes)
        return resolved


def record_outcome(
    recorder: TradeHistoryRecorder,
    signal: Signal,
    result: Optional[str] = None,
    recorded_at: Optional[datetime] = None,
) -> TradeOutcome:
    """
    Append a trade record for an emitted signal.

    Args:
        recorder: Store to append to
        signal: Valid directional signal that was traded
        result: "win", "loss", or None if the trade is still open
        recorded_at: Record timestamp (default: now, UTC)

    Returns:
        The appended TradeOutcome

    Raises:
        ValueError: If the signal is invalid or has no direction
    """
    if not signal.valid or signal.direction == Direction.NONE:
        raise ValueError(f"Only valid BUY/SELL signals can be recorded (got {signal.direction.value}, valid={signal.valid})")

    outcome = TradeOutcome(
        symbol=signal.symbol or "",
        direction=signal.direction.value,
        entry=signal.entry,
        stop_loss=signal.stop_loss,
        take_profit=signal.take_profit[0] if signal.take_profit else None,
        confidence=signal.confidence,
        result=result,
        recorded_at=(recorded_at or datetime.now(timezone.utc)).isoformat(),
    )
    recorder.append(outcome)
    return outcome
