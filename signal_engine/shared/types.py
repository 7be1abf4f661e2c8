"""
Shared types for the signal engine.

Consolidates the Direction enum, the indicator snapshot, the weight vector,
trade outcome records and the Signal record so every module agrees on one
definition.
"""
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Optional, Any, Dict, Tuple


class Direction(Enum):
    """Directional call of a signal."""
    BUY = "BUY"
    SELL = "SELL"
    NONE = "NONE"


class TradeResult(Enum):
    """Realized result of a trade."""
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class MacdValues:
    """MACD line, signal line and histogram at the latest candle."""
    value: float
    signal_line: float
    histogram: float


@dataclass(frozen=True)
class IndicatorSet:
    """
    Indicator values at the latest candle.

    Every field is optional: None means indeterminate (not enough candles),
    never a stand-in zero.
    """
    sma_short: Optional[float] = None
    sma_long: Optional[float] = None
    rsi: Optional[float] = None
    macd: Optional[MacdValues] = None
    atr: Optional[float] = None
    trend_strength: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        """Flatten into a JSON-ready mapping."""
        return {
            "sma_short": self.sma_short,
            "sma_long": self.sma_long,
            "rsi": self.rsi,
            "macd": self.macd.value if self.macd else None,
            "macd_signal": self.macd.signal_line if self.macd else None,
            "macd_histogram": self.macd.histogram if self.macd else None,
            "atr": self.atr,
            "trend_strength": self.trend_strength,
        }


@dataclass(frozen=True)
class WeightVector:
    """Multiplicative boost applied to each indicator's score contribution (each >= 1.0)."""
    trend_weight: float = 1.0
    rsi_weight: float = 1.0
    macd_weight: float = 1.0

    def __post_init__(self) -> None:
        for name in ("trend_weight", "rsi_weight", "macd_weight"):
            value = getattr(self, name)
            if value < 1.0:
                raise ValueError(f"{name} must be >= 1.0, got {value}")

    @classmethod
    def identity(cls) -> "WeightVector":
        return cls()

    @property
    def is_identity(self) -> bool:
        return self.trend_weight == 1.0 and self.rsi_weight == 1.0 and self.macd_weight == 1.0


@dataclass
class TradeOutcome:
    """Record of an emitted signal and, once known, its realized result."""
    symbol: str = ""
    direction: str = ""  # "BUY" or "SELL"; empty for bare {"result": ...} records
    entry: Optional[float] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    confidence: Optional[int] = None
    result: Optional[str] = None  # "win", "loss", or None while unresolved
    recorded_at: str = ""  # ISO format timestamp

    def __post_init__(self) -> None:
        if self.result is not None and self.result not in (TradeResult.WIN.value, TradeResult.LOSS.value):
            raise ValueError(f"result must be 'win', 'loss' or None, got {self.result!r}")

    @property
    def is_resolved(self) -> bool:
        return self.result is not None

    @property
    def is_win(self) -> bool:
        return self.result == TradeResult.WIN.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TradeOutcome":
        """Create from dictionary, ignoring unknown keys written by other tools."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class Signal:
    """
    Scored trading signal.

    Produced fresh per scoring call and never mutated. A failed call still
    returns a Signal, with valid=False and a reason tag
    ("insufficient", "invalid_input", "configuration_missing").
    """
    valid: bool
    direction: Direction = Direction.NONE
    confidence: int = 0
    symbol: Optional[str] = None
    reason: Optional[str] = None
    entry: Optional[float] = None
    stop_loss: Optional[float] = None
    take_profit: Tuple[float, ...] = field(default_factory=tuple)
    indicators: IndicatorSet = field(default_factory=IndicatorSet)

    @classmethod
    def failure(cls, reason: str, symbol: Optional[str] = None) -> "Signal":
        return cls(valid=False, reason=reason, symbol=symbol)

    @property
    def has_levels(self) -> bool:
        return self.stop_loss is not None and len(self.take_profit) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Flat structure for the presentation layer (tp1..tpN plus the indicator snapshot)."""
        out: Dict[str, Any] = {
            "valid": self.valid,
            "reason": self.reason,
            "symbol": self.symbol,
            "direction": self.direction.value,
            "confidence": self.confidence,
            "entry": self.entry,
            "stop_loss": self.stop_loss,
        }
        for i, level in enumerate(self.take_profit, start=1):
            out[f"tp{i}"] = level
        out.update(self.indicators.to_dict())
        return out
