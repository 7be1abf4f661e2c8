"""
Error taxonomy for the signal engine.

Indicator functions never raise for short input (they return None); these
exceptions are raised inside the scorer's boundary and converted there into
a tagged failure Signal.
"""


class SignalEngineError(Exception):
    """Base class for signal engine errors."""

    reason = "error"


class InsufficientData(SignalEngineError):
    """Series or history is too short for the requested computation."""

    reason = "insufficient"


class InvalidInput(SignalEngineError):
    """Malformed candle data (missing field, non-finite price, high < low, wrong orientation)."""

    reason = "invalid_input"


class ConfigurationMissing(SignalEngineError):
    """A required instrument parameter has no mapping."""

    reason = "configuration_missing"


class HistoryReadError(SignalEngineError):
    """Trade history could not be read from its store."""

    reason = "history_unreadable"
