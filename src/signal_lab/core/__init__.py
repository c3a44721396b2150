"""
Signal Lab - Core Module

Signal data model, error hierarchy and shared infrastructure.
"""

from signal_lab.core.exceptions import (
    IncompatibleSignalsError,
    InsufficientDataError,
    InvalidMethodPreconditionsError,
    InvalidParameterError,
    NotExecutedError,
    OutOfRangeError,
    SignalFileNotFoundError,
    SignalIOError,
    SignalProcessingError,
    UnsupportedOperationError,
)
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Sample, Signal, SignalParams

__all__ = [
    "Sample",
    "Signal",
    "SignalParams",
    "SignalOperator",
    "SignalProcessingError",
    "InvalidParameterError",
    "OutOfRangeError",
    "IncompatibleSignalsError",
    "InsufficientDataError",
    "InvalidMethodPreconditionsError",
    "NotExecutedError",
    "UnsupportedOperationError",
    "SignalIOError",
    "SignalFileNotFoundError",
]
