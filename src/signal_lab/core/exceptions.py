"""
Signal Lab - Exception Hierarchy

Every failure raised by the toolkit derives from SignalProcessingError.
Each subclass also inherits from the closest builtin exception so that
callers catching ValueError, IndexError, OSError, etc. keep working.
"""


class SignalProcessingError(Exception):
    """Base class for all signal processing errors."""

    pass


class InvalidParameterError(SignalProcessingError, ValueError):
    """Missing input, non-positive scalar, bad range or absent metadata."""

    pass


class OutOfRangeError(SignalProcessingError, IndexError):
    """Indexed access beyond the number of points of a signal."""

    pass


class IncompatibleSignalsError(SignalProcessingError, ValueError):
    """Two signals failed the approximate compatibility check."""

    pass


class InsufficientDataError(SignalProcessingError, ValueError):
    """Too few samples for the requested operation."""

    pass


class InvalidMethodPreconditionsError(SignalProcessingError, ValueError):
    """Sample count violates a quadrature rule's parity/modulus requirement."""

    pass


class NotExecutedError(SignalProcessingError, RuntimeError):
    """A result accessor was called before execute()."""

    pass


class UnsupportedOperationError(SignalProcessingError, NotImplementedError):
    """A recognised but unimplemented variant was requested."""

    pass


class SignalIOError(SignalProcessingError, OSError):
    """A file could not be written or an external tool could not be run."""

    pass


class SignalFileNotFoundError(SignalProcessingError, FileNotFoundError):
    """A referenced data file does not exist."""

    pass
