"""
Signal Lab - Operator Base Class

Common "configure, then execute" contract shared by every processing
component.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, ClassVar, Generic, TypeVar

from signal_lab.core.exceptions import InvalidParameterError, NotExecutedError
from signal_lab.core.logging_config import get_logger
from signal_lab.core.signal import Signal

logger = get_logger(__name__)

P = TypeVar("P")


class SignalOperator(ABC, Generic[P]):
    """
    Abstract base class for signal operators.

    All operators:
    - Store an immutable parameter record at construction
    - Borrow their input signals read-only and never mutate them
    - Produce their result in execute() and cache it
    - Raise NotExecutedError from result accessors until execute() succeeds

    Parameters can be passed as a ready record, as keyword arguments, or
    both (keywords override fields of the record):

        Integrator(IntegratorParams(signal=s, method=IntegrationMethod.SIMPSON))
        Integrator(signal=s, method=IntegrationMethod.SIMPSON)
    """

    params_type: ClassVar[type]

    def __init__(self, params: P | None = None, **overrides: Any):
        if params is None:
            params = self.params_type(**overrides)
        elif overrides:
            params = replace(params, **overrides)
        self._params: P = params
        self._executed = False
        self._validate_params()

    @property
    def params(self) -> P:
        """Parameters the operator was configured with."""
        return self._params

    @property
    def is_executed(self) -> bool:
        """Whether execute() has completed successfully."""
        return self._executed

    def execute(self) -> None:
        """
        Run the operation and cache its result.

        On failure the operator is left un-executed: any result from a
        previous run is no longer reachable through the accessors.
        """
        self._executed = False
        logger.debug(f"Executing {type(self).__name__}")
        self._execute()
        self._executed = True

    @abstractmethod
    def _execute(self) -> None:
        """Compute and store the result. Implemented by each operator."""

    def _validate_params(self) -> None:
        """Hook for construction-time parameter checks."""

    def _require_executed(self) -> None:
        if not self._executed:
            raise NotExecutedError(f"{type(self).__name__} not executed")

    @staticmethod
    def _require_signal(signal: Signal | None, name: str = "signal") -> Signal:
        if signal is None:
            raise InvalidParameterError(f"Invalid {name} (None)")
        return signal

    @staticmethod
    def _require_duration(signal: Signal) -> float:
        duration = signal.params.duration
        if duration is None:
            raise InvalidParameterError("Signal does not have duration information")
        return duration
