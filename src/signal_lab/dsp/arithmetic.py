"""
Signal Lab - Pointwise Arithmetic

Summation and multiplication of two compatible signals.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass

import numpy as np

from signal_lab.config.defaults import (
    DEFAULT_INACCURACY,
    DEFAULT_X_LABEL,
    DEFAULT_Y_LABEL,
    MULTIPLICATION_GRAPH_LABEL,
    SUMMATION_GRAPH_LABEL,
)
from signal_lab.core.exceptions import IncompatibleSignalsError
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal, SignalParams


@dataclass(frozen=True)
class SummatorParams:
    """Parameters for pointwise summation."""

    signal1: Signal | None = None
    signal2: Signal | None = None
    inaccuracy: float = DEFAULT_INACCURACY

    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    graph_label: str = SUMMATION_GRAPH_LABEL


@dataclass(frozen=True)
class MultiplierParams:
    """Parameters for pointwise multiplication."""

    signal1: Signal | None = None
    signal2: Signal | None = None
    inaccuracy: float = DEFAULT_INACCURACY

    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    graph_label: str = MULTIPLICATION_GRAPH_LABEL


class _BinaryOperator(SignalOperator):
    """
    Shared logic for operators combining two signals sample by sample.

    The inputs must pass signal1.equals(signal2, inaccuracy): same points
    count and matching first/last x within tolerance. Interior samples are
    paired by index without further checks. The output takes its x values
    from signal1, plus signal1's sampling frequency and duration so it can
    feed duration-based analysis (RMS, correlation).
    """

    def __init__(self, params=None, **overrides):
        super().__init__(params, **overrides)
        self._signal: Signal | None = None

    @property
    def signal(self) -> Signal:
        """
        Combined signal.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._signal

    @abstractmethod
    def _combine(self, y1: np.ndarray, y2: np.ndarray) -> np.ndarray:
        """Combine the y arrays of the two inputs."""

    def _execute(self) -> None:
        p = self._params
        signal1 = self._require_signal(p.signal1, "first signal")
        signal2 = self._require_signal(p.signal2, "second signal")

        if not signal1.equals(signal2, p.inaccuracy):
            raise IncompatibleSignalsError(
                f"Signals are not compatible: {signal1.points_count} vs "
                f"{signal2.points_count} points, inaccuracy {p.inaccuracy}"
            )

        params = SignalParams(
            sampling_frequency=signal1.params.sampling_frequency,
            duration=signal1.params.duration,
            x_label=p.x_label,
            y_label=p.y_label,
            graph_label=p.graph_label,
        )
        self._signal = Signal.from_arrays(signal1.x, self._combine(signal1.y, signal2.y), params)


class Summator(_BinaryOperator):
    """Pointwise sum: y = signal1.y + signal2.y."""

    params_type = SummatorParams

    def _combine(self, y1: np.ndarray, y2: np.ndarray) -> np.ndarray:
        return y1 + y2


class Multiplier(_BinaryOperator):
    """Pointwise product: y = signal1.y * signal2.y."""

    params_type = MultiplierParams

    def _combine(self, y1: np.ndarray, y2: np.ndarray) -> np.ndarray:
        return y1 * y2
