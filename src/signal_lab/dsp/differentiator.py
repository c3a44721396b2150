"""
Signal Lab - Numerical Differentiation

Finite-difference derivative of a signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from signal_lab.config.defaults import (
    DEFAULT_DIFF_NORMALIZATION,
    DEFAULT_X_LABEL,
    DEFAULT_Y_LABEL,
    DIFFERENTIATION_GRAPH_LABEL,
)
from signal_lab.core.exceptions import InsufficientDataError, InvalidParameterError
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal


class DifferentiationMethod(Enum):
    """
    Edge handling for the finite-difference derivative.

    - CENTRAL_ONLY: central differences only; output is 2 samples shorter
    - CENTRAL_AND_EDGES: central differences inside, forward difference at
      the first sample and backward difference at the last; same length
    """

    CENTRAL_ONLY = "central_only"
    CENTRAL_AND_EDGES = "central_and_edges"


@dataclass(frozen=True)
class DifferentiatorParams:
    """Parameters for differentiation."""

    signal: Signal | None = None
    perform_normalization: bool = DEFAULT_DIFF_NORMALIZATION
    method: DifferentiationMethod = DifferentiationMethod.CENTRAL_AND_EDGES

    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    graph_label: str = DIFFERENTIATION_GRAPH_LABEL


class Differentiator(SignalOperator[DifferentiatorParams]):
    """
    Finite-difference differentiator.

    Interior derivative at sample i is
        (y[i+1] - y[i-1]) / (x[i+1] - x[i-1])
    stored with the x coordinate of sample i-1. With perform_normalization
    every value is divided by the source's normalize_factor, which must
    then be present in the source metadata.
    """

    params_type = DifferentiatorParams

    def __init__(self, params: DifferentiatorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._signal: Signal | None = None

    def _validate_params(self) -> None:
        try:
            DifferentiationMethod(self._params.method)
        except ValueError as e:
            raise InvalidParameterError(
                f"Unknown differentiation method: {self._params.method!r}"
            ) from e

    @property
    def signal(self) -> Signal:
        """
        Derivative signal.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._signal

    def _normalize_factor(self, source: Signal) -> float:
        if not self._params.perform_normalization:
            return 1.0
        factor = source.params.normalize_factor
        if factor is None:
            raise InvalidParameterError(
                "Normalization requested but the signal has no normalize factor"
            )
        if factor == 0:
            raise InvalidParameterError("Normalize factor must be non-zero")
        return factor

    def _execute(self) -> None:
        p = self._params
        source = self._require_signal(p.signal)
        if source.points_count < 2:
            raise InsufficientDataError(
                f"Differentiation needs at least 2 points, got {source.points_count}"
            )

        method = DifferentiationMethod(p.method)
        if method == DifferentiationMethod.CENTRAL_ONLY and source.points_count < 3:
            # Two points leave no interior sample to keep
            raise InsufficientDataError(
                f"Central-only differentiation needs at least 3 points, got {source.points_count}"
            )

        factor = self._normalize_factor(source)
        x = source.x
        y = source.y

        # Central differences for interior samples 1..n-2, keyed by x[i-1]
        central = (y[2:] - y[:-2]) / (x[2:] - x[:-2])

        if method == DifferentiationMethod.CENTRAL_ONLY:
            out_x = x[:-2]
            out_y = central
        else:
            forward = (y[1] - y[0]) / (x[1] - x[0])
            backward = (y[-1] - y[-2]) / (x[-1] - x[-2])
            # Interior samples carry x[i-1]; the backward edge carries x[n-2]
            out_x = np.concatenate(([x[0]], x[:-2], [x[-2]]))
            out_y = np.concatenate(([forward], central, [backward]))

        params = source.params.with_labels(p.x_label, p.y_label, p.graph_label)
        self._signal = Signal.from_arrays(out_x, out_y / factor, params)
