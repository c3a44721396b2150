"""
Signal Lab - Numerical Integration

Definite integral of a signal by composite quadrature.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scipy.integrate import trapezoid

from signal_lab.core.exceptions import (
    InsufficientDataError,
    InvalidMethodPreconditionsError,
    InvalidParameterError,
)
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal


class IntegrationMethod(Enum):
    """
    Composite quadrature rules.

    - TRAPEZOIDAL: any number of points >= 2
    - SIMPSON: odd number of points (>= 3)
    - BOOLE: 4k + 1 points (5, 9, 13, ...)
    """

    TRAPEZOIDAL = "trapezoidal"
    SIMPSON = "simpson"
    BOOLE = "boole"


@dataclass(frozen=True)
class IntegratorParams:
    """Parameters for integration."""

    signal: Signal | None = None
    method: IntegrationMethod = IntegrationMethod.TRAPEZOIDAL


class Integrator(SignalOperator[IntegratorParams]):
    """
    Numerical integrator over the full x range of a signal.

    Simpson and Boole weights use the width of each panel
    (x[i+1] - x[i-1] and x[i+4] - x[i]), which is exact for uniform
    sampling.
    """

    params_type = IntegratorParams

    def __init__(self, params: IntegratorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._integral: float | None = None

    def _validate_params(self) -> None:
        try:
            IntegrationMethod(self._params.method)
        except ValueError as e:
            raise InvalidParameterError(
                f"Unknown integration method: {self._params.method!r}"
            ) from e

    @property
    def integral(self) -> float:
        """
        Integral value.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._integral

    def _execute(self) -> None:
        source = self._require_signal(self._params.signal)
        n = source.points_count
        if n < 2:
            raise InsufficientDataError(f"Integration needs at least 2 points, got {n}")

        method = IntegrationMethod(self._params.method)
        x = source.x
        y = source.y

        if method == IntegrationMethod.TRAPEZOIDAL:
            integral = trapezoid(y, x)

        elif method == IntegrationMethod.SIMPSON:
            if n % 2 == 0:
                raise InvalidMethodPreconditionsError(
                    f"Simpson's rule requires an odd number of points, got {n}"
                )
            # Panels centred on i = 1, 3, 5, ..., n-2
            widths = x[2::2] - x[:-2:2]
            integral = (widths / 6.0 * (y[:-2:2] + 4.0 * y[1::2] + y[2::2])).sum()

        elif method == IntegrationMethod.BOOLE:
            if n % 4 != 1:
                raise InvalidMethodPreconditionsError(
                    f"Boole's rule requires 4k + 1 points, got {n}"
                )
            # Panels starting at i = 0, 4, 8, ..., n-5
            widths = x[4::4] - x[:-4:4]
            integral = (
                widths
                / 90.0
                * (
                    7.0 * y[:-4:4]
                    + 32.0 * y[1::4]
                    + 12.0 * y[2::4]
                    + 32.0 * y[3::4]
                    + 7.0 * y[4::4]
                )
            ).sum()

        else:
            raise InvalidParameterError(f"Unknown integration method: {method}")

        self._integral = float(integral)
