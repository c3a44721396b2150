"""
Signal Lab - Correlation

Zero-lag correlation coefficient between two signals.
"""

from __future__ import annotations

from dataclasses import dataclass

from signal_lab.config.defaults import DEFAULT_CORRELATION_NORMALIZATION, DEFAULT_INACCURACY
from signal_lab.core.logging_config import get_logger
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal
from signal_lab.analysis.rms import RMS
from signal_lab.dsp.arithmetic import Multiplier
from signal_lab.dsp.integrator import Integrator

logger = get_logger(__name__)


@dataclass(frozen=True)
class CorrelatorParams:
    """Parameters for correlation."""

    signal1: Signal | None = None
    signal2: Signal | None = None
    perform_normalization: bool = DEFAULT_CORRELATION_NORMALIZATION
    inaccuracy: float = DEFAULT_INACCURACY


class Correlator(SignalOperator[CorrelatorParams]):
    """
    Single-lag correlation of two signals.

        raw = integral(y1 * y2 dx) / duration1
        value = raw / (rms1 * rms2)     (with normalization)

    Only the strength of the relationship at zero lag is measured; phase
    differences are not captured, so this is not a cross-correlation
    function. When either signal has zero RMS the normalized value is
    defined as 0.0.
    """

    params_type = CorrelatorParams

    def __init__(self, params: CorrelatorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._correlation_value: float | None = None

    @property
    def correlation_value(self) -> float:
        """
        Correlation value.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._correlation_value

    def _execute(self) -> None:
        p = self._params
        signal1 = self._require_signal(p.signal1, "first signal")
        signal2 = self._require_signal(p.signal2, "second signal")
        duration = self._require_duration(signal1)
        self._require_duration(signal2)

        product = Multiplier(signal1=signal1, signal2=signal2, inaccuracy=p.inaccuracy)
        product.execute()

        integral = Integrator(signal=product.signal)
        integral.execute()
        raw_correlation = integral.integral / duration

        if not p.perform_normalization:
            self._correlation_value = raw_correlation
            return

        rms1 = RMS(signal=signal1, inaccuracy=p.inaccuracy)
        rms1.execute()
        rms2 = RMS(signal=signal2, inaccuracy=p.inaccuracy)
        rms2.execute()

        scale = rms1.rms_value * rms2.rms_value
        if scale == 0.0:
            logger.debug("Zero-energy signal in correlation; returning 0.0")
            self._correlation_value = 0.0
        else:
            self._correlation_value = raw_correlation / scale
