"""
Signal Lab - RMS and Amplitude Detection

Power-based level estimation built from the Multiplier and Integrator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from signal_lab.config.defaults import DEFAULT_INACCURACY
from signal_lab.core.exceptions import InvalidParameterError
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal
from signal_lab.dsp.arithmetic import Multiplier
from signal_lab.dsp.integrator import IntegrationMethod, Integrator


@dataclass(frozen=True)
class RMSParams:
    """Parameters for RMS computation."""

    signal: Signal | None = None
    inaccuracy: float = DEFAULT_INACCURACY
    method: IntegrationMethod = IntegrationMethod.TRAPEZOIDAL


@dataclass(frozen=True)
class AmplitudeDetectorParams:
    """Parameters for amplitude detection."""

    signal: Signal | None = None
    inaccuracy: float = DEFAULT_INACCURACY
    method: IntegrationMethod = IntegrationMethod.TRAPEZOIDAL


class RMS(SignalOperator[RMSParams]):
    """
    Root-mean-square value of a signal.

        rms = sqrt( integral(y^2 dx) / duration )

    The source must carry duration metadata.
    """

    params_type = RMSParams

    def __init__(self, params: RMSParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._rms_value: float | None = None
        self._power: float | None = None

    @property
    def rms_value(self) -> float:
        """
        RMS value.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._rms_value

    @property
    def power(self) -> float:
        """Mean power (rms squared)."""
        self._require_executed()
        return self._power

    def _execute(self) -> None:
        p = self._params
        source = self._require_signal(p.signal)
        duration = self._require_duration(source)

        squared = Multiplier(signal1=source, signal2=source, inaccuracy=p.inaccuracy)
        squared.execute()

        energy = Integrator(signal=squared.signal, method=p.method)
        energy.execute()

        power = energy.integral / duration
        if power < 0:
            # x runs backwards somewhere, so the integral changed sign
            raise InvalidParameterError(
                f"Negative signal energy {energy.integral:g}; x values must be non-decreasing"
            )
        self._power = power
        self._rms_value = math.sqrt(power)


class AmplitudeDetector(SignalOperator[AmplitudeDetectorParams]):
    """
    Amplitude estimate for symmetric periodic waveforms.

    The DC component is removed from a copy of the input, then
        amplitude = sqrt(2) * rms(copy)

    The sqrt(2) crest factor only holds for sinusoids over whole periods;
    this is not a general peak estimator.
    """

    params_type = AmplitudeDetectorParams

    def __init__(self, params: AmplitudeDetectorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._amplitude: float | None = None
        self._rms_value: float | None = None

    @property
    def amplitude(self) -> float:
        """
        Detected amplitude.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._amplitude

    @property
    def rms_value(self) -> float:
        """RMS of the DC-free copy."""
        self._require_executed()
        return self._rms_value

    def _execute(self) -> None:
        p = self._params
        source = self._require_signal(p.signal)
        self._require_duration(source)

        centered = Signal.from_signal(source)
        centered.remove_dc_component(p.inaccuracy)

        rms = RMS(signal=centered, inaccuracy=p.inaccuracy, method=p.method)
        rms.execute()

        self._rms_value = rms.rms_value
        self._amplitude = math.sqrt(2.0) * self._rms_value
