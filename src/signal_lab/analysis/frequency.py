"""
Signal Lab - Frequency Analysis

Correlation-vs-frequency spectrum obtained by sweeping a reference sine.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

import numpy as np

from signal_lab.config.defaults import (
    DEFAULT_FROM_FREQUENCY_HZ,
    DEFAULT_INACCURACY,
    DEFAULT_STEP_FREQUENCY_HZ,
    DEFAULT_TO_FREQUENCY_HZ,
    DEFAULT_USE_ABSOLUTE_VALUE,
    DEFAULT_X_LABEL,
    DEFAULT_Y_LABEL,
    FREQUENCY_ANALYSIS_GRAPH_LABEL,
)
from signal_lab.core.exceptions import InvalidParameterError
from signal_lab.core.logging_config import get_logger, log_performance
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal, SignalParams
from signal_lab.analysis.correlator import Correlator
from signal_lab.dsp.generator import GenerationMethod, Generator

logger = get_logger(__name__)


@dataclass(frozen=True)
class FrequencyAnalyzerParams:
    """Parameters for the frequency sweep."""

    signal: Signal | None = None
    from_frequency: float = DEFAULT_FROM_FREQUENCY_HZ
    to_frequency: float = DEFAULT_TO_FREQUENCY_HZ
    step_frequency: float = DEFAULT_STEP_FREQUENCY_HZ
    use_absolute_value: bool = DEFAULT_USE_ABSOLUTE_VALUE
    inaccuracy: float = DEFAULT_INACCURACY

    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    graph_label: str = FREQUENCY_ANALYSIS_GRAPH_LABEL


class FrequencyAnalyzer(SignalOperator[FrequencyAnalyzerParams]):
    """
    Brute-force frequency analyzer.

    For i in 0 .. ceil((to - from) / step) - 1:
        f_i = from + i * step
        ref = unit sine at f_i, zero phase and offset, same sampling
              frequency and duration as the source
        y_i = correlation(dc_free_source, ref)      (|.| if use_absolute_value)

    The output signal's x axis is frequency, not time. It is a
    correlation-magnitude spectrum, not a Fourier magnitude spectrum, and
    costs O(N * M) for N frequency steps and M samples per reference:
    every step regenerates the reference and recomputes both RMS values.
    This sweep dominates the run time of the toolkit.
    """

    params_type = FrequencyAnalyzerParams

    def __init__(self, params: FrequencyAnalyzerParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._signal: Signal | None = None

    def _validate_params(self) -> None:
        p = self._params
        if p.from_frequency >= p.to_frequency:
            raise InvalidParameterError(
                f"Invalid frequency range: from {p.from_frequency} Hz to {p.to_frequency} Hz"
            )
        if not p.step_frequency > 0:
            raise InvalidParameterError(
                f"Frequency step must be positive, got {p.step_frequency}"
            )

    @property
    def signal(self) -> Signal:
        """
        Spectrum signal (x = frequency in Hz, y = correlation).

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._signal

    @property
    def steps_count(self) -> int:
        """Number of frequencies in the sweep."""
        p = self._params
        return math.ceil((p.to_frequency - p.from_frequency) / p.step_frequency)

    def _execute(self) -> None:
        p = self._params
        source = self._require_signal(p.signal)
        duration = self._require_duration(source)
        sampling_frequency = source.params.sampling_frequency
        if sampling_frequency is None:
            raise InvalidParameterError("Signal does not have sampling frequency information")

        centered = Signal.from_signal(source)
        centered.remove_dc_component(p.inaccuracy)

        steps = self.steps_count
        frequencies = p.from_frequency + np.arange(steps, dtype=np.float64) * p.step_frequency
        correlations = np.empty(steps, dtype=np.float64)

        start = time.perf_counter()
        for i, frequency in enumerate(frequencies):
            reference = Generator(
                sampling_frequency=sampling_frequency,
                duration=duration,
                oscillation_frequency=float(frequency),
                init_phase=0.0,
                offset_y=0.0,
                amplitude=1.0,
                method=GenerationMethod.SINE,
            )
            reference.execute()

            correlator = Correlator(
                signal1=centered, signal2=reference.signal, inaccuracy=p.inaccuracy
            )
            correlator.execute()
            correlations[i] = correlator.correlation_value

        log_performance(
            logger,
            "frequency_sweep",
            (time.perf_counter() - start) * 1000.0,
            steps=steps,
            samples_per_step=source.points_count,
        )

        if p.use_absolute_value:
            correlations = np.abs(correlations)

        params = SignalParams(x_label=p.x_label, y_label=p.y_label, graph_label=p.graph_label)
        self._signal = Signal.from_arrays(frequencies, correlations, params)
