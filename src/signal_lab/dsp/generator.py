"""
Signal Lab - Waveform Generator

Synthesizes signals from closed-form trigonometric waveforms.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from signal_lab.config.defaults import (
    DEFAULT_AMPLITUDE,
    DEFAULT_CLAMP_VALUE,
    DEFAULT_DURATION_SECONDS,
    DEFAULT_FREQ_HZ,
    DEFAULT_INACCURACY,
    DEFAULT_INIT_PHASE,
    DEFAULT_OFFSET_Y,
    DEFAULT_SAMPLING_FREQ_HZ,
    GENERATOR_GRAPH_LABEL,
    GENERATOR_X_LABEL,
    GENERATOR_Y_LABEL,
    WAVEFORM_NORMALIZE_FACTOR,
)
from signal_lab.core.exceptions import InvalidParameterError, UnsupportedOperationError
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal


class GenerationMethod(Enum):
    """
    Waveform shapes the generator can produce.

    Tangent and cotangent have vertical asymptotes, so their values are
    clamped to [-clamp_value, clamp_value] before offset_y is added.
    """

    SINE = "sine"
    COSINE = "cosine"
    TANGENT = "tangent"
    COTANGENT = "cotangent"


_CLAMPED_METHODS = (GenerationMethod.TANGENT, GenerationMethod.COTANGENT)


@dataclass(frozen=True)
class GeneratorParams:
    """Parameters for waveform generation."""

    sampling_frequency: float = DEFAULT_SAMPLING_FREQ_HZ
    duration: float = DEFAULT_DURATION_SECONDS
    oscillation_frequency: float = DEFAULT_FREQ_HZ
    init_phase: float = DEFAULT_INIT_PHASE
    offset_y: float = DEFAULT_OFFSET_Y
    amplitude: float = DEFAULT_AMPLITUDE
    method: GenerationMethod = GenerationMethod.SINE
    clamp_value: float | None = DEFAULT_CLAMP_VALUE

    x_label: str = GENERATOR_X_LABEL
    y_label: str = GENERATOR_Y_LABEL
    graph_label: str = GENERATOR_GRAPH_LABEL


class Generator(SignalOperator[GeneratorParams]):
    """
    Waveform generator.

    For sample index i (0 <= i < ceil(duration * fs) + 1):
        x_i = i / fs
        theta_i = 2*pi * f / fs * i + init_phase

    and y_i is one of
        sine:       amplitude * sin(theta_i) + offset_y
        cosine:     amplitude * cos(theta_i) + offset_y
        tangent:    clip(amplitude * tan(theta_i)) + offset_y
        cotangent:  clip(amplitude / tan(theta_i)) + offset_y

    Where tan(theta_i) is within DEFAULT_INACCURACY of zero the cotangent
    takes the clamp value with the sign of the tangent.

    The produced signal carries a normalization factor of 2*pi, which the
    Differentiator divides out.
    """

    params_type = GeneratorParams

    def __init__(self, params: GeneratorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._signal: Signal | None = None

    def _validate_params(self) -> None:
        p = self._params
        try:
            method = GenerationMethod(p.method)
        except ValueError as e:
            raise InvalidParameterError(f"Unknown generation method: {p.method!r}") from e
        if not p.sampling_frequency > 0:
            raise InvalidParameterError(
                f"Sampling frequency must be positive, got {p.sampling_frequency}"
            )
        if not p.duration > 0:
            raise InvalidParameterError(f"Duration must be positive, got {p.duration}")
        if method in _CLAMPED_METHODS and (p.clamp_value is None or not p.clamp_value > 0):
            raise InvalidParameterError(
                f"{method.value} generation requires a positive clamp value, got {p.clamp_value}"
            )

    @property
    def signal(self) -> Signal:
        """
        Generated signal.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._signal

    def _execute(self) -> None:
        p = self._params
        signal = Signal.from_duration(
            p.sampling_frequency,
            p.duration,
            oscillation_frequency=p.oscillation_frequency,
            init_phase=p.init_phase,
            offset_y=p.offset_y,
            amplitude=p.amplitude,
            normalize_factor=WAVEFORM_NORMALIZE_FACTOR,
            x_label=p.x_label,
            y_label=p.y_label,
            graph_label=p.graph_label,
        )

        index = np.arange(signal.points_count, dtype=np.float64)
        x = index / p.sampling_frequency
        theta = 2.0 * np.pi * p.oscillation_frequency / p.sampling_frequency * index + p.init_phase

        signal.fill(x, self._waveform(GenerationMethod(p.method), theta))
        self._signal = signal

    def _waveform(self, method: GenerationMethod, theta: np.ndarray) -> np.ndarray:
        """Evaluate the waveform (offset included) at the given angles."""
        p = self._params

        if method == GenerationMethod.SINE:
            return p.amplitude * np.sin(theta) + p.offset_y

        elif method == GenerationMethod.COSINE:
            return p.amplitude * np.cos(theta) + p.offset_y

        elif method == GenerationMethod.TANGENT:
            values = p.amplitude * np.tan(theta)
            return np.clip(values, -p.clamp_value, p.clamp_value) + p.offset_y

        elif method == GenerationMethod.COTANGENT:
            tangent = np.tan(theta)
            near_zero = np.abs(tangent) < DEFAULT_INACCURACY
            # Asymptote: take the clamp value, signed like the tangent
            values = np.copysign(np.full_like(tangent, p.clamp_value), tangent)
            np.divide(p.amplitude, tangent, out=values, where=~near_zero)
            return np.clip(values, -p.clamp_value, p.clamp_value) + p.offset_y

        else:
            raise UnsupportedOperationError(f"Unsupported generation method: {method}")
