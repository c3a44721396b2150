"""
Signal Lab - Noise Injection

Adds random perturbation to the y values of an existing signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from signal_lab.config.defaults import (
    DEFAULT_NOISE_AMPLITUDE,
    GENERATOR_X_LABEL,
    GENERATOR_Y_LABEL,
    NOISE_GRAPH_LABEL,
)
from signal_lab.core.exceptions import InvalidParameterError, UnsupportedOperationError
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal


class NoiseType(Enum):
    """Noise colours. Only white noise is implemented."""

    WHITE = "white"
    PINK = "pink"
    BROWN = "brown"


@dataclass(frozen=True)
class NoiseGeneratorParams:
    """Parameters for noise injection."""

    signal: Signal | None = None
    noise_amplitude: float = DEFAULT_NOISE_AMPLITUDE
    noise_type: NoiseType = NoiseType.WHITE
    seed: int | None = None  # None draws fresh OS entropy on every run

    x_label: str = GENERATOR_X_LABEL
    y_label: str = GENERATOR_Y_LABEL
    graph_label: str = NOISE_GRAPH_LABEL


class NoiseGenerator(SignalOperator[NoiseGeneratorParams]):
    """
    Noise injector.

    White noise adds an independent value drawn uniformly from
    [-noise_amplitude, +noise_amplitude] to every y; x is unchanged and
    the source metadata is carried over.
    """

    params_type = NoiseGeneratorParams

    def __init__(self, params: NoiseGeneratorParams | None = None, **overrides):
        super().__init__(params, **overrides)
        self._signal: Signal | None = None

    def _validate_params(self) -> None:
        p = self._params
        try:
            NoiseType(p.noise_type)
        except ValueError as e:
            raise InvalidParameterError(f"Unknown noise type: {p.noise_type!r}") from e
        if p.noise_amplitude < 0:
            raise InvalidParameterError(
                f"Noise amplitude must be non-negative, got {p.noise_amplitude}"
            )
        if p.seed is not None and p.seed < 0:
            raise InvalidParameterError(f"Seed must be non-negative, got {p.seed}")

    @property
    def signal(self) -> Signal:
        """
        Noisy signal.

        Raises:
            NotExecutedError: If execute() has not run.
        """
        self._require_executed()
        return self._signal

    def _execute(self) -> None:
        p = self._params
        source = self._require_signal(p.signal, "source signal")
        noise_type = NoiseType(p.noise_type)

        if noise_type == NoiseType.WHITE:
            rng = np.random.default_rng(p.seed)
            noise = rng.uniform(-p.noise_amplitude, p.noise_amplitude, size=source.points_count)
        else:
            raise UnsupportedOperationError(f"{noise_type.value} noise is not supported")

        params = source.params.with_labels(p.x_label, p.y_label, p.graph_label)
        self._signal = Signal.from_arrays(source.x, source.y + noise, params)
