"""
Signal Lab - Signal Data Model

Fixed-length discrete signal made of (x, y) samples plus optional
descriptive metadata.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from signal_lab.config.defaults import (
    DEFAULT_AMPLITUDE,
    DEFAULT_FREQ_HZ,
    DEFAULT_GRAPH_LABEL,
    DEFAULT_INACCURACY,
    DEFAULT_INIT_PHASE,
    DEFAULT_NORMALIZE_FACTOR,
    DEFAULT_OFFSET_Y,
    DEFAULT_X_LABEL,
    DEFAULT_Y_LABEL,
)
from signal_lab.core.exceptions import InvalidParameterError, OutOfRangeError


class Sample(NamedTuple):
    """A single (x, y) point of a signal."""

    x: float
    y: float


@dataclass(frozen=True)
class SignalParams:
    """
    Descriptive metadata attached to a signal.

    Every numeric field is independently present or absent (None).
    Operators that need a field (e.g. duration for RMS) fail when it is
    absent rather than assuming a default.
    """

    sampling_frequency: float | None = None  # Hz
    duration: float | None = None  # seconds
    oscillation_frequency: float | None = None  # Hz
    init_phase: float | None = None  # radians
    offset_y: float | None = None
    amplitude: float | None = None
    normalize_factor: float | None = None  # undone by the Differentiator

    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    graph_label: str = DEFAULT_GRAPH_LABEL

    def with_labels(
        self,
        x_label: str | None = None,
        y_label: str | None = None,
        graph_label: str | None = None,
    ) -> SignalParams:
        """Return a copy with the given labels replaced (None keeps the current one)."""
        return replace(
            self,
            x_label=self.x_label if x_label is None else x_label,
            y_label=self.y_label if y_label is None else y_label,
            graph_label=self.graph_label if graph_label is None else graph_label,
        )


def _check_tolerance(tolerance: float | None) -> float:
    if tolerance is None:
        return DEFAULT_INACCURACY
    if tolerance < 0:
        raise InvalidParameterError(f"Tolerance must be non-negative, got {tolerance}")
    return float(tolerance)


class Signal:
    """
    Discrete signal: an ordered, fixed-length sequence of (x, y) samples.

    Samples live in two float64 arrays. The length never changes after
    construction; samples are mutated in place with set_sample(). x is
    expected, but not enforced, to be non-decreasing.

    Extrema are cached: find_max()/find_min() scan once and reuse the
    result until called with force_recompute=True. set_sample() does NOT
    invalidate the cache, so callers that mutate samples must force a
    recompute to get fresh extrema.

    Construction modes:
    - Signal(points_count, params): zeroed samples, optional metadata
    - Signal.from_duration(sampling_frequency, duration, ...):
      ceil(duration * sampling_frequency) + 1 zeroed samples
    - Signal.from_signal(source, offset_x, offset_y): translated copy
    - Signal.from_arrays(x, y, params): wraps existing sample data
    """

    def __init__(self, points_count: int, params: SignalParams | None = None):
        """
        Create a signal of zeroed samples.

        Args:
            points_count: Number of samples (must be >= 1).
            params: Optional metadata. Defaults to labels only, no
                frequency/duration information.
        """
        try:
            points_count = operator.index(points_count)
        except TypeError as e:
            raise InvalidParameterError(f"points_count must be an integer, got {points_count!r}") from e
        if points_count < 1:
            raise InvalidParameterError(f"points_count must be >= 1, got {points_count}")

        self._x = np.zeros(points_count, dtype=np.float64)
        self._y = np.zeros(points_count, dtype=np.float64)
        self._params = params if params is not None else SignalParams()
        self._max_value: float | None = None
        self._min_value: float | None = None

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_duration(
        cls,
        sampling_frequency: float,
        duration: float,
        oscillation_frequency: float | None = DEFAULT_FREQ_HZ,
        init_phase: float | None = DEFAULT_INIT_PHASE,
        offset_y: float | None = DEFAULT_OFFSET_Y,
        amplitude: float | None = DEFAULT_AMPLITUDE,
        normalize_factor: float | None = DEFAULT_NORMALIZE_FACTOR,
        x_label: str = DEFAULT_X_LABEL,
        y_label: str = DEFAULT_Y_LABEL,
        graph_label: str = DEFAULT_GRAPH_LABEL,
    ) -> Signal:
        """
        Create a zeroed signal sized by duration and sampling frequency.

        Args:
            sampling_frequency: Sampling frequency in Hz (> 0).
            duration: Duration in seconds (> 0).
            oscillation_frequency: Oscillation frequency in Hz.
            init_phase: Initial phase in radians.
            offset_y: Vertical offset.
            amplitude: Peak amplitude.
            normalize_factor: Factor undone by differentiation.
            x_label: X axis label.
            y_label: Y axis label.
            graph_label: Graph title.

        Returns:
            Signal with ceil(duration * sampling_frequency) + 1 samples.

        Raises:
            InvalidParameterError: If duration or sampling_frequency is not positive.
        """
        if not duration > 0:
            raise InvalidParameterError(f"Duration must be positive, got {duration}")
        if not sampling_frequency > 0:
            raise InvalidParameterError(
                f"Sampling frequency must be positive, got {sampling_frequency}"
            )

        points_count = math.ceil(duration * sampling_frequency) + 1
        params = SignalParams(
            sampling_frequency=float(sampling_frequency),
            duration=float(duration),
            oscillation_frequency=oscillation_frequency,
            init_phase=init_phase,
            offset_y=offset_y,
            amplitude=amplitude,
            normalize_factor=normalize_factor,
            x_label=x_label,
            y_label=y_label,
            graph_label=graph_label,
        )
        return cls(points_count, params)

    @classmethod
    def from_signal(cls, source: Signal | None, offset_x: float = 0.0, offset_y: float = 0.0) -> Signal:
        """
        Copy a signal, translating every sample by (offset_x, offset_y).

        The copy keeps the source metadata except offset_y, which is
        cleared because the offset now lives in the sample data.

        Raises:
            InvalidParameterError: If source is None.
        """
        if source is None:
            raise InvalidParameterError("Source signal is not specified")

        copy = cls(source.points_count, replace(source.params, offset_y=None))
        copy.fill(source.x + offset_x, source.y + offset_y)
        return copy

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, params: SignalParams | None = None) -> Signal:
        """
        Build a signal from existing coordinate arrays (copied).

        Raises:
            InvalidParameterError: If the arrays are not 1-D, empty, or differ in length.
        """
        x_arr = np.array(x, dtype=np.float64)
        y_arr = np.array(y, dtype=np.float64)
        if x_arr.ndim != 1 or y_arr.ndim != 1:
            raise InvalidParameterError(
                f"x and y must be 1-D, got shapes {x_arr.shape} and {y_arr.shape}"
            )
        if x_arr.size != y_arr.size:
            raise InvalidParameterError(
                f"x and y must have the same length, got {x_arr.size} and {y_arr.size}"
            )

        signal = cls(x_arr.size, params)
        signal.fill(x_arr, y_arr)
        return signal

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def points_count(self) -> int:
        """Number of samples."""
        return self._x.size

    @property
    def params(self) -> SignalParams:
        """Signal metadata."""
        return self._params

    @property
    def x(self) -> np.ndarray:
        """Read-only view of the x coordinates."""
        view = self._x.view()
        view.flags.writeable = False
        return view

    @property
    def y(self) -> np.ndarray:
        """Read-only view of the y coordinates."""
        view = self._y.view()
        view.flags.writeable = False
        return view

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self.points_count:
            raise OutOfRangeError(
                f"Index {index} out of range for signal with {self.points_count} points"
            )
        return index

    def set_sample(self, index: int, x: float, y: float) -> None:
        """
        Replace the sample at index.

        Does not touch the cached extrema.

        Raises:
            OutOfRangeError: If index is outside 0..points_count-1.
        """
        index = self._check_index(index)
        self._x[index] = x
        self._y[index] = y

    def get_sample(self, index: int) -> Sample:
        """
        Get the sample at index.

        Raises:
            OutOfRangeError: If index is outside 0..points_count-1.
        """
        index = self._check_index(index)
        return Sample(float(self._x[index]), float(self._y[index]))

    def fill(self, x: ArrayLike, y: ArrayLike) -> None:
        """
        Overwrite every sample from coordinate arrays of length points_count.

        Like set_sample(), this does not touch the cached extrema.

        Raises:
            InvalidParameterError: If either array does not match points_count.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        y_arr = np.asarray(y, dtype=np.float64)
        if x_arr.shape != self._x.shape or y_arr.shape != self._y.shape:
            raise InvalidParameterError(
                f"Expected arrays of shape {self._x.shape}, got {x_arr.shape} and {y_arr.shape}"
            )
        self._x[:] = x_arr
        self._y[:] = y_arr

    def __len__(self) -> int:
        return self.points_count

    def __iter__(self) -> Iterator[Sample]:
        for x, y in zip(self._x.tolist(), self._y.tolist()):
            yield Sample(x, y)

    def __repr__(self) -> str:
        return (
            f"Signal(points_count={self.points_count}, "
            f"graph_label={self._params.graph_label!r})"
        )

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @staticmethod
    def are_close_x(sample1: Sample, sample2: Sample, tolerance: float | None = DEFAULT_INACCURACY) -> bool:
        """Whether two samples have x coordinates within tolerance."""
        return abs(sample1.x - sample2.x) <= _check_tolerance(tolerance)

    @staticmethod
    def are_close_y(sample1: Sample, sample2: Sample, tolerance: float | None = DEFAULT_INACCURACY) -> bool:
        """Whether two samples have y coordinates within tolerance."""
        return abs(sample1.y - sample2.y) <= _check_tolerance(tolerance)

    @staticmethod
    def are_close(sample1: Sample, sample2: Sample, tolerance: float | None = DEFAULT_INACCURACY) -> bool:
        """Whether two samples are within tolerance on both coordinates."""
        return Signal.are_close_x(sample1, sample2, tolerance) and Signal.are_close_y(
            sample1, sample2, tolerance
        )

    def equals(self, other: Signal | None, tolerance: float | None = DEFAULT_INACCURACY) -> bool:
        """
        Approximate compatibility check between two signals.

        Only the points count and the x coordinates of the first and last
        samples are compared. This is an O(1) gate used by the binary
        operators, not an elementwise equality test: signals with equal
        endpoints but different interior sampling pass.

        Raises:
            InvalidParameterError: If other is None or tolerance is negative.
        """
        if other is None:
            raise InvalidParameterError("Signal to compare with is not specified")
        tolerance = _check_tolerance(tolerance)

        if self.points_count != other.points_count:
            return False
        last = self.points_count - 1
        return self.are_close_x(self.get_sample(0), other.get_sample(0), tolerance) and self.are_close_x(
            self.get_sample(last), other.get_sample(last), tolerance
        )

    # ------------------------------------------------------------------
    # Extrema
    # ------------------------------------------------------------------

    def find_max(self, force_recompute: bool = False) -> float:
        """Maximum y value, cached until force_recompute=True."""
        if self._max_value is None or force_recompute:
            self._max_value = float(np.max(self._y))
        return self._max_value

    def find_min(self, force_recompute: bool = False) -> float:
        """Minimum y value, cached until force_recompute=True."""
        if self._min_value is None or force_recompute:
            self._min_value = float(np.min(self._y))
        return self._min_value

    def remove_dc_component(self, tolerance: float | None = DEFAULT_INACCURACY) -> None:
        """
        Center an asymmetric waveform around zero, in place.

        When |min| and |max| differ by more than tolerance, (max + min) / 2
        is subtracted from every y value. Extrema are recomputed before the
        decision and the cache is shifted along with the data.
        """
        tolerance = _check_tolerance(tolerance)
        max_value = self.find_max(force_recompute=True)
        min_value = self.find_min(force_recompute=True)

        if abs(abs(min_value) - abs(max_value)) <= tolerance:
            return

        midpoint = (max_value + min_value) / 2.0
        self._y -= midpoint
        self._max_value = max_value - midpoint
        self._min_value = min_value - midpoint
