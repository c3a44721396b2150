"""
Signal Lab - Noise Injection Tests
"""

import pytest
import numpy as np

from signal_lab.core.exceptions import InvalidParameterError, NotExecutedError, UnsupportedOperationError
from signal_lab.dsp.noise import NoiseGenerator, NoiseType


class TestNoiseGenerator:
    """Tests for NoiseGenerator class."""

    def test_noise_within_bounds(self, sine_signal):
        """Test every perturbation lies in [-a, a] and x is unchanged."""
        noise = NoiseGenerator(signal=sine_signal, noise_amplitude=0.25, seed=1)
        noise.execute()
        noisy = noise.signal

        delta = noisy.y - sine_signal.y
        assert np.all(np.abs(delta) <= 0.25)
        assert np.std(delta) > 0.0
        np.testing.assert_array_equal(noisy.x, sine_signal.x)

    def test_source_not_mutated(self, sine_signal):
        """Test the input signal is borrowed read-only."""
        before = sine_signal.y.copy()

        NoiseGenerator(signal=sine_signal, seed=3).execute()

        np.testing.assert_array_equal(sine_signal.y, before)

    def test_seed_reproducible(self, sine_signal):
        """Test the same seed produces the same noise."""
        a = NoiseGenerator(signal=sine_signal, seed=42)
        b = NoiseGenerator(signal=sine_signal, seed=42)
        a.execute()
        b.execute()

        np.testing.assert_array_equal(a.signal.y, b.signal.y)

    def test_zero_amplitude(self, sine_signal):
        """Test zero noise amplitude leaves y unchanged."""
        noise = NoiseGenerator(signal=sine_signal, noise_amplitude=0.0)
        noise.execute()

        np.testing.assert_array_equal(noise.signal.y, sine_signal.y)

    def test_metadata_carried_over(self, sine_signal):
        """Test source metadata survives with the noise graph label."""
        noise = NoiseGenerator(signal=sine_signal)
        noise.execute()

        assert noise.signal.params.duration == sine_signal.params.duration
        assert noise.signal.params.normalize_factor == sine_signal.params.normalize_factor
        assert noise.signal.params.graph_label == "Noisy Signal"

    @pytest.mark.parametrize("noise_type", [NoiseType.PINK, NoiseType.BROWN])
    def test_unsupported_noise_type(self, sine_signal, noise_type):
        """Test coloured noise is not implemented."""
        noise = NoiseGenerator(signal=sine_signal, noise_type=noise_type)

        with pytest.raises(UnsupportedOperationError):
            noise.execute()
        assert not noise.is_executed
        with pytest.raises(NotExecutedError):
            noise.signal

    def test_missing_signal(self):
        """Test execution without a source signal fails."""
        with pytest.raises(InvalidParameterError):
            NoiseGenerator().execute()

    def test_negative_amplitude(self, sine_signal):
        """Test negative noise amplitude is rejected."""
        with pytest.raises(InvalidParameterError):
            NoiseGenerator(signal=sine_signal, noise_amplitude=-1.0)

    def test_negative_seed(self, sine_signal):
        """Test a negative seed is rejected before any noise is drawn."""
        with pytest.raises(InvalidParameterError):
            NoiseGenerator(signal=sine_signal, seed=-1)
