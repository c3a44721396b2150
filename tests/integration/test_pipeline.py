"""
Signal Lab - Pipeline Integration Tests

Operators chained the way an analysis script uses them.
"""

import math

import pytest
import numpy as np

from signal_lab import (
    AmplitudeDetector,
    Correlator,
    Differentiator,
    FileWriter,
    FrequencyAnalyzer,
    Generator,
    Integrator,
    Multiplier,
    NoiseGenerator,
    RMS,
    Signal,
    Summator,
)
from signal_lab.dsp import DifferentiationMethod, GenerationMethod, IntegrationMethod


class TestPipeline:
    """End-to-end operator chains."""

    def test_sum_of_tones_spectrum(self):
        """Test two summed tones show up as the two largest spectrum peaks."""
        tones = []
        for frequency, amplitude in ((3.0, 1.0), (7.0, 0.5)):
            generator = Generator(
                sampling_frequency=200.0, oscillation_frequency=frequency, amplitude=amplitude
            )
            generator.execute()
            tones.append(generator.signal)

        summator = Summator(signal1=tones[0], signal2=tones[1])
        summator.execute()

        analyzer = FrequencyAnalyzer(
            signal=summator.signal, from_frequency=1.0, to_frequency=10.0, step_frequency=1.0,
            use_absolute_value=True,
        )
        analyzer.execute()
        spectrum = analyzer.signal

        order = np.argsort(spectrum.y)[::-1]
        assert {spectrum.get_sample(i).x for i in order[:2]} == {3.0, 7.0}
        assert spectrum.get_sample(order[0]).x == 3.0

    def test_amplitude_modulation_power(self):
        """Test RMS of a product of whole-period sines is A1*A2/2."""
        carrier = Generator(sampling_frequency=1000.0, oscillation_frequency=50.0, amplitude=2.0)
        envelope = Generator(sampling_frequency=1000.0, oscillation_frequency=2.0, amplitude=3.0)
        carrier.execute()
        envelope.execute()

        product = Multiplier(signal1=carrier.signal, signal2=envelope.signal)
        product.execute()

        rms = RMS(signal=product.signal)
        rms.execute()

        assert rms.rms_value == pytest.approx(2.0 * 3.0 / 2.0, rel=1e-6)

    def test_noisy_amplitude_and_correlation(self):
        """Test analysis of a noisy tone against its clean reference."""
        generator = Generator(sampling_frequency=5000.0, oscillation_frequency=50.0, amplitude=3.0)
        generator.execute()
        clean = generator.signal

        noise = NoiseGenerator(signal=clean, noise_amplitude=0.3, seed=11)
        noise.execute()

        correlator = Correlator(signal1=noise.signal, signal2=clean)
        correlator.execute()
        assert 0.98 < correlator.correlation_value < 1.0

        detector = AmplitudeDetector(signal=noise.signal)
        detector.execute()
        # Uniform noise adds variance a^2 / 3 to the power
        expected = math.sqrt(2.0 * (3.0 ** 2 / 2.0 + 0.3 ** 2 / 3.0))
        assert detector.amplitude == pytest.approx(expected, rel=0.02)

    def test_cosine_derivative_integral(self):
        """Test integrating the derivative of a cosine over a quarter period."""
        generator = Generator(
            sampling_frequency=2000.0, duration=0.25, oscillation_frequency=1.0,
            method=GenerationMethod.COSINE,
        )
        generator.execute()

        diff = Differentiator(signal=generator.signal, method=DifferentiationMethod.CENTRAL_AND_EDGES)
        diff.execute()

        # Normalized derivative of cos(2*pi*t) is -sin(2*pi*t)
        rescaled = Signal.from_arrays(generator.signal.x, diff.signal.y, diff.signal.params)
        integrator = Integrator(signal=rescaled, method=IntegrationMethod.SIMPSON)
        integrator.execute()

        assert integrator.integral == pytest.approx(-1.0 / (2.0 * np.pi), rel=1e-3)

    def test_write_spectrum(self, tmp_path):
        """Test a spectrum can be written and read back."""
        generator = Generator(sampling_frequency=100.0, oscillation_frequency=2.0)
        generator.execute()
        analyzer = FrequencyAnalyzer(signal=generator.signal, to_frequency=4.0, step_frequency=1.0)
        analyzer.execute()

        path = tmp_path / "spectrum.txt"
        FileWriter(signal=analyzer.signal, file_path=path).execute()

        data = np.loadtxt(path)
        np.testing.assert_array_equal(data[:, 0], [0.0, 1.0, 2.0, 3.0])
        assert data[2, 1] == pytest.approx(1.0)
