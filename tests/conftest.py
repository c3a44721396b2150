"""
Signal Lab - Test Configuration

Pytest fixtures and configuration for testing.
"""

import logging

import pytest
import numpy as np

from signal_lab.core import logging_config
from signal_lab.core.signal import Signal, SignalParams
from signal_lab.dsp.generator import GenerationMethod, Generator


@pytest.fixture
def sampling_frequency():
    """Default sampling frequency for tests."""
    return 1000.0


@pytest.fixture
def generate():
    """Generate a waveform signal with the Generator."""
    def _generate(
        sampling_frequency=1000.0,
        duration=1.0,
        oscillation_frequency=5.0,
        amplitude=1.0,
        init_phase=0.0,
        offset_y=0.0,
        method=GenerationMethod.SINE,
        **kwargs,
    ):
        generator = Generator(
            sampling_frequency=sampling_frequency,
            duration=duration,
            oscillation_frequency=oscillation_frequency,
            amplitude=amplitude,
            init_phase=init_phase,
            offset_y=offset_y,
            method=method,
            **kwargs,
        )
        generator.execute()
        return generator.signal
    return _generate


@pytest.fixture
def sine_signal(generate):
    """Unit-amplitude 5 Hz sine, 1 s at 1 kHz (1001 samples)."""
    return generate()


@pytest.fixture
def make_signal():
    """Build a signal from plain coordinate lists."""
    def _make(x, y, sampling_frequency=None, duration=None, normalize_factor=None):
        params = SignalParams(
            sampling_frequency=sampling_frequency,
            duration=duration,
            normalize_factor=normalize_factor,
        )
        return Signal.from_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float), params)
    return _make


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    initialized = logging_config._initialized
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging_config._initialized = initialized


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
