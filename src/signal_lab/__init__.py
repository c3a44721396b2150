"""
Signal Lab

A small toolkit for synthesizing one-dimensional discrete signals and
analyzing them: waveform generation, noise injection, pointwise
arithmetic, numerical calculus, RMS and amplitude estimation,
correlation and a brute-force correlation spectrum.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Signal Lab Team"

from signal_lab.config.schema import SignalLabConfig
from signal_lab.core import Sample, Signal, SignalParams, SignalProcessingError
from signal_lab.dsp import (
    Differentiator,
    Generator,
    Integrator,
    Multiplier,
    NoiseGenerator,
    Summator,
)
from signal_lab.analysis import RMS, AmplitudeDetector, Correlator, FrequencyAnalyzer
from signal_lab.output import FileWriter, GnuplotViewer

__all__ = [
    "__version__",
    "SignalLabConfig",
    "Sample",
    "Signal",
    "SignalParams",
    "SignalProcessingError",
    "Generator",
    "NoiseGenerator",
    "Summator",
    "Multiplier",
    "Differentiator",
    "Integrator",
    "RMS",
    "AmplitudeDetector",
    "Correlator",
    "FrequencyAnalyzer",
    "FileWriter",
    "GnuplotViewer",
]
