"""
Signal Lab - Analysis Module

Level, correlation and frequency estimators composed from the DSP operators.
"""

from signal_lab.analysis.correlator import Correlator, CorrelatorParams
from signal_lab.analysis.frequency import FrequencyAnalyzer, FrequencyAnalyzerParams
from signal_lab.analysis.rms import RMS, AmplitudeDetector, AmplitudeDetectorParams, RMSParams

__all__ = [
    "RMS",
    "RMSParams",
    "AmplitudeDetector",
    "AmplitudeDetectorParams",
    "Correlator",
    "CorrelatorParams",
    "FrequencyAnalyzer",
    "FrequencyAnalyzerParams",
]
