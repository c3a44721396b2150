"""
Signal Lab - Configuration Module
"""

from signal_lab.config.schema import (
    PRESETS,
    AnalysisConfig,
    GeneratorConfig,
    LoggingConfig,
    NoiseConfig,
    OutputConfig,
    SignalConfig,
    SignalLabConfig,
    SpectrumConfig,
)

__all__ = [
    "SignalLabConfig",
    "SignalConfig",
    "GeneratorConfig",
    "NoiseConfig",
    "AnalysisConfig",
    "SpectrumConfig",
    "OutputConfig",
    "LoggingConfig",
    "PRESETS",
]
