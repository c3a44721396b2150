"""
Centralized Configuration Defaults

Contains all default values used throughout the toolkit. Operator
parameter records and the configuration schema both import these
constants instead of hardcoding values.

Usage:
    from signal_lab.config.defaults import (
        DEFAULT_INACCURACY,
        DEFAULT_CLAMP_VALUE,
    )
"""

import math

# =========================================================================
# Signal Parameters
# =========================================================================
DEFAULT_SAMPLING_FREQ_HZ = 100.0
DEFAULT_DURATION_SECONDS = 1.0
DEFAULT_FREQ_HZ = 1.0
DEFAULT_INIT_PHASE = 0.0  # radians
DEFAULT_OFFSET_Y = 0.0
DEFAULT_AMPLITUDE = 1.0

# =========================================================================
# Graph Labels
# =========================================================================
DEFAULT_X_LABEL = "X Axis"
DEFAULT_Y_LABEL = "Y Axis"
DEFAULT_GRAPH_LABEL = "Graph"

GENERATOR_X_LABEL = "Time"
GENERATOR_Y_LABEL = "Amplitude"
GENERATOR_GRAPH_LABEL = "Signal"
NOISE_GRAPH_LABEL = "Noisy Signal"
SUMMATION_GRAPH_LABEL = "Summation"
MULTIPLICATION_GRAPH_LABEL = "Multiplication"
DIFFERENTIATION_GRAPH_LABEL = "Differentiation"
FREQUENCY_ANALYSIS_GRAPH_LABEL = "Fourier Transform"

# =========================================================================
# Numerical Tolerances & Factors
# =========================================================================
DEFAULT_INACCURACY = 1e-9
DEFAULT_NORMALIZE_FACTOR = 1.0
# Generated waveforms are parameterized by angular frequency
WAVEFORM_NORMALIZE_FACTOR = 2.0 * math.pi

# =========================================================================
# Generator / Noise
# =========================================================================
DEFAULT_CLAMP_VALUE = 10.0
DEFAULT_NOISE_AMPLITUDE = 1.0

# =========================================================================
# Processing
# =========================================================================
DEFAULT_DIFF_NORMALIZATION = True
DEFAULT_CORRELATION_NORMALIZATION = True
DEFAULT_USE_ABSOLUTE_VALUE = False

# Frequency sweep used when nothing else is configured
DEFAULT_FROM_FREQUENCY_HZ = 0.0
DEFAULT_TO_FREQUENCY_HZ = 10.0
DEFAULT_STEP_FREQUENCY_HZ = 0.5

# =========================================================================
# Output
# =========================================================================
DEFAULT_SIGNAL_FILEPATH = "signal.txt"
DEFAULT_GNUPLOT_PATH = "gnuplot"
DEFAULT_REWRITE_ENABLED = True

# =========================================================================
# Logging
# =========================================================================
DEFAULT_LOG_LEVEL = "WARNING"
