"""
Signal Lab - DSP Module

Signal generation, noise injection and pointwise/calculus operators.
"""

from signal_lab.dsp.arithmetic import Multiplier, MultiplierParams, Summator, SummatorParams
from signal_lab.dsp.differentiator import (
    DifferentiationMethod,
    Differentiator,
    DifferentiatorParams,
)
from signal_lab.dsp.generator import GenerationMethod, Generator, GeneratorParams
from signal_lab.dsp.integrator import IntegrationMethod, Integrator, IntegratorParams
from signal_lab.dsp.noise import NoiseGenerator, NoiseGeneratorParams, NoiseType

__all__ = [
    "Generator",
    "GeneratorParams",
    "GenerationMethod",
    "NoiseGenerator",
    "NoiseGeneratorParams",
    "NoiseType",
    "Summator",
    "SummatorParams",
    "Multiplier",
    "MultiplierParams",
    "Differentiator",
    "DifferentiatorParams",
    "DifferentiationMethod",
    "Integrator",
    "IntegratorParams",
    "IntegrationMethod",
]
