"""
Signal Lab - Configuration Schema

Pydantic models for all configuration options with validation rules.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from signal_lab.config import defaults


class SignalConfig(BaseModel):
    """Waveform and sampling configuration."""

    sampling_frequency_hz: float = Field(default=defaults.DEFAULT_SAMPLING_FREQ_HZ, gt=0)
    duration_s: float = Field(default=defaults.DEFAULT_DURATION_SECONDS, gt=0)
    oscillation_frequency_hz: float = Field(default=defaults.DEFAULT_FREQ_HZ, ge=0)
    init_phase_rad: float = defaults.DEFAULT_INIT_PHASE
    offset_y: float = defaults.DEFAULT_OFFSET_Y
    amplitude: float = defaults.DEFAULT_AMPLITUDE


class GeneratorConfig(BaseModel):
    """Waveform generator configuration."""

    waveform: Literal["sine", "cosine", "tangent", "cotangent"] = "sine"
    clamp_value: float = Field(default=defaults.DEFAULT_CLAMP_VALUE, gt=0)


class NoiseConfig(BaseModel):
    """Noise injection configuration."""

    enabled: bool = False
    noise_amplitude: float = Field(default=defaults.DEFAULT_NOISE_AMPLITUDE, ge=0)
    noise_type: Literal["white", "pink", "brown"] = "white"
    seed: int | None = Field(default=None, ge=0)


class AnalysisConfig(BaseModel):
    """Numerical processing configuration."""

    inaccuracy: float = Field(default=defaults.DEFAULT_INACCURACY, ge=0)
    integration_method: Literal["trapezoidal", "simpson", "boole"] = "trapezoidal"
    differentiation_method: Literal["central_only", "central_and_edges"] = "central_and_edges"
    differentiate: bool = False
    perform_normalization: bool = defaults.DEFAULT_DIFF_NORMALIZATION


class SpectrumConfig(BaseModel):
    """Frequency sweep configuration."""

    from_frequency_hz: float = defaults.DEFAULT_FROM_FREQUENCY_HZ
    to_frequency_hz: float = defaults.DEFAULT_TO_FREQUENCY_HZ
    step_frequency_hz: float = Field(default=defaults.DEFAULT_STEP_FREQUENCY_HZ, gt=0)
    use_absolute_value: bool = defaults.DEFAULT_USE_ABSOLUTE_VALUE

    @field_validator("to_frequency_hz")
    @classmethod
    def range_increasing(cls, v, info):
        if "from_frequency_hz" in info.data and v <= info.data["from_frequency_hz"]:
            raise ValueError("to_frequency_hz must be > from_frequency_hz")
        return v


class OutputConfig(BaseModel):
    """File output and plotting configuration."""

    output_path: str = defaults.DEFAULT_SIGNAL_FILEPATH
    rewrite: bool = defaults.DEFAULT_REWRITE_ENABLED
    gnuplot_path: str = defaults.DEFAULT_GNUPLOT_PATH
    plot: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = defaults.DEFAULT_LOG_LEVEL
    log_file: str | None = None
    structured: bool = False


class SignalLabConfig(BaseModel):
    """Root configuration for Signal Lab."""

    signal: SignalConfig = Field(default_factory=SignalConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    spectrum: SpectrumConfig = Field(default_factory=SpectrumConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "SignalLabConfig":
        """Load configuration from YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def to_yaml(self, path: str) -> None:
        """Save configuration to YAML file."""
        import yaml

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


# Preset configurations
PRESET_AMPLITUDE_60HZ = SignalLabConfig(
    signal=SignalConfig(
        sampling_frequency_hz=1000.0, duration_s=1.0, oscillation_frequency_hz=60.0, amplitude=3.0
    ),
)

PRESET_NOISY_SPECTRUM = SignalLabConfig(
    signal=SignalConfig(
        sampling_frequency_hz=10000.0, duration_s=1.0, oscillation_frequency_hz=524.0, amplitude=3.0
    ),
    noise=NoiseConfig(enabled=True, noise_amplitude=1.0),
    spectrum=SpectrumConfig(from_frequency_hz=0.0, to_frequency_hz=1000.0, step_frequency_hz=0.25),
)

PRESET_LOW_FREQUENCY_SWEEP = SignalLabConfig(
    signal=SignalConfig(sampling_frequency_hz=100.0, duration_s=1.0, oscillation_frequency_hz=5.0),
    spectrum=SpectrumConfig(from_frequency_hz=0.0, to_frequency_hz=10.0, step_frequency_hz=0.5),
)

PRESETS = {
    "amplitude_60hz": PRESET_AMPLITUDE_60HZ,
    "noisy_spectrum": PRESET_NOISY_SPECTRUM,
    "low_frequency_sweep": PRESET_LOW_FREQUENCY_SWEEP,
}
