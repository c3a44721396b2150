#!/usr/bin/env python3
"""
Signal Lab - Command Line Entry Point

Allows running: python -m signal_lab

    signal-lab generate --waveform sine --frequency 5 --output sine.txt
    signal-lab amplitude --preset amplitude_60hz
    signal-lab --log-level DEBUG spectrum --from 0 --to 10 --step 0.5 --absolute
"""

from __future__ import annotations

import argparse
import sys

import numpy as np
import yaml
from pydantic import ValidationError

from signal_lab import __version__
from signal_lab.analysis import AmplitudeDetector, FrequencyAnalyzer
from signal_lab.config import PRESETS, SignalLabConfig
from signal_lab.core.exceptions import SignalProcessingError
from signal_lab.core.logging_config import get_logger, setup_logging
from signal_lab.core.signal import Signal
from signal_lab.dsp import (
    DifferentiationMethod,
    Differentiator,
    GenerationMethod,
    Generator,
    IntegrationMethod,
    NoiseGenerator,
    NoiseType,
)
from signal_lab.output import FileWriter, GnuplotViewer

logger = get_logger(__name__)


def load_config(args: argparse.Namespace) -> SignalLabConfig:
    """
    Resolve the effective configuration for a CLI invocation.

    A YAML file given with --config wins over --preset; individual flags
    override either. The merged mapping is validated again so that flag
    values go through the same checks as file values.
    """
    if args.config:
        config = SignalLabConfig.from_yaml(args.config)
    elif args.preset:
        config = PRESETS[args.preset]
    else:
        config = SignalLabConfig()

    data = config.model_dump()
    if args.log_level:
        data["logging"]["level"] = args.log_level
    if args.waveform:
        data["generator"]["waveform"] = args.waveform
    if args.sampling_frequency is not None:
        data["signal"]["sampling_frequency_hz"] = args.sampling_frequency
    if args.duration is not None:
        data["signal"]["duration_s"] = args.duration
    if args.frequency is not None:
        data["signal"]["oscillation_frequency_hz"] = args.frequency
    if args.amplitude is not None:
        data["signal"]["amplitude"] = args.amplitude
    if args.noise is not None:
        data["noise"]["enabled"] = args.noise > 0
        data["noise"]["noise_amplitude"] = args.noise
    if args.seed is not None:
        data["noise"]["seed"] = args.seed
    if args.output:
        data["output"]["output_path"] = args.output
    if args.plot:
        data["output"]["plot"] = True
    if args.differentiate:
        data["analysis"]["differentiate"] = True

    if args.command == "spectrum":
        if args.from_frequency is not None:
            data["spectrum"]["from_frequency_hz"] = args.from_frequency
        if args.to_frequency is not None:
            data["spectrum"]["to_frequency_hz"] = args.to_frequency
        if args.step_frequency is not None:
            data["spectrum"]["step_frequency_hz"] = args.step_frequency
        if args.absolute:
            data["spectrum"]["use_absolute_value"] = True

    return SignalLabConfig(**data)


def build_signal(config: SignalLabConfig) -> Signal:
    """Generate the configured waveform, with noise when enabled."""
    sig = config.signal
    generator = Generator(
        sampling_frequency=sig.sampling_frequency_hz,
        duration=sig.duration_s,
        oscillation_frequency=sig.oscillation_frequency_hz,
        init_phase=sig.init_phase_rad,
        offset_y=sig.offset_y,
        amplitude=sig.amplitude,
        method=GenerationMethod(config.generator.waveform),
        clamp_value=config.generator.clamp_value,
    )
    generator.execute()
    signal = generator.signal

    if config.noise.enabled:
        noise = NoiseGenerator(
            signal=signal,
            noise_amplitude=config.noise.noise_amplitude,
            noise_type=NoiseType(config.noise.noise_type),
            seed=config.noise.seed,
        )
        noise.execute()
        signal = noise.signal

    logger.info(
        f"Generated {config.generator.waveform} signal: {signal.points_count} samples, "
        f"{sig.oscillation_frequency_hz} Hz, noise={'on' if config.noise.enabled else 'off'}"
    )
    return signal


def write_and_plot(signal: Signal, config: SignalLabConfig) -> None:
    """Write the signal to the configured file and optionally plot it."""
    out = config.output
    writer = FileWriter(signal=signal, file_path=out.output_path, rewrite=out.rewrite)
    writer.execute()
    logger.info(f"Wrote {signal.points_count} samples to {writer.file_path}")

    if out.plot:
        viewer = GnuplotViewer(
            file_paths=(out.output_path,),
            graph_labels=(signal.params.graph_label,),
            x_label=signal.params.x_label,
            y_label=signal.params.y_label,
            gnuplot_path=out.gnuplot_path,
        )
        viewer.execute()


def cmd_generate(config: SignalLabConfig) -> int:
    signal = build_signal(config)

    if config.analysis.differentiate:
        differentiator = Differentiator(
            signal=signal,
            perform_normalization=config.analysis.perform_normalization,
            method=DifferentiationMethod(config.analysis.differentiation_method),
        )
        differentiator.execute()
        signal = differentiator.signal

    write_and_plot(signal, config)
    print(f"Wrote {signal.points_count} samples to {config.output.output_path}")
    return 0


def cmd_amplitude(config: SignalLabConfig) -> int:
    signal = build_signal(config)

    detector = AmplitudeDetector(
        signal=signal,
        inaccuracy=config.analysis.inaccuracy,
        method=IntegrationMethod(config.analysis.integration_method),
    )
    detector.execute()

    print(f"Amplitude: {detector.amplitude:.6f}")
    print(f"RMS:       {detector.rms_value:.6f}")
    return 0


def cmd_spectrum(config: SignalLabConfig) -> int:
    signal = build_signal(config)

    sweep = config.spectrum
    analyzer = FrequencyAnalyzer(
        signal=signal,
        from_frequency=sweep.from_frequency_hz,
        to_frequency=sweep.to_frequency_hz,
        step_frequency=sweep.step_frequency_hz,
        use_absolute_value=sweep.use_absolute_value,
        inaccuracy=config.analysis.inaccuracy,
    )
    analyzer.execute()
    spectrum = analyzer.signal

    write_and_plot(spectrum, config)

    peak = int(np.argmax(np.abs(spectrum.y)))
    peak_sample = spectrum.get_sample(peak)
    print(f"Peak: {peak_sample.x:g} Hz (correlation {peak_sample.y:.6f})")
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "amplitude": cmd_amplitude,
    "spectrum": cmd_spectrum,
}


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, help="YAML configuration file")
    common.add_argument(
        "--waveform", choices=[m.value for m in GenerationMethod],
        help="Waveform shape (default: sine)"
    )
    common.add_argument(
        "--sampling-frequency", type=float, dest="sampling_frequency",
        help="Sampling frequency in Hz (default: 100)"
    )
    common.add_argument("--duration", type=float, help="Duration in seconds (default: 1)")
    common.add_argument("--frequency", type=float, help="Oscillation frequency in Hz (default: 1)")
    common.add_argument("--amplitude", type=float, help="Peak amplitude (default: 1)")
    common.add_argument("--noise", type=float, help="White noise amplitude (default: off)")
    common.add_argument("--seed", type=int, help="Noise random seed")
    common.add_argument("--output", type=str, help="Output file (default: signal.txt)")
    common.add_argument("--plot", action="store_true", help="Plot the output with gnuplot")
    common.add_argument(
        "--differentiate", action="store_true",
        help="Write the derivative instead of the waveform (generate only)"
    )

    parser = argparse.ArgumentParser(
        prog="signal-lab",
        description="Signal Lab - waveform generation and analysis"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: from configuration)"
    )
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Named configuration preset")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        "generate", parents=[common], help="Generate a waveform and write it to a file"
    )
    subparsers.add_parser(
        "amplitude", parents=[common], help="Generate a waveform and detect its amplitude"
    )
    spectrum = subparsers.add_parser(
        "spectrum", parents=[common], help="Generate a waveform and sweep its correlation spectrum"
    )
    spectrum.add_argument("--from", type=float, dest="from_frequency", help="Start frequency in Hz")
    spectrum.add_argument("--to", type=float, dest="to_frequency", help="End frequency in Hz (exclusive)")
    spectrum.add_argument("--step", type=float, dest="step_frequency", help="Frequency step in Hz")
    spectrum.add_argument("--absolute", action="store_true", help="Report |correlation|")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (ValidationError, yaml.YAMLError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(
        level=config.logging.level,
        log_file=config.logging.log_file,
        structured=config.logging.structured,
        force=True,
    )

    try:
        return COMMANDS[args.command](config)
    except SignalProcessingError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
