"""
Signal Lab - Text File Writer

Serializes a signal as two tab-separated columns, one sample per line.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from signal_lab.config.defaults import DEFAULT_REWRITE_ENABLED, DEFAULT_SIGNAL_FILEPATH
from signal_lab.core.exceptions import SignalIOError
from signal_lab.core.logging_config import get_logger
from signal_lab.core.operator import SignalOperator
from signal_lab.core.signal import Signal

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileWriterParams:
    """Parameters for writing a signal to disk."""

    signal: Signal | None = None
    file_path: str | Path = DEFAULT_SIGNAL_FILEPATH
    rewrite: bool = DEFAULT_REWRITE_ENABLED


class FileWriter(SignalOperator[FileWriterParams]):
    """
    Plain-text signal writer.

    Each line is "{x}\\t{y}\\n" with full float precision. With
    rewrite=False an existing non-empty file is left untouched and
    SignalIOError is raised.
    """

    params_type = FileWriterParams

    @property
    def file_path(self) -> Path:
        """Destination path."""
        return Path(self._params.file_path)

    def _execute(self) -> None:
        p = self._params
        signal = self._require_signal(p.signal)
        path = self.file_path

        if not p.rewrite and path.is_file() and path.stat().st_size > 0:
            raise SignalIOError(f"Refusing to overwrite non-empty file: {path}")

        try:
            with path.open("w", encoding="utf-8") as f:
                f.writelines(f"{x!r}\t{y!r}\n" for x, y in zip(signal.x.tolist(), signal.y.tolist()))
        except OSError as e:
            raise SignalIOError(f"Can't open file: {path}: {e}") from e

        logger.debug(f"Wrote {signal.points_count} samples to {path}")
