"""
Signal Lab - Gnuplot Viewer

Plots one or more two-column data files with an external gnuplot process.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, replace
from pathlib import Path

from signal_lab.config.defaults import (
    DEFAULT_GNUPLOT_PATH,
    DEFAULT_GRAPH_LABEL,
    DEFAULT_X_LABEL,
    DEFAULT_Y_LABEL,
)
from signal_lab.core.exceptions import (
    InvalidParameterError,
    SignalFileNotFoundError,
    SignalIOError,
)
from signal_lab.core.logging_config import get_logger
from signal_lab.core.operator import SignalOperator

logger = get_logger(__name__)


@dataclass(frozen=True)
class GnuplotViewerParams:
    """Parameters for plotting data files."""

    file_paths: tuple[str | Path, ...] = ()
    graph_labels: tuple[str, ...] | None = None  # None: one default label per file
    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL
    gnuplot_path: str = DEFAULT_GNUPLOT_PATH


def _quote(text: str) -> str:
    """Quote a string for a gnuplot single-quoted literal."""
    return "'" + str(text).replace("'", "''") + "'"


class GnuplotViewer(SignalOperator[GnuplotViewerParams]):
    """
    Gnuplot launcher.

    Builds a command of the form

        gnuplot -persist -e "set xlabel '...'; set ylabel '...';
                             plot 'a.txt' using 1:2 with lines title '...', ..."

    and runs it. Data files are produced by FileWriter.
    """

    params_type = GnuplotViewerParams

    def _validate_params(self) -> None:
        p = self._params
        if isinstance(p.file_paths, (str, Path)):
            # A bare path would otherwise be split into characters
            self._params = p = replace(p, file_paths=(p.file_paths,))
        if not p.file_paths:
            raise InvalidParameterError("At least one data file is required")
        if p.graph_labels is not None and len(p.graph_labels) != len(p.file_paths):
            raise InvalidParameterError(
                f"Got {len(p.file_paths)} files but {len(p.graph_labels)} graph labels"
            )

    @property
    def graph_labels(self) -> tuple[str, ...]:
        """Graph label for every file."""
        p = self._params
        if p.graph_labels is None:
            return (DEFAULT_GRAPH_LABEL,) * len(p.file_paths)
        return tuple(p.graph_labels)

    def build_script(self) -> str:
        """Gnuplot script passed with -e."""
        p = self._params
        plots = ", ".join(
            f"{_quote(Path(path).as_posix())} using 1:2 with lines title {_quote(label)}"
            for path, label in zip(p.file_paths, self.graph_labels)
        )
        return f"set xlabel {_quote(p.x_label)}; set ylabel {_quote(p.y_label)}; plot {plots}"

    def build_command(self) -> list[str]:
        """Full argv for the gnuplot process."""
        p = self._params
        return [p.gnuplot_path, "-persist", "-e", self.build_script()]

    def _execute(self) -> None:
        for path in self._params.file_paths:
            if not Path(path).is_file():
                raise SignalFileNotFoundError(f"Can't find file: {path}")

        command = self.build_command()
        logger.debug(f"Launching gnuplot: {command}")
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError as e:
            raise SignalIOError(f"Gnuplot executable not found: {self._params.gnuplot_path}") from e
        except subprocess.CalledProcessError as e:
            raise SignalIOError(f"Gnuplot exited with status {e.returncode}") from e
