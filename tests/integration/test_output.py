"""
Signal Lab - Output Integration Tests

Writer round trips through real files and gnuplot launches with the
process call stubbed out.
"""

import subprocess

import pytest
import numpy as np

from signal_lab.core.exceptions import (
    InvalidParameterError,
    SignalFileNotFoundError,
    SignalIOError,
)
from signal_lab.output.viewer import GnuplotViewer
from signal_lab.output.writer import FileWriter


class TestFileWriter:
    """Tests for FileWriter class."""

    def test_write_two_columns(self, sine_signal, tmp_path):
        """Test one tab-separated line per sample at full precision."""
        path = tmp_path / "sine.txt"

        writer = FileWriter(signal=sine_signal, file_path=path)
        writer.execute()

        lines = path.read_text().splitlines()
        assert len(lines) == sine_signal.points_count
        assert lines[0] == "0.0\t0.0"
        assert all(line.count("\t") == 1 for line in lines)

        data = np.loadtxt(path)
        np.testing.assert_array_equal(data[:, 0], sine_signal.x)
        np.testing.assert_array_equal(data[:, 1], sine_signal.y)

    def test_rewrite_enabled(self, sine_signal, tmp_path):
        """Test an existing file is replaced by default."""
        path = tmp_path / "out.txt"
        path.write_text("old contents\n")

        FileWriter(signal=sine_signal, file_path=path).execute()

        assert "old contents" not in path.read_text()

    def test_rewrite_disabled(self, sine_signal, tmp_path):
        """Test a non-empty file is kept when rewrite is off."""
        path = tmp_path / "out.txt"
        path.write_text("keep me\n")
        writer = FileWriter(signal=sine_signal, file_path=path, rewrite=False)

        with pytest.raises(SignalIOError):
            writer.execute()
        assert path.read_text() == "keep me\n"
        assert not writer.is_executed

    def test_rewrite_disabled_empty_file(self, sine_signal, tmp_path):
        """Test an empty file may be written even with rewrite off."""
        path = tmp_path / "empty.txt"
        path.touch()

        FileWriter(signal=sine_signal, file_path=path, rewrite=False).execute()

        assert path.stat().st_size > 0

    def test_unwritable_path(self, sine_signal, tmp_path):
        """Test a path in a missing directory raises SignalIOError."""
        writer = FileWriter(signal=sine_signal, file_path=tmp_path / "missing" / "out.txt")

        with pytest.raises(SignalIOError):
            writer.execute()

    def test_io_error_is_oserror(self, sine_signal, tmp_path):
        """Test writer failures can be caught as OSError."""
        with pytest.raises(OSError):
            FileWriter(signal=sine_signal, file_path=tmp_path / "no" / "such" / "f.txt").execute()

    def test_missing_signal(self, tmp_path):
        """Test writing without a signal fails."""
        with pytest.raises(InvalidParameterError):
            FileWriter(file_path=tmp_path / "x.txt").execute()


@pytest.fixture
def data_files(sine_signal, tmp_path):
    """Two written data files."""
    paths = []
    for name in ("a.txt", "b.txt"):
        path = tmp_path / name
        FileWriter(signal=sine_signal, file_path=path).execute()
        paths.append(path)
    return paths


@pytest.fixture
def fake_run(monkeypatch):
    """Record subprocess.run calls instead of launching gnuplot."""
    calls = []

    def _run(command, check=False, **kwargs):
        calls.append(command)
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(subprocess, "run", _run)
    return calls


class TestGnuplotViewer:
    """Tests for GnuplotViewer class."""

    def test_command(self, data_files, fake_run):
        """Test gnuplot is launched with one plot clause per file."""
        viewer = GnuplotViewer(
            file_paths=tuple(data_files),
            graph_labels=("Signal", "Noisy Signal"),
            x_label="Time",
            y_label="Amplitude",
            gnuplot_path="/usr/bin/gnuplot",
        )
        viewer.execute()

        assert len(fake_run) == 1
        command = fake_run[0]
        assert command[:3] == ["/usr/bin/gnuplot", "-persist", "-e"]
        script = command[3]
        assert "set xlabel 'Time'" in script
        assert "set ylabel 'Amplitude'" in script
        assert script.count("using 1:2 with lines") == 2
        assert "title 'Noisy Signal'" in script
        assert viewer.is_executed

    def test_single_path_default_label(self, data_files, fake_run):
        """Test a bare path is accepted and labelled with the default."""
        viewer = GnuplotViewer(file_paths=data_files[0])
        viewer.execute()

        assert viewer.graph_labels == ("Graph",)
        assert "title 'Graph'" in fake_run[0][3]

    def test_quotes_escaped(self, data_files):
        """Test single quotes in labels are doubled for gnuplot."""
        viewer = GnuplotViewer(file_paths=(data_files[0],), graph_labels=("it's",))

        assert "title 'it''s'" in viewer.build_script()

    def test_label_count_mismatch(self, data_files):
        """Test labels must match files one to one."""
        with pytest.raises(InvalidParameterError):
            GnuplotViewer(file_paths=tuple(data_files), graph_labels=("only one",))

    def test_no_files(self):
        """Test at least one file is required."""
        with pytest.raises(InvalidParameterError):
            GnuplotViewer(file_paths=())

    def test_missing_file(self, tmp_path, fake_run):
        """Test a missing data file is reported before launching."""
        viewer = GnuplotViewer(file_paths=(tmp_path / "nope.txt",))

        with pytest.raises(SignalFileNotFoundError):
            viewer.execute()
        assert fake_run == []

    def test_missing_file_is_filenotfounderror(self, tmp_path, fake_run):
        """Test the error can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            GnuplotViewer(file_paths=(tmp_path / "nope.txt",)).execute()

    def test_gnuplot_not_installed(self, data_files, monkeypatch):
        """Test a missing executable surfaces as SignalIOError."""
        def _run(command, check=False, **kwargs):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(subprocess, "run", _run)
        viewer = GnuplotViewer(file_paths=(data_files[0],), gnuplot_path="no-such-gnuplot")

        with pytest.raises(SignalIOError):
            viewer.execute()

    def test_gnuplot_failure(self, data_files, monkeypatch):
        """Test a non-zero exit surfaces as SignalIOError."""
        def _run(command, check=False, **kwargs):
            raise subprocess.CalledProcessError(1, command)

        monkeypatch.setattr(subprocess, "run", _run)

        with pytest.raises(SignalIOError):
            GnuplotViewer(file_paths=(data_files[0],)).execute()

    def test_not_executed_flag(self, data_files):
        """Test a fresh viewer reports not executed."""
        viewer = GnuplotViewer(file_paths=(data_files[0],))

        assert not viewer.is_executed
