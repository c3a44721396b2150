"""
Signal Lab - Output Module

Plain-text serialization and gnuplot visualization of finished signals.
"""

from signal_lab.output.viewer import GnuplotViewer, GnuplotViewerParams
from signal_lab.output.writer import FileWriter, FileWriterParams

__all__ = [
    "FileWriter",
    "FileWriterParams",
    "GnuplotViewer",
    "GnuplotViewerParams",
]
