"""
Exporters module for evt-tracer.

Supported exporters:
- LoggingExporter: one record per event on a standard library logger
- ConsoleExporter: Console output (for debugging)
- FileExporter: JSONL file output
- MultiExporter: Send to multiple sinks
"""

from evt_tracer.exporters.base import BaseExporter
from evt_tracer.exporters.logger import LoggingExporter
from evt_tracer.exporters.console import ConsoleExporter
from evt_tracer.exporters.file import FileExporter
from evt_tracer.exporters.multi import MultiExporter

__all__ = [
    "BaseExporter",
    "LoggingExporter",
    "ConsoleExporter",
    "FileExporter",
    "MultiExporter",
]
