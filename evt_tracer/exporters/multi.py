"""
Multi-exporter for sending span events to several sinks at once.
"""

import logging
from typing import Any, Dict, List

from evt_tracer.exporters.base import BaseExporter

logger = logging.getLogger("evt_tracer.exporters.multi")


def _describe(event: Dict[str, Any]) -> str:
    return f"{event.get('kind')} event of span {event.get('span_id')}"


class MultiExporter(BaseExporter):
    """
    Hands every span event to each of several exporters.

    A sink that raises or reports failure does not stop the event from
    reaching the others; the failing sink is named in the log.
    """

    def __init__(self, exporters: List[BaseExporter]):
        """
        Initialize multi-exporter.

        Args:
            exporters: Exporters to send events to, in order
        """
        if not exporters:
            raise ValueError("MultiExporter needs at least one exporter")
        self.exporters = exporters

    def export(self, event: Dict[str, Any]) -> bool:
        """
        Export the event to every exporter.

        Returns True if at least one exporter took the event.
        """
        delivered = False
        for exp in self.exporters:
            name = type(exp).__name__
            try:
                ok = exp.export(event)
            except Exception as e:
                logger.error(f"{name} failed on {_describe(event)}: {e}")
                continue
            if ok:
                delivered = True
            else:
                logger.warning(f"{name} rejected {_describe(event)}")
        return delivered

    def _each(self, method: str) -> None:
        for exp in self.exporters:
            try:
                getattr(exp, method)()
            except Exception as e:
                logger.error(f"{type(exp).__name__}.{method}() failed: {e}")

    def start(self) -> None:
        """Start all exporters."""
        self._each("start")

    def stop(self) -> None:
        """Stop all exporters, even if one of them fails to stop."""
        self._each("stop")

    def flush(self) -> None:
        """Flush all exporters."""
        self._each("flush")

    def health_check(self) -> bool:
        """Check if any exporter is healthy."""
        return any(exp.health_check() for exp in self.exporters)
