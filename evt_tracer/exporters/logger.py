"""
Logging exporter: one structured log record per span event.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from evt_tracer.exporters.base import BaseExporter

DEFAULT_LOGGER_NAME = "evt_tracer.events"


class LoggingExporter(BaseExporter):
    """
    Emits each event as a single record on a standard library logger.

    The event is attached to the record as ``record.evt`` for structured
    handlers, and serialized as JSON in the message for plain ones.
    """
    
    def __init__(
        self,
        logger: Union[str, logging.Logger, None] = None,
        level: int = logging.INFO
    ):
        """
        Initialize logging exporter.
        
        Args:
            logger: Logger instance or name (default: evt_tracer.events)
            level: Level the events are logged at
        """
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger or DEFAULT_LOGGER_NAME)
        self.logger = logger
        self.level = level
    
    def export(self, event: Dict[str, Any]) -> bool:
        """Log the event."""
        self.logger.log(
            self.level,
            "evt %s",
            json.dumps(event, default=str, sort_keys=True),
            extra={"evt": event}
        )
        return True
    
    def flush(self) -> None:
        """Flush the handlers of the logger."""
        for handler in self.logger.handlers:
            handler.flush()
    
    def health_check(self) -> bool:
        """Healthy when the events would actually be logged."""
        return self.logger.isEnabledFor(self.level)
