"""
Span class representing one hop of a distributed trace.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, MutableMapping, Optional

from evt_tracer.core.errors import InvalidIdentifierError, SpanFinishedError
from evt_tracer.core.ids import ROOT_PARENT_ID, is_parent_id, is_uuid, new_id
from evt_tracer.core.propagation import SpanContext, inject_headers
from evt_tracer.exporters.base import BaseExporter

logger = logging.getLogger("evt_tracer.core.span")


class Span:
    """
    Represents a single traced unit of work.

    A span created without a ``span_id`` mints its own and is the *creator*
    of that span: only the creator marks its terminal event with ``end``.
    A span built with a ``span_id`` supplied by a peer joins that span and
    never claims its end.
    """

    def __init__(
        self,
        exporter: BaseExporter,
        operation: str,
        trace_id: Optional[str] = None,
        span_id: Optional[str] = None,
        parent_span_id: Optional[str] = None,
    ):
        if exporter is None:
            raise ValueError("exporter is required")
        if not isinstance(operation, str) or not operation:
            raise ValueError("operation must be a non-empty string")
        if parent_span_id is not None and not is_parent_id(parent_span_id):
            raise InvalidIdentifierError("parent_span_id", parent_span_id)
        if span_id is not None and not is_uuid(span_id):
            raise InvalidIdentifierError("span_id", span_id)
        if trace_id is not None and not is_uuid(trace_id):
            raise InvalidIdentifierError("trace_id", trace_id)

        # keep track of the fact that we minted the id so we can end it
        self.creator = span_id is None

        self.exporter = exporter
        self.operation = operation
        self.parent_span_id = parent_span_id or ROOT_PARENT_ID
        self.span_id = span_id or new_id()
        self.trace_id = trace_id or new_id()
        self.tags: Dict[str, Any] = {}
        self.finished = False

        if self.span_id == self.parent_span_id:
            raise InvalidIdentifierError("span_id", self.span_id)

    def __repr__(self) -> str:
        return (
            f"Span(operation={self.operation!r}, trace_id={self.trace_id!r}, "
            f"span_id={self.span_id!r}, parent_span_id={self.parent_span_id!r})"
        )

    @property
    def is_root(self) -> bool:
        return self.parent_span_id == ROOT_PARENT_ID

    def context(self) -> SpanContext:
        """Snapshot of the identifiers of this span."""
        return SpanContext(
            trace_id=self.trace_id,
            span_id=self.span_id,
            parent_span_id=self.parent_span_id,
        )

    def start_child(self, operation: str) -> "Span":
        """Create a new span caused by this one, in the same trace."""
        # trace_id is kept, span_id is left out since the child is a new span
        child = Span(
            exporter=self.exporter,
            operation=operation,
            trace_id=self.trace_id,
            parent_span_id=self.span_id,
        )
        logger.debug(f"Started child span {child.span_id} of {self.span_id}")
        return child

    def inject_headers(self, headers: MutableMapping[str, str]) -> None:
        """Write the propagation headers for this span into ``headers``."""
        inject_headers(self.context(), headers)

    def add_tags(self, tags: Mapping) -> None:
        """Merge ``tags`` into the tags reported with the next event."""
        self._check_open()
        if not isinstance(tags, Mapping):
            raise TypeError(f"tags must be a mapping, got {type(tags).__name__}")
        self.tags.update(tags)

    def log(self, name: str, end: bool = False) -> Dict[str, Any]:
        """
        Emit an event for this span and drain its tags.

        Args:
            name: Event kind, e.g. ``client.request``
            end: Finish the span. The emitted event only carries
                ``end: True`` when this span is the creator.

        Returns:
            The event record handed to the exporter.
        """
        self._check_open()
        if not isinstance(name, str) or not name:
            raise ValueError("event name must be a non-empty string")

        event: Dict[str, Any] = {
            "kind": name,
            "operation": self.operation,
            "parent_span_id": self.parent_span_id,
            "span_id": self.span_id,
            "trace_id": self.trace_id,
        }

        if end:
            # A joined span is done with, but its end belongs to the creator.
            if self.creator:
                event["end"] = True
            self.finished = True

        event["tags"] = self.tags
        self.tags = {}

        self.exporter.export(event)
        return event

    def _check_open(self) -> None:
        if self.finished:
            raise SpanFinishedError(self)
