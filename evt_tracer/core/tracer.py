"""
Call-site protocols for tracing client and server calls.

Each traced call is bracketed by a pair of functions:

    client_request / client_response   around an outbound call
    server_request / server_response   around handling an inbound call

The functions hold no state. The span returned by a ``*_request`` function
must be kept by the caller and handed back to the matching ``*_response``.
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Optional

from evt_tracer.core.errors import InvalidIdentifierError
from evt_tracer.core.ids import ROOT_PARENT_ID, is_parent_id, is_uuid, new_id
from evt_tracer.core.propagation import extract_context
from evt_tracer.core.span import Span
from evt_tracer.exporters.base import BaseExporter

logger = logging.getLogger("evt_tracer.core.tracer")

CLIENT_REQUEST = "client.request"
CLIENT_RESPONSE = "client.response"
SERVER_REQUEST = "server.request"
SERVER_RESPONSE = "server.response"


def _resolve_exporter(exporter: Optional[BaseExporter]) -> BaseExporter:
    if exporter is not None:
        return exporter
    # Import here to avoid circular imports
    from evt_tracer.core.config import get_exporter
    return get_exporter()


def new_span(operation: str, exporter: Optional[BaseExporter] = None) -> Span:
    """Start a new trace with a root span."""
    span = Span(exporter=_resolve_exporter(exporter), operation=operation)
    logger.debug(f"New trace {span.trace_id} with root span {span.span_id}")
    return span


def join_span(
    trace_id: str,
    operation: str,
    span_id: Optional[str] = None,
    parent_span_id: str = ROOT_PARENT_ID,
    exporter: Optional[BaseExporter] = None
) -> Span:
    """
    Resume a span of an existing trace.

    Args:
        trace_id: Trace to join, required
        operation: Name of the work this span represents
        span_id: Span id decided by the peer. When given, the returned
            span is not the creator and never marks the end of the span.
        parent_span_id: Parent of the joined span, "0" for a root
        exporter: Sink for events, defaults to the configured one

    Raises:
        InvalidIdentifierError: if trace_id is missing or any id is malformed
    """
    # trace_id and parent_span_id connect us to the rest of the trace
    if not is_uuid(trace_id):
        raise InvalidIdentifierError("trace_id", trace_id)
    if not is_parent_id(parent_span_id):
        raise InvalidIdentifierError("parent_span_id", parent_span_id)

    span = Span(
        exporter=_resolve_exporter(exporter),
        operation=operation,
        trace_id=trace_id,
        span_id=span_id,
        parent_span_id=parent_span_id,
    )
    logger.debug(f"Joined trace {span.trace_id} as span {span.span_id}")
    return span


def client_request(
    span: Optional[Span],
    operation: str,
    headers: MutableMapping,
    tags: Optional[Mapping] = None,
    exporter: Optional[BaseExporter] = None
) -> Span:
    """
    Start tracing an outbound call.

    A child of ``span`` is created when one is given, otherwise the call
    starts a new trace. The propagation headers are written into ``headers``
    and a ``client.request`` event is emitted.

    Returns:
        The span of the call, to be passed to ``client_response``.
    """
    if not isinstance(headers, MutableMapping):
        raise TypeError(f"headers must be a mutable mapping, got {type(headers).__name__}")
    if tags is not None and not isinstance(tags, Mapping):
        raise TypeError(f"tags must be a mapping, got {type(tags).__name__}")

    if span is not None:
        # Handling a request already, so the call is part of its trace.
        call_span = span.start_child(operation)
    else:
        call_span = new_span(operation, exporter=exporter)

    call_span.inject_headers(headers)
    call_span.add_tags(tags or {})
    call_span.log(CLIENT_REQUEST)

    return call_span


def client_response(
    span: Span,
    tags: Optional[Mapping] = None,
    keep_open: bool = False
) -> Dict[str, Any]:
    """
    Record the response of an outbound call.

    Args:
        span: Span returned by ``client_request``
        tags: Tags describing the response
        keep_open: Leave the span open for further response events,
            e.g. for streamed responses

    Returns:
        The emitted event record.
    """
    span.add_tags(tags or {})
    return span.log(CLIENT_RESPONSE, end=not keep_open)


def server_request(
    operation: str,
    headers: Mapping,
    request_id: Optional[str] = None,
    tags: Optional[Mapping] = None,
    exporter: Optional[BaseExporter] = None
) -> Span:
    """
    Start tracing the handling of an inbound call.

    The span joins the one the caller propagated in ``headers``. Its trace
    id is ``request_id``, the id the server already correlates the request
    by. Without one, the ``x-request-id`` header is used, and failing that
    a new id is minted.

    Returns:
        The span of the request, to be passed to ``server_response``.
    """
    context = extract_context(headers, request_id=request_id)

    # If a parent span was passed, that is our parent in this trace.
    # Otherwise we are a top-level request and parent is "0".
    span = join_span(
        trace_id=context.trace_id or new_id(),
        operation=operation,
        span_id=context.span_id,
        parent_span_id=context.parent_span_id,
        exporter=exporter,
    )
    span.add_tags(tags or {})
    span.log(SERVER_REQUEST)

    return span


def server_response(
    span: Span,
    tags: Optional[Mapping] = None,
    keep_open: bool = False
) -> Dict[str, Any]:
    """Record the response of an inbound call. See ``client_response``."""
    span.add_tags(tags or {})
    return span.log(SERVER_RESPONSE, end=not keep_open)
