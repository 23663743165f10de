"""
Core module for evt-tracer.
"""

from evt_tracer.core.errors import (
    TracingError,
    InvalidIdentifierError,
    SpanFinishedError,
)
from evt_tracer.core.ids import ROOT_PARENT_ID, new_id, is_uuid
from evt_tracer.core.propagation import (
    SpanContext,
    SPAN_ID_HEADER,
    PARENT_SPAN_ID_HEADER,
    REQUEST_ID_HEADER,
    extract_context,
    response_headers,
)
from evt_tracer.core.span import Span
from evt_tracer.core.tracer import (
    new_span,
    join_span,
    client_request,
    client_response,
    server_request,
    server_response,
)
from evt_tracer.core.config import (
    TracingConfig,
    setup_tracing,
    get_config,
    get_exporter,
    get_service_name,
    reset_tracing,
)
from evt_tracer.core.decorators import (
    http_tags,
    trace_client_call,
    trace_server_call,
)

__all__ = [
    "TracingError",
    "InvalidIdentifierError",
    "SpanFinishedError",
    "ROOT_PARENT_ID",
    "new_id",
    "is_uuid",
    "SpanContext",
    "SPAN_ID_HEADER",
    "PARENT_SPAN_ID_HEADER",
    "REQUEST_ID_HEADER",
    "extract_context",
    "response_headers",
    "Span",
    "new_span",
    "join_span",
    "client_request",
    "client_response",
    "server_request",
    "server_response",
    "TracingConfig",
    "setup_tracing",
    "get_config",
    "get_exporter",
    "get_service_name",
    "reset_tracing",
    "http_tags",
    "trace_client_call",
    "trace_server_call",
]
