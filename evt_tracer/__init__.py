"""
evt-tracer - Distributed tracing through structured log events
==============================================================

Carries trace context from a server to the downstream clients it calls,
and emits one structured event per traced step so a multi-service request
can be rebuilt offline from the logs of every service it touched.

Usage:
    from evt_tracer import setup_tracing, server_request, server_response
    from evt_tracer import client_request, client_response

    setup_tracing("billing")

    # Handling an inbound request
    span = server_request("billing.get_invoice", request.headers,
                          request_id=request.id)

    # Calling another service while handling it
    headers = {}
    call = client_request(span, "billing.get_customer", headers)
    resp = http.get(url, headers=headers)
    client_response(call, {"http.statusCode": str(resp.status_code)})

    server_response(span, {"http.statusCode": "200"})

Propagation headers: x-span-id, x-parent-span-id, x-request-id.

License: Apache-2.0
"""

__version__ = "1.0.0"

# Core components
from evt_tracer.core.errors import (
    TracingError,
    InvalidIdentifierError,
    SpanFinishedError,
)
from evt_tracer.core.ids import ROOT_PARENT_ID
from evt_tracer.core.propagation import SpanContext, extract_context
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
    get_exporter,
    reset_tracing,
)
from evt_tracer.core.decorators import (
    http_tags,
    trace_client_call,
    trace_server_call,
)

# Exporters
from evt_tracer.exporters.base import BaseExporter
from evt_tracer.exporters.logger import LoggingExporter
from evt_tracer.exporters.console import ConsoleExporter
from evt_tracer.exporters.file import FileExporter
from evt_tracer.exporters.multi import MultiExporter

__all__ = [
    # Version
    "__version__",
    # Core
    "Span",
    "SpanContext",
    "ROOT_PARENT_ID",
    "extract_context",
    "TracingConfig",
    "setup_tracing",
    "get_exporter",
    "reset_tracing",
    # Tracer
    "new_span",
    "join_span",
    "client_request",
    "client_response",
    "server_request",
    "server_response",
    # Decorators
    "http_tags",
    "trace_client_call",
    "trace_server_call",
    # Errors
    "TracingError",
    "InvalidIdentifierError",
    "SpanFinishedError",
    # Exporters
    "BaseExporter",
    "LoggingExporter",
    "ConsoleExporter",
    "FileExporter",
    "MultiExporter",
]
