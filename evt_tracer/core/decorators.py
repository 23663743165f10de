"""
Decorators for tracing outbound calls and inbound handlers.

The span is always passed explicitly: callers hand the current span to a
decorated client call, and a decorated handler receives the span of the
request it is handling as its first argument.
"""

from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable, Dict, Optional

from evt_tracer.core.propagation import SPAN_ID_HEADER
from evt_tracer.core.tracer import (
    client_request,
    client_response,
    server_request,
    server_response,
)
from evt_tracer.exporters.base import BaseExporter

MAX_TAG_LENGTH = 80


def _get_service_name() -> str:
    """Import config to avoid circular imports."""
    from evt_tracer.core.config import get_service_name
    return get_service_name()


def _operation_name(operation: Optional[str], func: Callable) -> str:
    if operation:
        return operation
    return f"{_get_service_name()}.{func.__name__}"


def _status_code(result: Any) -> Optional[str]:
    """Pull an HTTP status code off a response-like object."""
    for attr in ("status_code", "status"):
        code = getattr(result, attr, None)
        if isinstance(code, int):
            return str(code)
    if isinstance(result, Mapping) and isinstance(result.get("status_code"), int):
        return str(result["status_code"])
    return None


def _error_tags(error: Exception) -> Dict[str, Any]:
    return {
        "error": True,
        "error.type": type(error).__name__,
        "error.message": str(error)[:MAX_TAG_LENGTH],
    }


def http_tags(method: str, path: str, url: str) -> Dict[str, str]:
    """Standard tags for an HTTP request, each value capped at 80 characters."""
    return {
        "http.method": method[:MAX_TAG_LENGTH],
        "http.path": path[:MAX_TAG_LENGTH],
        "http.url": url[:MAX_TAG_LENGTH],
    }


def trace_client_call(
    operation: str = None,
    exporter: BaseExporter = None,
    tags: Optional[Mapping] = None
) -> Callable:
    """
    Decorator to trace a function that makes one outbound call.

    The decorated function must accept a ``headers`` keyword: it receives a
    dict holding the caller's headers plus the propagation headers, and
    must send them with the request. Callers pass the span they are
    working in as ``parent_span`` (None starts a new trace).

    Args:
        operation: Operation name (default: "<service_name>.<function name>")
        exporter: Sink used when a new trace is started
        tags: Extra tags for the ``client.request`` event

    Example:
        @trace_client_call(operation="billing.get_invoice")
        def get_invoice(invoice_id, headers=None):
            return requests.get(f"{BILLING}/invoices/{invoice_id}", headers=headers)

        response = get_invoice("42", parent_span=span)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, parent_span=None, headers=None, **kwargs):
            call_headers = dict(headers or {})
            span = client_request(
                parent_span,
                _operation_name(operation, func),
                call_headers,
                tags=tags,
                exporter=exporter,
            )

            try:
                result = func(*args, headers=call_headers, **kwargs)
            except Exception as e:
                client_response(span, _error_tags(e))
                raise

            code = _status_code(result)
            client_response(span, {"http.statusCode": code} if code else {})
            return result
        return wrapper
    return decorator


def trace_server_call(
    operation: str = None,
    exporter: BaseExporter = None
) -> Callable:
    """
    Decorator to trace a request handler.

    The wrapper is called with the inbound ``headers`` mapping and the
    ``request_id`` of the request, plus optional ``tags`` (e.g. peer
    address) and a mutable ``response_headers`` mapping that receives the
    ``x-span-id`` of this hop. The handler is called with the joined span
    as its first argument.

    Example:
        @trace_server_call(operation="billing.get_invoice")
        def get_invoice(span, invoice_id):
            ...

        get_invoice("42", headers=request.headers, request_id=request.id,
                    tags={"peer.addr": request.remote_addr})
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, headers=None, request_id=None, tags=None,
                    response_headers=None, **kwargs):
            span = server_request(
                _operation_name(operation, func),
                headers if headers is not None else {},
                request_id=request_id,
                tags=tags,
                exporter=exporter,
            )
            if response_headers is not None:
                response_headers[SPAN_ID_HEADER] = span.span_id

            try:
                result = func(span, *args, **kwargs)
            except Exception as e:
                server_response(span, _error_tags(e))
                raise

            code = _status_code(result)
            server_response(span, {"http.statusCode": code} if code else {})
            return result
        return wrapper
    return decorator
