"""
Header propagation protocol between a caller and the peer it calls.

Every outbound call carries three headers:

    x-span-id          id of the span making the call
    x-parent-span-id   id of that span's parent, or "0" for a root
    x-request-id       trace id, shared with the request-correlation id
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from evt_tracer.core.ids import ROOT_PARENT_ID

SPAN_ID_HEADER = "x-span-id"
PARENT_SPAN_ID_HEADER = "x-parent-span-id"
REQUEST_ID_HEADER = "x-request-id"


@dataclass(frozen=True)
class SpanContext:
    """Identifiers that travel with a request."""

    trace_id: Optional[str]
    span_id: Optional[str]
    parent_span_id: str = ROOT_PARENT_ID

    @property
    def is_root(self) -> bool:
        return self.parent_span_id == ROOT_PARENT_ID


def inject_headers(context: SpanContext, headers: MutableMapping[str, str]) -> None:
    """Write ``context`` into an outbound header mapping, overwriting."""
    headers[SPAN_ID_HEADER] = context.span_id
    headers[PARENT_SPAN_ID_HEADER] = context.parent_span_id
    # The trace id doubles as the request id for historical reasons.
    headers[REQUEST_ID_HEADER] = context.trace_id


def get_header(headers: Mapping, name: str) -> Optional[Any]:
    """Look up a header by name, case-insensitively. Empty values count as absent."""
    if not isinstance(headers, Mapping):
        raise TypeError(f"headers must be a mapping, got {type(headers).__name__}")

    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if isinstance(key, str) and key.lower() == lowered:
                value = candidate
                break
    return value or None


def extract_context(headers: Mapping, request_id: Optional[str] = None) -> SpanContext:
    """
    Read the context a caller propagated in inbound headers.

    The trace id is the caller-supplied request id when given, else the
    ``x-request-id`` header. A missing parent header means this hop is the
    root as far as this server can tell. Identifiers are not validated here.
    """
    return SpanContext(
        trace_id=request_id or get_header(headers, REQUEST_ID_HEADER),
        span_id=get_header(headers, SPAN_ID_HEADER),
        parent_span_id=get_header(headers, PARENT_SPAN_ID_HEADER) or ROOT_PARENT_ID,
    )


def response_headers(context: SpanContext) -> dict:
    """Headers a server adds to its response to name the hop that answered."""
    return {SPAN_ID_HEADER: context.span_id}
