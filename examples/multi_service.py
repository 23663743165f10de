"""
Example: One trace across two services
======================================

A "frontend" service calls a "billing" service. Both log their events to
the same JSONL file, which is then read back to rebuild the call tree by
trace_id and parent_span_id.

Usage:
    python multi_service.py
"""

import json
import tempfile
from collections import defaultdict

from evt_tracer import (
    FileExporter,
    trace_client_call,
    trace_server_call,
    http_tags,
    new_span,
    server_response,
)

events_path = tempfile.NamedTemporaryFile(suffix=".jsonl", delete=False).name
billing_sink = FileExporter(events_path)
frontend_sink = FileExporter(events_path)


@trace_server_call(operation="billing.get_invoice", exporter=billing_sink)
def billing_get_invoice(span, invoice_id):
    return {"status_code": 200, "invoice": invoice_id}


@trace_client_call(
    operation="frontend.get_invoice",
    tags=http_tags("GET", "/invoices/42", "http://billing/invoices/42"),
)
def call_billing(invoice_id, headers=None):
    # The "network": hand our headers to the billing service
    return billing_get_invoice(
        invoice_id,
        headers=headers,
        request_id=headers["x-request-id"],
        tags={"peer.addr": "10.0.0.2"},
    )


def main():
    root = new_span("frontend.page", exporter=frontend_sink)
    root.log("server.request")
    call_billing("42", parent_span=root)
    server_response(root, {"http.statusCode": "200"})

    spans = defaultdict(list)
    with open(events_path) as f:
        for line in f:
            event = json.loads(line)
            spans[event["trace_id"]].append(event)

    for trace_id, events in spans.items():
        print(f"trace {trace_id}")
        for event in events:
            end = " (end)" if event.get("end") else ""
            print(f"  {event['parent_span_id'][:8]} -> {event['span_id'][:8]} "
                  f"{event['kind']:16} {event['operation']}{end}")


if __name__ == "__main__":
    main()
