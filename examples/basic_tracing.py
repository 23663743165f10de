"""
Example: Tracing one request and the calls it makes
===================================================

Shows the four call-site functions used by hand: a server handling a
request that makes one outbound call.

Usage:
    python basic_tracing.py
"""

import logging

from evt_tracer import (
    setup_tracing,
    server_request,
    server_response,
    client_request,
    client_response,
)

logging.basicConfig(level=logging.INFO, format="%(name)s %(message)s")

# Events go to the "billing.evt" logger, and to the console for this demo
setup_tracing("billing", logger_name="billing.evt", console=True)


def fake_http_get(url, headers):
    """Stand-in for a real HTTP client."""
    print(f"GET {url} with {headers}")
    return 200


def handle_get_invoice(inbound_headers, request_id):
    span = server_request(
        "billing.get_invoice",
        inbound_headers,
        request_id=request_id,
        tags={"peer.addr": "10.0.0.1", "peer.port": 51234},
    )

    # The span of this request is passed explicitly to every outbound call
    headers = {}
    call = client_request(span, "customers.get", headers, {"http.method": "GET"})
    status = fake_http_get("http://customers/42", headers)
    client_response(call, {"http.statusCode": str(status)})

    server_response(span, {"http.statusCode": "200"})


if __name__ == "__main__":
    import uuid

    handle_get_invoice({}, str(uuid.uuid4()))
