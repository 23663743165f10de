"""
Identifier helpers for trace and span ids.
"""

import re
import uuid
from typing import Any

# Parent id carried by root spans, on the wire and in emitted events.
ROOT_PARENT_ID = "0"

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def new_id() -> str:
    """Mint a random 128-bit identifier in canonical UUID text form."""
    return str(uuid.uuid4())


def is_uuid(value: Any) -> bool:
    """Check whether a value is a canonical UUID string."""
    return isinstance(value, str) and _UUID_RE.fullmatch(value) is not None


def is_parent_id(value: Any) -> bool:
    """Check whether a value can be used as a parent span id."""
    return value == ROOT_PARENT_ID or is_uuid(value)
