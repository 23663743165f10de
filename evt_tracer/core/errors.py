"""
Exceptions raised on tracing precondition violations.
"""


class TracingError(Exception):
    """Base class for all tracing errors."""


class InvalidIdentifierError(TracingError, ValueError):
    """A trace, span or parent id is missing or malformed."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} is not a valid identifier: {value!r}")


class SpanFinishedError(TracingError, RuntimeError):
    """A write was attempted on a span that already logged its terminal event."""

    def __init__(self, span):
        self.span = span
        super().__init__(
            f"span {span.span_id} ({span.operation}) is already finished"
        )
