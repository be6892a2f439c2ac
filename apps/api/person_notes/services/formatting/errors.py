"""Error types for person record formatting."""

from typing import Optional


class PersonRecordError(Exception):
    """The primary person record breaks its contract (missing or malformed id)."""
    def __init__(self, field: str, message: str, cause: Optional[Exception] = None):
        self.field = field
        self.message = message
        self.cause = cause
        super().__init__(f"[{field}] {message}")
