"""Error types raised by the store, the repository and the routes.

Every error carries the HTTP status it maps to and a static, user-facing
message. ``details`` is a best-effort description of the underlying cause and
is only included in the JSON payload when set.
"""
from __future__ import annotations


class LiftlogError(Exception):
    status_code: int = 500
    message: str = "Internal error"

    def __init__(self, message: str | None = None, *, details: str | None = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message if details is None else f"{self.message}: {details}")

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(LiftlogError):
    """A required request field is missing or malformed."""
    status_code = 400
    message = "Invalid request"


class NotFoundError(LiftlogError):
    status_code = 404
    message = "Not found"


class StoreError(LiftlogError):
    """The key-value store failed to read or write."""
    status_code = 500
    message = "Store operation failed"


class EntryShapeError(ValueError):
    """An entry's set layout does not match the exercise it was logged against."""
