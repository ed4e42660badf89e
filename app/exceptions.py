from typing import Any, Mapping, Optional


class UnauthorizedError(Exception):
    """Raised when the caller is missing or does not own the requested resource.

    Attributes:
        message: human-readable message, sent back verbatim as ``{"error": message}``
        details: optional mapping with extra context, only used for logging
        http_status: suggested HTTP status code for handlers (401)
    """

    http_status = 401

    def __init__(self, message: str = "Unauthorized.", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message
