"""
DIDComm builder error types.

Every error carries a stable machine-readable ``code`` so a caller can relay it
upstream, e.g. as a problem-report.
"""

from typing import Any, Optional


class DIDCommError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class MissingPredecessor(DIDCommError):
    def __init__(self, message: str = "A predecessor message is required", code: str = "missing_predecessor"):
        super().__init__(code, message)


class UnsupportedPredecessorType(DIDCommError):
    def __init__(self, message_type: str, accepted: Optional[list[str]] = None):
        super().__init__(
            "unsupported_predecessor_type",
            f"Unsupported predecessor message type: {message_type}",
            {"type": message_type, "accepted": accepted or []},
        )
        self.message_type = message_type


class MissingRequiredField(DIDCommError):
    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(
            "missing_required_field",
            message or f"Required field not set: {field}",
            {"field": field},
        )
        self.field = field


class MalformedAttachment(DIDCommError):
    def __init__(self, message: str, attachment_id: Optional[str] = None):
        details = {"attachment_id": attachment_id} if attachment_id is not None else None
        super().__init__("malformed_attachment", message, details)


class MalformedMessage(DIDCommError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("malformed_message", message, details)
