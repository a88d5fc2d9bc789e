from typing import Optional


class AuditError(Exception):
    """Base for every failure the audit endpoint reports to the caller."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(AuditError):
    """Deployment problem: the OpenAI credential is not set."""

    def __init__(self, message: str = "Server configuration error: Missing API key."):
        super().__init__(message, 500)


class InvalidRequestError(AuditError):
    """Caller sent malformed JSON or an unusable contractCode."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class UpstreamError(AuditError):
    """OpenAI answered with a structured error."""

    def __init__(self, status: Optional[int], name: str, detail: str):
        self.upstream_status = status or 500
        self.name = name
        self.detail = detail
        super().__init__(
            f"OpenAI API Error: {self.upstream_status} {name} {detail}",
            self.upstream_status,
        )


class EmptyResultError(AuditError):
    def __init__(self):
        super().__init__("Internal Server Error: Received empty response from AI analysis.", 500)


class UnknownError(AuditError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Internal Server Error: {cause}", 500)
