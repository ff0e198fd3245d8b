"""Governance errors - raised by services and repositories, rendered by the web layer."""


class GovernanceError(Exception):
    """Base class for governance errors."""

    status_code: int = 400
    error_code: str = "GOVERNANCE_ERROR"
    default_message: str = "Governance error"

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(GovernanceError):
    """Practice or committee absent, or practice not open for the requested round."""

    status_code = 404
    error_code = "NOT_FOUND"
    default_message = "Resource not found"


class ForbiddenError(GovernanceError):
    """Requesting user may not act on this resource."""

    status_code = 403
    error_code = "FORBIDDEN"
    default_message = "Access denied"


class ConflictError(GovernanceError):
    """Duplicate vote or committee."""

    status_code = 409
    error_code = "CONFLICT"
    default_message = "Conflict"


class InvalidAnswerError(GovernanceError):
    """Questionnaire answer missing or outside the level set."""

    status_code = 422
    error_code = "INVALID_ANSWER"
    default_message = "All questionnaire answers are required"


class ValidationError(GovernanceError):
    """Malformed request input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation error"


class StorageError(GovernanceError):
    """Storage collaborator failure. The message never carries driver detail."""

    status_code = 500
    error_code = "STORAGE_ERROR"
    default_message = "Storage failure"


class UniqueConstraintViolation(StorageError):
    """Insert rejected by a unique or primary key constraint."""

    error_code = "UNIQUE_VIOLATION"


class WriteConflictError(StorageError):
    """Concurrent transaction touched the same rows."""

    error_code = "WRITE_CONFLICT"
