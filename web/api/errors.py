"""API errors and validation helpers."""

from loguru import logger
from pydantic import BaseModel

from app.errors import GovernanceError, ValidationError
from app.models.voting import VoteRound
from settings import MAX_PAGE_SIZE

MAX_PRACTICE_ID_LENGTH = 64


class ErrorResponse(BaseModel):
    """Error body returned for any governance error."""

    status: int
    code: str
    message: str
    details: dict = {}


def error_response(exc: GovernanceError) -> ErrorResponse:
    """Render a governance error for the client."""
    if exc.status_code >= 500:
        logger.error("{}: {}", exc.error_code, exc.message)
    return ErrorResponse(
        status=exc.status_code,
        code=exc.error_code,
        message=exc.message,
        details=exc.details,
    )


def validate_round(round: str) -> VoteRound:
    """Validate the voting round name."""
    try:
        return VoteRound((round or "").strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid round: {round!r}. Must be 'quarterly' or 'annual'") from None


def validate_practice_id(practice_id: str) -> str:
    """Validate a practice id is a non-empty token."""
    value = (practice_id or "").strip()
    if not value or len(value) > MAX_PRACTICE_ID_LENGTH:
        raise ValidationError(f"Invalid practice_id: {practice_id!r}")
    return value


def validate_page(page: int, limit: int) -> None:
    """Validate pagination arguments."""
    if page < 1:
        raise ValidationError(f"Invalid page: {page}. Must be at least 1")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(f"Invalid limit: {limit}. Must be between 1 and {MAX_PAGE_SIZE}")
