"""Voting API request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class StageItem(BaseModel):
    """Stage progress entry."""

    key: str
    name: str
    active: bool
    completed: bool


class BallotItem(BaseModel):
    """Practice open for voting."""

    id: str
    title: str | None
    contract_code: str | None
    status: str | None
    author_name: str | None
    created_at: datetime | None


class OpenBallotsResponse(BaseModel):
    """Practices the voter still has to vote on."""

    round: str
    items: list[BallotItem]
    total: int


class QuestionSchema(BaseModel):
    """Ballot question."""

    id: str
    weight: int


class VotingContextResponse(BaseModel):
    """Ballot for one practice."""

    round: str
    practice: BallotItem
    description: str | None
    relevance: float | None
    stages: list[StageItem]
    questions: list[QuestionSchema]
    levels: list[str]


class BallotRequest(BaseModel):
    """Questionnaire answers: {question id: level}."""

    answers: dict[str, str | None] = Field(default_factory=dict)


class VoteReceiptResponse(BaseModel):
    """Recorded vote."""

    practice_id: str
    round: str
    score: int
