"""Committee API request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommitteeRequest(BaseModel):
    """Committee create or update payload."""

    name: str = ""
    kind: str | None = None
    contract_code: str | None = None
    description: str | None = None
    members: list[int] = Field(default_factory=list)


class MemberSchema(BaseModel):
    """Committee member."""

    matricula: int
    name: str | None
    email: str | None
    contract_code: str | None


class CommitteeResponse(BaseModel):
    """Committee with members."""

    id: int
    name: str
    description: str | None
    kind: str
    contract_code: str | None
    contract_name: str | None
    created_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    members: list[MemberSchema]


class PaginationSchema(BaseModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int
    total_pages: int


class CommitteeListResponse(BaseModel):
    """One page of committees."""

    items: list[CommitteeResponse]
    pagination: PaginationSchema


class CandidateSchema(BaseModel):
    """Active user selectable as committee member."""

    matricula: int
    name: str | None
    email: str | None
    contract_code: str | None


class CandidateListResponse(BaseModel):
    """Selectable members."""

    items: list[CandidateSchema]
