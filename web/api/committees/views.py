"""Committee API views - thin layer over services."""

from pydantic import ValidationError as PydanticValidationError

from app.container import container
from app.errors import ValidationError
from app.models.core import Voter
from app.models.voting import CommitteeDetail, CommitteeDraft
from settings import DEFAULT_PAGE_SIZE
from web.api.errors import validate_page

from .schemas import (
    CandidateListResponse,
    CandidateSchema,
    CommitteeListResponse,
    CommitteeRequest,
    CommitteeResponse,
    MemberSchema,
    PaginationSchema,
)


def _response(detail: CommitteeDetail) -> CommitteeResponse:
    c = detail.committee
    return CommitteeResponse(
        id=c.id,
        name=c.name,
        description=c.description,
        kind=c.kind.value,
        contract_code=c.contract_code,
        contract_name=detail.contract_name,
        created_by=c.created_by,
        created_at=c.created_at,
        updated_at=c.updated_at,
        members=[
            MemberSchema(matricula=m.matricula, name=m.name, email=m.email, contract_code=m.contract_code)
            for m in detail.members
        ],
    )


def _draft(payload: CommitteeRequest | dict) -> CommitteeDraft:
    if isinstance(payload, dict):
        try:
            payload = CommitteeRequest.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError("Malformed committee", details={"errors": e.errors(include_url=False)}) from e
    return CommitteeDraft(
        name=payload.name,
        kind=payload.kind,
        contract_code=payload.contract_code,
        members=payload.members,
        description=payload.description,
    )


def list_committees(
    kind: str | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> CommitteeListResponse:
    """Committees, newest first, with members and contract names."""
    validate_page(page, limit)
    data = container.committee_admin.list_committees(kind or None, search, page, limit)

    return CommitteeListResponse(
        items=[_response(d) for d in data.items],
        pagination=PaginationSchema(
            page=data.page,
            limit=data.limit,
            total=data.total,
            total_pages=data.total_pages,
        ),
    )


def get_committee(committee_id: int) -> CommitteeResponse:
    return _response(container.committee_admin.get(committee_id))


def create_committee(payload: CommitteeRequest | dict, actor: Voter) -> CommitteeResponse:
    return _response(container.committee_admin.create(_draft(payload), actor))


def update_committee(committee_id: int, payload: CommitteeRequest | dict, actor: Voter) -> CommitteeResponse:
    return _response(container.committee_admin.update(committee_id, _draft(payload), actor))


def delete_committee(committee_id: int, actor: Voter) -> None:
    container.committee_admin.delete(committee_id, actor)


def list_candidates(contract_code: str | None = None, search: str | None = None) -> CandidateListResponse:
    """Active users that can be added to a committee."""
    users = container.committee_admin.candidate_members(contract_code, search)
    return CandidateListResponse(
        items=[
            CandidateSchema(matricula=u.matricula, name=u.name, email=u.email, contract_code=u.contract_code)
            for u in users
        ]
    )
