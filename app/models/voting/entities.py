"""Voting domain entities - votes, committees, participation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity
from helpers.stages import Stage


class VoteRound(str, Enum):
    """Voting phase. Quarterly is decided locally, annual by the corporate committee."""

    QUARTERLY = "quarterly"
    ANNUAL = "annual"

    @property
    def stage(self) -> Stage:
        return Stage.QUARTERLY_VOTE if self is VoteRound.QUARTERLY else Stage.ANNUAL_VOTE


class CommitteeKind(str, Enum):
    """Committee scope."""

    LOCAL = "local"
    CORPORATE = "corporate"


@dataclass
class Vote(BaseEntity):
    """A recorded committee vote."""

    practice_id: str
    voter_matricula: int
    round: VoteRound
    score: int
    raw_answers: dict[str, str]
    id: str | None = None
    created_at: datetime | None = None


@dataclass
class VoteReceipt(BaseEntity):
    """Outcome of a successful vote."""

    practice_id: str
    round: VoteRound
    score: int


@dataclass
class Committee(BaseEntity):
    """Voting committee."""

    id: int
    name: str
    kind: CommitteeKind
    contract_code: str | None = None
    description: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class CommitteeRef(BaseEntity):
    """Committee identity as shown next to participation lists."""

    id: int
    name: str
    kind: CommitteeKind
    contract_code: str | None = None

    @classmethod
    def of(cls, committee: Committee) -> "CommitteeRef":
        return cls(
            id=committee.id,
            name=committee.name,
            kind=committee.kind,
            contract_code=committee.contract_code,
        )


@dataclass
class Member(BaseEntity):
    """Committee member."""

    matricula: int
    name: str | None = None
    email: str | None = None
    contract_code: str | None = None


@dataclass
class Participant(BaseEntity):
    """Committee member with vote status for a round."""

    matricula: int
    name: str | None
    voted: bool


@dataclass
class CommitteeDetail(BaseEntity):
    """Committee hydrated with contract name and members."""

    committee: Committee
    contract_name: str | None = None
    members: list[Member] = field(default_factory=list)


@dataclass
class CommitteePage(BaseEntity):
    """One page of hydrated committees."""

    items: list[CommitteeDetail]
    page: int
    limit: int
    total: int
    total_pages: int


@dataclass
class CommitteeDraft(BaseEntity):
    """Committee fields as submitted for create or update."""

    name: str
    kind: CommitteeKind | str | None
    contract_code: str | None = None
    members: list[int] = field(default_factory=list)
    description: str | None = None
