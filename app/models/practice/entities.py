"""Practice domain entities."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity
from app.models.core.entities import UserSummary
from app.models.voting.entities import CommitteeRef, Participant, VoteRound


@dataclass
class Practice(BaseEntity):
    """The fields of a practice the governance pipeline reads."""

    id: str
    contract_code: str | None
    status: str | None
    relevance: float | None = None


@dataclass
class PracticeDetail(BaseEntity):
    """Practice with display fields, for ballots and listings."""

    id: str
    contract_code: str | None
    status: str | None
    relevance: float | None = None
    title: str | None = None
    description: str | None = None
    author_matricula: int | None = None
    author_name: str | None = None
    created_at: datetime | None = None


@dataclass
class StageStepView(BaseEntity):
    """Stage progress entry."""

    key: str
    name: str
    active: bool
    completed: bool


@dataclass
class EvaluationStep(BaseEntity):
    """SESMT or management evaluation block of the strategic view."""

    responsible: UserSummary | None
    done: bool
    relevance: float | None = None


@dataclass
class RoundParticipation(BaseEntity):
    """Committee and per-member vote status for one round."""

    committee: CommitteeRef | None
    participants: list[Participant] = field(default_factory=list)


@dataclass
class StrategicView(BaseEntity):
    """Governance dashboard view of one practice."""

    practice: Practice
    status_recognized: bool
    stages: list[StageStepView]
    sesmt: EvaluationStep
    management: EvaluationStep
    quarterly: RoundParticipation
    annual: RoundParticipation


@dataclass
class QuestionItem(BaseEntity):
    """Ballot question and its weight."""

    id: str
    weight: int


@dataclass
class VotingContext(BaseEntity):
    """Everything needed to render a ballot."""

    practice: PracticeDetail
    round: VoteRound
    stages: list[StageStepView]
    questions: list[QuestionItem]
    levels: list[str]
