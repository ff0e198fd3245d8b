"""Practice API response schemas."""

from pydantic import BaseModel

from web.api.voting.schemas import StageItem


class PersonSchema(BaseModel):
    """Matricula with display name."""

    matricula: int
    name: str | None


class EvaluationSchema(BaseModel):
    """SESMT or management evaluation."""

    responsible: PersonSchema | None
    done: bool
    relevance: float | None = None


class CommitteeRefSchema(BaseModel):
    """Committee identity."""

    id: int
    name: str
    kind: str
    contract_code: str | None


class ParticipantSchema(BaseModel):
    """Committee member and whether they voted."""

    matricula: int
    name: str | None
    voted: bool


class RoundSchema(BaseModel):
    """Committee participation in one round."""

    committee: CommitteeRefSchema | None
    participants: list[ParticipantSchema]
    voted: int
    total: int


class StrategicViewResponse(BaseModel):
    """Governance dashboard view of a practice."""

    practice_id: str
    contract_code: str | None
    status: str
    status_recognized: bool
    relevance: float | None
    stages: list[StageItem]
    sesmt: EvaluationSchema
    management: EvaluationSchema
    quarterly: RoundSchema
    annual: RoundSchema
