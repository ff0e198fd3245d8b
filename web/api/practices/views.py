"""Practice API views - thin layer over services."""

from app.container import container
from app.models.core import UserSummary, Voter
from app.models.practice import EvaluationStep, RoundParticipation
from web.api.errors import validate_practice_id
from web.api.voting.schemas import StageItem

from .schemas import (
    CommitteeRefSchema,
    EvaluationSchema,
    ParticipantSchema,
    PersonSchema,
    RoundSchema,
    StrategicViewResponse,
)


def _person(user: UserSummary | None) -> PersonSchema | None:
    if user is None:
        return None
    return PersonSchema(matricula=user.matricula, name=user.name)


def _evaluation(step: EvaluationStep) -> EvaluationSchema:
    return EvaluationSchema(responsible=_person(step.responsible), done=step.done, relevance=step.relevance)


def _round(data: RoundParticipation) -> RoundSchema:
    committee = None
    if data.committee:
        committee = CommitteeRefSchema(
            id=data.committee.id,
            name=data.committee.name,
            kind=data.committee.kind.value,
            contract_code=data.committee.contract_code,
        )
    participants = [ParticipantSchema(matricula=p.matricula, name=p.name, voted=p.voted) for p in data.participants]
    return RoundSchema(
        committee=committee,
        participants=participants,
        voted=sum(p.voted for p in participants),
        total=len(participants),
    )


def get_strategic_view(practice_id: str, viewer: Voter) -> StrategicViewResponse:
    """Stages, evaluators and committee participation of a practice."""
    practice_id = validate_practice_id(practice_id)
    view = container.strategic_view.get_view(practice_id, viewer)

    return StrategicViewResponse(
        practice_id=view.practice.id,
        contract_code=view.practice.contract_code,
        status=view.practice.status,
        status_recognized=view.status_recognized,
        relevance=view.practice.relevance,
        stages=[StageItem(key=s.key, name=s.name, active=s.active, completed=s.completed) for s in view.stages],
        sesmt=_evaluation(view.sesmt),
        management=_evaluation(view.management),
        quarterly=_round(view.quarterly),
        annual=_round(view.annual),
    )
