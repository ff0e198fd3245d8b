"""Strategic view - governance dashboard read model of a single practice.

Built in two parallel fetch phases followed by a pure join:

    phase 1: responsibles | local committee | corporate committee | votes cast
    phase 2: responsible names | local participation | corporate participation
    join:    StrategicView
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from loguru import logger

from app.errors import NotFoundError
from app.models.core import ResponsibleAssignment, UserSummary, Voter
from app.models.practice import EvaluationStep, Practice, RoundParticipation, StrategicView
from app.models.voting import Committee, CommitteeRef, Participant, VoteRound
from app.repositories.core import ResponsibleRepository, UserRepository
from app.repositories.practice import PracticeRepository
from app.repositories.voting import VoteRepository
from app.services.governance.committees import CommitteeRegistry
from app.services.governance.eligibility import EligibilityGuard
from app.services.governance.ledger import stage_views
from helpers.stages import Stage, resolve_status

NO_STATUS = "No status"


@dataclass(frozen=True)
class GovernanceFetch:
    """Phase 1 results."""

    responsibles: ResponsibleAssignment | None
    local_committee: Committee | None
    corporate_committee: Committee | None
    votes: dict[VoteRound, set[int]]


@dataclass(frozen=True)
class ParticipationFetch:
    """Phase 2 results."""

    responsible_names: dict[int, str | None]
    local: list[Participant]
    corporate: list[Participant]


class StrategicViewService:
    """Assembles the strategic view of a practice."""

    def __init__(
        self,
        practice_repo: PracticeRepository,
        vote_repo: VoteRepository,
        responsible_repo: ResponsibleRepository,
        user_repo: UserRepository,
        registry: CommitteeRegistry,
        guard: EligibilityGuard,
        unknown_status_stage: Stage = Stage.COMPLETED,
        max_workers: int = 4,
    ):
        self._practices = practice_repo
        self._votes = vote_repo
        self._responsibles = responsible_repo
        self._users = user_repo
        self._registry = registry
        self._guard = guard
        self._fallback = unknown_status_stage
        self._max_workers = max_workers
        logger.debug("StrategicViewService initialized")

    def _responsibles_for(self, contract_code: str | None) -> ResponsibleAssignment | None:
        if not contract_code:
            return None
        return self._responsibles.get_responsibles(contract_code)

    def _participation(self, committee: Committee | None, voters: set[int]) -> list[Participant]:
        if committee is None:
            return []
        return self._registry.participation(committee.id, voters)

    def _fetch_governance(self, practice: Practice) -> GovernanceFetch:
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            f_responsibles = pool.submit(self._responsibles_for, practice.contract_code)
            f_local = pool.submit(self._registry.resolve_local_committee, practice.contract_code)
            f_corporate = pool.submit(self._registry.resolve_corporate_committee)
            f_votes = pool.submit(self._votes.votes_for_practice, practice.id)

            return GovernanceFetch(
                responsibles=f_responsibles.result(),
                local_committee=f_local.result(),
                corporate_committee=f_corporate.result(),
                votes=f_votes.result(),
            )

    def _fetch_participation(self, fetched: GovernanceFetch) -> ParticipationFetch:
        responsibles = fetched.responsibles
        matriculas = []
        if responsibles:
            matriculas = [
                m for m in (responsibles.sesmt_responsible, responsibles.management_responsible) if m is not None
            ]

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            f_names = pool.submit(self._users.get_names, matriculas)
            f_local = pool.submit(
                self._participation, fetched.local_committee, fetched.votes.get(VoteRound.QUARTERLY, set())
            )
            f_corporate = pool.submit(
                self._participation, fetched.corporate_committee, fetched.votes.get(VoteRound.ANNUAL, set())
            )

            return ParticipationFetch(
                responsible_names=f_names.result(),
                local=f_local.result(),
                corporate=f_corporate.result(),
            )

    def get_view(self, practice_id: str, viewer: Voter) -> StrategicView:
        practice = self._practices.get_practice(practice_id)
        if practice is None:
            raise NotFoundError("Practice not found")
        self._guard.can_access(viewer, practice)

        fetched = self._fetch_governance(practice)
        participation = self._fetch_participation(fetched)
        view = build_view(practice, fetched, participation, self._fallback)

        if not view.status_recognized:
            logger.warning("Practice {} has unrecognized status {!r}", practice.id, practice.status)
        logger.debug("Strategic view built for {}", practice.id)
        return view


def _summary(matricula: int | None, names: dict[int, str | None]) -> UserSummary | None:
    if matricula is None:
        return None
    return UserSummary(matricula=matricula, name=names.get(matricula))


def _ref(committee: Committee | None) -> CommitteeRef | None:
    return CommitteeRef.of(committee) if committee else None


def build_view(
    practice: Practice,
    fetched: GovernanceFetch,
    participation: ParticipationFetch,
    fallback: Stage = Stage.COMPLETED,
) -> StrategicView:
    """Join fetched data into the view. Pure."""
    resolved = resolve_status(practice.status, fallback)
    stage = resolved.stage
    responsibles = fetched.responsibles
    names = participation.responsible_names

    return StrategicView(
        practice=Practice(
            id=practice.id,
            contract_code=practice.contract_code or None,
            status=practice.status or NO_STATUS,
            relevance=practice.relevance,
        ),
        status_recognized=resolved.recognized,
        stages=stage_views(practice.status, fallback),
        sesmt=EvaluationStep(
            responsible=_summary(responsibles.sesmt_responsible if responsibles else None, names),
            done=stage > Stage.SESMT,
        ),
        management=EvaluationStep(
            responsible=_summary(responsibles.management_responsible if responsibles else None, names),
            done=stage > Stage.MANAGEMENT or practice.relevance is not None,
            relevance=practice.relevance,
        ),
        quarterly=RoundParticipation(committee=_ref(fetched.local_committee), participants=participation.local),
        annual=RoundParticipation(committee=_ref(fetched.corporate_committee), participants=participation.corporate),
    )
