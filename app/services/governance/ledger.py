"""Vote ledger - round-gated, contract-scoped, one vote per voter and round."""

from loguru import logger

from app.errors import ConflictError, NotFoundError, UniqueConstraintViolation, ValidationError
from app.models.core import Voter
from app.models.practice import Practice, PracticeDetail, QuestionItem, StageStepView, VotingContext
from app.models.voting import Vote, VoteReceipt, VoteRound
from app.repositories.practice import PracticeRepository
from app.repositories.voting import VoteRepository
from app.services.governance.eligibility import EligibilityGuard
from helpers import scoring
from helpers.stages import Stage, build_stages, resolve_status, status_phrases


def parse_round(value: VoteRound | str) -> VoteRound:
    """VoteRound from its value; ValidationError otherwise."""
    try:
        return VoteRound(value)
    except ValueError:
        raise ValidationError(f"Invalid round: {value!r}. Must be 'quarterly' or 'annual'") from None


def stage_views(status: str | None, fallback: Stage) -> list[StageStepView]:
    return [
        StageStepView(key=s.key, name=s.name, active=s.active, completed=s.completed)
        for s in build_stages(status, fallback)
    ]


class VoteLedger:
    """Casts committee votes and prepares ballots."""

    def __init__(
        self,
        practice_repo: PracticeRepository,
        vote_repo: VoteRepository,
        guard: EligibilityGuard,
        unknown_status_stage: Stage = Stage.COMPLETED,
    ):
        self._practices = practice_repo
        self._votes = vote_repo
        self._guard = guard
        self._fallback = unknown_status_stage
        logger.debug("VoteLedger initialized")

    def _open_practice(self, practice_id: str, round: VoteRound) -> Practice:
        """Practice currently awaiting `round`; NotFound otherwise."""
        practice = self._practices.get_practice(practice_id)
        if practice is None:
            logger.info("Practice {} not found", practice_id)
            raise NotFoundError("Practice not found")

        resolved = resolve_status(practice.status, self._fallback)
        if not resolved.recognized:
            logger.warning(
                "Practice {} has unrecognized status {!r}, resolved to {}",
                practice_id,
                practice.status,
                resolved.stage.label,
            )
        if resolved.stage != round.stage:
            logger.info(
                "Practice {} is at {}, not open for {} voting", practice_id, resolved.stage.label, round.value
            )
            raise NotFoundError("Practice is not available for voting")
        return practice

    def _precheck(self, practice_id: str, voter: Voter, round: VoteRound) -> Practice:
        """Stage, eligibility and uniqueness checks, in that order."""
        practice = self._open_practice(practice_id, round)
        self._guard.can_access(voter, practice)
        if self._votes.find_vote(practice.id, voter.matricula, round) is not None:
            logger.info("Voter {} already voted on {} ({})", voter.matricula, practice.id, round.value)
            raise ConflictError("Vote already cast for this practice")
        return practice

    def get_voting_context(self, practice_id: str, voter: Voter, round: VoteRound | str) -> VotingContext:
        """Read-only pre-check returning what the ballot needs."""
        round = parse_round(round)
        self._precheck(practice_id, voter, round)

        detail = self._practices.get_detail(practice_id)
        if detail is None:
            raise NotFoundError("Practice not found")

        return VotingContext(
            practice=detail,
            round=round,
            stages=stage_views(detail.status, self._fallback),
            questions=[QuestionItem(id=q, weight=scoring.WEIGHTS[q]) for q in scoring.QUESTIONS],
            levels=[level.value for level in scoring.Level],
        )

    def cast_vote(self, practice_id: str, voter: Voter, round: VoteRound | str, answers: dict) -> VoteReceipt:
        """Record one vote and return its score.

        The existence check is a fast path; the storage unique key decides when
        two requests race, and the loser gets ConflictError.
        """
        round = parse_round(round)
        practice = self._precheck(practice_id, voter, round)

        score = scoring.score(answers)
        vote = Vote(
            practice_id=practice.id,
            voter_matricula=voter.matricula,
            round=round,
            score=score,
            raw_answers=scoring.raw_answers(answers),
        )

        try:
            self._votes.insert_vote(vote)
        except UniqueConstraintViolation as e:
            logger.info("Concurrent vote rejected: {} on {} ({})", voter.matricula, practice.id, round.value)
            raise ConflictError("Vote already cast for this practice") from e

        logger.info("Vote recorded: {} on {} ({}) score={}", voter.matricula, practice.id, round.value, score)
        return VoteReceipt(practice_id=practice.id, round=round, score=score)

    def list_open_ballots(self, voter: Voter, round: VoteRound | str) -> list[PracticeDetail]:
        """Practices awaiting `round` the voter has not voted on, newest first.

        Quarterly ballots require a contract. Either round lists only the
        practices the eligibility rule lets the voter reach.
        """
        round = parse_round(round)
        if round is VoteRound.QUARTERLY and not voter.contract_code:
            raise ValidationError("Voter contract is required for quarterly voting")
        contract_code = self._guard.contract_scope(voter)

        practices = self._practices.list_by_status(status_phrases(round.stage), contract_code)
        voted = self._votes.voted_practice_ids(voter.matricula, round)
        result = [p for p in practices if p.id not in voted]
        logger.debug("Open {} ballots for {}: {}", round.value, voter.matricula, len(result))
        return result
