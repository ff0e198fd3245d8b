"""Voting API views - thin layer over services."""

from pydantic import ValidationError as PydanticValidationError

from app.container import container
from app.errors import ValidationError
from app.models.core import Voter
from app.models.practice import PracticeDetail
from web.api.errors import validate_practice_id, validate_round

from .schemas import (
    BallotItem,
    BallotRequest,
    OpenBallotsResponse,
    QuestionSchema,
    StageItem,
    VoteReceiptResponse,
    VotingContextResponse,
)


def _ballot_item(p: PracticeDetail) -> BallotItem:
    return BallotItem(
        id=p.id,
        title=p.title,
        contract_code=p.contract_code,
        status=p.status,
        author_name=p.author_name,
        created_at=p.created_at,
    )


def get_open_ballots(voter: Voter, round: str) -> OpenBallotsResponse:
    """Practices awaiting the round that the voter has not voted on."""
    vote_round = validate_round(round)
    data = container.ledger.list_open_ballots(voter, vote_round)

    items = [_ballot_item(p) for p in data]
    return OpenBallotsResponse(round=vote_round.value, items=items, total=len(items))


def get_voting_context(practice_id: str, voter: Voter, round: str) -> VotingContextResponse:
    """Ballot for a practice, after stage, access and duplicate checks."""
    practice_id = validate_practice_id(practice_id)
    vote_round = validate_round(round)
    ctx = container.ledger.get_voting_context(practice_id, voter, vote_round)

    return VotingContextResponse(
        round=ctx.round.value,
        practice=_ballot_item(ctx.practice),
        description=ctx.practice.description,
        relevance=ctx.practice.relevance,
        stages=[StageItem(key=s.key, name=s.name, active=s.active, completed=s.completed) for s in ctx.stages],
        questions=[QuestionSchema(id=q.id, weight=q.weight) for q in ctx.questions],
        levels=ctx.levels,
    )


def cast_vote(practice_id: str, voter: Voter, round: str, ballot: BallotRequest | dict) -> VoteReceiptResponse:
    """Record a vote and return its score."""
    practice_id = validate_practice_id(practice_id)
    vote_round = validate_round(round)
    if isinstance(ballot, dict):
        try:
            ballot = BallotRequest.model_validate(ballot)
        except PydanticValidationError as e:
            raise ValidationError("Malformed ballot", details={"errors": e.errors(include_url=False)}) from e

    receipt = container.ledger.cast_vote(practice_id, voter, vote_round, ballot.answers)
    return VoteReceiptResponse(practice_id=receipt.practice_id, round=receipt.round.value, score=receipt.score)
