"""Vote repository - committee votes with a (practice, voter, round) unique key."""

import json
import uuid
from collections import defaultdict

from loguru import logger

from app.errors import UniqueConstraintViolation, WriteConflictError
from app.models.voting import Vote, VoteRound
from app.repositories.base import BaseRepository, retry_on_write_conflict


class VoteRepository(BaseRepository):
    """Repository for vote data access."""

    @retry_on_write_conflict
    def _insert(self, vote_id: str, vote: Vote) -> None:
        """Insert, retrying while a concurrent writer holds the same key uncommitted."""
        self.execute(
            """
            INSERT INTO vote (id, practice_id, voter_matricula, vote_round, score, answers)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                vote_id,
                vote.practice_id,
                vote.voter_matricula,
                VoteRound(vote.round).value,
                vote.score,
                json.dumps(vote.raw_answers),
            ],
        )

    def find_vote(self, practice_id: str, voter_matricula: int, round: VoteRound) -> Vote | None:
        row = self.fetchone(
            """
            SELECT id, practice_id, voter_matricula, vote_round, score, answers, created_at
            FROM vote
            WHERE practice_id = ? AND voter_matricula = ? AND vote_round = ?
            """,
            [practice_id, voter_matricula, VoteRound(round).value],
        )
        if row is None:
            return None
        return Vote(
            id=row[0],
            practice_id=row[1],
            voter_matricula=row[2],
            round=VoteRound(row[3]),
            score=row[4],
            raw_answers=json.loads(row[5]) if isinstance(row[5], str) else row[5],
            created_at=row[6],
        )

    def insert_vote(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises UniqueConstraintViolation when a vote for the same practice, voter
        and round already exists, including one committed by a concurrent writer.
        """
        vote_id = vote.id or str(uuid.uuid4())
        try:
            self._insert(vote_id, vote)
        except WriteConflictError as e:
            if self.find_vote(vote.practice_id, vote.voter_matricula, vote.round) is not None:
                raise UniqueConstraintViolation() from e
            raise

        logger.debug("Vote stored: {} {} by {}", vote.practice_id, vote.round, vote.voter_matricula)
        return Vote(
            id=vote_id,
            practice_id=vote.practice_id,
            voter_matricula=vote.voter_matricula,
            round=VoteRound(vote.round),
            score=vote.score,
            raw_answers=dict(vote.raw_answers),
        )

    def votes_for_practice(self, practice_id: str) -> dict[VoteRound, set[int]]:
        """Voter matriculas per round for a practice."""
        rows = self.fetchall(
            "SELECT voter_matricula, vote_round FROM vote WHERE practice_id = ?",
            [practice_id],
        )
        result: dict[VoteRound, set[int]] = defaultdict(set)
        for matricula, round_value in rows:
            result[VoteRound(round_value)].add(matricula)
        return {r: result.get(r, set()) for r in VoteRound}

    def voted_practice_ids(self, voter_matricula: int, round: VoteRound) -> set[str]:
        """Practices a voter already voted on in a round."""
        rows = self.fetchall(
            "SELECT practice_id FROM vote WHERE voter_matricula = ? AND vote_round = ?",
            [voter_matricula, VoteRound(round).value],
        )
        return {r[0] for r in rows}
