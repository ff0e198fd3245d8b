"""Tests for DuckDB repositories."""

import pytest

from app.errors import StorageError, UniqueConstraintViolation
from app.models.voting import CommitteeKind, Vote, VoteRound
from app.repositories import BaseRepository, init_tables
from helpers.stages import Stage
from seed import add_committee, add_practice, add_user


def make_vote(matricula: int = 1, round: VoteRound = VoteRound.QUARTERLY, score: int = 45) -> Vote:
    return Vote(practice_id="P1", voter_matricula=matricula, round=round, score=score, raw_answers={"q1": "good"})


class TestSchema:
    def test_init_is_idempotent(self, conn):
        init_tables(conn)
        assert conn.execute("SELECT COUNT(*) FROM vote").fetchone()[0] == 0


class TestBaseRepository:
    def test_driver_error_is_opaque(self, conn):
        with pytest.raises(StorageError) as exc:
            BaseRepository(conn).fetchall("SELECT * FROM no_such_table")
        assert exc.value.message == "Storage failure"
        assert "no_such_table" not in str(exc.value)

    def test_transaction_rolls_back(self, conn):
        repo = BaseRepository(conn)

        def op(cur):
            cur.execute("INSERT INTO contract (code, name) VALUES ('C1', 'North')")
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            repo.transaction(op)
        assert conn.execute("SELECT COUNT(*) FROM contract").fetchone()[0] == 0


class TestVoteRepository:
    def test_insert_and_find(self, vote_repo):
        stored = vote_repo.insert_vote(make_vote())
        found = vote_repo.find_vote("P1", 1, VoteRound.QUARTERLY)
        assert found.id == stored.id
        assert found.raw_answers == {"q1": "good"}
        assert vote_repo.find_vote("P1", 1, VoteRound.ANNUAL) is None

    def test_unique_key(self, vote_repo):
        vote_repo.insert_vote(make_vote())
        with pytest.raises(UniqueConstraintViolation):
            vote_repo.insert_vote(make_vote(score=60))

    def test_score_range_enforced(self, vote_repo):
        with pytest.raises(StorageError) as exc:
            vote_repo.insert_vote(make_vote(score=80))
        assert not isinstance(exc.value, UniqueConstraintViolation)

    def test_votes_for_practice(self, vote_repo):
        vote_repo.insert_vote(make_vote(1))
        vote_repo.insert_vote(make_vote(2))
        vote_repo.insert_vote(make_vote(1, VoteRound.ANNUAL))
        assert vote_repo.votes_for_practice("P1") == {VoteRound.QUARTERLY: {1, 2}, VoteRound.ANNUAL: {1}}
        assert vote_repo.votes_for_practice("P9") == {VoteRound.QUARTERLY: set(), VoteRound.ANNUAL: set()}

    def test_voted_ids(self, vote_repo):
        vote_repo.insert_vote(make_vote(1))
        assert vote_repo.voted_practice_ids(1, VoteRound.QUARTERLY) == {"P1"}
        assert vote_repo.voted_practice_ids(1, VoteRound.ANNUAL) == set()


class TestPracticeRepository:
    def test_detail_with_author(self, conn, practice_repo):
        add_user(conn, 7, "C1", name="Author")
        add_practice(conn, "P1", "C1", Stage.SESMT, author=7)
        detail = practice_repo.get_detail("P1")
        assert detail.author_name == "Author"
        assert detail.title == "Practice P1"

    def test_list_by_status_normalizes(self, conn, practice_repo):
        add_practice(conn, "A", "C1", "  AWAITING annual VOTE ")
        add_practice(conn, "B", "C2", "aguardando votacao anual", age_days=1)
        add_practice(conn, "C", "C1", Stage.COMPLETED)
        phrases = ["awaiting annual vote", "aguardando votacao anual"]
        assert [p.id for p in practice_repo.list_by_status(phrases)] == ["A", "B"]
        assert [p.id for p in practice_repo.list_by_status(phrases, "C2")] == ["B"]
        assert practice_repo.list_by_status([]) == []


class TestCommitteeRepository:
    def test_local_requires_contract_in_storage(self, committee_repo):
        with pytest.raises(StorageError):
            committee_repo.create("Bad", CommitteeKind.LOCAL, None, [1])

    def test_failed_create_leaves_nothing(self, conn, committee_repo):
        with pytest.raises(StorageError) as exc:
            committee_repo.create("Bad", CommitteeKind.CORPORATE, "C1", [1])
        assert not isinstance(exc.value, UniqueConstraintViolation)
        assert conn.execute("SELECT COUNT(*) FROM committee").fetchone()[0] == 0

    def test_one_corporate_in_storage(self, conn, committee_repo):
        add_committee(conn, "Corp", "corporate", None, [1])
        with pytest.raises(UniqueConstraintViolation):
            committee_repo.create("Corp 2", CommitteeKind.CORPORATE, None, [2])
        assert conn.execute("SELECT COUNT(*) FROM committee").fetchone()[0] == 1

    def test_one_local_per_contract_in_storage(self, conn, committee_repo):
        add_committee(conn, "North", "local", "C1", [1])
        add_committee(conn, "South", "local", "C2", [2])
        with pytest.raises(UniqueConstraintViolation):
            committee_repo.create("North 2", CommitteeKind.LOCAL, "C1", [3])

    def test_update_replaces_members(self, conn, committee_repo):
        committee_id = add_committee(conn, "Corp", "corporate", None, [1, 2])
        committee_repo.update(committee_id, "Corp", CommitteeKind.CORPORATE, None, [3])
        assert [m.matricula for m in committee_repo.list_members(committee_id)] == [3]

    def test_update_into_taken_slot(self, conn, committee_repo):
        add_committee(conn, "North", "local", "C1", [1])
        south = add_committee(conn, "South", "local", "C2", [2])
        with pytest.raises(UniqueConstraintViolation):
            committee_repo.update(south, "South", CommitteeKind.LOCAL, "C1", [2])
        assert committee_repo.get(south).contract_code == "C2"

    def test_update_moves_slot(self, conn, committee_repo):
        local_id = add_committee(conn, "North", "local", "C1", [1])
        moved = committee_repo.update(local_id, "Corp", CommitteeKind.CORPORATE, None, [1])
        assert moved.kind is CommitteeKind.CORPORATE
        assert moved.contract_code is None
        add_committee(conn, "North Again", "local", "C1", [2])

    def test_members_by_committee(self, conn, committee_repo):
        add_user(conn, 2, None, name="Zed")
        add_user(conn, 1, None, name="Amy")
        a = add_committee(conn, "A", "corporate", None, [2, 1])
        b = add_committee(conn, "B", "local", "C1", [2])
        members = committee_repo.members_by_committee([a, b])
        assert [m.name for m in members[a]] == ["Amy", "Zed"]
        assert [m.matricula for m in members[b]] == [2]

    def test_find_local_without_contract(self, committee_repo):
        assert committee_repo.find_committee(CommitteeKind.LOCAL, None) is None
