"""Tests for the API views over a fresh container."""

import pytest

from app.container import container
from app.errors import ConflictError, InvalidAnswerError, NotFoundError, ValidationError
from app.models.core import Voter
from helpers.stages import Stage
from seed import ALL_GOOD, add_committee, add_contract, add_practice, add_user
from web.api import committees, practices, voting
from web.api.errors import error_response, validate_page, validate_practice_id, validate_round

VOTER = Voter(matricula=101, contract_code="C1")
ADMIN = Voter(matricula=900, role="Admin")


@pytest.fixture
def api():
    container.init(db_path=":memory:", force=True)
    conn = container.conn
    add_contract(conn, "C1", "Plant North")
    add_user(conn, 101, "C1")
    add_user(conn, 102, "C1")
    add_user(conn, 900, None, name="Corporate Lead")
    add_committee(conn, "North Committee", "local", "C1", [101, 102])
    add_practice(conn, "P1", "C1", Stage.QUARTERLY_VOTE)
    yield container
    container.close()


class TestVotingViews:
    def test_open_ballots(self, api):
        resp = voting.get_open_ballots(VOTER, "quarterly")
        assert resp.total == 1
        assert resp.items[0].id == "P1"

    def test_context_and_cast(self, api):
        ctx = voting.get_voting_context("P1", VOTER, "Quarterly")
        assert len(ctx.questions) == 5
        receipt = voting.cast_vote("P1", VOTER, "quarterly", {"answers": ALL_GOOD})
        assert receipt.score == 45
        assert voting.get_open_ballots(VOTER, "quarterly").total == 0

    def test_double_vote(self, api):
        voting.cast_vote("P1", VOTER, "quarterly", {"answers": ALL_GOOD})
        with pytest.raises(ConflictError) as exc:
            voting.cast_vote("P1", VOTER, "quarterly", {"answers": ALL_GOOD})
        assert error_response(exc.value).status == 409

    def test_missing_answer(self, api):
        with pytest.raises(InvalidAnswerError) as exc:
            voting.cast_vote("P1", VOTER, "quarterly", {"answers": {**ALL_GOOD, "q2": None}})
        body = error_response(exc.value)
        assert body.status == 422
        assert body.details == {"q2": "invalid level"}

    def test_malformed_ballot(self, api):
        with pytest.raises(ValidationError):
            voting.cast_vote("P1", VOTER, "quarterly", {"answers": ["good"]})


class TestPracticeViews:
    def test_strategic_view(self, api):
        voting.cast_vote("P1", VOTER, "quarterly", {"answers": ALL_GOOD})
        resp = practices.get_strategic_view("P1", ADMIN)
        assert resp.status == "Awaiting Quarterly Vote"
        assert (resp.quarterly.voted, resp.quarterly.total) == (1, 2)
        assert resp.annual.committee is None
        assert resp.sesmt.done

    def test_not_found(self, api):
        with pytest.raises(NotFoundError) as exc:
            practices.get_strategic_view("P404", ADMIN)
        assert error_response(exc.value).code == "NOT_FOUND"


class TestCommitteeViews:
    def test_crud(self, api):
        created = committees.create_committee({"name": "Corp", "kind": "corporate", "members": [900]}, ADMIN)
        assert created.members[0].name == "Corporate Lead"

        listing = committees.list_committees(page=1, limit=10)
        assert listing.pagination.total == 2

        updated = committees.update_committee(
            created.id, {"name": "Corp", "kind": "corporate", "members": [900, 101]}, ADMIN
        )
        assert len(updated.members) == 2

        committees.delete_committee(created.id, ADMIN)
        assert committees.list_committees().pagination.total == 1

    def test_candidates(self, api):
        resp = committees.list_candidates("C1")
        assert [c.matricula for c in resp.items] == [101, 102]


class TestValidators:
    def test_round(self):
        assert validate_round(" ANNUAL ").value == "annual"
        with pytest.raises(ValidationError):
            validate_round("weekly")

    def test_practice_id(self):
        assert validate_practice_id(" P1 ") == "P1"
        with pytest.raises(ValidationError):
            validate_practice_id("   ")

    def test_page(self):
        validate_page(1, 20)
        with pytest.raises(ValidationError):
            validate_page(0, 20)
        with pytest.raises(ValidationError):
            validate_page(1, 1000)
