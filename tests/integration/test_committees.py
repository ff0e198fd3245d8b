"""Tests for committee lookups and participation."""

import pytest

from app.errors import UniqueConstraintViolation
from app.models.voting import CommitteeKind, VoteRound
from seed import add_committee


class TestResolve:
    def test_local_committee(self, registry, governance):
        committee = registry.resolve_local_committee("C1")
        assert committee.id == governance["local"]
        assert committee.kind is CommitteeKind.LOCAL

    def test_local_missing(self, registry, governance):
        assert registry.resolve_local_committee("C2") is None
        assert registry.resolve_local_committee(None) is None

    def test_corporate_committee(self, registry, governance):
        assert registry.resolve_corporate_committee().id == governance["corporate"]

    def test_second_corporate_rejected(self, conn, registry, governance):
        with pytest.raises(UniqueConstraintViolation):
            add_committee(conn, "Second Corporate", "corporate", None, [900])
        assert registry.resolve_corporate_committee().id == governance["corporate"]

    def test_committee_for_round(self, registry, governance):
        assert registry.committee_for_round(VoteRound.QUARTERLY, "C1").id == governance["local"]
        assert registry.committee_for_round(VoteRound.ANNUAL, "C1").id == governance["corporate"]


class TestParticipation:
    def test_flags_voters(self, registry, governance):
        result = registry.participation(governance["local"], {101, 103})
        assert {p.matricula: p.voted for p in result} == {101: True, 102: False, 103: True}

    def test_covers_every_member_once(self, conn, registry, governance):
        conn.execute("INSERT INTO committee_member (committee_id, matricula) VALUES (?, ?)", [governance["local"], 102])
        result = registry.participation(governance["local"], set())
        assert sorted(p.matricula for p in result) == [101, 102, 103]

    def test_votes_by_non_members_ignored(self, registry, governance):
        result = registry.participation(governance["local"], {555})
        assert len(result) == 3
        assert not any(p.voted for p in result)

    def test_unknown_member_has_no_name(self, conn, registry):
        committee_id = add_committee(conn, "Ghosts", "corporate", None, [777])
        result = registry.participation(committee_id, {777})
        assert result[0].matricula == 777
        assert result[0].name is None
        assert result[0].voted
