"""Tests for committee administration."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.models.core import Voter
from app.models.voting import CommitteeDraft, CommitteeKind
from app.repositories import CommitteeRepository
from app.services.governance import CommitteeAdmin
from seed import add_contract, add_user


@pytest.fixture
def people(conn):
    add_contract(conn, "C1", "Plant North")
    add_contract(conn, "C2", "Plant South")
    add_user(conn, 1, "C1", name="Ana")
    add_user(conn, 2, "C1", name="Bruno")
    add_user(conn, 3, "C2", name="Carla")
    add_user(conn, 4, None, name="Diego")
    add_user(conn, 5, "C1", name="Eva", status="inactive")


def local(members, contract="C1", name="North") -> CommitteeDraft:
    return CommitteeDraft(name=name, kind="local", contract_code=contract, members=members)


def corporate(members, name="Corporate") -> CommitteeDraft:
    return CommitteeDraft(name=name, kind="corporate", members=members)


class TestCreate:
    def test_local(self, committee_admin, admin, people):
        detail = committee_admin.create(local([2, 1, 1, "2"]), admin)
        assert detail.committee.kind is CommitteeKind.LOCAL
        assert detail.committee.created_by == admin.matricula
        assert detail.contract_name == "Plant North"
        assert [m.name for m in detail.members] == ["Ana", "Bruno"]

    def test_member_without_contract_joins_local(self, committee_admin, admin, people):
        detail = committee_admin.create(local([1, 4]), admin)
        assert len(detail.members) == 2

    def test_corporate_drops_contract(self, committee_admin, admin, people):
        draft = CommitteeDraft(name="Corp", kind="corporate", contract_code="C1", members=[1, 3])
        detail = committee_admin.create(draft, admin)
        assert detail.committee.contract_code is None
        assert detail.contract_name is None

    def test_editor_allowed(self, committee_admin, people):
        committee_admin.create(corporate([1]), Voter(matricula=1, role="Editor"))

    def test_member_role_forbidden(self, committee_admin, people):
        with pytest.raises(ForbiddenError):
            committee_admin.create(corporate([1]), Voter(matricula=1, role="Member"))

    @pytest.mark.parametrize(
        "draft",
        [
            CommitteeDraft(name="", kind="local", contract_code="C1", members=[1]),
            CommitteeDraft(name="X", kind=None, members=[1]),
            CommitteeDraft(name="X", kind="regional", members=[1]),
            CommitteeDraft(name="X", kind="corporate", members=[]),
            CommitteeDraft(name="X", kind="corporate", members=["a", None]),
            CommitteeDraft(name="X", kind="local", contract_code=None, members=[1]),
            CommitteeDraft(name="X", kind="local", contract_code="C9", members=[1]),
        ],
    )
    def test_invalid_drafts(self, committee_admin, admin, people, draft):
        with pytest.raises(ValidationError):
            committee_admin.create(draft, admin)

    def test_unknown_member(self, committee_admin, admin, people):
        with pytest.raises(ValidationError) as exc:
            committee_admin.create(corporate([1, 99]), admin)
        assert exc.value.details == {"missing": [99]}

    def test_inactive_member(self, committee_admin, admin, people):
        with pytest.raises(ValidationError):
            committee_admin.create(corporate([1, 5]), admin)

    def test_local_member_from_other_contract(self, committee_admin, admin, people):
        with pytest.raises(ValidationError):
            committee_admin.create(local([1, 3]), admin)

    def test_second_corporate_conflicts(self, committee_admin, admin, people):
        committee_admin.create(corporate([1]), admin)
        with pytest.raises(ConflictError):
            committee_admin.create(corporate([2], name="Other"), admin)

    def test_second_local_for_contract_conflicts(self, committee_admin, admin, people):
        committee_admin.create(local([1]), admin)
        with pytest.raises(ConflictError):
            committee_admin.create(local([2], name="North 2"), admin)
        committee_admin.create(local([3], contract="C2", name="South"), admin)


class BarrierCommitteeRepository(CommitteeRepository):
    """Holds each thread at its first slot lookup until all have reached it."""

    def __init__(self, conn, barrier: threading.Barrier):
        super().__init__(conn)
        self._barrier = barrier
        self._local = threading.local()

    def find_committee(self, kind, contract_code=None):
        committee = super().find_committee(kind, contract_code)
        if not getattr(self._local, "waited", False):
            self._local.waited = True
            self._barrier.wait(timeout=10)
        return committee


class TestConcurrentCreate:
    @pytest.mark.parametrize(
        "draft",
        [corporate([1]), local([1, 2])],
        ids=["corporate", "local"],
    )
    def test_race_yields_one_committee_and_one_conflict(self, conn, user_repo, contract_repo, admin, people, draft):
        repo = BarrierCommitteeRepository(conn, threading.Barrier(2))
        committee_admin = CommitteeAdmin(repo, user_repo, contract_repo, admin_roles=("Admin",))

        def attempt():
            try:
                return committee_admin.create(draft, admin)
            except ConflictError as e:
                return e

        with ThreadPoolExecutor(max_workers=2) as pool:
            results = list(pool.map(lambda _: attempt(), range(2)))

        created = [r for r in results if not isinstance(r, ConflictError)]
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        assert len(created) == 1
        assert len(conflicts) == 1
        assert conn.execute("SELECT COUNT(*) FROM committee").fetchone()[0] == 1


class TestUpdate:
    def test_replaces_members(self, committee_admin, admin, people):
        created = committee_admin.create(local([1, 2]), admin)
        updated = committee_admin.update(created.committee.id, local([2], name="North Renamed"), admin)
        assert updated.committee.name == "North Renamed"
        assert [m.matricula for m in updated.members] == [2]

    def test_keeps_own_uniqueness_slot(self, committee_admin, admin, people):
        created = committee_admin.create(corporate([1]), admin)
        updated = committee_admin.update(created.committee.id, corporate([1, 2]), admin)
        assert len(updated.members) == 2

    def test_cannot_take_taken_contract(self, committee_admin, admin, people):
        committee_admin.create(local([1]), admin)
        south = committee_admin.create(local([3], contract="C2", name="South"), admin)
        with pytest.raises(ConflictError):
            committee_admin.update(south.committee.id, local([1]), admin)

    def test_missing(self, committee_admin, admin, people):
        with pytest.raises(NotFoundError):
            committee_admin.update(404, corporate([1]), admin)


class TestDeleteAndRead:
    def test_delete(self, conn, committee_admin, admin, people):
        created = committee_admin.create(corporate([1, 2]), admin)
        committee_admin.delete(created.committee.id, admin)
        with pytest.raises(NotFoundError):
            committee_admin.get(created.committee.id)
        assert conn.execute("SELECT COUNT(*) FROM committee_member").fetchone()[0] == 0

    def test_delete_missing(self, committee_admin, admin, people):
        with pytest.raises(NotFoundError):
            committee_admin.delete(404, admin)

    def test_delete_forbidden(self, committee_admin, admin, people):
        created = committee_admin.create(corporate([1]), admin)
        with pytest.raises(ForbiddenError):
            committee_admin.delete(created.committee.id, Voter(matricula=2))

    def test_list_paginates(self, committee_admin, admin, people):
        committee_admin.create(corporate([4]), admin)
        committee_admin.create(local([1]), admin)
        committee_admin.create(local([3], contract="C2", name="South"), admin)

        page = committee_admin.list_committees(page=1, limit=2)
        assert (page.total, page.total_pages, len(page.items)) == (3, 2, 2)
        assert page.items[0].committee.name == "South"
        assert committee_admin.list_committees(page=2, limit=2).items[0].committee.name == "Corporate"

    def test_list_filters(self, committee_admin, admin, people):
        committee_admin.create(corporate([4]), admin)
        committee_admin.create(local([1]), admin)
        assert committee_admin.list_committees(kind="local").total == 1
        assert committee_admin.list_committees(search="corp").items[0].committee.kind is CommitteeKind.CORPORATE

    def test_list_empty(self, committee_admin, people):
        page = committee_admin.list_committees()
        assert (page.total, page.total_pages, page.items) == (0, 0, [])

    def test_candidates(self, committee_admin, people):
        assert [u.matricula for u in committee_admin.candidate_members("C1")] == [1, 2]
        assert [u.name for u in committee_admin.candidate_members(search="car")] == ["Carla"]
