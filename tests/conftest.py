"""Shared fixtures: an in-memory governance database and wired services."""

import pytest

from app.models.core import Voter
from app.repositories import (
    CommitteeRepository,
    ContractRepository,
    PracticeRepository,
    ResponsibleRepository,
    UserRepository,
    VoteRepository,
    close_db,
    connect,
)
from app.repositories.db import MEMORY_DB
from app.services.governance import (
    CommitteeAdmin,
    CommitteeRegistry,
    EligibilityGuard,
    StrategicViewService,
    VoteLedger,
)
from seed import add_committee, add_contract, add_responsibles, add_user

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def conn():
    connection = connect(MEMORY_DB)
    yield connection
    close_db(connection)


@pytest.fixture
def practice_repo(conn):
    return PracticeRepository(conn)


@pytest.fixture
def vote_repo(conn):
    return VoteRepository(conn)


@pytest.fixture
def committee_repo(conn):
    return CommitteeRepository(conn)


@pytest.fixture
def user_repo(conn):
    return UserRepository(conn)


@pytest.fixture
def contract_repo(conn):
    return ContractRepository(conn)


@pytest.fixture
def responsible_repo(conn):
    return ResponsibleRepository(conn)


@pytest.fixture
def registry(committee_repo):
    return CommitteeRegistry(committee_repo)


@pytest.fixture
def guard():
    return EligibilityGuard(allow_unscoped=True)


@pytest.fixture
def ledger(practice_repo, vote_repo, guard):
    return VoteLedger(practice_repo, vote_repo, guard)


@pytest.fixture
def strategic_view(practice_repo, vote_repo, responsible_repo, user_repo, registry, guard):
    return StrategicViewService(
        practice_repo,
        vote_repo,
        responsible_repo,
        user_repo,
        registry,
        guard,
        max_workers=4,
    )


@pytest.fixture
def committee_admin(committee_repo, user_repo, contract_repo):
    return CommitteeAdmin(committee_repo, user_repo, contract_repo, admin_roles=("Admin", "Editor"))


@pytest.fixture
def governance(conn):
    """Two contracts, their users, committees and responsibles."""
    add_contract(conn, "C1", "Plant North")
    add_contract(conn, "C2", "Plant South")
    for m in (101, 102, 103):
        add_user(conn, m, "C1")
    add_user(conn, 201, "C2")
    add_user(conn, 900, None, name="Corporate Lead")
    add_user(conn, 901, "C1", name="Safety Officer")
    add_user(conn, 902, "C1", name="Area Manager")

    local_id = add_committee(conn, "North Committee", "local", "C1", [101, 102, 103])
    corporate_id = add_committee(conn, "Corporate Committee", "corporate", None, [900, 101])
    add_responsibles(conn, "C1", 901, 902)
    return {"local": local_id, "corporate": corporate_id}


@pytest.fixture
def voter():
    return Voter(matricula=101, contract_code="C1", role="Member")


@pytest.fixture
def admin():
    return Voter(matricula=900, contract_code=None, role="Admin")
