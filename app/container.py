"""Dependency Injection container - initialized at app startup."""

import duckdb
from loguru import logger

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
from app.services.governance import (
    CommitteeAdmin,
    CommitteeRegistry,
    EligibilityGuard,
    StrategicViewService,
    VoteLedger,
)
from helpers.stages import Stage
from settings import ALLOW_UNSCOPED_ACCESS, COMMITTEE_ADMIN_ROLES, DASHBOARD_MAX_WORKERS, UNKNOWN_STATUS_STAGE


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, db_path: str | None = None, force: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup.

        `force` rebuilds everything on a fresh connection (tests use it with
        an in-memory database).
        """
        if self._initialized and not force:
            return
        if self._initialized:
            self.close()

        self.conn: duckdb.DuckDBPyConnection = connect(db_path)
        fallback = Stage.from_key(UNKNOWN_STATUS_STAGE)

        # Repositories (one shared connection)
        self._user_repo = UserRepository(self.conn)
        self._contract_repo = ContractRepository(self.conn)
        self._responsible_repo = ResponsibleRepository(self.conn)
        self._practice_repo = PracticeRepository(self.conn)
        self._vote_repo = VoteRepository(self.conn)
        self._committee_repo = CommitteeRepository(self.conn)

        # Services (with injected repos)
        self.registry = CommitteeRegistry(committee_repo=self._committee_repo)
        self.guard = EligibilityGuard(allow_unscoped=ALLOW_UNSCOPED_ACCESS)

        self.ledger = VoteLedger(
            practice_repo=self._practice_repo,
            vote_repo=self._vote_repo,
            guard=self.guard,
            unknown_status_stage=fallback,
        )

        self.strategic_view = StrategicViewService(
            practice_repo=self._practice_repo,
            vote_repo=self._vote_repo,
            responsible_repo=self._responsible_repo,
            user_repo=self._user_repo,
            registry=self.registry,
            guard=self.guard,
            unknown_status_stage=fallback,
            max_workers=DASHBOARD_MAX_WORKERS,
        )

        self.committee_admin = CommitteeAdmin(
            committee_repo=self._committee_repo,
            user_repo=self._user_repo,
            contract_repo=self._contract_repo,
            admin_roles=COMMITTEE_ADMIN_ROLES,
        )

        self._initialized = True
        logger.info("Container initialized (unknown status -> {})", fallback.label)

    def close(self) -> None:
        """Close the shared connection."""
        if self._initialized:
            close_db(self.conn)
            self._initialized = False


# Global container instance
container = Container()
