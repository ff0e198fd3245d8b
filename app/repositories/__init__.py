"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.core import ContractRepository, ResponsibleRepository, UserRepository
from app.repositories.db import close_db, connect, init_tables
from app.repositories.practice import PracticeRepository
from app.repositories.voting import CommitteeRepository, VoteRepository

__all__ = [
    # DB
    "connect",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Core
    "ContractRepository",
    "ResponsibleRepository",
    "UserRepository",
    # Practice
    "PracticeRepository",
    # Voting
    "CommitteeRepository",
    "VoteRepository",
]
