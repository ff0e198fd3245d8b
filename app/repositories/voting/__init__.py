"""Voting repositories - votes and committees."""

from app.repositories.voting.committee import CommitteeRepository
from app.repositories.voting.vote import VoteRepository

__all__ = [
    "CommitteeRepository",
    "VoteRepository",
]
