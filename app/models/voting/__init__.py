"""Voting domain models - votes, committees and memberships."""

from app.models.voting.committee import (
    COMMITTEE_DDL,
    COMMITTEE_INDEXES,
    COMMITTEE_MEMBER_DDL,
    COMMITTEE_SEQUENCE_DDL,
)
from app.models.voting.entities import (
    Committee,
    CommitteeDetail,
    CommitteeDraft,
    CommitteeKind,
    CommitteePage,
    CommitteeRef,
    Member,
    Participant,
    Vote,
    VoteReceipt,
    VoteRound,
)
from app.models.voting.vote import VOTE_DDL, VOTE_INDEXES

__all__ = [
    "COMMITTEE_SEQUENCE_DDL",
    "COMMITTEE_DDL",
    "COMMITTEE_MEMBER_DDL",
    "COMMITTEE_INDEXES",
    "VOTE_DDL",
    "VOTE_INDEXES",
    "Committee",
    "CommitteeDetail",
    "CommitteeDraft",
    "CommitteeKind",
    "CommitteePage",
    "CommitteeRef",
    "Member",
    "Participant",
    "Vote",
    "VoteReceipt",
    "VoteRound",
]
