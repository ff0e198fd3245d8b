"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.core import (
    CONTRACT_DDL,
    RESPONSIBLE_DDL,
    USER_DDL,
    USER_INDEXES,
    ResponsibleAssignment,
    User,
    UserSummary,
    Voter,
)
from app.models.practice import (
    PRACTICE_DDL,
    PRACTICE_INDEXES,
    Practice,
    PracticeDetail,
    StrategicView,
    VotingContext,
)
from app.models.voting import (
    COMMITTEE_DDL,
    COMMITTEE_INDEXES,
    COMMITTEE_MEMBER_DDL,
    COMMITTEE_SEQUENCE_DDL,
    VOTE_DDL,
    VOTE_INDEXES,
    Committee,
    CommitteeKind,
    Participant,
    Vote,
    VoteRound,
)

ALL_DDL = [
    # Core
    USER_DDL,
    CONTRACT_DDL,
    RESPONSIBLE_DDL,
    # Practice
    PRACTICE_DDL,
    # Voting
    COMMITTEE_SEQUENCE_DDL,
    COMMITTEE_DDL,
    COMMITTEE_MEMBER_DDL,
    VOTE_DDL,
]

ALL_INDEXES = [
    *USER_INDEXES,
    *PRACTICE_INDEXES,
    *COMMITTEE_INDEXES,
    *VOTE_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Core
    "USER_DDL",
    "CONTRACT_DDL",
    "RESPONSIBLE_DDL",
    "ResponsibleAssignment",
    "User",
    "UserSummary",
    "Voter",
    # Practice
    "PRACTICE_DDL",
    "Practice",
    "PracticeDetail",
    "StrategicView",
    "VotingContext",
    # Voting
    "COMMITTEE_SEQUENCE_DDL",
    "COMMITTEE_DDL",
    "COMMITTEE_MEMBER_DDL",
    "VOTE_DDL",
    "Committee",
    "CommitteeKind",
    "Participant",
    "Vote",
    "VoteRound",
    # All DDL
    "ALL_DDL",
    "ALL_INDEXES",
]
