"""Core domain models - users, contracts, responsibles."""

from app.models.core.contract import CONTRACT_DDL
from app.models.core.entities import ACTIVE_STATUS, ResponsibleAssignment, User, UserSummary, Voter
from app.models.core.responsible import RESPONSIBLE_DDL
from app.models.core.user import USER_DDL, USER_INDEXES

__all__ = [
    "CONTRACT_DDL",
    "RESPONSIBLE_DDL",
    "USER_DDL",
    "USER_INDEXES",
    "ACTIVE_STATUS",
    "ResponsibleAssignment",
    "User",
    "UserSummary",
    "Voter",
]
