"""Core repositories - users, contracts, responsibles."""

from app.repositories.core.contract import ContractRepository
from app.repositories.core.responsible import ResponsibleRepository
from app.repositories.core.user import UserRepository

__all__ = [
    "ContractRepository",
    "ResponsibleRepository",
    "UserRepository",
]
