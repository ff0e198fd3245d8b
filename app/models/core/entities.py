"""Core domain entities - users and responsibles."""

from dataclasses import dataclass

from app.models.common import BaseEntity

ACTIVE_STATUS = "active"


@dataclass
class User(BaseEntity):
    """Employee record."""

    matricula: int
    name: str | None = None
    email: str | None = None
    contract_code: str | None = None
    status: str | None = ACTIVE_STATUS

    @property
    def active(self) -> bool:
        return not self.status or self.status == ACTIVE_STATUS


@dataclass
class UserSummary(BaseEntity):
    """Matricula with display name, when known."""

    matricula: int
    name: str | None = None


@dataclass
class ResponsibleAssignment(BaseEntity):
    """Evaluation responsibles for a contract."""

    contract_code: str
    sesmt_responsible: int | None = None
    management_responsible: int | None = None


@dataclass
class Voter(BaseEntity):
    """Authenticated caller as supplied by the identity collaborator."""

    matricula: int
    contract_code: str | None = None
    role: str | None = None
