"""Best-practice governance services."""

from app.services.governance.committee_admin import CommitteeAdmin
from app.services.governance.committees import CommitteeRegistry
from app.services.governance.eligibility import EligibilityGuard
from app.services.governance.ledger import VoteLedger
from app.services.governance.strategic_view import StrategicViewService

__all__ = [
    "CommitteeAdmin",
    "CommitteeRegistry",
    "EligibilityGuard",
    "StrategicViewService",
    "VoteLedger",
]
