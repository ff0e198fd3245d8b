"""Services package - service class exports."""

from app.services.governance import (
    CommitteeAdmin,
    CommitteeRegistry,
    EligibilityGuard,
    StrategicViewService,
    VoteLedger,
)

__all__ = [
    "CommitteeAdmin",
    "CommitteeRegistry",
    "EligibilityGuard",
    "StrategicViewService",
    "VoteLedger",
]
