"""Contract-scoped access rule for viewing and voting on practices."""

from loguru import logger

from app.errors import ForbiddenError
from app.models.core import Voter
from app.models.practice import Practice


class EligibilityGuard:
    """Decides whether a user may view or vote on a practice.

    A user bound to a contract only reaches practices of that contract. A user
    without a contract is let through unless `allow_unscoped` is off.
    """

    def __init__(self, allow_unscoped: bool = True):
        self._allow_unscoped = allow_unscoped

    def can_access(self, user: Voter, practice: Practice) -> bool:
        if user.contract_code:
            if user.contract_code != practice.contract_code:
                logger.info(
                    "Access denied: user {} ({}) on practice {} ({})",
                    user.matricula,
                    user.contract_code,
                    practice.id,
                    practice.contract_code,
                )
                raise ForbiddenError("Access denied for this contract")
            return True

        if not self._allow_unscoped:
            logger.info("Access denied: user {} has no contract", user.matricula)
            raise ForbiddenError("User has no contract")

        logger.debug("Unscoped access: user {} on practice {}", user.matricula, practice.id)
        return True

    def contract_scope(self, user: Voter) -> str | None:
        """Contract a listing for `user` is limited to; None means every contract.

        Applies the same rule as `can_access`, so nothing listed is later refused.
        """
        if user.contract_code:
            return user.contract_code
        if not self._allow_unscoped:
            logger.info("Access denied: user {} has no contract", user.matricula)
            raise ForbiddenError("User has no contract")
        return None
