"""Committee registry - who votes in which round, and who already did."""

from loguru import logger

from app.models.voting import Committee, CommitteeKind, Member, Participant, VoteRound
from app.repositories.voting import CommitteeRepository


class CommitteeRegistry:
    """Read-only committee lookups for ballots and dashboards. Never gates voting."""

    def __init__(self, committee_repo: CommitteeRepository):
        self._committees = committee_repo
        logger.debug("CommitteeRegistry initialized")

    def resolve_local_committee(self, contract_code: str | None) -> Committee | None:
        """The local committee of a contract, if one exists."""
        if not contract_code:
            return None
        return self._committees.find_committee(CommitteeKind.LOCAL, contract_code)

    def resolve_corporate_committee(self) -> Committee | None:
        """The corporate committee, if one exists."""
        return self._committees.find_committee(CommitteeKind.CORPORATE)

    def committee_for_round(self, round: VoteRound, contract_code: str | None) -> Committee | None:
        """Quarterly rounds are voted locally, annual rounds by the corporate committee."""
        if VoteRound(round) is VoteRound.QUARTERLY:
            return self.resolve_local_committee(contract_code)
        return self.resolve_corporate_committee()

    def list_members(self, committee_id: int) -> list[Member]:
        return self._committees.list_members(committee_id)

    def participation(self, committee_id: int, votes_cast: set[int]) -> list[Participant]:
        """Every member once, flagged when their matricula is in `votes_cast`."""
        seen: set[int] = set()
        result = []
        for member in self.list_members(committee_id):
            if member.matricula in seen:
                continue
            seen.add(member.matricula)
            result.append(
                Participant(
                    matricula=member.matricula,
                    name=member.name,
                    voted=member.matricula in votes_cast,
                )
            )
        logger.debug(
            "participation({}): {}/{} voted", committee_id, sum(p.voted for p in result), len(result)
        )
        return result
