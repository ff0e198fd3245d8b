"""Committee administration - create, edit and remove voting committees."""

import math

from loguru import logger

from app.errors import ConflictError, ForbiddenError, NotFoundError, UniqueConstraintViolation, ValidationError
from app.models.core import User, Voter
from app.models.voting import Committee, CommitteeDetail, CommitteeDraft, CommitteeKind, CommitteePage
from app.repositories.core import ContractRepository, UserRepository
from app.repositories.voting import CommitteeRepository
from settings import COMMITTEE_ADMIN_ROLES, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def _slot_taken(kind: CommitteeKind) -> ConflictError:
    if kind is CommitteeKind.CORPORATE:
        return ConflictError("A corporate committee already exists")
    return ConflictError("A local committee already exists for this contract")


def _member_ids(members) -> list[int]:
    """Unique integer matriculas, first occurrence order kept."""
    result: list[int] = []
    for m in members or []:
        try:
            matricula = int(m)
        except (TypeError, ValueError):
            continue
        if matricula not in result:
            result.append(matricula)
    return result


class CommitteeAdmin:
    """Committee CRUD with the membership rules voting depends on."""

    def __init__(
        self,
        committee_repo: CommitteeRepository,
        user_repo: UserRepository,
        contract_repo: ContractRepository,
        admin_roles: tuple[str, ...] = COMMITTEE_ADMIN_ROLES,
    ):
        self._committees = committee_repo
        self._users = user_repo
        self._contracts = contract_repo
        self._admin_roles = tuple(admin_roles)
        logger.debug("CommitteeAdmin initialized")

    # =========================================================================
    # Reads
    # =========================================================================

    def _hydrate(self, committees: list[Committee]) -> list[CommitteeDetail]:
        members = self._committees.members_by_committee([c.id for c in committees])
        codes = sorted({c.contract_code for c in committees if c.contract_code})
        names = self._contracts.get_names(codes)
        return [
            CommitteeDetail(
                committee=c,
                contract_name=names.get(c.contract_code) if c.contract_code else None,
                members=members.get(c.id, []),
            )
            for c in committees
        ]

    def get(self, committee_id: int) -> CommitteeDetail:
        committee = self._committees.get(committee_id)
        if committee is None:
            raise NotFoundError("Committee not found")
        return self._hydrate([committee])[0]

    def list_committees(
        self,
        kind: CommitteeKind | str | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> CommitteePage:
        """One page of committees, newest first."""
        if kind is not None:
            kind = self._parse_kind(kind)
        page = max(1, page)
        limit = max(1, min(limit, MAX_PAGE_SIZE))
        search = search.strip() if search else None

        total = self._committees.count(kind, search)
        committees = self._committees.list_committees(kind, search, limit=limit, offset=(page - 1) * limit)
        logger.debug("Committees page {} ({} of {})", page, len(committees), total)

        return CommitteePage(
            items=self._hydrate(committees),
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if total else 0,
        )

    def candidate_members(self, contract_code: str | None = None, search: str | None = None) -> list[User]:
        """Active users that may be picked as members."""
        return self._users.list_active(contract_code, search)

    # =========================================================================
    # Writes
    # =========================================================================

    def _authorize(self, actor: Voter) -> None:
        if actor.role not in self._admin_roles:
            logger.info("Committee change denied for {} (role {})", actor.matricula, actor.role)
            raise ForbiddenError("Access denied")

    @staticmethod
    def _parse_kind(kind) -> CommitteeKind:
        try:
            return CommitteeKind(kind)
        except ValueError:
            raise ValidationError("Committee kind must be 'local' or 'corporate'") from None

    def _validate(self, draft: CommitteeDraft, exclude_id: int | None = None) -> CommitteeDraft:
        """Checked and normalized copy of `draft`."""
        name = (draft.name or "").strip()
        if not name or not draft.kind:
            raise ValidationError("Required fields: name and kind (local or corporate)")
        kind = self._parse_kind(draft.kind)

        members = _member_ids(draft.members)
        if not members:
            raise ValidationError("Select at least one member")

        contract_code = None
        if kind is CommitteeKind.LOCAL:
            contract_code = (draft.contract_code or "").strip()
            if not contract_code:
                raise ValidationError("Contract is required for a local committee")
            if self._contracts.get_contract(contract_code) is None:
                raise ValidationError("Contract does not exist")

        existing = self._committees.find_committee(kind, contract_code)
        if existing is not None and existing.id != exclude_id:
            raise _slot_taken(kind)

        users = self._users.get_users(members)
        if len(users) != len(members):
            missing = sorted(set(members) - {u.matricula for u in users})
            raise ValidationError("Some members were not found", details={"missing": missing})
        if any(not u.active for u in users):
            raise ValidationError("All members must be active")
        if kind is CommitteeKind.LOCAL:
            if any(u.contract_code and u.contract_code != contract_code for u in users):
                raise ValidationError("All members of a local committee must belong to its contract")

        return CommitteeDraft(
            name=name,
            kind=kind,
            contract_code=contract_code,
            members=members,
            description=(draft.description or "").strip() or None,
        )

    def create(self, draft: CommitteeDraft, actor: Voter) -> CommitteeDetail:
        self._authorize(actor)
        checked = self._validate(draft)
        try:
            committee = self._committees.create(
                name=checked.name,
                kind=checked.kind,
                contract_code=checked.contract_code,
                members=checked.members,
                description=checked.description,
                created_by=actor.matricula,
            )
        except UniqueConstraintViolation as e:
            logger.info("Concurrent committee create rejected: {} ({})", checked.kind.value, checked.contract_code)
            raise _slot_taken(checked.kind) from e
        return self._hydrate([committee])[0]

    def update(self, committee_id: int, draft: CommitteeDraft, actor: Voter) -> CommitteeDetail:
        self._authorize(actor)
        if self._committees.get(committee_id) is None:
            raise NotFoundError("Committee not found")
        checked = self._validate(draft, exclude_id=committee_id)

        try:
            committee = self._committees.update(
                committee_id,
                name=checked.name,
                kind=checked.kind,
                contract_code=checked.contract_code,
                members=checked.members,
                description=checked.description,
            )
        except UniqueConstraintViolation as e:
            logger.info("Concurrent committee update rejected: {} ({})", committee_id, checked.kind.value)
            raise _slot_taken(checked.kind) from e
        if committee is None:
            raise NotFoundError("Committee not found")
        return self._hydrate([committee])[0]

    def delete(self, committee_id: int, actor: Voter) -> None:
        self._authorize(actor)
        if not self._committees.delete(committee_id):
            raise NotFoundError("Committee not found")
