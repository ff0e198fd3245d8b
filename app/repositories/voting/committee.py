"""Committee repository - committees and their memberships."""

from collections import defaultdict

import duckdb
from loguru import logger

from app.errors import UniqueConstraintViolation, WriteConflictError
from app.models.voting import Committee, CommitteeKind, Member
from app.repositories.base import BaseRepository, retry_on_write_conflict

_COLUMNS = "id, name, kind, contract_code, description, created_by, created_at, updated_at"


def _scope(kind: CommitteeKind, contract_code: str | None) -> str:
    if CommitteeKind(kind) is CommitteeKind.LOCAL:
        return f"local:{contract_code}"
    return "corporate"


def _committee(row) -> Committee:
    return Committee(
        id=row[0],
        name=row[1],
        kind=CommitteeKind(row[2]),
        contract_code=row[3],
        description=row[4],
        created_by=row[5],
        created_at=row[6],
        updated_at=row[7],
    )


def _filters(kind: CommitteeKind | None, search: str | None) -> tuple[str, list]:
    clauses, params = [], []
    if kind is not None:
        clauses.append("kind = ?")
        params.append(CommitteeKind(kind).value)
    if search:
        clauses.append("name ILIKE ?")
        params.append(f"%{search}%")
    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


def _insert_members(cur: duckdb.DuckDBPyConnection, committee_id: int, members: list[int]) -> None:
    if members:
        cur.executemany(
            "INSERT INTO committee_member (committee_id, matricula) VALUES (?, ?)",
            [[committee_id, m] for m in members],
        )


def _replace_members(cur: duckdb.DuckDBPyConnection, committee_id: int, members: list[int]) -> None:
    cur.execute("DELETE FROM committee_member WHERE committee_id = ?", [committee_id])
    _insert_members(cur, committee_id, members)


class CommitteeRepository(BaseRepository):
    """Repository for committee data access."""

    def find_committee(self, kind: CommitteeKind, contract_code: str | None = None) -> Committee | None:
        """Local committee of a contract, or the corporate committee (first by id)."""
        kind = CommitteeKind(kind)
        if kind is CommitteeKind.LOCAL:
            if not contract_code:
                return None
            row = self.fetchone(
                f"SELECT {_COLUMNS} FROM committee WHERE kind = 'local' AND contract_code = ? ORDER BY id LIMIT 1",
                [contract_code],
            )
        else:
            row = self.fetchone(f"SELECT {_COLUMNS} FROM committee WHERE kind = 'corporate' ORDER BY id LIMIT 1")
        return _committee(row) if row else None

    def get(self, committee_id: int) -> Committee | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM committee WHERE id = ?", [committee_id])
        return _committee(row) if row else None

    def list_committees(
        self,
        kind: CommitteeKind | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Committee]:
        where, params = _filters(kind, search)
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM committee {where} ORDER BY created_at DESC, id DESC LIMIT ? OFFSET ?",
            [*params, limit, offset],
        )
        return [_committee(r) for r in rows]

    def count(self, kind: CommitteeKind | None = None, search: str | None = None) -> int:
        where, params = _filters(kind, search)
        row = self.fetchone(f"SELECT COUNT(*) FROM committee {where}", params)
        return int(row[0]) if row else 0

    def list_members(self, committee_id: int) -> list[Member]:
        """Members ordered by name, then matricula."""
        return self.members_by_committee([committee_id]).get(committee_id, [])

    def members_by_committee(self, committee_ids: list[int]) -> dict[int, list[Member]]:
        """Members of several committees: {committee_id: [Member]}."""
        if not committee_ids:
            return {}
        placeholders = ", ".join("?" for _ in committee_ids)
        rows = self.fetchall(
            f"""
            SELECT DISTINCT m.committee_id, m.matricula, u.name, u.email, u.contract_code
            FROM committee_member m
            LEFT JOIN app_user u ON u.matricula = m.matricula
            WHERE m.committee_id IN ({placeholders})
            ORDER BY u.name NULLS LAST, m.matricula
            """,
            list(committee_ids),
        )
        result: dict[int, list[Member]] = defaultdict(list)
        for committee_id, matricula, name, email, contract_code in rows:
            result[committee_id].append(
                Member(matricula=matricula, name=name, email=email, contract_code=contract_code)
            )
        return dict(result)

    @retry_on_write_conflict
    def _atomic(self, op):
        """Run `op` in a transaction, retrying while a concurrent writer holds the same rows."""
        return self.transaction(op)

    def _taken(self, kind: CommitteeKind, contract_code: str | None, exclude_id: int | None = None) -> bool:
        existing = self.find_committee(kind, contract_code)
        return existing is not None and existing.id != exclude_id

    def create(
        self,
        name: str,
        kind: CommitteeKind,
        contract_code: str | None,
        members: list[int],
        description: str | None = None,
        created_by: int | None = None,
    ) -> Committee:
        """Insert a committee and its members atomically.

        Raises UniqueConstraintViolation when the corporate slot, or the local
        slot of the contract, is already taken, including by a concurrent writer.
        """
        kind = CommitteeKind(kind)

        def op(cur: duckdb.DuckDBPyConnection) -> Committee:
            row = cur.execute(
                f"""
                INSERT INTO committee (name, description, kind, contract_code, scope, created_by)
                VALUES (?, ?, ?, ?, ?, ?)
                RETURNING {_COLUMNS}
                """,
                [name, description, kind.value, contract_code, _scope(kind, contract_code), created_by],
            ).fetchone()
            committee = _committee(row)
            _insert_members(cur, committee.id, members)
            return committee

        try:
            committee = self._atomic(op)
        except WriteConflictError as e:
            if self._taken(kind, contract_code):
                raise UniqueConstraintViolation() from e
            raise

        logger.info("Committee created: {} ({}, {} members)", committee.id, committee.kind.value, len(members))
        return committee

    def update(
        self,
        committee_id: int,
        name: str,
        kind: CommitteeKind,
        contract_code: str | None,
        members: list[int],
        description: str | None = None,
    ) -> Committee | None:
        """Update a committee and replace its members atomically.

        The scope key is only rewritten when kind or contract change.
        """
        kind = CommitteeKind(kind)
        scope = _scope(kind, contract_code)

        def op(cur: duckdb.DuckDBPyConnection) -> Committee | None:
            current = cur.execute("SELECT scope FROM committee WHERE id = ?", [committee_id]).fetchone()
            if current is None:
                return None
            sets, params = ["name = ?", "description = ?"], [name, description]
            if current[0] != scope:
                sets += ["kind = ?", "contract_code = ?", "scope = ?"]
                params += [kind.value, contract_code, scope]
            row = cur.execute(
                f"""
                UPDATE committee
                SET {", ".join(sets)}, updated_at = current_timestamp
                WHERE id = ?
                RETURNING {_COLUMNS}
                """,
                [*params, committee_id],
            ).fetchone()
            _replace_members(cur, committee_id, members)
            return _committee(row)

        try:
            committee = self._atomic(op)
        except WriteConflictError as e:
            if self._taken(kind, contract_code, exclude_id=committee_id):
                raise UniqueConstraintViolation() from e
            raise

        if committee:
            logger.info("Committee updated: {} ({} members)", committee_id, len(members))
        return committee

    def delete(self, committee_id: int) -> bool:
        """Delete a committee and its memberships."""

        def op(cur: duckdb.DuckDBPyConnection) -> bool:
            cur.execute("DELETE FROM committee_member WHERE committee_id = ?", [committee_id])
            row = cur.execute("DELETE FROM committee WHERE id = ? RETURNING id", [committee_id]).fetchone()
            return row is not None

        deleted = self.transaction(op)
        if deleted:
            logger.info("Committee deleted: {}", committee_id)
        return deleted
