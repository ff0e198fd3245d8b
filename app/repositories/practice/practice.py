"""Practice repository - read access to best-practice records."""

from loguru import logger

from app.models.practice import Practice, PracticeDetail
from app.repositories.base import BaseRepository

_DETAIL_COLUMNS = """
    p.id, p.contract_code, p.status, p.relevance, p.title, p.description,
    p.author_matricula, u.name, p.created_at
"""


def _detail(row) -> PracticeDetail:
    return PracticeDetail(
        id=row[0],
        contract_code=row[1],
        status=row[2],
        relevance=row[3],
        title=row[4],
        description=row[5],
        author_matricula=row[6],
        author_name=row[7],
        created_at=row[8],
    )


class PracticeRepository(BaseRepository):
    """Repository for practice data access."""

    def get_practice(self, practice_id: str) -> Practice | None:
        """Fields the pipeline needs: id, contract, status, relevance."""
        row = self.fetchone(
            "SELECT id, contract_code, status, relevance FROM practice WHERE id = ?",
            [practice_id],
        )
        if row is None:
            return None
        return Practice(id=row[0], contract_code=row[1], status=row[2], relevance=row[3])

    def get_detail(self, practice_id: str) -> PracticeDetail | None:
        """Practice with display fields and author name."""
        row = self.fetchone(
            f"""
            SELECT {_DETAIL_COLUMNS}
            FROM practice p
            LEFT JOIN app_user u ON u.matricula = p.author_matricula
            WHERE p.id = ?
            """,
            [practice_id],
        )
        return _detail(row) if row else None

    def list_by_status(self, statuses: list[str], contract_code: str | None = None) -> list[PracticeDetail]:
        """Practices whose normalized status is one of `statuses`, newest first."""
        if not statuses:
            return []
        placeholders = ", ".join("?" for _ in statuses)
        query = f"""
            SELECT {_DETAIL_COLUMNS}
            FROM practice p
            LEFT JOIN app_user u ON u.matricula = p.author_matricula
            WHERE lower(trim(p.status)) IN ({placeholders})
        """
        params: list = list(statuses)
        if contract_code is not None:
            query += " AND p.contract_code = ?"
            params.append(contract_code)
        query += " ORDER BY p.created_at DESC, p.id"

        result = [_detail(r) for r in self.fetchall(query, params)]
        logger.debug("list_by_status({}, {}): {} practices", statuses, contract_code, len(result))
        return result
