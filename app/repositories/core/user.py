"""User repository - names and status of employees."""

from loguru import logger

from app.models.core import User
from app.repositories.base import BaseRepository


def _placeholders(values: list) -> str:
    return ", ".join("?" for _ in values)


class UserRepository(BaseRepository):
    """Repository for user data access."""

    def get_users(self, matriculas: list[int]) -> list[User]:
        """Users with the given matriculas; unknown matriculas are skipped."""
        if not matriculas:
            return []
        rows = self.fetchall(
            f"""
            SELECT matricula, name, email, contract_code, status
            FROM app_user
            WHERE matricula IN ({_placeholders(matriculas)})
            """,
            list(matriculas),
        )
        return [User(matricula=r[0], name=r[1], email=r[2], contract_code=r[3], status=r[4]) for r in rows]

    def get_names(self, matriculas: list[int]) -> dict[int, str | None]:
        """Get display names: {matricula: name}."""
        result = {u.matricula: u.name for u in self.get_users(matriculas)}
        logger.debug("get_names({}): {} found", len(matriculas), len(result))
        return result

    def list_active(self, contract_code: str | None = None, search: str | None = None) -> list[User]:
        """Active users, optionally of one contract and matching name or matricula."""
        query = """
            SELECT matricula, name, email, contract_code, status
            FROM app_user
            WHERE coalesce(status, 'active') = 'active'
        """
        params: list = []
        if contract_code:
            query += " AND contract_code = ?"
            params.append(contract_code)
        if search:
            query += " AND (lower(name) LIKE ? OR CAST(matricula AS VARCHAR) LIKE ?)"
            term = f"%{search.strip().lower()}%"
            params.extend([term, term])
        query += " ORDER BY name, matricula"

        rows = self.fetchall(query, params)
        return [User(matricula=r[0], name=r[1], email=r[2], contract_code=r[3], status=r[4]) for r in rows]
