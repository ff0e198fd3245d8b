"""Responsible-assignment repository."""

from app.models.core import ResponsibleAssignment
from app.repositories.base import BaseRepository


class ResponsibleRepository(BaseRepository):
    """Per-contract SESMT and management responsibles."""

    def get_responsibles(self, contract_code: str) -> ResponsibleAssignment | None:
        row = self.fetchone(
            """
            SELECT contract_code, sesmt_responsible, management_responsible
            FROM responsible_assignment
            WHERE contract_code = ?
            """,
            [contract_code],
        )
        if row is None:
            return None
        return ResponsibleAssignment(contract_code=row[0], sesmt_responsible=row[1], management_responsible=row[2])
