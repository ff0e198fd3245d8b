"""Contract repository."""

from app.repositories.base import BaseRepository


class ContractRepository(BaseRepository):
    """Repository for contract lookups."""

    def get_contract(self, code: str) -> dict | None:
        row = self.fetchone("SELECT code, name FROM contract WHERE code = ?", [code])
        if row is None:
            return None
        return {"code": row[0], "name": row[1]}

    def get_names(self, codes: list[str]) -> dict[str, str | None]:
        """Get contract names: {code: name}."""
        if not codes:
            return {}
        placeholders = ", ".join("?" for _ in codes)
        rows = self.fetchall(f"SELECT code, name FROM contract WHERE code IN ({placeholders})", list(codes))
        return {r[0]: r[1] for r in rows}
