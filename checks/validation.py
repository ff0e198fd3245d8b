"""Data validation functions."""

import duckdb

from helpers.scoring import MAX_SCORE, MIN_SCORE
from helpers.stages import resolve_status


def validate_governance(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate governance data integrity."""
    issues = []
    stats = {}

    statuses = conn.execute("SELECT status, COUNT(*) FROM practice GROUP BY status ORDER BY status").fetchall()
    stats["practices"] = sum(n for _, n in statuses)
    unrecognized = {status: n for status, n in statuses if not resolve_status(status).recognized}
    stats["unrecognized_statuses"] = sum(unrecognized.values())
    for status, n in unrecognized.items():
        issues.append(f"{n} practices have unrecognized status {status!r}")

    corporate = conn.execute("SELECT COUNT(*) FROM committee WHERE kind = 'corporate'").fetchone()[0]
    stats["corporate_committees"] = corporate
    if corporate != 1:
        issues.append(f"Expected exactly 1 corporate committee, found {corporate}")

    shared = conn.execute(
        """
        SELECT contract_code, COUNT(*) FROM committee
        WHERE kind = 'local'
        GROUP BY contract_code
        HAVING COUNT(*) > 1
        ORDER BY contract_code
        """
    ).fetchall()
    for contract_code, n in shared:
        issues.append(f"Contract {contract_code} has {n} local committees")

    empty = conn.execute(
        """
        SELECT c.id, c.name FROM committee c
        LEFT JOIN committee_member m ON m.committee_id = c.id
        WHERE m.committee_id IS NULL
        ORDER BY c.id
        """
    ).fetchall()
    stats["committees_without_members"] = len(empty)
    for committee_id, name in empty:
        issues.append(f"Committee {committee_id} ({name}) has no members")

    stats["votes"] = conn.execute("SELECT COUNT(*) FROM vote").fetchone()[0]
    bad_scores = conn.execute(
        "SELECT COUNT(*) FROM vote WHERE score < ? OR score > ?", [MIN_SCORE, MAX_SCORE]
    ).fetchone()[0]
    if bad_scores > 0:
        issues.append(f"{bad_scores} votes have scores outside {MIN_SCORE}-{MAX_SCORE}")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
