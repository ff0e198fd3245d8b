#!/usr/bin/env python3
"""
Governance database maintenance.

Usage:
    python manage.py init           # Create the schema
    python manage.py --validate     # Check data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.repositories import close_db, connect
from app.repositories.db import db_exists
from checks import validate_governance
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def init_db() -> None:
    """Create the schema (idempotent)."""
    conn = connect(DB_PATH)
    close_db(conn)
    logger.info("Schema ready at {}", DB_PATH)


def run_validation() -> bool:
    """Print the integrity report."""
    if not db_exists(DB_PATH):
        print(f"\n⚠️  No database at {DB_PATH}. Run 'python manage.py init' first.\n")
        return True

    conn = connect(DB_PATH, read_only=True)
    try:
        result = validate_governance(conn)
    finally:
        close_db(conn)

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)

    stats = result["stats"]
    print(f"  Practices: {stats['practices']:,}")
    print(f"  Unrecognized statuses: {stats['unrecognized_statuses']:,}")
    print(f"  Corporate committees: {stats['corporate_committees']}")
    print(f"  Committees without members: {stats['committees_without_members']}")
    print(f"  Votes: {stats['votes']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found.")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    if args == ["init"]:
        init_db()
        return

    print(__doc__)
    sys.exit(1)


if __name__ == "__main__":
    main()
