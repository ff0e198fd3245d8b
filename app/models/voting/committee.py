"""Voting committee and membership models."""

COMMITTEE_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS committee_id_seq START 1"

# `scope` is 'corporate' or 'local:<contract_code>'. Its unique key allows one
# corporate committee and one local committee per contract.
COMMITTEE_DDL = """
CREATE TABLE IF NOT EXISTS committee (
    id INTEGER PRIMARY KEY DEFAULT nextval('committee_id_seq'),
    name VARCHAR NOT NULL,
    description VARCHAR,
    kind VARCHAR NOT NULL CHECK (kind IN ('local', 'corporate')),
    contract_code VARCHAR,
    scope VARCHAR NOT NULL UNIQUE,
    created_by INTEGER,
    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp,
    CHECK (
        (kind = 'local' AND contract_code IS NOT NULL)
        OR (kind = 'corporate' AND contract_code IS NULL)
    ),
    CHECK (scope = CASE WHEN kind = 'local' THEN 'local:' || contract_code ELSE 'corporate' END)
)
"""

COMMITTEE_MEMBER_DDL = """
CREATE TABLE IF NOT EXISTS committee_member (
    committee_id INTEGER NOT NULL,
    matricula INTEGER NOT NULL
)
"""

COMMITTEE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_member_committee ON committee_member(committee_id)",
]
